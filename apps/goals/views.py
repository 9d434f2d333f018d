from apps.core.viewsets import OwnedResourceViewSet
from .models import Goal
from .serializers import GoalSerializer


class GoalViewSet(OwnedResourceViewSet):
    """
    Goals of the requesting user.
    New goals always start at current=0; progress is moved through PUT.
    """
    queryset = Goal.objects.all()
    serializer_class = GoalSerializer
    not_found_message = 'Goal not found'

    def get_create_defaults(self):
        return {'current': 0}
