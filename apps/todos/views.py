from rest_framework import filters
from django_filters.rest_framework import DjangoFilterBackend

from apps.core.viewsets import OwnedResourceViewSet
from .models import Todo
from .serializers import TodoSerializer


class TodoViewSet(OwnedResourceViewSet):
    """
    To-do items of the requesting user.
    New items always start open; `completed` can only be flipped through PUT.
    """
    queryset = Todo.objects.all()
    serializer_class = TodoSerializer
    not_found_message = 'Todo not found'

    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['category', 'completed']
    search_fields = ['content', 'category']

    def get_create_defaults(self):
        return {'completed': False}
