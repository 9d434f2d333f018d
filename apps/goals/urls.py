from rest_framework.routers import SimpleRouter
from .views import GoalViewSet

router = SimpleRouter(trailing_slash=False)
router.register('goals', GoalViewSet, basename='goals')

urlpatterns = router.urls
