from rest_framework.routers import SimpleRouter
from .views import TodoViewSet

router = SimpleRouter(trailing_slash=False)
router.register('todos', TodoViewSet, basename='todos')

urlpatterns = router.urls
