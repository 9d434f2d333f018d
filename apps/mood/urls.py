from rest_framework.routers import SimpleRouter
from .views import MoodEntryViewSet

router = SimpleRouter(trailing_slash=False)
router.register('mood', MoodEntryViewSet, basename='mood')

urlpatterns = router.urls
