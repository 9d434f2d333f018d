from rest_framework.routers import SimpleRouter
from .views import DiaryEntryViewSet

router = SimpleRouter(trailing_slash=False)
router.register('diary', DiaryEntryViewSet, basename='diary')

urlpatterns = router.urls
