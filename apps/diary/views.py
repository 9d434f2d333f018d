from rest_framework import filters
from django_filters.rest_framework import DjangoFilterBackend

from apps.core.viewsets import OwnedResourceViewSet
from .models import DiaryEntry
from .serializers import DiaryEntrySerializer


class DiaryEntryViewSet(OwnedResourceViewSet):
    """
    Journal entries of the requesting user.
    Supports ?mood= and ?search= (title, content) on the list.
    """
    queryset = DiaryEntry.objects.all()
    serializer_class = DiaryEntrySerializer
    not_found_message = 'Diary entry not found'

    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['mood']
    search_fields = ['title', 'content']
