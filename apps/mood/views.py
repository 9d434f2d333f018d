from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from apps.core.viewsets import OwnedResourceMixin
from .models import MoodEntry
from .serializers import MoodEntrySerializer, MoodSummarySerializer
from .utils import summarize_scores

MAX_SUMMARY_DAYS = 365


class MoodEntryViewSet(OwnedResourceMixin,
                       mixins.ListModelMixin,
                       mixins.RetrieveModelMixin,
                       mixins.CreateModelMixin,
                       viewsets.GenericViewSet):
    """
    Mood log of the requesting user.
    Entries are append-only: there is no update or delete.
    """
    queryset = MoodEntry.objects.all()
    serializer_class = MoodEntrySerializer
    not_found_message = 'Mood entry not found'

    @action(detail=False, methods=['get'], url_path='summary')
    def summary(self, request):
        """
        Average score over the last N days (?days=, default 7).
        """
        days = request.query_params.get('days', settings.WELLNESS['MOOD_SUMMARY_DEFAULT_DAYS'])
        try:
            days = int(days)
        except (TypeError, ValueError):
            raise ValidationError({'days': 'A valid integer is required.'})
        if not 1 <= days <= MAX_SUMMARY_DAYS:
            raise ValidationError({'days': f'Must be between 1 and {MAX_SUMMARY_DAYS}.'})

        since = timezone.now() - timedelta(days=days)
        scores = self.get_queryset().filter(created_at__gte=since).values_list('score', flat=True)
        scores = list(scores)
        average, label = summarize_scores(scores)

        data = {'days': days, 'count': len(scores), 'averageScore': average, 'mood': label}
        return Response(MoodSummarySerializer(data).data)
