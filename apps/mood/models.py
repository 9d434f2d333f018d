from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.conf import settings

from .utils import MAX_SCORE, MIN_SCORE, MOOD_LABELS


class MoodEntry(models.Model):
    MOOD_CHOICES = [(label, label) for label in MOOD_LABELS]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='mood_entries'
    )
    mood = models.CharField(max_length=20, choices=MOOD_CHOICES)
    score = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_SCORE), MaxValueValidator(MAX_SCORE)]
    )
    note = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']
        verbose_name_plural = 'mood entries'

    def __str__(self):
        return f"{self.user} - {self.mood} ({self.created_at.date()})"
