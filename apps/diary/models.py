from django.db import models
from django.conf import settings


class DiaryEntry(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='diary_entries'
    )
    content = models.TextField()
    title = models.CharField(max_length=255, blank=True, null=True)
    mood = models.CharField(max_length=50, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']
        verbose_name_plural = 'diary entries'

    def __str__(self):
        return f"{self.user} - {self.title or 'Untitled'} ({self.created_at.date()})"
