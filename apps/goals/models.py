from django.core.validators import MinValueValidator
from django.db import models
from django.conf import settings


class Goal(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='goals'
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    target = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    current = models.PositiveIntegerField(default=0)
    unit = models.CharField(max_length=50, blank=True, null=True)
    deadline = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']

    @property
    def progress(self):
        # Not clamped: current may run past target.
        if not self.target:
            return 0
        return round(self.current / self.target * 100)

    def __str__(self):
        return f"{self.title} ({self.current}/{self.target})"
