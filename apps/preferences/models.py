from django.db import models
from django.conf import settings

from apps.users.models import DEFAULT_COMPANION_NAME

DEFAULT_AVATAR = 'robot'


def default_ai_settings():
    return {'name': DEFAULT_COMPANION_NAME, 'avatar': DEFAULT_AVATAR}


class UserSettingsManager(models.Manager):
    def for_user(self, user):
        """
        Returns the user's settings row, creating it with defaults on first access.
        """
        return self.get_or_create(user=user)


class UserSettings(models.Model):
    THEME_CHOICES = [
        ('light', 'Light'),
        ('dark', 'Dark'),
        ('system', 'System'),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='settings'
    )
    theme = models.CharField(max_length=10, choices=THEME_CHOICES, default='light')
    notifications_enabled = models.BooleanField(default=True)
    ai_settings = models.JSONField(default=default_ai_settings)

    objects = UserSettingsManager()

    class Meta:
        verbose_name = 'settings'
        verbose_name_plural = 'settings'

    def __str__(self):
        return f"Settings for {self.user}"
