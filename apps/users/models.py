from django.contrib.auth.models import AbstractUser
from django.db import models

DEFAULT_COMPANION_NAME = 'Lily'


class User(AbstractUser):
    """
    Account owning every diary entry, todo, goal, chat message, mood entry
    and settings row. `ai_companion_name` mirrors the companion name stored
    in the user's settings so profile reads don't need a second query.
    """
    ai_companion_name = models.CharField(max_length=100, default=DEFAULT_COMPANION_NAME)

    def __str__(self):
        return self.username
