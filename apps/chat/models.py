from django.db import models
from django.conf import settings


class ChatMessage(models.Model):
    """
    One line of the conversation between a user and their AI companion.
    Replies written by the companion carry is_ai=True.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='chat_messages'
    )
    content = models.TextField()
    is_ai = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        sender = 'AI' if self.is_ai else self.user
        return f"{sender} at {self.created_at}"
