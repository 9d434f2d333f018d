import logging

from django.db import transaction
from rest_framework import mixins, status, viewsets
from rest_framework.response import Response

from apps.core.utils import load_component
from apps.core.viewsets import OwnedResourceMixin
from .models import ChatMessage
from .serializers import ChatMessageSerializer

logger = logging.getLogger(__name__)


class ChatMessageViewSet(OwnedResourceMixin,
                         mixins.ListModelMixin,
                         mixins.CreateModelMixin,
                         viewsets.GenericViewSet):
    """
    Conversation with the AI companion:
    - GET lists the user's messages and replies in creation order.
    - POST stores the user's message, stores one companion reply, returns both.
    """
    queryset = ChatMessage.objects.all()
    serializer_class = ChatMessageSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        content = serializer.validated_data['content']

        # The reply is produced first so a failing generator stores nothing.
        generator = load_component('CHAT_RESPONSE_GENERATOR')
        reply = generator.generate(request.user, content)

        with transaction.atomic():
            user_message = serializer.save(user=request.user, is_ai=False)
            ai_message = ChatMessage.objects.create(user=request.user, content=reply, is_ai=True)
        logger.info(f"[Chat] Companion replied to Message[{user_message.id}] for User[{request.user.id}]")

        return Response({
            'userMessage': ChatMessageSerializer(user_message).data,
            'aiMessage': ChatMessageSerializer(ai_message).data,
        }, status=status.HTTP_201_CREATED)
