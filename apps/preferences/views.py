import logging

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import UserSettings
from .serializers import UserSettingsSerializer

logger = logging.getLogger(__name__)


class UserSettingsView(APIView):
    """
    Singleton settings resource of the requesting user.
    - GET creates the row with defaults on first read.
    - PUT is a partial upsert; a new companion name is copied onto the user.
    """
    permission_classes = [IsAuthenticated]

    def get_settings(self, request):
        user_settings, created = UserSettings.objects.for_user(request.user)
        if created:
            logger.info(f"[Settings] Created default settings for User[{request.user.id}]")
        return user_settings

    def get(self, request):
        return Response(UserSettingsSerializer(self.get_settings(request)).data)

    def put(self, request):
        user_settings = self.get_settings(request)
        serializer = UserSettingsSerializer(user_settings, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        companion_name = serializer.validated_data.get('ai_settings', {}).get('name')
        if companion_name:
            user = request.user
            user.ai_companion_name = companion_name
            user.save(update_fields=['ai_companion_name'])
            logger.info(f"[Settings] User[{user.id}] renamed companion to '{companion_name}'")

        return Response(serializer.data)
