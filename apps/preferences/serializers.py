from rest_framework import serializers
from apps.users.models import DEFAULT_COMPANION_NAME
from .models import DEFAULT_AVATAR, UserSettings


class AiSettingsSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, default=DEFAULT_COMPANION_NAME)
    avatar = serializers.CharField(max_length=100, default=DEFAULT_AVATAR)


class UserSettingsSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    notificationsEnabled = serializers.BooleanField(source='notifications_enabled', required=False)
    aiSettings = AiSettingsSerializer(source='ai_settings', required=False)

    class Meta:
        model = UserSettings
        fields = ['id', 'userId', 'theme', 'notificationsEnabled', 'aiSettings']
        read_only_fields = ['id']

    def update(self, instance, validated_data):
        ai_settings = validated_data.pop('ai_settings', None)
        if ai_settings:
            # Merge so that {"aiSettings": {"name": ...}} keeps the avatar.
            instance.ai_settings = {**(instance.ai_settings or {}), **ai_settings}
        return super().update(instance, validated_data)
