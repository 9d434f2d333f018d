from rest_framework import serializers
from .models import DiaryEntry


class DiaryEntrySerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = DiaryEntry
        fields = ['id', 'userId', 'content', 'title', 'mood', 'createdAt']
        read_only_fields = ['id']
