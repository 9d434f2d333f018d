from rest_framework import serializers
from .models import Goal


class GoalSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    progress = serializers.IntegerField(read_only=True)

    class Meta:
        model = Goal
        fields = [
            'id',
            'userId',
            'title',
            'description',
            'target',
            'current',
            'unit',
            'deadline',
            'progress',
            'createdAt',
        ]
        read_only_fields = ['id']
        extra_kwargs = {
            'target': {'min_value': 1},
            'current': {'min_value': 0},
        }
