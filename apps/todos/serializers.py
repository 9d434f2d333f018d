from rest_framework import serializers
from .models import Todo


class TodoSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    dueDate = serializers.DateTimeField(source='due_date', required=False, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Todo
        fields = ['id', 'userId', 'content', 'completed', 'category', 'dueDate', 'createdAt']
        read_only_fields = ['id']
