from rest_framework import serializers
from .models import MoodEntry
from .utils import MAX_SCORE, MIN_SCORE, label_for_score


class MoodEntrySerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source='user_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = MoodEntry
        fields = ['id', 'userId', 'mood', 'score', 'note', 'createdAt']
        read_only_fields = ['id']
        extra_kwargs = {
            'mood': {'required': False},
            'score': {'min_value': MIN_SCORE, 'max_value': MAX_SCORE},
        }

    def validate(self, attrs):
        expected = label_for_score(attrs['score'])
        mood = attrs.get('mood')
        if mood is None:
            attrs['mood'] = expected
        elif mood != expected:
            raise serializers.ValidationError(
                {'mood': f"Mood '{mood}' does not match score {attrs['score']} (expected '{expected}')."}
            )
        return attrs


class MoodSummarySerializer(serializers.Serializer):
    days = serializers.IntegerField()
    count = serializers.IntegerField()
    averageScore = serializers.FloatField(allow_null=True)
    mood = serializers.CharField(allow_null=True)
