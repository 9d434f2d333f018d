from rest_framework import serializers
from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth import password_validation

User = get_user_model()


# -------------------------------
# User Serializer
# -------------------------------
class UserSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', read_only=True)
    aiCompanionName = serializers.CharField(source='ai_companion_name', read_only=True)
    createdAt = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'firstName', 'aiCompanionName', 'createdAt']
        read_only_fields = ['id', 'username']


# -------------------------------
# Register Serializer
# -------------------------------
class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True,
        validators=[password_validation.validate_password],
        style={'input_type': 'password'}
    )
    firstName = serializers.CharField(
        source='first_name', required=False, allow_blank=True, allow_null=True, max_length=150
    )

    class Meta:
        model = User
        fields = ['id', 'username', 'password', 'firstName']

    def create(self, validated_data):
        password = validated_data.pop('password')
        validated_data['first_name'] = validated_data.get('first_name') or ''

        user = User(**validated_data)
        user.set_password(password)
        user.save()
        return user

    def to_representation(self, instance):
        return UserSerializer(instance).data


# -------------------------------
# Login Serializer
# -------------------------------
class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})

    def validate(self, attrs):
        user = authenticate(
            request=self.context.get('request'),
            username=attrs['username'],
            password=attrs['password'],
        )
        attrs['user'] = user
        return attrs


# -------------------------------
# Profile Update Serializer
# -------------------------------
class ProfileUpdateSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(
        source='first_name', required=False, allow_blank=True, allow_null=True, max_length=150
    )
    password = serializers.CharField(
        write_only=True,
        required=False,
        style={'input_type': 'password'}
    )

    class Meta:
        model = User
        fields = ['firstName', 'password']

    def validate_password(self, value):
        password_validation.validate_password(value, self.instance)
        return value

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        if 'first_name' in validated_data:
            instance.first_name = validated_data['first_name'] or ''
        if password:
            instance.set_password(password)
        instance.save()
        return instance

    def to_representation(self, instance):
        return UserSerializer(instance).data
