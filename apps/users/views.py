import logging

from django.contrib.auth import login, logout, update_session_auth_hash
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.serializers import (
    LoginSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


# -------------------------------
# Register a New User
# -------------------------------
class RegisterView(generics.CreateAPIView):
    serializer_class = RegisterSerializer
    permission_classes = [AllowAny]

    def perform_create(self, serializer):
        user = serializer.save()
        login(self.request, user)
        logger.info(f"[Auth] Registered User[{user.id}] ({user.username})")


# -------------------------------
# Session Login
# -------------------------------
class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']

        if user is None:
            logger.warning(f"[Auth] Failed login for username '{serializer.validated_data['username']}'")
            return Response(
                {'message': 'Invalid username or password'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        login(request, user)
        logger.info(f"[Auth] User[{user.id}] logged in")
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)


# -------------------------------
# Session Logout
# -------------------------------
class LogoutView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        if request.user.is_authenticated:
            logger.info(f"[Auth] User[{request.user.id}] logged out")
        logout(request)
        return Response({'message': 'Logged out'}, status=status.HTTP_200_OK)


# -------------------------------
# Current User Profile
# -------------------------------
@method_decorator(ensure_csrf_cookie, name='dispatch')
class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def put(self, request):
        serializer = ProfileUpdateSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        if 'password' in serializer.validated_data:
            update_session_auth_hash(request, user)
            logger.info(f"[Auth] User[{user.id}] changed password")

        return Response(serializer.data)
