from django.urls import path

from .views import CurrentUserView, LoginView, LogoutView, RegisterView

urlpatterns = [
    path('register', RegisterView.as_view(), name='register'),
    path('login', LoginView.as_view(), name='login'),
    path('logout', LogoutView.as_view(), name='logout'),
    path('user', CurrentUserView.as_view(), name='current-user'),
]
