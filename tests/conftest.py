import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


@pytest.fixture
def user(db):
    return User.objects.create_user(username='alice', password='secret123', first_name='Alice')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username='bob', password='secret123')


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def client(user):
    api_client = APIClient()
    api_client.force_login(user)
    return api_client


@pytest.fixture
def other_client(other_user):
    api_client = APIClient()
    api_client.force_login(other_user)
    return api_client
