import pytest

from apps.goals.models import Goal

pytestmark = pytest.mark.django_db


def test_create_always_starts_at_zero(client):
    response = client.post('/api/goals', {'title': 'Meditate', 'target': 30, 'current': 12, 'unit': 'days'}, format='json')

    assert response.status_code == 201
    assert response.data['current'] == 0
    assert response.data['progress'] == 0
    assert response.data['unit'] == 'days'


@pytest.mark.parametrize('target', [0, -3])
def test_target_must_be_positive(client, target):
    response = client.post('/api/goals', {'title': 'Meditate', 'target': target}, format='json')

    assert response.status_code == 400
    assert response.data['errors'][0]['field'] == 'target'


def test_title_and_target_are_required(client):
    response = client.post('/api/goals', {}, format='json')

    assert response.status_code == 400
    assert {e['field'] for e in response.data['errors']} == {'title', 'target'}


def test_partial_update_of_current(client, user):
    goal = Goal.objects.create(user=user, title='Read', target=10)

    response = client.put(f'/api/goals/{goal.id}', {'current': 5}, format='json')

    assert response.status_code == 200
    assert response.data['title'] == 'Read'
    assert response.data['current'] == 5
    assert response.data['progress'] == 50


def test_current_can_run_past_target(client, user):
    goal = Goal.objects.create(user=user, title='Read', target=4)

    response = client.put(f'/api/goals/{goal.id}', {'current': 6}, format='json')

    assert response.data['current'] == 6
    assert response.data['progress'] == 150


def test_negative_current_is_rejected(client, user):
    goal = Goal.objects.create(user=user, title='Read', target=4)

    response = client.put(f'/api/goals/{goal.id}', {'current': -1}, format='json')

    assert response.status_code == 400


def test_delete(client, user):
    goal = Goal.objects.create(user=user, title='Read', target=4)

    assert client.delete(f'/api/goals/{goal.id}').status_code == 204
    assert client.get(f'/api/goals/{goal.id}').status_code == 404


def test_current_in_create_payload_is_ignored_not_validated(client):
    response = client.post('/api/goals', {'title': 'Read', 'target': 10, 'current': -3}, format='json')

    assert response.status_code == 201
    assert response.data['current'] == 0
    assert response.data['title'] == 'Read'
