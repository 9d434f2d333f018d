import pytest

from apps.todos.models import Todo

pytestmark = pytest.mark.django_db


def test_create_always_starts_open(client):
    response = client.post('/api/todos', {'content': 'Drink water', 'completed': True}, format='json')

    assert response.status_code == 201
    assert response.data['completed'] is False
    assert Todo.objects.get(pk=response.data['id']).completed is False


def test_create_with_category_and_due_date(client):
    response = client.post(
        '/api/todos',
        {'content': 'Yoga', 'category': 'self-care', 'dueDate': '2026-01-05T08:00:00Z'},
        format='json'
    )

    assert response.status_code == 201
    assert response.data['category'] == 'self-care'
    assert response.data['dueDate'].startswith('2026-01-05T08:00:00')


def test_put_toggles_completed_only(client, user):
    todo = Todo.objects.create(user=user, content='Stretch', category='health')

    response = client.put(f'/api/todos/{todo.id}', {'completed': True}, format='json')

    assert response.status_code == 200
    assert response.data['completed'] is True
    assert response.data['content'] == 'Stretch'
    assert response.data['category'] == 'health'


def test_put_without_completed_keeps_it(client, user):
    todo = Todo.objects.create(user=user, content='Stretch', completed=True)

    response = client.put(f'/api/todos/{todo.id}', {'content': 'Stretch for 10 min'}, format='json')

    assert response.data['completed'] is True
    assert response.data['content'] == 'Stretch for 10 min'


def test_invalid_completed_value(client, user):
    todo = Todo.objects.create(user=user, content='Stretch')

    response = client.put(f'/api/todos/{todo.id}', {'completed': 'maybe'}, format='json')

    assert response.status_code == 400
    assert response.data['errors'][0]['field'] == 'completed'


def test_filters(client, user):
    Todo.objects.create(user=user, content='Run', category='health', completed=True)
    Todo.objects.create(user=user, content='Report', category='work')

    assert [t['content'] for t in client.get('/api/todos', {'category': 'work'}).data] == ['Report']
    assert [t['content'] for t in client.get('/api/todos', {'completed': 'true'}).data] == ['Run']


def test_delete(client, user):
    todo = Todo.objects.create(user=user, content='Old task')

    assert client.delete(f'/api/todos/{todo.id}').status_code == 204
    assert client.get(f'/api/todos/{todo.id}').status_code == 404


def test_completed_in_create_payload_is_ignored_not_validated(client):
    response = client.post('/api/todos', {'content': 'Journal', 'completed': 'maybe'}, format='json')

    assert response.status_code == 201
    assert response.data['completed'] is False
