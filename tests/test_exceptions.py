import pytest
from rest_framework.exceptions import ErrorDetail

from apps.core.exceptions import api_exception_handler, flatten_errors


def test_flatten_nested_errors():
    detail = {
        'theme': [ErrorDetail('"neon" is not a valid choice.', code='invalid_choice')],
        'aiSettings': {'name': [ErrorDetail('This field may not be blank.', code='blank')]},
        'non_field_errors': [ErrorDetail('Broken.', code='invalid')],
    }

    assert flatten_errors(detail) == [
        {'field': 'theme', 'message': '"neon" is not a valid choice.', 'code': 'invalid_choice'},
        {'field': 'aiSettings.name', 'message': 'This field may not be blank.', 'code': 'blank'},
        {'field': 'non_field_errors', 'message': 'Broken.', 'code': 'invalid'},
    ]


def test_unexpected_error_becomes_500():
    response = api_exception_handler(RuntimeError('database is on fire'), {'view': None})

    assert response.status_code == 500
    assert response.data == {'message': 'Internal server error: database is on fire'}


@pytest.mark.django_db
def test_unexpected_error_in_view(client, monkeypatch):
    def broken(name):
        raise RuntimeError('provider exploded')

    monkeypatch.setattr('apps.quotes.views.load_component', broken)

    response = client.get('/api/quote')

    assert response.status_code == 500
    assert response.data['message'] == 'Internal server error: provider exploded'
