import pytest

from apps.quotes.providers import QUOTES, RandomQuoteProvider

pytestmark = pytest.mark.django_db


def test_quote_is_one_of_the_fixed_list(client):
    response = client.get('/api/quote')

    assert response.status_code == 200
    assert set(response.data) == {'quote', 'author'}
    assert response.data in QUOTES


def test_provider_returns_a_copy():
    quote = RandomQuoteProvider().get_quote(None)
    quote['author'] = 'changed'

    assert all(q['author'] != 'changed' for q in QUOTES)
    assert len(QUOTES) == 10
