from datetime import timedelta

import pytest
from django.utils import timezone

from apps.mood.models import MoodEntry
from apps.mood.utils import MOOD_LABELS, label_for_score, summarize_scores

pytestmark = pytest.mark.django_db


def test_create_entry(client, user):
    response = client.post('/api/mood', {'mood': 'Happy', 'score': 5, 'note': 'Sunny day'}, format='json')

    assert response.status_code == 201
    assert response.data['mood'] == 'Happy'
    assert response.data['score'] == 5
    assert response.data['note'] == 'Sunny day'
    assert response.data['userId'] == user.id


@pytest.mark.parametrize('score', [0, 6, 7])
def test_score_out_of_range_is_rejected(client, score):
    response = client.post('/api/mood', {'mood': 'Happy', 'score': score}, format='json')

    assert response.status_code == 400
    assert 'score' in [e['field'] for e in response.data['errors']]


def test_unknown_label_is_rejected(client):
    response = client.post('/api/mood', {'mood': 'Ecstatic', 'score': 5}, format='json')

    assert response.status_code == 400
    assert response.data['errors'][0]['field'] == 'mood'


def test_label_must_match_score(client):
    response = client.post('/api/mood', {'mood': 'Happy', 'score': 1}, format='json')

    assert response.status_code == 400
    assert response.data['errors'][0]['field'] == 'mood'


def test_label_derived_from_score(client):
    response = client.post('/api/mood', {'score': 3}, format='json')

    assert response.status_code == 201
    assert response.data['mood'] == 'Neutral'


def test_retrieve_own_entry(client, user):
    entry = MoodEntry.objects.create(user=user, mood='Good', score=4)

    response = client.get(f'/api/mood/{entry.id}')

    assert response.status_code == 200
    assert response.data['mood'] == 'Good'


def test_entries_are_append_only(client, user):
    entry = MoodEntry.objects.create(user=user, mood='Good', score=4)

    assert client.delete(f'/api/mood/{entry.id}').status_code == 405
    assert client.put(f'/api/mood/{entry.id}', {'score': 1}, format='json').status_code == 405


def test_summary(client, user):
    MoodEntry.objects.create(user=user, mood='Happy', score=5)
    MoodEntry.objects.create(user=user, mood='Good', score=4)
    old = MoodEntry.objects.create(user=user, mood='Upset', score=1)
    MoodEntry.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=30))

    response = client.get('/api/mood/summary')

    assert response.status_code == 200
    assert response.data == {'days': 7, 'count': 2, 'averageScore': 4.5, 'mood': 'Good'}


def test_summary_without_entries(client):
    response = client.get('/api/mood/summary', {'days': 30})

    assert response.data == {'days': 30, 'count': 0, 'averageScore': None, 'mood': None}


@pytest.mark.parametrize('days', ['0', 'abc', '1000'])
def test_summary_rejects_bad_window(client, days):
    response = client.get('/api/mood/summary', {'days': days})

    assert response.status_code == 400
    assert response.data['errors'][0]['field'] == 'days'


def test_label_for_score():
    assert [label_for_score(score) for score in range(1, 6)] == MOOD_LABELS
    assert label_for_score(9) == 'Happy'


def test_summarize_scores():
    assert summarize_scores([]) == (None, None)
    assert summarize_scores([1, 2, 2]) == (1.7, 'Sad')
