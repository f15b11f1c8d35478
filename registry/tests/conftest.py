import pytest
from django.core.cache import cache
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _fresh_cache():
    # throttle counters live in the cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def doctor(api_client, db):
    r = api_client.post('/doctors', {'name': 'Dr. Ada Park', 'speciality': 'Cardiology'}, format='json')
    assert r.status_code == 201
    return r.data['doctor']


@pytest.fixture
def patient(api_client, db):
    r = api_client.post('/patients', {'name': 'Ben Ortiz', 'age': 34, 'gender': 'male'}, format='json')
    assert r.status_code == 201
    return r.data['patient']
