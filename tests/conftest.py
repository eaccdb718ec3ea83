from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import fakeredis
import pytest
from django.contrib.auth.hashers import make_password
from rest_framework.test import APIClient

from volunteering import redis_view
from volunteering.models import Users, Events, EventRoles

from tests.helpers import ADMIN_PASSWORD, USER_PASSWORD


@pytest.fixture(autouse=True)
def fake_session_storage(monkeypatch):
    storage = fakeredis.FakeRedis(decode_responses=True)
    monkeypatch.setattr(redis_view, 'session_storage', storage)
    return storage


@pytest.fixture(autouse=True)
def test_settings(settings):
    settings.ADMIN_PASSWORD = ADMIN_PASSWORD
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']
    return settings


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make_user(username, role='member'):
        return Users.objects.create(
            username=username,
            email=f'{username}@example.com',
            password=make_password(USER_PASSWORD),
            full_name=username.title(),
            role=role,
        )
    return _make_user


@pytest.fixture
def alice(make_user):
    return make_user('alice')


@pytest.fixture
def bob(make_user):
    return make_user('bob')


@pytest.fixture
def admin_user(make_user):
    return make_user('root', role='admin')


@pytest.fixture
def make_event(db):
    def _make_event(name='Park Cleanup', event_type='volunteer', donation_goal=None, is_active=True):
        return Events.objects.create(
            name=name,
            host='Green City',
            category='Environment',
            description='Cleaning the riverside park',
            start_date=datetime(2026, 11, 1, 9, 0, tzinfo=dt_timezone.utc),
            end_date=datetime(2026, 11, 3, 17, 0, tzinfo=dt_timezone.utc),
            event_type=event_type,
            donation_goal=Decimal(donation_goal) if donation_goal is not None else None,
            is_active=is_active,
        )
    return _make_event


@pytest.fixture
def event(make_event):
    return make_event()


@pytest.fixture
def make_role(db):
    def _make_role(event, name='Litter picker', capacity=1):
        return EventRoles.objects.create(event=event, name=name, description='', capacity=capacity)
    return _make_role


@pytest.fixture
def role(event, make_role):
    return make_role(event)
