import pytest

from volunteering.models import UserAvailability

from tests.helpers import admin_auth, auth

pytestmark = pytest.mark.django_db


def slot(day='2026-11-02', start='09:00', end='12:00'):
    return {'availability_date': day, 'start_time': start, 'end_time': end}


def submit(client, user, event_id, slots):
    return client.post(f'/api/availability/users/{user.pk}',
                       {'event_id': event_id, 'availability_slots': slots},
                       format='json', **auth(user))


def test_submit_replaces_previous_slots(client, alice, event):
    response = submit(client, alice, event.pk, [slot(), slot(start='13:00', end='15:00')])
    assert response.status_code == 201
    assert len(response.data) == 2

    response = submit(client, alice, event.pk, [slot(day='2026-11-03')])
    assert response.status_code == 201
    saved = UserAvailability.objects.filter(user=alice, event=event)
    assert [str(row.availability_date) for row in saved] == ['2026-11-03']


def test_slot_outside_event_dates(client, alice, event):
    response = submit(client, alice, event.pk, [slot(day='2026-11-05')])
    assert response.status_code == 400
    assert response.data == {'error': 'Selected date is outside the event timeframe'}


def test_slot_must_end_after_start(client, alice, event):
    response = submit(client, alice, event.pk, [slot(start='12:00', end='12:00')])
    assert response.status_code == 400
    assert response.data == {'error': 'End time must be after start time'}


def test_rejected_submission_keeps_existing_slots(client, alice, event):
    submit(client, alice, event.pk, [slot()])
    submit(client, alice, event.pk, [slot(), slot(day='2026-10-01')])
    assert UserAvailability.objects.filter(user=alice).count() == 1


def test_submission_needs_slots(client, alice, event):
    response = submit(client, alice, event.pk, [])
    assert response.status_code == 400
    assert response.data == {'error': 'Event ID and at least one availability slot are required'}


def test_inactive_event(client, alice, make_event):
    closed = make_event(name='Closed', is_active=False)
    response = submit(client, alice, closed.pk, [slot()])
    assert response.status_code == 404
    assert response.data == {'error': 'Event not found or not active'}


def test_user_availability_is_private(client, alice, bob, event):
    submit(client, alice, event.pk, [slot()])
    url = f'/api/availability/users/{alice.pk}/events/{event.pk}'

    assert client.get(url, **auth(bob)).status_code == 403
    response = client.get(url, **auth(alice))
    assert response.status_code == 200
    assert response.data[0]['start_time'] == '09:00:00'


def test_event_availability_for_admins(client, alice, bob, admin_user, event):
    submit(client, alice, event.pk, [slot(start='10:00', end='11:00')])
    submit(client, bob, event.pk, [slot(start='08:00', end='09:00')])
    url = f'/api/availability/events/{event.pk}'

    assert client.get(url, **auth(alice)).status_code == 403
    # the shared admin password alone does not identify a user
    assert client.get(url, **admin_auth()).status_code == 401
    response = client.get(url, **auth(admin_user))
    assert response.status_code == 200
    assert [row['username'] for row in response.data] == ['bob', 'alice']
