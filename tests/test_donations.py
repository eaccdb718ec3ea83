from decimal import Decimal

import pytest

from volunteering.donations import progress_percentage
from volunteering.models import Donations

from tests.helpers import admin_auth, auth


@pytest.mark.parametrize('goal, total, expected', [
    (0, 0, 0),
    (0, 500, 0),
    (None, 10, 0),
    (100, 250, 100),
    (200, 50, 25),
    (200, 1, 1),       # 0.5% rounds half up
    (300, 100, 33),
    (100, 0, 0),
])
def test_progress_percentage(goal, total, expected):
    assert progress_percentage(Decimal(total), goal) == expected


def donate(client, **payload):
    return client.post('/api/donations', payload, format='json')


@pytest.mark.django_db
def test_monetary_donation_requires_positive_amount(client, event):
    response = donate(client, event_id=event.pk, donation_type_id=1, amount=0)
    assert response.status_code == 400
    assert response.data == {'error': 'Amount is required for monetary donations'}


@pytest.mark.django_db
def test_goods_donation_requires_positive_quantity(client, event):
    response = donate(client, event_id=event.pk, donation_type_id=2, quantity=0)
    assert response.status_code == 400
    assert response.data == {'error': 'Quantity is required for non-monetary donations'}


@pytest.mark.django_db
def test_goods_donation_is_created_pending(client, event):
    response = donate(client, event_id=event.pk, donation_type_id=2, quantity=5, item_description='Rice')

    assert response.status_code == 201
    assert response.data['status'] == 'pending'
    assert response.data['quantity'] == 5
    assert response.data['amount'] is None
    assert response.data['user_id'] is None


@pytest.mark.django_db
def test_donation_requires_event_and_type(client, event):
    response = donate(client, event_id=event.pk)
    assert response.status_code == 400
    assert response.data == {'error': 'Event ID and donation type are required'}


@pytest.mark.django_db
def test_donation_unknown_event_and_type(client, event):
    assert donate(client, event_id=9999, donation_type_id=1, amount=5).status_code == 404
    response = donate(client, event_id=event.pk, donation_type_id=999, amount=5)
    assert response.status_code == 404
    assert response.data == {'error': 'Donation type not found'}


@pytest.mark.django_db
def test_donation_types_are_seeded(client):
    response = client.get('/api/donations/types')

    assert response.status_code == 200
    assert response.data[0]['id'] == 1
    assert response.data[0]['name'] == 'Money'


@pytest.mark.django_db
def test_donation_total_counts_only_received_and_distributed(client, make_event, alice):
    event = make_event(name='Winter Coats', event_type='donation', donation_goal='200')
    Donations.objects.create(event=event, donation_type_id=1, amount=Decimal('30'), status='received')
    Donations.objects.create(event=event, donation_type_id=1, amount=Decimal('20'), status='distributed')
    Donations.objects.create(event=event, donation_type_id=1, amount=Decimal('500'), status='pending')
    Donations.objects.create(event=event, user=alice, donation_type_id=3, quantity=4, status='received')

    response = client.get(f'/api/events/{event.pk}/donations/total')

    assert response.status_code == 200
    assert response.data['goal'] == Decimal('200')
    assert response.data['total_amount'] == Decimal('50')
    assert response.data['progress_percentage'] == 25
    counts = {row['name']: row for row in response.data['donation_counts']}
    assert counts['Money']['donation_count'] == 2
    assert counts['Clothing']['total_quantity'] == 4


@pytest.mark.django_db
def test_event_detail_shows_donation_progress_for_donation_events(client, make_event):
    donation_event = make_event(name='Book Fund', event_type='mixed', donation_goal='100')
    Donations.objects.create(event=donation_event, donation_type_id=1, amount=Decimal('250'), status='received')
    volunteer_event = make_event(name='Beach Day')

    response = client.get(f'/api/events/{donation_event.pk}')
    assert response.data['donation_summary']['progress_percentage'] == 100

    response = client.get(f'/api/events/{volunteer_event.pk}')
    assert response.data['donation_summary'] is None


@pytest.mark.django_db
def test_event_donations_listing_with_summary(client, event, alice):
    Donations.objects.create(event=event, user=alice, donation_type_id=1, amount=Decimal('15'))
    Donations.objects.create(event=event, donation_type_id=2, quantity=3)

    response = client.get(f'/api/events/{event.pk}/donations')

    assert response.status_code == 200
    assert len(response.data['donations']) == 2
    summary = {row['type']: row for row in response.data['summary']}
    assert summary['Money']['total_amount'] == Decimal('15')
    assert summary['Food']['total_quantity'] == 3
    assert summary['Food']['total_amount'] == 0


@pytest.mark.django_db
def test_user_donations_are_private(client, event, alice, bob):
    Donations.objects.create(event=event, user=alice, donation_type_id=1, amount=Decimal('15'))
    url = f'/api/users/{alice.pk}/donations'

    assert client.get(url, **auth(bob)).status_code == 403
    response = client.get(url, **auth(alice))
    assert response.status_code == 200
    assert response.data[0]['event_name'] == event.name


@pytest.mark.django_db
def test_donation_status_update(client, event):
    donation = Donations.objects.create(event=event, donation_type_id=1, amount=Decimal('15'))
    url = f'/api/donations/{donation.pk}/status'

    assert client.put(url, {'status': 'received'}, format='json').status_code == 401
    assert client.put(url, {'status': 'lost'}, format='json', **admin_auth()).status_code == 400

    response = client.put(url, {'status': 'received'}, format='json', **admin_auth())
    assert response.status_code == 200
    assert response.data['status'] == 'received'


@pytest.mark.django_db
@pytest.mark.parametrize('amount', ['0.001', '-5', '1e15', '12345678901.00', 'lots'])
def test_monetary_amount_must_fit_the_amount_column(client, event, amount):
    response = donate(client, event_id=event.pk, donation_type_id=1, amount=amount)

    assert response.status_code == 400
    assert response.data == {'error': 'Amount is required for monetary donations'}
    assert not Donations.objects.exists()


@pytest.mark.django_db
def test_monetary_amount_keeps_cents(client, event):
    response = donate(client, event_id=event.pk, donation_type_id=1, amount='0.01')

    assert response.status_code == 201
    assert Donations.objects.get().amount == Decimal('0.01')


@pytest.mark.django_db
@pytest.mark.parametrize('quantity', [True, 2.5, '-1'])
def test_goods_quantity_must_be_a_positive_whole_number(client, event, quantity):
    response = donate(client, event_id=event.pk, donation_type_id=2, quantity=quantity)

    assert response.status_code == 400
    assert response.data == {'error': 'Quantity is required for non-monetary donations'}
