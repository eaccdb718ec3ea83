import pytest
from django.contrib.auth.hashers import check_password

from volunteering.models import Users

from tests.helpers import USER_PASSWORD, admin_auth, auth

pytestmark = pytest.mark.django_db

NEW_USER = {
    'username': 'carol',
    'email': 'carol@example.com',
    'password': 'hunter2',
    'full_name': 'Carol Example',
}


def test_register_hashes_password(client):
    response = client.post('/api/users/register', NEW_USER, format='json')

    assert response.status_code == 201
    assert 'password' not in response.data
    assert response.data['role'] == 'member'
    stored = Users.objects.get(username='carol')
    assert stored.password != 'hunter2'
    assert check_password('hunter2', stored.password)


def test_register_requires_all_fields(client):
    response = client.post('/api/users/register', {'username': 'carol'}, format='json')
    assert response.status_code == 400
    assert response.data == {'error': 'All fields are required'}


def test_register_rejects_taken_username(client, alice):
    response = client.post('/api/users/register', dict(NEW_USER, username='alice'), format='json')
    assert response.status_code == 400
    assert response.data == {'error': 'Username or email already in use'}


def test_only_admins_create_admins(client, alice):
    response = client.post('/api/users/register', dict(NEW_USER, role='admin'), format='json', **auth(alice))
    assert response.data['role'] == 'member'

    response = client.post('/api/users/register',
                           dict(NEW_USER, username='dave', email='dave@example.com', role='admin'),
                           format='json', **admin_auth())
    assert response.data['role'] == 'admin'


def test_login_issues_session_key(client, alice, fake_session_storage):
    response = client.post('/api/users/login', {'username': 'alice', 'password': USER_PASSWORD}, format='json')

    assert response.status_code == 200
    session_key = response.data['session_key']
    assert fake_session_storage.get(session_key) == str(alice.pk)
    assert response.cookies['session_key'].value == session_key

    # the cookie set on login authenticates the next request
    response = client.get(f'/api/registrations/users/{alice.pk}/events')
    assert response.status_code == 200


def test_session_key_header_and_logout(alice):
    from rest_framework.test import APIClient

    login = APIClient().post('/api/users/login', {'username': 'alice', 'password': USER_PASSWORD}, format='json')
    headers = {'HTTP_SESSION_KEY': login.data['session_key']}
    other_client = APIClient()

    assert other_client.get(f'/api/registrations/users/{alice.pk}/events', **headers).status_code == 200
    assert other_client.post('/api/users/logout', **headers).status_code == 200
    assert other_client.get(f'/api/registrations/users/{alice.pk}/events', **headers).status_code == 401


def test_login_rejects_bad_credentials(client, alice):
    response = client.post('/api/users/login', {'username': 'alice', 'password': 'nope'}, format='json')
    assert response.status_code == 401
    assert response.data == {'error': 'Invalid credentials'}

    response = client.post('/api/users/login', {'username': 'alice'}, format='json')
    assert response.status_code == 400


def test_credential_headers(client, alice, bob):
    url = f'/api/registrations/users/{alice.pk}/events'

    assert client.get(url).status_code == 401
    response = client.get(url, HTTP_USERNAME='alice', HTTP_PASSWORD='wrong')
    assert response.status_code == 401
    assert response.data == {'error': 'Invalid credentials'}

    response = client.get(url, **auth(bob))
    assert response.status_code == 403
    assert response.data == {'error': 'Forbidden: You can only access your own data'}

    assert client.get(url, **auth(alice)).status_code == 200


def test_admin_may_act_for_other_users(client, alice, admin_user):
    response = client.get(f'/api/registrations/users/{alice.pk}/events', **auth(admin_user))
    assert response.status_code == 200


def test_profile(client, alice):
    response = client.get(f'/api/users/{alice.pk}')
    assert response.data['username'] == 'alice'
    assert client.get('/api/users/9999').status_code == 404


def test_user_list_and_role_change(client, alice, admin_user):
    assert client.get('/api/users', **auth(alice)).status_code == 403

    response = client.get('/api/users', **auth(admin_user))
    assert [row['username'] for row in response.data] == ['alice', 'root']

    url = f'/api/users/{alice.pk}/role'
    assert client.put(url, {'role': 'owner'}, format='json', **admin_auth()).status_code == 400
    response = client.put(url, {'role': 'admin'}, format='json', **admin_auth())
    assert response.status_code == 200
    assert Users.objects.get(pk=alice.pk).role == 'admin'


def test_logout_needs_a_live_session(client, alice):
    response = client.post('/api/users/logout', HTTP_SESSION_KEY='not-a-session', **auth(alice))

    assert response.status_code == 401
    assert response.data == {'error': 'Authentication required'}
