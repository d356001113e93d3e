import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from clinic.models import AuditEvent, Doctor, Specialty

pytestmark = pytest.mark.django_db


@pytest.fixture
def doctor():
    return Doctor.objects.create_user(
        username='sjohnson', email='sarah.johnson@hospital.test', password='P@ssw0rd1',
        full_name='Dr. Sarah Johnson',
    )


def login(client, username, password):
    return client.post(reverse('login_view'), {'username': username, 'password': password}, format='json')


def test_login_by_email_returns_tokens_and_doctor(doctor):
    r = login(APIClient(), 'Sarah.Johnson@hospital.test', 'P@ssw0rd1')
    assert r.status_code == 200
    assert r.data['token'] and r.data['jwt_access'] and r.data['jwt_refresh']
    assert r.data['user']['email'] == 'sarah.johnson@hospital.test'
    assert 'password' not in r.data['user']
    assert AuditEvent.objects.filter(action='login', user=doctor, detail__result='ok').exists()


def test_login_by_username(doctor):
    assert login(APIClient(), 'sjohnson', 'P@ssw0rd1').status_code == 200


def test_wrong_password_is_refused(doctor):
    r = login(APIClient(), 'sarah.johnson@hospital.test', 'nope')
    assert r.status_code == 400
    assert r.data == {'ok': False, 'detail': 'Invalid email or password'}
    assert AuditEvent.objects.filter(action='login', user=None, detail__result='fail').exists()


def test_token_header_authenticates(doctor):
    client = APIClient()
    token = login(client, 'sjohnson', 'P@ssw0rd1').data['token']
    client.credentials(HTTP_AUTHORIZATION=f'Token {token}')
    r = client.get(reverse('profile'))
    assert r.status_code == 200
    assert r.data['data']['username'] == 'sjohnson'


def test_jwt_bearer_authenticates(doctor):
    client = APIClient()
    access = login(client, 'sjohnson', 'P@ssw0rd1').data['jwt_access']
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
    assert client.get(reverse('dashboard')).status_code == 200


def test_profile_update_keeps_email(doctor):
    cardio = Specialty.objects.create(name='Cardiology')
    client = APIClient()
    client.force_authenticate(doctor)
    r = client.post(reverse('profile'), {
        'full_name': 'Dr. Sarah J. Johnson', 'phone': '+1-555-0199', 'specialty_id': cardio.id,
        'email': 'hijack@hospital.test', 'id': 999,
    }, format='json')
    assert r.status_code == 200
    doctor.refresh_from_db()
    assert doctor.full_name == 'Dr. Sarah J. Johnson'
    assert doctor.specialty_id == cardio.id
    assert doctor.email == 'sarah.johnson@hospital.test'
    assert doctor.id != 999


def test_profile_update_unknown_specialty(doctor):
    client = APIClient()
    client.force_authenticate(doctor)
    r = client.post(reverse('profile'), {'specialty_id': 4242}, format='json')
    assert r.status_code == 400
    assert r.data == {'ok': False, 'error': {'code': 'domain_error', 'message': 'specialty not found'}}


def test_logout_blacklists_refresh_and_drops_token(doctor):
    client = APIClient()
    data = login(client, 'sjohnson', 'P@ssw0rd1').data
    client.credentials(HTTP_AUTHORIZATION=f"Token {data['token']}")
    r = client.post(reverse('jwt_logout'), {'refresh': data['jwt_refresh']}, format='json')
    assert r.status_code == 200
    assert r.data['blacklisted'] == 1
    r = APIClient().post(reverse('jwt_refresh'), {'refresh': data['jwt_refresh']}, format='json')
    assert r.status_code == 401


def test_healthz():
    r = APIClient().get(reverse('healthz'))
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True}
