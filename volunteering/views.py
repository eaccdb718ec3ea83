import logging
import secrets
import hashlib

from rest_framework.response import Response
from rest_framework.decorators import api_view
from rest_framework import status

from django.conf import settings
from django.contrib.auth.hashers import make_password, check_password
from django.db import transaction

from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from volunteering import availability, donations, registration
from volunteering.auth import (
    SESSION_COOKIE,
    check_authorize,
    get_session_key,
    has_admin_password,
    require_admin,
    require_same_user,
    require_user,
)
from volunteering.exceptions import BadRequest, Forbidden, Unauthorized
from volunteering.lookups import (
    annotate_occupancy,
    filled_spots,
    get_event,
    get_event_role,
    get_user,
    role_with_occupancy,
)
from volunteering.models import Users, Events, DonationTypes, Donations
from volunteering.redis_view import set_key, get_value, delete_value
from volunteering.serializers import (
    UsersSerializer,
    EventsSerializer,
    EventRolesSerializer,
    RoleOccupancySerializer,
    RegistrationsSerializer,
    UserEventRegistrationSerializer,
    RegistrantSerializer,
    UserRoleRegistrationSerializer,
    DonationTypesSerializer,
    DonationsSerializer,
    EventDonationSerializer,
    UserDonationSerializer,
    UserAvailabilitySerializer,
    EventAvailabilitySerializer,
)

logger = logging.getLogger(__name__)

ADMIN_HEADERS = [
    openapi.Parameter('admin-password', openapi.IN_HEADER, type=openapi.TYPE_STRING, required=False),
    openapi.Parameter('username', openapi.IN_HEADER, type=openapi.TYPE_STRING, required=False),
    openapi.Parameter('password', openapi.IN_HEADER, type=openapi.TYPE_STRING, required=False),
]
USER_HEADERS = ADMIN_HEADERS[1:] + [
    openapi.Parameter('Session-Key', openapi.IN_HEADER, type=openapi.TYPE_STRING, required=False),
]

EVENT_REQUIRED_FIELDS = ['name', 'host', 'category', 'start_date', 'end_date']


def occupancy_data(role_id):
    role = role_with_occupancy(role_id)
    return RoleOccupancySerializer(role).data if role is not None else None


"""
USERS ###########################################################################################
"""
@swagger_auto_schema(
    method='post',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['username', 'email', 'password', 'full_name'],
        properties={
            'username': openapi.Schema(type=openapi.TYPE_STRING),
            'email': openapi.Schema(type=openapi.TYPE_STRING),
            'password': openapi.Schema(type=openapi.TYPE_STRING, format=openapi.FORMAT_PASSWORD),
            'full_name': openapi.Schema(type=openapi.TYPE_STRING),
            'role': openapi.Schema(type=openapi.TYPE_STRING, enum=['admin', 'member']),
        },
    ),
    responses={201: UsersSerializer(), 400: 'Missing fields or username/email already in use'},
    operation_summary='Register a new user'
)
@api_view(['POST'])
def register_user(request, format=None):
    required_fields = ['username', 'email', 'password', 'full_name']
    if any(not request.data.get(field) for field in required_fields):
        return Response({'error': 'All fields are required'}, status=status.HTTP_400_BAD_REQUEST)

    username = request.data['username']
    email = request.data['email']
    if Users.objects.filter(username=username).exists() or Users.objects.filter(email=email).exists():
        return Response({'error': 'Username or email already in use'}, status=status.HTTP_400_BAD_REQUEST)

    # only an admin may hand out the admin role
    role = request.data.get('role', 'member')
    if role not in ('admin', 'member'):
        role = 'member'
    if role == 'admin':
        creator = check_authorize(request)
        if not (has_admin_password(request) or (creator and creator.is_admin)):
            role = 'member'

    user = Users.objects.create(
        username=username,
        email=email,
        password=make_password(request.data['password']),
        full_name=request.data['full_name'],
        role=role,
    )
    logger.info('Registered user %s (%s)', user.pk, user.role)
    return Response(UsersSerializer(user).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(
    method='post',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['username', 'password'],
        properties={
            'username': openapi.Schema(type=openapi.TYPE_STRING),
            'password': openapi.Schema(type=openapi.TYPE_STRING, format=openapi.FORMAT_PASSWORD),
        },
    ),
    responses={200: 'User and session key', 400: 'Missing fields', 401: 'Invalid credentials'},
    operation_summary='Log in and receive a session key'
)
@api_view(['POST'])
def login(request, format=None):
    username = request.data.get('username')
    password = request.data.get('password')

    if not username or not password:
        return Response({'error': 'Username and password are required'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = Users.objects.get(username=username)
    except Users.DoesNotExist:
        return Response({'error': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)

    if not check_password(password, user.password):
        return Response({'error': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)

    random_part = secrets.token_hex(16)
    session_hash = hashlib.sha256(f'{user.pk}:{user.username}:{random_part}'.encode()).hexdigest()
    set_key(session_hash, user.pk)

    data = UsersSerializer(user).data
    data['session_key'] = session_hash
    response = Response(data)
    response.set_cookie(SESSION_COOKIE, session_hash, max_age=settings.SESSION_TTL, httponly=True)
    return response


@swagger_auto_schema(method='post', responses={200: 'Logged out', 401: 'Not logged in'},
                     manual_parameters=USER_HEADERS[2:], operation_summary='Log out')
@api_view(['POST'])
def logout(request, format=None):
    session_key = get_session_key(request)
    if not session_key or get_value(session_key) is None:
        raise Unauthorized('Authentication required')

    delete_value(session_key)
    response = Response({'message': 'Logged out successfully'})
    response.delete_cookie(SESSION_COOKIE)
    return response


@swagger_auto_schema(method='get', responses={200: UsersSerializer(many=True)},
                     manual_parameters=ADMIN_HEADERS, operation_summary='List all users (admin)')
@api_view(['GET'])
def get_users(request, format=None):
    require_admin(request)
    return Response(UsersSerializer(Users.objects.order_by('id'), many=True).data)


@swagger_auto_schema(method='get', responses={200: UsersSerializer(), 404: 'User not found'},
                     operation_summary='User profile')
@api_view(['GET'])
def get_user_profile(request, pk, format=None):
    return Response(UsersSerializer(get_user(pk)).data)


@swagger_auto_schema(
    method='put',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['role'],
        properties={'role': openapi.Schema(type=openapi.TYPE_STRING, enum=['admin', 'member'])},
    ),
    manual_parameters=ADMIN_HEADERS,
    responses={200: UsersSerializer(), 400: 'Invalid role', 404: 'User not found'},
    operation_summary='Change a user role (admin)'
)
@api_view(['PUT'])
def put_user_role(request, pk, format=None):
    require_admin(request)

    role = request.data.get('role')
    if role not in ('admin', 'member'):
        return Response({'error': 'Valid role is required (admin or member)'}, status=status.HTTP_400_BAD_REQUEST)

    user = get_user(pk)
    user.role = role
    user.save(update_fields=['role'])
    logger.info('User %s role set to %s', user.pk, role)
    return Response(UsersSerializer(user).data)


"""
EVENTS ###########################################################################################
"""
@swagger_auto_schema(method='get', operation_summary='List events ordered by start date',
                     responses={200: EventsSerializer(many=True)})
@swagger_auto_schema(method='post', operation_summary='Create an event (admin)',
                     request_body=EventsSerializer, manual_parameters=ADMIN_HEADERS,
                     responses={201: EventsSerializer(), 400: 'Missing required fields'})
@api_view(['GET', 'POST'])
def events(request, format=None):
    if request.method == 'GET':
        return Response(EventsSerializer(Events.objects.order_by('start_date', 'id'), many=True).data)

    require_admin(request)
    if any(not request.data.get(field) for field in EVENT_REQUIRED_FIELDS):
        return Response({'error': 'Missing required fields'}, status=status.HTTP_400_BAD_REQUEST)

    serializer = EventsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    event = serializer.save()
    logger.info('Created event %s (%s)', event.pk, event.event_type)
    return Response(EventsSerializer(event).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(method='get', operation_summary='List events of one type',
                     responses={200: EventsSerializer(many=True), 400: 'Invalid event type'})
@api_view(['GET'])
def get_events_by_type(request, event_type, format=None):
    if event_type not in dict(Events.TYPE_CHOICE):
        return Response({'error': 'Invalid event type'}, status=status.HTTP_400_BAD_REQUEST)
    queryset = Events.objects.filter(event_type=event_type).order_by('start_date', 'id')
    return Response(EventsSerializer(queryset, many=True).data)


@swagger_auto_schema(method='get', operation_summary='Event with roles, occupancy and donation progress',
                     responses={200: EventsSerializer(), 404: 'Event not found'})
@swagger_auto_schema(method='put', operation_summary='Update an event (admin)',
                     request_body=EventsSerializer, manual_parameters=ADMIN_HEADERS,
                     responses={200: EventsSerializer(), 400: 'Bad Request', 404: 'Event not found'})
@swagger_auto_schema(method='delete', operation_summary='Delete an event with its roles, registrations and donations (admin)',
                     manual_parameters=ADMIN_HEADERS, responses={200: 'Deleted', 404: 'Event not found'})
@api_view(['GET', 'PUT', 'DELETE'])
def event_detail(request, pk, format=None):
    if request.method == 'GET':
        event = get_event(pk)
        roles = annotate_occupancy(event.roles.all()).order_by('name', 'id')
        data = EventsSerializer(event).data
        data['roles'] = RoleOccupancySerializer(roles, many=True).data
        data['donation_summary'] = donations.event_progress(event)
        return Response(data)

    require_admin(request)
    event = get_event(pk)

    if request.method == 'PUT':
        serializer = EventsSerializer(event, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)
        return Response({'error': 'Invalid request data', 'fields': serializer.errors},
                        status=status.HTTP_400_BAD_REQUEST)

    event_id = event.pk
    event.delete()
    logger.info('Deleted event %s', event_id)
    return Response({'message': 'Event deleted successfully'})


"""
ROLES ###########################################################################################
"""
@swagger_auto_schema(method='get', operation_summary='Roles of an event with occupancy',
                     responses={200: RoleOccupancySerializer(many=True), 404: 'Event not found'})
@swagger_auto_schema(method='post', operation_summary='Add a role to an event (admin)',
                     request_body=EventRolesSerializer, manual_parameters=ADMIN_HEADERS,
                     responses={201: EventRolesSerializer(), 400: 'Bad Request', 404: 'Event not found'})
@api_view(['GET', 'POST'])
def event_roles(request, event_id, format=None):
    if request.method == 'GET':
        event = get_event(event_id)
        roles = annotate_occupancy(event.roles.all()).order_by('name', 'id')
        return Response(RoleOccupancySerializer(roles, many=True).data)

    require_admin(request)
    if not request.data.get('name') or not request.data.get('capacity'):
        return Response({'error': 'Role name and capacity are required'}, status=status.HTTP_400_BAD_REQUEST)

    event = get_event(event_id)
    serializer = EventRolesSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    role = serializer.save(event=event)
    logger.info('Created role %s for event %s with capacity %s', role.pk, event.pk, role.capacity)
    return Response(EventRolesSerializer(role).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(method='put', operation_summary='Update a role (admin)',
                     request_body=EventRolesSerializer, manual_parameters=ADMIN_HEADERS,
                     responses={200: EventRolesSerializer(), 400: 'Bad Request', 404: 'Role not found'})
@swagger_auto_schema(method='delete', operation_summary='Delete a role without registrations (admin)',
                     manual_parameters=ADMIN_HEADERS,
                     responses={200: 'Deleted', 400: 'Role has registrations', 404: 'Role not found'})
@api_view(['PUT', 'DELETE'])
def event_role(request, event_id, role_id, format=None):
    require_admin(request)

    if request.method == 'PUT':
        if not request.data.get('name') or not request.data.get('capacity'):
            return Response({'error': 'Role name and capacity are required'}, status=status.HTTP_400_BAD_REQUEST)

        with transaction.atomic():
            role = get_event_role(event_id, role_id, for_update=True)
            serializer = EventRolesSerializer(role, data=request.data, partial=True)
            serializer.is_valid(raise_exception=True)
            if serializer.validated_data['capacity'] < filled_spots(role):
                raise BadRequest('Capacity cannot be lower than the number of filled spots')
            serializer.save()
        return Response(serializer.data)

    role = get_event_role(event_id, role_id)
    if role.registrations.exists():
        return Response(
            {'error': 'Cannot delete role as users are already registered. Consider updating it instead.'},
            status=status.HTTP_400_BAD_REQUEST,
        )
    role.delete()
    return Response({'message': 'Role deleted successfully'})


@swagger_auto_schema(method='get', operation_summary='Users registered for a role',
                     responses={200: RegistrantSerializer(many=True), 404: 'Role not found'})
@api_view(['GET'])
def get_role_users(request, event_id, role_id, format=None):
    queryset = registration.role_registrations(event_id, role_id)
    return Response(RegistrantSerializer(queryset, many=True).data)


"""
REGISTRATIONS ###########################################################################################
"""
@swagger_auto_schema(
    method='post',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['event_id'],
        properties={
            'event_id': openapi.Schema(type=openapi.TYPE_INTEGER),
            'role_id': openapi.Schema(type=openapi.TYPE_INTEGER),
        },
    ),
    manual_parameters=USER_HEADERS,
    responses={201: 'Registration and role occupancy', 400: 'Already registered or role full', 404: 'Not found'},
    operation_summary='Register a user for an event, optionally into a role'
)
@api_view(['POST'])
def register_for_event(request, user_id, format=None):
    require_same_user(request, user_id)
    created = registration.register(user_id, request.data.get('event_id'), request.data.get('role_id'))
    return Response({
        'registration': RegistrationsSerializer(created).data,
        'role': occupancy_data(created.role_id),
    }, status=status.HTTP_201_CREATED)


@swagger_auto_schema(
    method='put',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['event_id', 'role_id'],
        properties={
            'event_id': openapi.Schema(type=openapi.TYPE_INTEGER),
            'role_id': openapi.Schema(type=openapi.TYPE_INTEGER),
        },
    ),
    manual_parameters=USER_HEADERS,
    responses={200: 'New and previous role occupancy', 400: 'Bad Request', 404: 'Not found'},
    operation_summary='Move a registration into another role'
)
@api_view(['PUT'])
def update_registration_role(request, user_id, format=None):
    require_same_user(request, user_id)
    updated, previous_role_id = registration.update_role(
        user_id, request.data.get('event_id'), request.data.get('role_id'))
    return Response({
        'message': 'Role updated successfully',
        'role': occupancy_data(updated.role_id),
        'previous_role': occupancy_data(previous_role_id),
    })


@swagger_auto_schema(method='delete', manual_parameters=USER_HEADERS,
                     responses={200: 'Freed role occupancy', 404: 'Registration not found'},
                     operation_summary='Cancel a registration')
@api_view(['DELETE'])
def cancel_registration(request, user_id, event_id, format=None):
    require_same_user(request, user_id)
    freed_role_id = registration.cancel(user_id, event_id)
    return Response({
        'message': 'Registration canceled successfully',
        'freed_role': occupancy_data(freed_role_id),
    })


@swagger_auto_schema(method='get', manual_parameters=USER_HEADERS,
                     responses={200: UserEventRegistrationSerializer(many=True)},
                     operation_summary='Events a user is registered for')
@api_view(['GET'])
def get_user_events(request, user_id, format=None):
    require_same_user(request, user_id)
    queryset = registration.user_registrations(user_id)
    return Response(UserEventRegistrationSerializer(queryset, many=True).data)


@swagger_auto_schema(method='get', responses={200: RegistrantSerializer(many=True), 404: 'Event not found'},
                     operation_summary='Users registered for an event')
@api_view(['GET'])
def get_event_users(request, event_id, format=None):
    queryset = registration.event_registrations(event_id)
    return Response(RegistrantSerializer(queryset, many=True).data)


"""
ROLE REGISTRATIONS ###########################################################################################
"""
@swagger_auto_schema(method='get', manual_parameters=USER_HEADERS,
                     responses={200: UserRoleRegistrationSerializer(many=True)},
                     operation_summary='Role registrations of a user')
@swagger_auto_schema(
    method='post',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['event_id', 'role_id'],
        properties={
            'event_id': openapi.Schema(type=openapi.TYPE_INTEGER),
            'role_id': openapi.Schema(type=openapi.TYPE_INTEGER),
        },
    ),
    manual_parameters=USER_HEADERS,
    responses={201: RegistrationsSerializer(), 400: 'Already registered or role full', 404: 'Not found'},
    operation_summary='Sign a user up for a role'
)
@api_view(['GET', 'POST'])
def user_roles(request, user_id, format=None):
    require_same_user(request, user_id)

    if request.method == 'GET':
        queryset = registration.user_role_registrations(user_id)
        return Response(UserRoleRegistrationSerializer(queryset, many=True).data)

    created = registration.register_for_role(user_id, request.data.get('event_id'), request.data.get('role_id'))
    return Response(RegistrationsSerializer(created).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(method='delete', manual_parameters=USER_HEADERS,
                     responses={200: 'Freed role occupancy', 404: 'Registration not found'},
                     operation_summary='Leave a role, staying registered as an attendee')
@api_view(['DELETE'])
def unregister_role(request, user_id, event_id, role_id, format=None):
    require_same_user(request, user_id)
    freed_role_id = registration.unregister_from_role(user_id, event_id, role_id)
    return Response({
        'message': 'Successfully unregistered from role',
        'freed_role': occupancy_data(freed_role_id),
    })


@swagger_auto_schema(method='get', manual_parameters=USER_HEADERS,
                     responses={200: UserRoleRegistrationSerializer(), 404: 'No role registration'},
                     operation_summary='Role of a user in one event')
@api_view(['GET'])
def get_user_event_role(request, user_id, event_id, format=None):
    require_same_user(request, user_id)
    found = registration.user_role_for_event(user_id, event_id)
    return Response(UserRoleRegistrationSerializer(found).data)


@swagger_auto_schema(
    method='put',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['status'],
        properties={'status': openapi.Schema(type=openapi.TYPE_STRING,
                                             enum=['pending', 'approved', 'declined', 'completed'])},
    ),
    manual_parameters=ADMIN_HEADERS,
    responses={200: RegistrationsSerializer(), 400: 'Invalid status or transition', 404: 'Registration not found'},
    operation_summary='Change a registration status (admin)'
)
@api_view(['PUT'])
def put_registration_status(request, pk, format=None):
    require_admin(request)
    updated = registration.set_status(pk, request.data.get('status'))
    return Response(RegistrationsSerializer(updated).data)


"""
DONATIONS ###########################################################################################
"""
@swagger_auto_schema(
    method='post',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['event_id', 'donation_type_id'],
        properties={
            'event_id': openapi.Schema(type=openapi.TYPE_INTEGER),
            'user_id': openapi.Schema(type=openapi.TYPE_INTEGER),
            'donation_type_id': openapi.Schema(type=openapi.TYPE_INTEGER),
            'amount': openapi.Schema(type=openapi.TYPE_NUMBER),
            'quantity': openapi.Schema(type=openapi.TYPE_INTEGER),
            'item_description': openapi.Schema(type=openapi.TYPE_STRING),
        },
    ),
    responses={201: DonationsSerializer(), 400: 'Bad Request', 404: 'Event or donation type not found'},
    operation_summary='Pledge a donation to an event'
)
@api_view(['POST'])
def post_donation(request, format=None):
    donation = donations.create_donation(request.data)
    logger.info('Donation %s pledged to event %s', donation.pk, donation.event_id)
    return Response(DonationsSerializer(donation).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(method='get', responses={200: DonationTypesSerializer(many=True)},
                     operation_summary='Donation types')
@api_view(['GET'])
def get_donation_types(request, format=None):
    return Response(DonationTypesSerializer(DonationTypes.objects.order_by('id'), many=True).data)


@swagger_auto_schema(method='get', responses={200: 'Donations and per type summary', 404: 'Event not found'},
                     operation_summary='Donations of an event')
@api_view(['GET'])
def get_event_donations(request, event_id, format=None):
    event = get_event(event_id)
    queryset = Donations.objects.filter(event=event).select_related('donation_type', 'user')
    return Response({
        'donations': EventDonationSerializer(queryset, many=True).data,
        'summary': donations.donation_summary(event),
    })


@swagger_auto_schema(method='get', responses={200: 'Goal progress', 404: 'Event not found'},
                     operation_summary='Donation total and goal progress of an event')
@api_view(['GET'])
def get_event_donation_total(request, event_id, format=None):
    return Response(donations.donation_total(get_event(event_id)))


@swagger_auto_schema(method='get', manual_parameters=USER_HEADERS,
                     responses={200: UserDonationSerializer(many=True), 404: 'User not found'},
                     operation_summary='Donations made by a user')
@api_view(['GET'])
def get_user_donations(request, user_id, format=None):
    require_same_user(request, user_id)
    user = get_user(user_id)
    queryset = Donations.objects.filter(user=user).select_related('donation_type', 'event')
    return Response(UserDonationSerializer(queryset, many=True).data)


@swagger_auto_schema(
    method='put',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['status'],
        properties={'status': openapi.Schema(type=openapi.TYPE_STRING,
                                             enum=['pending', 'received', 'distributed'])},
    ),
    manual_parameters=ADMIN_HEADERS,
    responses={200: DonationsSerializer(), 400: 'Invalid status', 404: 'Donation not found'},
    operation_summary='Change a donation status (admin)'
)
@api_view(['PUT'])
def put_donation_status(request, pk, format=None):
    require_admin(request)
    donation = donations.set_donation_status(pk, request.data.get('status'))
    return Response(DonationsSerializer(donation).data)


"""
AVAILABILITY ###########################################################################################
"""
@swagger_auto_schema(
    method='post',
    request_body=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        required=['event_id', 'availability_slots'],
        properties={
            'event_id': openapi.Schema(type=openapi.TYPE_INTEGER),
            'availability_slots': openapi.Schema(
                type=openapi.TYPE_ARRAY,
                items=openapi.Schema(
                    type=openapi.TYPE_OBJECT,
                    properties={
                        'availability_date': openapi.Schema(type=openapi.TYPE_STRING, format=openapi.FORMAT_DATE),
                        'start_time': openapi.Schema(type=openapi.TYPE_STRING),
                        'end_time': openapi.Schema(type=openapi.TYPE_STRING),
                    },
                ),
            ),
        },
    ),
    manual_parameters=USER_HEADERS,
    responses={201: UserAvailabilitySerializer(many=True), 400: 'Bad Request', 404: 'Not found'},
    operation_summary='Replace the availability of a user for an event'
)
@api_view(['POST'])
def post_availability(request, user_id, format=None):
    require_same_user(request, user_id)
    saved = availability.submit_availability(
        user_id, request.data.get('event_id'), request.data.get('availability_slots'))
    return Response(UserAvailabilitySerializer(saved, many=True).data, status=status.HTTP_201_CREATED)


@swagger_auto_schema(method='get', manual_parameters=USER_HEADERS,
                     responses={200: UserAvailabilitySerializer(many=True)},
                     operation_summary='Availability of a user for an event')
@api_view(['GET'])
def get_user_availability(request, user_id, event_id, format=None):
    require_same_user(request, user_id)
    queryset = availability.user_availability(user_id, event_id)
    return Response(UserAvailabilitySerializer(queryset, many=True).data)


@swagger_auto_schema(method='get', manual_parameters=USER_HEADERS,
                     responses={200: EventAvailabilitySerializer(many=True)},
                     operation_summary='Availability of every user for an event (logged-in admin)')
@api_view(['GET'])
def get_event_availability(request, event_id, format=None):
    if not require_user(request).is_admin:
        raise Forbidden('Access denied. Admin privileges required.')
    queryset = availability.event_availability(event_id)
    return Response(EventAvailabilitySerializer(queryset, many=True).data)
