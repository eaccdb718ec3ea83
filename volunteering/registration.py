"""
Role-capacity constrained registration workflow.

A user holds at most one registration per event. The registration may point
at one of the event's roles (a volunteer position with a capacity) or at no
role (a general attendee). Every write that can take a spot in a role locks
the role row first and counts active registrations while holding the lock,
so two requests can not both take the last spot.
"""
import logging

from django.db import IntegrityError, transaction

from volunteering.exceptions import BadRequest, Conflict, NotFound
from volunteering.lookups import filled_spots, get_event, get_event_role, get_user, parse_id
from volunteering.models import Registrations

logger = logging.getLogger(__name__)

# Which status a registration may move to from its current one
STATUS_TRANSITIONS = {
    'pending': {'approved', 'declined'},
    'approved': {'pending', 'declined', 'completed'},
    'declined': {'pending'},
    'completed': set(),
}

STATUSES = tuple(choice[0] for choice in Registrations.STATUS_CHOICE)


def _ensure_capacity(role):
    # caller must hold the row lock on role
    if filled_spots(role) >= role.capacity:
        raise Conflict('This role is already at full capacity')


def _create(user, event, role):
    try:
        with transaction.atomic():
            return Registrations.objects.create(user=user, event=event, role=role, status='pending')
    except IntegrityError:
        # a concurrent request registered the same user first
        raise Conflict('User already registered for this event')


def _ensure_reopenable(registration):
    # members may only move registrations that still hold or await a spot
    if registration.status not in Registrations.ACTIVE_STATUSES:
        raise BadRequest(f'Cannot change status from {registration.status} to pending')


def _get_registration(user_id, event_id, for_update=True):
    registrations = Registrations.objects.filter(
        user_id=parse_id(user_id, 'user ID'),
        event_id=parse_id(event_id, 'event ID'),
    )
    if for_update:
        registrations = registrations.select_for_update()
    registration = registrations.first()
    if registration is None:
        raise NotFound('Registration not found')
    return registration


def register(user_id, event_id, role_id=None):
    """
    Registers a user for an event, optionally into a role.
    Returns the new registration.
    """
    if not event_id:
        raise BadRequest('Event ID is required')

    user = get_user(user_id)
    event = get_event(event_id)

    with transaction.atomic():
        if Registrations.objects.filter(user=user, event=event).exists():
            raise Conflict('User already registered for this event')

        role = None
        if role_id is not None:
            role = get_event_role(event.pk, role_id, for_update=True)
            _ensure_capacity(role)

        registration = _create(user, event, role)

    logger.info('User %s registered for event %s (role %s)', user.pk, event.pk, registration.role_id)
    return registration


def update_role(user_id, event_id, role_id):
    """
    Moves an existing registration into another role of the same event.
    Returns (registration, previous_role_id).
    """
    if not event_id or not role_id:
        raise BadRequest('Event ID and Role ID are required')

    with transaction.atomic():
        registration = _get_registration(user_id, event_id)
        role = get_event_role(event_id, role_id, for_update=True)

        if registration.role_id == role.pk:
            raise BadRequest('User is already registered for this role')

        _ensure_reopenable(registration)
        _ensure_capacity(role)

        previous_role_id = registration.role_id
        registration.role = role
        registration.status = 'pending'
        registration.save(update_fields=['role', 'status'])

    logger.info('User %s moved from role %s to role %s in event %s',
                registration.user_id, previous_role_id, role.pk, registration.event_id)
    return registration, previous_role_id


def cancel(user_id, event_id):
    """Deletes the registration. Returns the id of the freed role, or None for attendees."""
    with transaction.atomic():
        registration = _get_registration(user_id, event_id)
        freed_role_id = registration.role_id
        registration.delete()

    logger.info('User %s canceled registration for event %s (freed role %s)', user_id, event_id, freed_role_id)
    return freed_role_id


def register_for_role(user_id, event_id, role_id):
    """Signs a user up directly for a role of an event they are not yet registered for."""
    if not event_id or not role_id:
        raise BadRequest('Event ID and Role ID are required')

    user = get_user(user_id)
    event = get_event(event_id)

    with transaction.atomic():
        role = get_event_role(event.pk, role_id, for_update=True)

        existing = Registrations.objects.filter(user=user, event=event).first()
        if existing is not None:
            if existing.role_id == role.pk:
                raise Conflict('Already registered for this role')
            raise Conflict('User already registered for this event')

        _ensure_capacity(role)
        registration = _create(user, event, role)

    logger.info('User %s registered for role %s in event %s', user.pk, role.pk, event.pk)
    return registration


def unregister_from_role(user_id, event_id, role_id):
    """
    Releases the user's spot in a role. The user stays registered for the
    event as an attendee. Returns the freed role id.
    """
    with transaction.atomic():
        registration = Registrations.objects.select_for_update().filter(
            user_id=parse_id(user_id, 'user ID'),
            event_id=parse_id(event_id, 'event ID'),
            role_id=parse_id(role_id, 'role ID'),
        ).first()
        if registration is None:
            raise NotFound('Registration not found')

        _ensure_reopenable(registration)
        freed_role_id = registration.role_id
        registration.role = None
        registration.status = 'pending'
        registration.save(update_fields=['role', 'status'])

    logger.info('User %s left role %s in event %s', user_id, freed_role_id, event_id)
    return freed_role_id


def set_status(registration_id, new_status):
    if not new_status or new_status not in STATUSES:
        raise BadRequest('Valid status is required')

    with transaction.atomic():
        try:
            registration = Registrations.objects.select_for_update().get(pk=parse_id(registration_id, 'registration ID'))
        except Registrations.DoesNotExist:
            raise NotFound('Registration not found')

        current = registration.status
        if new_status == current:
            return registration
        if new_status not in STATUS_TRANSITIONS[current]:
            raise BadRequest(f'Cannot change status from {current} to {new_status}')

        reactivating = current not in Registrations.ACTIVE_STATUSES and new_status in Registrations.ACTIVE_STATUSES
        if reactivating and registration.role_id:
            role = get_event_role(registration.event_id, registration.role_id, for_update=True)
            _ensure_capacity(role)

        registration.status = new_status
        registration.save(update_fields=['status'])

    logger.info('Registration %s status changed from %s to %s', registration.pk, current, new_status)
    return registration


def user_registrations(user_id):
    user = get_user(user_id)
    return Registrations.objects.filter(user=user).select_related('event', 'role').order_by('event__start_date', 'id')


def event_registrations(event_id):
    event = get_event(event_id)
    return Registrations.objects.filter(event=event).select_related('user').order_by('registration_date', 'id')


def role_registrations(event_id, role_id):
    role = get_event_role(event_id, role_id)
    return Registrations.objects.filter(role=role).select_related('user').order_by('registration_date', 'id')


def user_role_registrations(user_id):
    user = get_user(user_id)
    return (Registrations.objects.filter(user=user, role__isnull=False)
            .select_related('event', 'role')
            .order_by('event__start_date', 'role__name'))


def user_role_for_event(user_id, event_id):
    user = get_user(user_id)
    event = get_event(event_id)
    registration = (Registrations.objects.filter(user=user, event=event, role__isnull=False)
                    .select_related('event', 'role').first())
    if registration is None:
        raise NotFound('No role registration found for this user and event')
    return registration
