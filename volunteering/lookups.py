from django.db.models import Count, ExpressionWrapper, F, IntegerField, Q

from volunteering.exceptions import BadRequest, NotFound
from volunteering.models import Users, Events, EventRoles, Registrations


def parse_id(value, label='ID'):
    """Ids arrive as path segments or JSON values; anything non-numeric is a 400."""
    if isinstance(value, bool):
        raise BadRequest(f'Invalid {label}')
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise BadRequest(f'Invalid {label}')
    if parsed <= 0:
        raise BadRequest(f'Invalid {label}')
    return parsed


def get_user(user_id):
    try:
        return Users.objects.get(pk=parse_id(user_id, 'user ID'))
    except Users.DoesNotExist:
        raise NotFound('User not found')


def get_event(event_id):
    try:
        return Events.objects.get(pk=parse_id(event_id, 'event ID'))
    except Events.DoesNotExist:
        raise NotFound('Event not found')


def get_event_role(event_id, role_id, for_update=False):
    roles = EventRoles.objects.all()
    if for_update:
        roles = roles.select_for_update()
    try:
        return roles.get(pk=parse_id(role_id, 'role ID'), event_id=parse_id(event_id, 'event ID'))
    except EventRoles.DoesNotExist:
        raise NotFound('Role not found for this event')


def annotate_occupancy(roles):
    """
    Adds filled_spots / available_spots to a role queryset.
    Only pending and approved registrations hold a spot.
    """
    return roles.annotate(
        filled_spots=Count(
            'registrations',
            filter=Q(registrations__status__in=Registrations.ACTIVE_STATUSES),
        ),
    ).annotate(
        available_spots=ExpressionWrapper(F('capacity') - F('filled_spots'), output_field=IntegerField()),
    )


def filled_spots(role):
    return Registrations.objects.filter(role=role, status__in=Registrations.ACTIVE_STATUSES).count()


def role_with_occupancy(role_id):
    if role_id is None:
        return None
    return annotate_occupancy(EventRoles.objects.filter(pk=role_id)).first()
