import logging

from django.db import transaction
from django.utils import timezone

from volunteering.exceptions import BadRequest, NotFound
from volunteering.lookups import get_user, parse_id
from volunteering.models import Events, UserAvailability
from volunteering.serializers import AvailabilitySlotSerializer

logger = logging.getLogger(__name__)


def _parse_slots(slots):
    parsed = []
    for slot in slots:
        serializer = AvailabilitySlotSerializer(data=slot)
        if not serializer.is_valid():
            raise BadRequest('Each availability slot needs a valid availability_date, start_time and end_time')
        parsed.append(serializer.validated_data)
    return parsed


def submit_availability(user_id, event_id, slots):
    """
    Replaces everything the user submitted earlier for the event with the
    given slots. Each slot must fall inside the event dates and end after it
    starts.
    """
    if not event_id or not slots or not isinstance(slots, list):
        raise BadRequest('Event ID and at least one availability slot are required')

    user = get_user(user_id)
    try:
        event = Events.objects.get(pk=parse_id(event_id, 'event ID'), is_active=True)
    except Events.DoesNotExist:
        raise NotFound('Event not found or not active')

    first_day = timezone.localtime(event.start_date).date()
    last_day = timezone.localtime(event.end_date).date()

    parsed = _parse_slots(slots)
    for slot in parsed:
        if slot['availability_date'] < first_day or slot['availability_date'] > last_day:
            raise BadRequest('Selected date is outside the event timeframe')
        if slot['start_time'] >= slot['end_time']:
            raise BadRequest('End time must be after start time')

    with transaction.atomic():
        UserAvailability.objects.filter(user=user, event=event).delete()
        UserAvailability.objects.bulk_create([
            UserAvailability(user=user, event=event, **slot) for slot in parsed
        ])

    logger.info('User %s submitted %d availability slots for event %s', user.pk, len(parsed), event.pk)
    return UserAvailability.objects.filter(user=user, event=event)


def user_availability(user_id, event_id):
    return UserAvailability.objects.filter(
        user_id=parse_id(user_id, 'user ID'),
        event_id=parse_id(event_id, 'event ID'),
    )


def event_availability(event_id):
    return (UserAvailability.objects
            .filter(event_id=parse_id(event_id, 'event ID'))
            .select_related('user')
            .order_by('availability_date', 'start_time', 'user__full_name'))
