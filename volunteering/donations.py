from decimal import Decimal, ROUND_HALF_UP

from django.db.models import Count, Q, Sum

from volunteering.exceptions import BadRequest, NotFound
from volunteering.lookups import get_event, get_user, parse_id
from volunteering.models import Donations, DonationTypes, MONETARY_DONATION_TYPE_ID
from volunteering.serializers import DonationPledgeSerializer

DONATION_STATUSES = tuple(choice[0] for choice in Donations.STATUS_CHOICE)


def progress_percentage(total_amount, goal):
    """Share of the goal collected, rounded half up and clamped to 0..100."""
    goal = Decimal(goal or 0)
    if goal <= 0:
        return 0
    percentage = (Decimal(total_amount or 0) / goal * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return max(0, min(int(percentage), 100))


def monetary_total(event):
    total = Donations.objects.filter(
        event=event,
        donation_type_id=MONETARY_DONATION_TYPE_ID,
        status__in=Donations.COUNTED_STATUSES,
    ).aggregate(total=Sum('amount'))['total']
    return total or Decimal('0')


def event_progress(event):
    """Goal progress shown on the event itself; only donation and mixed events collect."""
    if not event.collects_donations:
        return None
    goal = event.donation_goal or Decimal('0')
    total_amount = monetary_total(event)
    return {
        'goal': goal,
        'total_amount': total_amount,
        'progress_percentage': progress_percentage(total_amount, goal),
    }


def donation_total(event):
    goal = event.donation_goal or Decimal('0')
    total_amount = monetary_total(event)

    donation_counts = []
    counted = (DonationTypes.objects
               .filter(donations__event=event, donations__status__in=Donations.COUNTED_STATUSES)
               .annotate(total_quantity=Sum('donations__quantity'), donation_count=Count('donations'))
               .order_by('id'))
    for donation_type in counted:
        donation_counts.append({
            'name': donation_type.name,
            'total_quantity': donation_type.total_quantity or 0,
            'donation_count': donation_type.donation_count,
        })

    return {
        'goal': goal,
        'total_amount': total_amount,
        'progress_percentage': progress_percentage(total_amount, goal),
        'donation_counts': donation_counts,
    }


def donation_summary(event):
    """Per type totals over every donation of the event, whatever its status."""
    summary = []
    types = (DonationTypes.objects
             .filter(donations__event=event)
             .annotate(
                 total_amount=Sum('donations__amount', filter=Q(id=MONETARY_DONATION_TYPE_ID)),
                 total_quantity=Sum('donations__quantity'),
                 donation_count=Count('donations'),
             )
             .order_by('id'))
    for donation_type in types:
        summary.append({
            'type': donation_type.name,
            'unit_of_measure': donation_type.unit_of_measure,
            'total_amount': donation_type.total_amount or Decimal('0'),
            'total_quantity': donation_type.total_quantity or 0,
            'donation_count': donation_type.donation_count,
        })
    return summary


def _pledged(field, value):
    serializer = DonationPledgeSerializer(data={field: value})
    if not serializer.is_valid():
        return None
    return serializer.validated_data.get(field)


def create_donation(data):
    """
    Records a pledged donation. Money is tracked by amount, every other type
    by quantity. Anonymous donations carry no user_id. New donations start
    out pending.
    """
    event_id = data.get('event_id')
    donation_type_id = data.get('donation_type_id')
    if not event_id or not donation_type_id:
        raise BadRequest('Event ID and donation type are required')

    event = get_event(event_id)
    user = get_user(data['user_id']) if data.get('user_id') else None
    try:
        donation_type = DonationTypes.objects.get(pk=parse_id(donation_type_id, 'donation type ID'))
    except DonationTypes.DoesNotExist:
        raise NotFound('Donation type not found')

    amount = None
    quantity = None
    if donation_type.is_monetary:
        amount = _pledged('amount', data.get('amount'))
        if amount is None:
            raise BadRequest('Amount is required for monetary donations')
    else:
        quantity = _pledged('quantity', data.get('quantity'))
        if quantity is None:
            raise BadRequest('Quantity is required for non-monetary donations')

    return Donations.objects.create(
        event=event,
        user=user,
        donation_type=donation_type,
        amount=amount,
        quantity=quantity,
        item_description=data.get('item_description'),
    )


def set_donation_status(donation_id, new_status):
    if not new_status or new_status not in DONATION_STATUSES:
        raise BadRequest('Valid status is required')
    try:
        donation = Donations.objects.get(pk=parse_id(donation_id, 'donation ID'))
    except Donations.DoesNotExist:
        raise NotFound('Donation not found')
    donation.status = new_status
    donation.save(update_fields=['status'])
    return donation
