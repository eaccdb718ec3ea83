from django.db import models

# Donation type with id=1 is money, tracked by amount instead of quantity
MONETARY_DONATION_TYPE_ID = 1


class Users(models.Model):
    ROLE_CHOICE = (
        ('admin', 'Admin'),
        ('member', 'Member'),
    )
    username = models.CharField(max_length=100, unique=True)
    email = models.CharField(max_length=100, unique=True)
    password = models.CharField(max_length=128)
    full_name = models.CharField(max_length=100)
    role = models.CharField(max_length=10, choices=ROLE_CHOICE, default='member')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        managed = True
        db_table = 'users'
        ordering = ['id']

    @property
    def is_admin(self):
        return self.role == 'admin'

    def __str__(self):
        return self.username


class Events(models.Model):
    TYPE_CHOICE = (
        ('volunteer', 'Volunteer'),
        ('donation', 'Donation'),
        ('teaching', 'Teaching'),
        ('mixed', 'Mixed'),
    )
    name = models.CharField(max_length=255)
    host = models.CharField(max_length=255)
    category = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    event_type = models.CharField(max_length=20, choices=TYPE_CHOICE, default='volunteer')
    donation_goal = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    donation_goal_description = models.TextField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        managed = True
        db_table = 'events'
        ordering = ['start_date', 'id']

    @property
    def collects_donations(self):
        return self.event_type in ('donation', 'mixed')

    def __str__(self):
        return self.name


class EventRoles(models.Model):
    event = models.ForeignKey(Events, on_delete=models.CASCADE, related_name='roles')
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default='')
    capacity = models.PositiveIntegerField()
    skills_required = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        managed = True
        db_table = 'event_roles'
        ordering = ['name', 'id']
        constraints = [
            models.CheckConstraint(condition=models.Q(capacity__gt=0), name='event_roles_capacity_positive'),
        ]

    def __str__(self):
        return f'{self.name} ({self.event.name})'


class Registrations(models.Model):
    STATUS_CHOICE = (
        ('pending', 'Pending'),
        ('approved', 'Approved'),
        ('declined', 'Declined'),
        ('completed', 'Completed'),
    )
    # Registrations in these statuses hold a spot in their role
    ACTIVE_STATUSES = ('pending', 'approved')

    user = models.ForeignKey(Users, on_delete=models.CASCADE, related_name='registrations')
    event = models.ForeignKey(Events, on_delete=models.CASCADE, related_name='registrations')
    # null role means a general attendee
    role = models.ForeignKey(EventRoles, null=True, blank=True, on_delete=models.RESTRICT, related_name='registrations')
    status = models.CharField(max_length=20, choices=STATUS_CHOICE, default='pending')
    registration_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        managed = True
        db_table = 'registrations'
        ordering = ['registration_date', 'id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'event'], name='registrations_unique_user_event'),
        ]


class DonationTypes(models.Model):
    name = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True)
    unit_of_measure = models.CharField(max_length=50, null=True, blank=True)

    class Meta:
        managed = True
        db_table = 'donation_types'
        ordering = ['id']

    @property
    def is_monetary(self):
        return self.pk == MONETARY_DONATION_TYPE_ID

    def __str__(self):
        return self.name


class Donations(models.Model):
    STATUS_CHOICE = (
        ('pending', 'Pending'),
        ('received', 'Received'),
        ('distributed', 'Distributed'),
    )
    # Only these count towards totals and goal progress
    COUNTED_STATUSES = ('received', 'distributed')

    event = models.ForeignKey(Events, on_delete=models.CASCADE, related_name='donations')
    user = models.ForeignKey(Users, null=True, blank=True, on_delete=models.SET_NULL, related_name='donations')
    donation_type = models.ForeignKey(DonationTypes, on_delete=models.PROTECT, related_name='donations')
    amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    quantity = models.PositiveIntegerField(null=True, blank=True)
    item_description = models.TextField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICE, default='pending')
    donation_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        managed = True
        db_table = 'donations'
        ordering = ['-donation_date', '-id']


class UserAvailability(models.Model):
    user = models.ForeignKey(Users, on_delete=models.CASCADE, related_name='availability')
    event = models.ForeignKey(Events, on_delete=models.CASCADE, related_name='availability')
    availability_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()

    class Meta:
        managed = True
        db_table = 'user_availability'
        ordering = ['availability_date', 'start_time', 'id']
