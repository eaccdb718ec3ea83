from decimal import Decimal

from rest_framework import serializers

from .models import Users, Events, EventRoles, Registrations, Donations, DonationTypes, UserAvailability


class UsersSerializer(serializers.ModelSerializer):
    class Meta:
        model = Users
        fields = ['id', 'username', 'email', 'full_name', 'role', 'created_at']


class EventsSerializer(serializers.ModelSerializer):
    class Meta:
        model = Events
        fields = '__all__'

    def validate(self, attrs):
        start_date = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end_date = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({'end_date': 'End date must not be before start date'})
        return attrs


class EventRolesSerializer(serializers.ModelSerializer):
    event_id = serializers.PrimaryKeyRelatedField(source='event', read_only=True)

    class Meta:
        model = EventRoles
        fields = ['id', 'event_id', 'name', 'description', 'capacity', 'skills_required', 'created_at']

    def validate_capacity(self, value):
        if value < 1:
            raise serializers.ValidationError('Capacity must be a positive integer')
        return value


class RoleOccupancySerializer(EventRolesSerializer):
    """Role together with its derived occupancy (requires annotate_occupancy)."""
    filled_spots = serializers.IntegerField(read_only=True)
    available_spots = serializers.IntegerField(read_only=True)

    class Meta(EventRolesSerializer.Meta):
        fields = EventRolesSerializer.Meta.fields + ['filled_spots', 'available_spots']


class RegistrationsSerializer(serializers.ModelSerializer):
    user_id = serializers.PrimaryKeyRelatedField(source='user', read_only=True)
    event_id = serializers.PrimaryKeyRelatedField(source='event', read_only=True)
    role_id = serializers.PrimaryKeyRelatedField(source='role', read_only=True)

    class Meta:
        model = Registrations
        fields = ['id', 'user_id', 'event_id', 'role_id', 'status', 'registration_date']


class UserEventRegistrationSerializer(serializers.ModelSerializer):
    """An event the user signed up for, with the role and status of the signup."""
    event = EventsSerializer(read_only=True)
    role_id = serializers.PrimaryKeyRelatedField(source='role', read_only=True)
    role_name = serializers.CharField(source='role.name', read_only=True, default=None)

    class Meta:
        model = Registrations
        fields = ['id', 'event', 'role_id', 'role_name', 'status', 'registration_date']


class RegistrantSerializer(serializers.ModelSerializer):
    """A user signed up for an event or role."""
    id = serializers.IntegerField(source='user.id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    email = serializers.CharField(source='user.email', read_only=True)
    full_name = serializers.CharField(source='user.full_name', read_only=True)
    registration_id = serializers.IntegerField(source='id', read_only=True)
    role_id = serializers.PrimaryKeyRelatedField(source='role', read_only=True)

    class Meta:
        model = Registrations
        fields = ['id', 'username', 'email', 'full_name', 'registration_id', 'role_id', 'status', 'registration_date']


class UserRoleRegistrationSerializer(serializers.ModelSerializer):
    registration_id = serializers.IntegerField(source='id', read_only=True)
    event_id = serializers.IntegerField(source='event.id', read_only=True)
    event_name = serializers.CharField(source='event.name', read_only=True)
    start_date = serializers.DateTimeField(source='event.start_date', read_only=True)
    end_date = serializers.DateTimeField(source='event.end_date', read_only=True)
    role_id = serializers.IntegerField(source='role.id', read_only=True)
    role_name = serializers.CharField(source='role.name', read_only=True)
    role_description = serializers.CharField(source='role.description', read_only=True)

    class Meta:
        model = Registrations
        fields = ['registration_id', 'status', 'registration_date', 'event_id', 'event_name',
                  'start_date', 'end_date', 'role_id', 'role_name', 'role_description']


class DonationTypesSerializer(serializers.ModelSerializer):
    class Meta:
        model = DonationTypes
        fields = ['id', 'name', 'description', 'unit_of_measure']


class DonationsSerializer(serializers.ModelSerializer):
    event_id = serializers.PrimaryKeyRelatedField(source='event', read_only=True)
    user_id = serializers.PrimaryKeyRelatedField(source='user', read_only=True)
    donation_type_id = serializers.PrimaryKeyRelatedField(source='donation_type', read_only=True)

    class Meta:
        model = Donations
        fields = ['id', 'event_id', 'user_id', 'donation_type_id', 'amount', 'quantity',
                  'item_description', 'status', 'donation_date']


class StrictIntegerField(serializers.IntegerField):
    def to_internal_value(self, data):
        if isinstance(data, bool):
            self.fail('invalid')
        return super().to_internal_value(data)


class DonationPledgeSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'),
                                      required=False, allow_null=True)
    quantity = StrictIntegerField(min_value=1, required=False, allow_null=True)


class EventDonationSerializer(DonationsSerializer):
    donation_type = serializers.CharField(source='donation_type.name', read_only=True)
    unit_of_measure = serializers.CharField(source='donation_type.unit_of_measure', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True, default=None)
    full_name = serializers.CharField(source='user.full_name', read_only=True, default=None)

    class Meta(DonationsSerializer.Meta):
        fields = DonationsSerializer.Meta.fields + ['donation_type', 'unit_of_measure', 'username', 'full_name']


class UserDonationSerializer(DonationsSerializer):
    donation_type = serializers.CharField(source='donation_type.name', read_only=True)
    unit_of_measure = serializers.CharField(source='donation_type.unit_of_measure', read_only=True)
    event_name = serializers.CharField(source='event.name', read_only=True)

    class Meta(DonationsSerializer.Meta):
        fields = DonationsSerializer.Meta.fields + ['donation_type', 'unit_of_measure', 'event_name']


class AvailabilitySlotSerializer(serializers.Serializer):
    availability_date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()


class UserAvailabilitySerializer(serializers.ModelSerializer):
    user_id = serializers.PrimaryKeyRelatedField(source='user', read_only=True)
    event_id = serializers.PrimaryKeyRelatedField(source='event', read_only=True)

    class Meta:
        model = UserAvailability
        fields = ['id', 'user_id', 'event_id', 'availability_date', 'start_time', 'end_time']


class EventAvailabilitySerializer(UserAvailabilitySerializer):
    username = serializers.CharField(source='user.username', read_only=True)
    full_name = serializers.CharField(source='user.full_name', read_only=True)

    class Meta(UserAvailabilitySerializer.Meta):
        fields = UserAvailabilitySerializer.Meta.fields + ['username', 'full_name']
