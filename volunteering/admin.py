from django.contrib import admin
from volunteering.models import Users, Events, EventRoles, Registrations, Donations, DonationTypes, UserAvailability


class UsersAdmin(admin.ModelAdmin):
    list_display = ('id', 'username', 'email', 'full_name', 'role')
    list_filter = ('role',)
    search_fields = ('username', 'email', 'full_name')
    exclude = ('password',)


class EventRolesInline(admin.TabularInline):
    model = EventRoles
    extra = 0


class EventsAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'host', 'event_type', 'start_date', 'end_date', 'is_active')
    list_filter = ('event_type', 'is_active')
    search_fields = ('name', 'host')
    inlines = [EventRolesInline]


class RegistrationsAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'event', 'role', 'status', 'registration_date')
    list_filter = ('status',)


class DonationsAdmin(admin.ModelAdmin):
    list_display = ('id', 'event', 'user', 'donation_type', 'amount', 'quantity', 'status', 'donation_date')
    list_filter = ('status', 'donation_type')


admin.site.register(Users, UsersAdmin)
admin.site.register(Events, EventsAdmin)
admin.site.register(Registrations, RegistrationsAdmin)
admin.site.register(Donations, DonationsAdmin)
admin.site.register(DonationTypes)
admin.site.register(UserAvailability)
