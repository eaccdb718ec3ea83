from django.urls import path

from volunteering import views

urlpatterns = [
    path('users/register', views.register_user, name='users-register'),
    path('users/login', views.login, name='users-login'),
    path('users/logout', views.logout, name='users-logout'),
    path('users', views.get_users, name='users-list'),
    path('users/<int:pk>', views.get_user_profile, name='users-detail'),
    path('users/<int:pk>/role', views.put_user_role, name='users-role'),
    path('users/<int:user_id>/donations', views.get_user_donations, name='users-donations'),

    path('events', views.events, name='events-list'),
    path('events/type/<str:event_type>', views.get_events_by_type, name='events-by-type'),
    path('events/<int:pk>', views.event_detail, name='events-detail'),
    path('events/<int:event_id>/donations', views.get_event_donations, name='events-donations'),
    path('events/<int:event_id>/donations/total', views.get_event_donation_total, name='events-donations-total'),

    path('roles/events/<int:event_id>/roles', views.event_roles, name='roles-list'),
    path('roles/events/<int:event_id>/roles/<int:role_id>', views.event_role, name='roles-detail'),
    path('roles/events/<int:event_id>/roles/<int:role_id>/users', views.get_role_users, name='roles-users'),

    path('registrations/users/<int:user_id>/register', views.register_for_event, name='registrations-register'),
    path('registrations/users/<int:user_id>/update-role', views.update_registration_role, name='registrations-update-role'),
    path('registrations/users/<int:user_id>/events', views.get_user_events, name='registrations-user-events'),
    path('registrations/users/<int:user_id>/events/<int:event_id>', views.cancel_registration, name='registrations-cancel'),
    path('registrations/events/<int:event_id>/users', views.get_event_users, name='registrations-event-users'),

    path('role-registrations/users/<int:user_id>/roles', views.user_roles, name='role-registrations-user-roles'),
    path('role-registrations/users/<int:user_id>/events/<int:event_id>', views.get_user_event_role, name='role-registrations-user-event'),
    path('role-registrations/users/<int:user_id>/events/<int:event_id>/roles/<int:role_id>', views.unregister_role, name='role-registrations-unregister'),
    path('role-registrations/registrations/<int:pk>/status', views.put_registration_status, name='role-registrations-status'),

    path('donations', views.post_donation, name='donations-create'),
    path('donations/types', views.get_donation_types, name='donations-types'),
    path('donations/<int:pk>/status', views.put_donation_status, name='donations-status'),

    path('availability/users/<int:user_id>', views.post_availability, name='availability-submit'),
    path('availability/users/<int:user_id>/events/<int:event_id>', views.get_user_availability, name='availability-user'),
    path('availability/events/<int:event_id>', views.get_event_availability, name='availability-event'),
]
