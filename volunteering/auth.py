from django.conf import settings
from django.contrib.auth.hashers import check_password
from django.utils.crypto import constant_time_compare

from volunteering.exceptions import Forbidden, Unauthorized
from volunteering.models import Users
from volunteering.redis_view import get_value

SESSION_COOKIE = 'session_key'
SESSION_HEADER = 'Session-Key'


def get_session_key(request):
    return request.COOKIES.get(SESSION_COOKIE) or request.headers.get(SESSION_HEADER)


def check_authorize(request):
    """
    Returns the authenticated user or None.

    A session token issued on login is tried first, then the
    username/password headers.
    """
    existing_session = get_session_key(request)

    if existing_session:
        user_id = get_value(existing_session)
        if user_id:
            try:
                return Users.objects.get(pk=user_id)
            except Users.DoesNotExist:
                pass

    username = request.headers.get('username')
    password = request.headers.get('password')
    if not username or not password:
        return None

    try:
        user = Users.objects.get(username=username)
    except Users.DoesNotExist:
        return None

    if check_password(password, user.password):
        return user
    return None


def has_admin_password(request):
    admin_password = request.headers.get('admin-password')
    return bool(settings.ADMIN_PASSWORD) and bool(admin_password) and \
        constant_time_compare(admin_password, settings.ADMIN_PASSWORD)


def require_user(request):
    user = check_authorize(request)
    if user is None:
        if get_session_key(request) or request.headers.get('username'):
            raise Unauthorized('Invalid credentials')
        raise Unauthorized('Authentication required')
    return user


def require_admin(request):
    """
    Admin access is granted by the shared admin password header or by an
    authenticated user with the admin role. Returns the user when there is one.
    """
    user = check_authorize(request)
    if has_admin_password(request):
        return user
    if user is None:
        raise Unauthorized('Authentication required')
    if not user.is_admin:
        raise Forbidden('Access denied. Admin privileges required.')
    return user


def require_same_user(request, user_id):
    """Admins may act for anyone, members only for themselves."""
    user = require_user(request)
    if user.is_admin:
        return user
    if str(user.pk) != str(user_id):
        raise Forbidden('Forbidden: You can only access your own data')
    return user
