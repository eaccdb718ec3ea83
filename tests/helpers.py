ADMIN_PASSWORD = 'admin-secret'
USER_PASSWORD = 'secret'


def auth(user):
    """Credential headers for the test client."""
    return {'HTTP_USERNAME': user.username, 'HTTP_PASSWORD': USER_PASSWORD}


def admin_auth():
    return {'HTTP_ADMIN_PASSWORD': ADMIN_PASSWORD}
