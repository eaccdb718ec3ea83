import redis
from django.conf import settings

session_storage = redis.Redis(
    host=settings.REDIS_HOST,
    port=settings.REDIS_PORT,
    db=settings.REDIS_DB,
    decode_responses=True,
)


def set_key(key, value, ttl=None):
    """Stores a session token -> user id mapping, expiring after ttl seconds."""
    session_storage.set(key, value, ex=ttl or settings.SESSION_TTL)


def get_value(key):
    return session_storage.get(key)


def delete_value(key):
    session_storage.delete(key)
