import logging

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

KEY_PREFIX = "spotlight"


def _timeout():
    return settings.SPOTLIGHT.get("CACHE_TIMEOUT", 300)


def _version_key(route):
    return f"{KEY_PREFIX}:route:{route}:version"


def route_version(route):
    return cache.get_or_set(_version_key(route), 1, None)


def invalidate_routes(*routes):
    """Bump the version of each route so everything cached under it is skipped."""
    for route in routes:
        key = _version_key(route)
        try:
            cache.incr(key)
        except ValueError:
            cache.set(key, 2, None)
        logger.debug("invalidated cached route %s", route)


def cached(route, name, builder):
    """Return ``builder()`` cached under ``route`` until the route is invalidated."""
    key = f"{KEY_PREFIX}:{route}:v{route_version(route)}:{name}"
    value = cache.get(key)
    if value is None:
        value = builder()
        cache.set(key, value, _timeout())
    return value


def post_route(post_id):
    return f"post:{post_id}"


POSTS_ROUTE = "posts"
