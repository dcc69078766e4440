from functools import lru_cache

from app.core.config import get_settings
from app.services.cache import TTLCache
from app.services.manifest_source import ManifestSource


def get_settings_dep():
    return get_settings()


@lru_cache
def get_manifest_source() -> ManifestSource:
    """
    Source partagée par tout le process (un seul cache par worker).
    """
    settings = get_settings()
    cache = TTLCache(ttl_seconds=settings.CACHE_TTL)
    return ManifestSource(cache=cache, timeout=settings.FETCH_TIMEOUT)
