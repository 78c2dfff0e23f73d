"""Read-through file cache for GET requests."""

import logging
from pathlib import Path
from typing import Any, Callable

import diskcache
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_IN = 7 * 24 * 60 * 60

_MISSING = object()


class CacheOptions(BaseModel):
    """Per-call caching options; ``cache_key`` splits the module's namespace."""

    expires_in: int = DEFAULT_EXPIRES_IN
    cache_key: str | None = None


def cache_namespace(module_name: str, cache_key: str | None = None) -> str:
    return f"{module_name}_{cache_key}" if cache_key else module_name


def read_through(
    directory: Path,
    namespace: str,
    key: str,
    loader: Callable[[], Any],
    expires_in: int = DEFAULT_EXPIRES_IN,
) -> Any:
    """Return the cached value for ``namespace:key``, calling ``loader`` on a miss."""
    entry_key = f"{namespace}:{key}"
    with diskcache.Cache(str(directory)) as cache:
        value = cache.get(entry_key, default=_MISSING)
        if value is not _MISSING:
            logger.debug("Cache hit for %s", entry_key)
            return value

        value = loader()
        cache.set(entry_key, value, expire=expires_in)
        logger.debug("Cached %s for %ss", entry_key, expires_in)
        return value
