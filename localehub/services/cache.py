"""Cache stores for export results.

The export path only needs two operations from a cache: ``remember`` (get
or compute-and-store with a TTL) and ``forget``. Both stores serialize
values as JSON so a cached result is an independent copy of what was
computed.

A cache failure never fails the request: reads degrade to a miss and
writes/deletes are logged and dropped.
"""

import json
import logging
import threading
import time

import redis
from flask import current_app

from localehub.services.redis_client import get_redis

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'localehub_cache'

_MISSING = object()


class CacheStore:
    """Base cache capability. Subclasses implement get/set/forget."""

    name = 'base'

    def get(self, key, default=None):
        raise NotImplementedError

    def set(self, key, value, ttl_seconds):
        raise NotImplementedError

    def forget(self, key):
        raise NotImplementedError

    def ping(self) -> bool:
        return True

    def remember(self, key, ttl_seconds, compute):
        """Return the cached value for key, or compute, store and return it."""
        value = self.get(key, _MISSING)
        if value is not _MISSING:
            logger.debug(f"Cache hit: {key}")
            return value

        logger.debug(f"Cache miss: {key}")
        value = compute()
        self.set(key, value, ttl_seconds)
        return value


class MemoryCache(CacheStore):
    """Process-local TTL cache. Used in tests and when Redis is not configured."""

    name = 'memory'

    def __init__(self, clock=time.monotonic):
        self._entries = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key, default=None):
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            expires_at, payload = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return default
        return json.loads(payload)

    def set(self, key, value, ttl_seconds):
        payload = json.dumps(value)
        with self._lock:
            now = self._clock()
            self._sweep(now)
            self._entries[key] = (now + ttl_seconds, payload)

    def _sweep(self, now):
        """Drop expired entries. Caller holds the lock."""
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]

    def forget(self, key):
        with self._lock:
            self._entries.pop(key, None)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __contains__(self, key):
        return self.get(key, _MISSING) is not _MISSING


class RedisCache(CacheStore):
    """Redis-backed cache shared by every worker."""

    name = 'redis'

    def __init__(self, redis_url):
        self.redis_url = redis_url

    def _client(self):
        return get_redis(self.redis_url)

    def get(self, key, default=None):
        client = self._client()
        if client is None:
            return default

        try:
            raw = client.get(key)
        except redis.RedisError as e:
            logger.warning(f"Redis read failed for {key}, recomputing: {e}")
            return default

        if raw is None:
            return default

        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"Discarding unreadable cache entry {key}")
            return default

    def set(self, key, value, ttl_seconds):
        client = self._client()
        if client is None:
            return

        try:
            client.setex(key, ttl_seconds, json.dumps(value))
        except redis.RedisError as e:
            logger.warning(f"Redis write failed for {key}: {e}")

    def forget(self, key):
        client = self._client()
        if client is None:
            logger.warning(f"Redis unavailable, could not forget {key}")
            return

        try:
            client.delete(key)
        except redis.RedisError as e:
            logger.error(f"Redis delete failed for {key}: {e}")

    def ping(self) -> bool:
        client = self._client()
        if client is None:
            return False
        try:
            return bool(client.ping())
        except redis.RedisError:
            return False


def init_cache(app):
    """Attach the configured cache store to the app."""
    backend = app.config.get('CACHE_BACKEND')
    if not backend:
        backend = 'redis' if app.config.get('REDIS_URL') else 'memory'

    if backend == 'redis':
        store = RedisCache(app.config['REDIS_URL'])
    elif backend == 'memory':
        store = MemoryCache()
    else:
        raise ValueError(f"Unknown CACHE_BACKEND: {backend}")

    app.extensions[EXTENSION_KEY] = store
    logger.info(f"Export cache backend: {store.name}")
    return store


def get_cache(app=None) -> CacheStore:
    """Get the cache store for the given (or current) app."""
    app = app or current_app
    return app.extensions[EXTENSION_KEY]
