"""Redis connections shared by the export cache and the health check."""

import os
import redis
import logging

logger = logging.getLogger(__name__)

# Successful connections keyed by URL (lazy initialization)
_redis_clients = {}


def get_redis(redis_url=None):
    """Get or create a Redis connection. Returns None when Redis is unavailable."""
    redis_url = redis_url or os.environ.get('REDIS_URL')
    
    if not redis_url:
        logger.warning("REDIS_URL not set - export caching will not use Redis")
        return None
    
    if redis_url in _redis_clients:
        return _redis_clients[redis_url]
    
    try:
        client = redis.from_url(redis_url, decode_responses=True)
        # Test connection
        client.ping()
        _redis_clients[redis_url] = client
        logger.info("Redis connected successfully")
        return client
    except Exception as e:
        # Not cached: the next call retries the connection
        logger.error(f"Redis connection failed: {e}")
        return None
