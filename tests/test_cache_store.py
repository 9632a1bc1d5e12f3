"""
Tests for the export cache stores and invalidation.
"""

from unittest.mock import MagicMock, patch

import redis

from localehub.services.cache import MemoryCache, RedisCache
from localehub.services.cache_keys import export_cache_key
from localehub.services.export import invalidate_export_caches


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class Counter:
    """compute() stand-in that records how often it ran."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


class TestMemoryCache:
    """Tests for the in-process cache."""

    def test_remember_computes_once(self):
        cache = MemoryCache()
        compute = Counter({'a': 'b'})

        assert cache.remember('k', 60, compute) == {'a': 'b'}
        assert cache.remember('k', 60, compute) == {'a': 'b'}
        assert compute.calls == 1

    def test_entry_expires_after_ttl(self):
        clock = FakeClock()
        cache = MemoryCache(clock=clock)
        compute = Counter('v')

        cache.remember('k', 3600, compute)
        clock.now += 3599
        cache.remember('k', 3600, compute)
        assert compute.calls == 1

        clock.now += 1
        cache.remember('k', 3600, compute)
        assert compute.calls == 2

    def test_forget(self):
        cache = MemoryCache()
        cache.set('k', 1, 60)
        cache.forget('k')
        assert 'k' not in cache
        # Forgetting a missing key is a no-op
        cache.forget('k')

    def test_values_are_copies(self):
        cache = MemoryCache()
        value = {'nested': {'x': '1'}}
        cache.set('k', value, 60)
        value['nested']['x'] = 'changed'
        assert cache.get('k') == {'nested': {'x': '1'}}

    def test_set_drops_expired_entries(self):
        clock = FakeClock()
        cache = MemoryCache(clock=clock)
        for i in range(3):
            cache.set(f'old-{i}', i, 60)

        clock.now += 61
        cache.set('fresh', 'v', 60)

        assert list(cache._entries) == ['fresh']


class TestInvalidation:
    """invalidate_export_caches() purges every enumerable shape."""

    def _warm(self, cache, locale, tags, fmt='flat'):
        compute = Counter({'warm': fmt})
        key = export_cache_key(locale, tags, fmt)
        cache.remember(key, 3600, compute)
        return key, compute

    def test_affected_keys_miss_after_invalidation(self):
        cache = MemoryCache()
        affected = [
            (None, None),
            ('en', None),
            ('en', ['web']),
            (None, ['web']),
        ]
        for locale, tags in affected:
            for fmt in ('flat', 'nested'):
                self._warm(cache, locale, tags, fmt)

        invalidate_export_caches(cache, 'en', ['web'])

        for locale, tags in affected:
            for fmt in ('flat', 'nested'):
                key, compute = self._warm(cache, locale, tags, fmt)
                assert compute.calls == 1, key

    def test_unrelated_keys_still_hit(self):
        cache = MemoryCache()
        unrelated = [('fr', None), ('fr', ['mobile']), (None, ['mobile']), ('en', ['mobile'])]
        for locale, tags in unrelated:
            self._warm(cache, locale, tags)

        invalidate_export_caches(cache, 'en', ['web'])

        for locale, tags in unrelated:
            key, compute = self._warm(cache, locale, tags)
            assert compute.calls == 0, key

    def test_forget_errors_are_swallowed(self):
        cache = MagicMock()
        cache.forget.side_effect = RuntimeError('boom')

        keys = invalidate_export_caches(cache, 'en', [])

        assert cache.forget.call_count == len(keys)


class TestRedisCache:
    """RedisCache never lets Redis failures escape."""

    def test_read_failure_recomputes(self):
        client = MagicMock()
        client.get.side_effect = redis.ConnectionError('down')
        client.setex.side_effect = redis.ConnectionError('down')

        with patch('localehub.services.cache.get_redis', return_value=client):
            cache = RedisCache('redis://localhost:6379/0')
            compute = Counter({'a': 'b'})
            assert cache.remember('k', 60, compute) == {'a': 'b'}
            assert compute.calls == 1

    def test_hit_is_decoded_from_json(self):
        client = MagicMock()
        client.get.return_value = '{"a": {"b": "c"}}'

        with patch('localehub.services.cache.get_redis', return_value=client):
            cache = RedisCache('redis://localhost:6379/0')
            compute = Counter(None)
            assert cache.remember('k', 60, compute) == {'a': {'b': 'c'}}
            assert compute.calls == 0

    def test_miss_stores_with_ttl(self):
        client = MagicMock()
        client.get.return_value = None

        with patch('localehub.services.cache.get_redis', return_value=client):
            RedisCache('redis://localhost:6379/0').remember('k', 3600, Counter({'x': 'y'}))

        client.setex.assert_called_once_with('k', 3600, '{"x": "y"}')

    def test_forget_failure_is_logged_not_raised(self):
        client = MagicMock()
        client.delete.side_effect = redis.TimeoutError('slow')

        with patch('localehub.services.cache.get_redis', return_value=client):
            RedisCache('redis://localhost:6379/0').forget('k')

        client.delete.assert_called_once_with('k')

    def test_unavailable_redis_behaves_as_miss(self):
        with patch('localehub.services.cache.get_redis', return_value=None):
            cache = RedisCache('redis://localhost:6379/0')
            compute = Counter('v')
            assert cache.remember('k', 60, compute) == 'v'
            assert cache.remember('k', 60, compute) == 'v'
            assert compute.calls == 2
            assert cache.ping() is False
