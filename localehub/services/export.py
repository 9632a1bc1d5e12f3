"""Translation export: flat/nested formatting with a cached read path."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple
import logging
import time

from localehub.models import Translation
from localehub.services.cache_keys import (
    DEFAULT_EXPORT_TTL,
    export_cache_key,
    invalidation_keys,
    split_tags,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportOptions:
    """Normalized export request: lowercase locale, trimmed tags in caller order."""

    locale: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    format: str = 'flat'

    @classmethod
    def from_request_args(cls, locale=None, tags=None, format=None):
        return cls(
            locale=locale.strip().lower() if locale else None,
            tags=tuple(split_tags(tags)) or None,
            format=format or 'flat',
        )

    @property
    def cache_key(self) -> str:
        return export_cache_key(self.locale, self.tags, self.format)


def format_flat(pairs: Iterable[Tuple[str, str]]) -> dict:
    """Map each full key to its content. A repeated key keeps the last content."""
    result = {}
    for key, content in pairs:
        result[key] = content
    return result


def set_nested_value(tree: dict, key: str, value: str) -> None:
    """Assign value in tree at the path given by splitting key on '.'.

    Overwrite policy: an intermediate segment holding a leaf string is
    replaced by a new mapping (the old leaf is lost), and the final segment
    replaces whatever was there, mapping included. Empty segments are
    literal '' keys.
    """
    *parents, last = key.split('.')
    node = tree
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = node[segment] = {}
        node = child
    node[last] = value


def format_nested(pairs: Iterable[Tuple[str, str]]) -> dict:
    """Build a tree with one mapping level per dot-separated key segment."""
    result = {}
    for key, content in pairs:
        set_nested_value(result, key, content)
    return result


def format_export(pairs: Iterable[Tuple[str, str]], format: str = 'flat') -> dict:
    if format == 'nested':
        return format_nested(pairs)
    return format_flat(pairs)


def _log_performance(operation, start_time, record_count):
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"export.{operation} executed in {elapsed_ms:.2f}ms "
        f"({record_count} records)"
    )


def export_translations(options: ExportOptions, cache, ttl_seconds: int = DEFAULT_EXPORT_TTL) -> dict:
    """
    Export translations for a locale/tag filter, served from cache when possible.

    The database query and formatting only run on a cache miss. A database
    error propagates to the caller.

    Returns:
        {'data': <flat or nested dict>, 'meta': {total, locale, tags, format, generated_at}}
    """
    start_time = time.perf_counter()

    def compute():
        rows = Translation.for_export(options.locale, list(options.tags or []))
        logger.debug(f"Export cache miss for {options.cache_key}: {len(rows)} rows")
        return format_export(((row.key, row.content) for row in rows), options.format)

    data = cache.remember(options.cache_key, ttl_seconds, compute)

    _log_performance('export', start_time, len(data))

    return {
        'data': data,
        'meta': {
            'total': len(data),
            'locale': options.locale,
            'tags': list(options.tags) if options.tags else None,
            'format': options.format,
            'generated_at': datetime.now(timezone.utc).isoformat(),
        }
    }


def invalidate_export_caches(cache, locale: Optional[str], tags: Iterable[str]) -> List[str]:
    """Forget every export key affected by a change to a record with this locale/tags.

    Never raises: the data change has already been committed.
    """
    keys = invalidation_keys(locale, tags)
    for key in keys:
        try:
            cache.forget(key)
        except Exception as e:
            logger.error(f"Failed to invalidate export cache {key}: {e}")
    logger.debug(f"Invalidated {len(keys)} export cache keys for locale={locale}")
    return keys
