"""Cache key builders and invalidation sets for translation exports.

Key Naming Convention:
    - Colons (:) separate segments
    - Format: translations:export[:{locale}][:tags:{tag1}-{tag2}...]:{format}
    - Examples:
        - translations:export:flat
        - translations:export:en:nested
        - translations:export:en:tags:web-mobile:flat

Tag order is kept exactly as the caller supplied it, so ``web,mobile`` and
``mobile,web`` are cached separately. Invalidation can only purge the
single-tag shapes it can enumerate; multi-tag entries expire by TTL.
"""

from typing import Iterable, List, Optional, Union
from urllib.parse import quote

EXPORT_PREFIX = 'translations:export'
EXPORT_FORMATS = ('flat', 'nested')
DEFAULT_EXPORT_TTL = 3600  # 1 hour


def split_tags(tags: Union[str, Iterable[str], None]) -> List[str]:
    """Normalize a comma-separated string or a list of tags into trimmed names."""
    if not tags:
        return []
    if isinstance(tags, str):
        tags = tags.split(',')
    return [tag.strip() for tag in tags]


def _escape_tag(tag: str) -> str:
    # '-' joins tags and ':' separates segments, so neither may appear raw
    return quote(tag, safe='').replace('-', '%2D')


def export_cache_key(
    locale: Optional[str] = None,
    tags: Union[str, Iterable[str], None] = None,
    format: str = 'flat',
) -> str:
    """
    Build the cache key for one export request.

    Args:
        locale: 2-letter locale code, or None for all locales
        tags: comma-separated string or list of tag names, in caller order
        format: 'flat' or 'nested'

    Returns:
        Cache key, e.g. "translations:export:en:tags:web-mobile:flat"

    Example:
        >>> export_cache_key('en', 'web, mobile', 'flat')
        'translations:export:en:tags:web-mobile:flat'
    """
    parts = [EXPORT_PREFIX]

    if locale:
        parts.append(locale)

    tag_list = split_tags(tags)
    if tag_list:
        parts.append('tags:' + '-'.join(_escape_tag(tag) for tag in tag_list))

    parts.append(format)
    return ':'.join(parts)


def invalidation_keys(locale: Optional[str], tags: Iterable[str]) -> List[str]:
    """
    List every export key that a change to a record with this locale and
    these tags must purge.

    Covers, for each export format: the unscoped key, the locale key, and per
    tag the locale+tag key and the tag-only key.
    """
    tag_list = split_tags(list(tags or []))
    keys = []

    for fmt in EXPORT_FORMATS:
        keys.append(export_cache_key(None, None, fmt))
        if locale:
            keys.append(export_cache_key(locale, None, fmt))
        for tag in tag_list:
            if locale:
                keys.append(export_cache_key(locale, [tag], fmt))
            keys.append(export_cache_key(None, [tag], fmt))

    return list(dict.fromkeys(keys))
