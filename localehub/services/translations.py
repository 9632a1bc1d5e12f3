"""Translation CRUD and search with export cache invalidation."""

import logging
import time

from localehub import db
from localehub.models import Translation
from localehub.services.export import invalidate_export_caches

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 50


class TranslationNotFound(Exception):
    """Raised when a translation id does not exist."""

    def __init__(self, translation_id):
        self.translation_id = translation_id
        super().__init__(f'Translation {translation_id} not found')


def _log_performance(operation, start_time):
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(f"translations.{operation} executed in {elapsed_ms:.2f}ms")


def get_paginated(locale=None, tags=None, page=1, per_page=DEFAULT_PER_PAGE):
    """Newest-first page of translations, optionally filtered by locale and tags."""
    start_time = time.perf_counter()

    query = Translation.filtered(locale, tags).order_by(
        Translation.created_at.desc(),
        Translation.id.desc()
    )
    result = query.paginate(page=page, per_page=per_page, error_out=False)

    _log_performance('get_paginated', start_time)
    return result


def find_by_id(translation_id):
    translation = db.session.get(Translation, translation_id)
    if not translation:
        raise TranslationNotFound(translation_id)
    return translation


def create(key, locale, content, tags=None, cache=None):
    """Create a translation, attach its tags and purge affected export caches."""
    start_time = time.perf_counter()
    tags = list(tags or [])

    translation = Translation(key=key, locale=locale, content=content)
    db.session.add(translation)
    if tags:
        translation.sync_tags(tags)

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    if cache is not None:
        invalidate_export_caches(cache, locale, tags)

    _log_performance('create', start_time)
    return translation


def update(translation_id, key=None, locale=None, content=None, tags=None, cache=None):
    """
    Partially update a translation.

    Fields left as None are unchanged; tags=None keeps the current tags while
    a list (even empty) replaces them. Export caches are purged for both the
    previous and the new locale/tags.
    """
    start_time = time.perf_counter()

    translation = find_by_id(translation_id)
    old_locale = translation.locale
    old_tags = translation.tag_names

    if key is not None:
        translation.key = key
    if locale is not None:
        translation.locale = locale
    if content is not None:
        translation.content = content
    if tags is not None:
        translation.sync_tags(tags)

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    if cache is not None:
        invalidate_export_caches(cache, old_locale, old_tags)
        invalidate_export_caches(cache, translation.locale, translation.tag_names)

    _log_performance('update', start_time)
    return translation


def delete(translation_id, cache=None):
    """Delete a translation and purge the export caches it could appear in."""
    start_time = time.perf_counter()

    translation = find_by_id(translation_id)
    locale = translation.locale
    tags = translation.tag_names

    db.session.delete(translation)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    if cache is not None:
        invalidate_export_caches(cache, locale, tags)

    _log_performance('delete', start_time)
    return True


def search(locale=None, tags=None, key=None, content=None, page=1, per_page=DEFAULT_PER_PAGE):
    """
    Search translations by locale, tags, key substring and content.

    Content uses full-text matching on MySQL/PostgreSQL and substring
    matching elsewhere. On MySQL a content search is ordered by relevance.
    """
    start_time = time.perf_counter()

    query = Translation.filtered(locale, tags)

    if key:
        query = Translation.search_key(query, key)

    if content:
        query = Translation.search_content(query, content)

    if content and Translation.ranks_by_relevance():
        query = query.order_by(Translation.content_relevance(content).desc())
    else:
        query = query.order_by(Translation.created_at.desc(), Translation.id.desc())

    result = query.paginate(page=page, per_page=per_page, error_out=False)

    _log_performance('search', start_time)
    return result


def statistics():
    start_time = time.perf_counter()
    stats = Translation.statistics()
    _log_performance('statistics', start_time)
    return stats
