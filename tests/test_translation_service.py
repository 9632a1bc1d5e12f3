"""
Tests for the translation service layer (no HTTP).
"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from localehub.models import Tag, Translation
from localehub.services.export import ExportOptions, export_translations
from localehub.services import translations as translation_service
from localehub.services.cache_keys import export_cache_key
from localehub.services.translations import TranslationNotFound


class TestTranslationService:

    def test_create_with_tags(self, db_session, cache):
        translation = translation_service.create(
            key='test.key',
            locale='en',
            content='Test content',
            tags=['web', 'mobile'],
            cache=cache
        )

        assert translation.id is not None
        assert translation.key == 'test.key'
        assert sorted(translation.tag_names) == ['mobile', 'web']
        assert Tag.query.count() == 2

    def test_create_reuses_existing_tags(self, db_session, make_translation):
        make_translation(tags=['web'])

        translation_service.create(key='x.y', locale='en', content='z', tags=['web', 'web'])

        assert Tag.query.filter_by(name='web').count() == 1

    def test_update_replaces_tags(self, db_session, make_translation):
        translation = make_translation(tags=['web'])

        updated = translation_service.update(
            translation.id,
            content='Updated content',
            tags=['mobile', 'desktop']
        )

        assert updated.content == 'Updated content'
        assert sorted(updated.tag_names) == ['desktop', 'mobile']

    def test_update_invalidates_both_locales(self, db_session, cache, make_translation):
        translation = make_translation(locale='en', tags=['web'])
        for locale in ('en', 'fr'):
            cache.set(export_cache_key(locale, None, 'flat'), {'stale': 'yes'}, 3600)
        cache.set(export_cache_key('en', ['web'], 'nested'), {'stale': 'yes'}, 3600)

        translation_service.update(translation.id, locale='fr', cache=cache)

        assert export_cache_key('en', None, 'flat') not in cache
        assert export_cache_key('fr', None, 'flat') not in cache
        assert export_cache_key('en', ['web'], 'nested') not in cache

    def test_get_paginated(self, db_session, make_translation):
        for _ in range(15):
            make_translation()

        result = translation_service.get_paginated(per_page=10)

        assert result.per_page == 10
        assert result.total == 15
        assert len(result.items) == 10

    def test_search_with_multiple_criteria(self, db_session, make_translation):
        make_translation(key='search.test', locale='en', content='Searchable content', tags=['web'])
        make_translation(key='other.test', locale='fr', content='Different content')

        results = translation_service.search(locale='en', tags=['web'], key='search')

        assert [t.key for t in results.items] == ['search.test']

    def test_delete(self, db_session, cache, make_translation):
        translation = make_translation(locale='en')
        translation_id = translation.id
        cache.set(export_cache_key('en', None, 'flat'), {'stale': 'yes'}, 3600)

        assert translation_service.delete(translation_id, cache=cache) is True
        assert db_session.get(Translation, translation_id) is None
        assert export_cache_key('en', None, 'flat') not in cache

    def test_delete_keeps_tags(self, db_session, make_translation):
        translation = make_translation(tags=['web'])

        translation_service.delete(translation.id)

        assert Tag.query.filter_by(name='web').count() == 1

    def test_find_by_id_not_found(self, db_session):
        with pytest.raises(TranslationNotFound):
            translation_service.find_by_id(99999)

    def test_for_export_orders_by_key(self, db_session, make_translation):
        make_translation(key='b.key', locale='en', content='2')
        make_translation(key='a.key', locale='en', content='1')

        rows = Translation.for_export('en')

        assert [(row.key, row.content) for row in rows] == [('a.key', '1'), ('b.key', '2')]

    def test_export_reraises_database_error(self, db_session, cache):
        options = ExportOptions.from_request_args(locale='en')
        error = OperationalError('SELECT', {}, Exception('database is unavailable'))

        with patch.object(Translation, 'for_export', side_effect=error):
            with pytest.raises(OperationalError):
                export_translations(options, cache)

        assert options.cache_key not in cache

    def test_sqlite_uses_substring_search(self, db_session, make_translation):
        make_translation(key='a', content='Save changes')
        make_translation(key='b', content='Cancel')

        assert not Translation.uses_fulltext()
        assert not Translation.ranks_by_relevance()
        query = Translation.search_content(Translation.query, 'save')
        assert [t.key for t in query.all()] == ['a']

    def test_statistics_lists_distinct_locales(self, db_session, make_translation):
        make_translation(key='a', locale='fr')
        make_translation(key='b', locale='en')
        make_translation(key='c', locale='fr')

        assert Translation.available_locales() == ['en', 'fr']
        assert translation_service.statistics()['locales'] == ['en', 'fr']
