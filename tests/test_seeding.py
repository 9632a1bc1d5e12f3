"""
Tests for tag seeding and generated translation data.
"""

import random

from localehub.constants import STANDARD_TAGS
from localehub.models import Tag, Translation
from localehub.services.seeding import (
    generate_content,
    generate_key,
    populate_translations,
    seed_tags,
)


def test_generate_key():
    assert generate_key(0) == 'common.title.0'
    assert generate_key(1) == 'auth.success.1'


def test_generate_content_falls_back_to_english():
    assert generate_content(3, 'fr') == "Une erreur s'est produite #3"
    assert generate_content(3, 'ja') == 'An error occurred #3'


def test_seed_tags_is_idempotent(db_session):
    seed_tags()
    seed_tags()
    assert Tag.query.count() == len(STANDARD_TAGS)


def test_populate_translations(db_session):
    tagged = populate_translations(25, batch_size=10, rng=random.Random(7))

    assert Translation.query.count() == 25
    assert tagged == 25
    assert all(1 <= len(t.tags) <= 4 for t in Translation.query.all())

    # A second run continues numbering instead of colliding
    populate_translations(5, rng=random.Random(8))
    assert Translation.query.count() == 30
