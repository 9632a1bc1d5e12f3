"""Tag seeding and bulk generation of sample translations."""

from datetime import datetime, timedelta
import logging
import random

from sqlalchemy import func, insert

from localehub import db
from localehub.constants import (
    CONTENT_TEMPLATES,
    KEY_PREFIXES,
    KEY_SUFFIXES,
    SAMPLE_LOCALES,
    STANDARD_TAGS,
)
from localehub.models import Tag, Translation

logger = logging.getLogger(__name__)

BATCH_SIZE = 1000
MAX_TAGGED_TRANSLATIONS = 5000


def seed_tags(names=None):
    """Create any missing tags from names (defaults to the standard set)."""
    tags = [Tag.first_or_create(name) for name in (names or STANDARD_TAGS)]
    db.session.commit()
    return tags


def generate_key(index):
    prefix = KEY_PREFIXES[index % len(KEY_PREFIXES)]
    suffix = KEY_SUFFIXES[(index * 7) % len(KEY_SUFFIXES)]
    return f"{prefix}.{suffix}.{index}"


def generate_content(index, locale):
    templates = CONTENT_TEMPLATES.get(locale, CONTENT_TEMPLATES['en'])
    return f"{templates[index % len(templates)]} #{index}"


def populate_translations(count, batch_size=BATCH_SIZE, rng=None, progress=None):
    """
    Bulk insert ``count`` generated translations and tag a random subset.

    Indexes continue from the current row count so repeated runs do not
    collide on (key, locale).

    Args:
        count: number of translations to create
        batch_size: rows per INSERT
        rng: random.Random for reproducible runs
        progress: optional callable(done, total)

    Returns:
        Number of translations that were tagged.
    """
    rng = rng or random.Random()
    tags = seed_tags()
    start = db.session.query(func.count(Translation.id)).scalar() or 0
    now = datetime.utcnow()

    for offset in range(0, count, batch_size):
        batch = []
        for index in range(start + offset, start + min(offset + batch_size, count)):
            locale = SAMPLE_LOCALES[index % len(SAMPLE_LOCALES)]
            batch.append({
                'key': generate_key(index),
                'locale': locale,
                'content': generate_content(index, locale),
                'created_at': now - timedelta(days=rng.randint(0, 365)),
                'updated_at': now - timedelta(days=rng.randint(0, 30)),
            })

        db.session.execute(insert(Translation), batch)
        db.session.commit()

        if progress:
            progress(min(offset + batch_size, count), count)

    logger.info(f"Inserted {count} translations")
    return attach_random_tags(tags, rng)


def attach_random_tags(tags, rng, limit=MAX_TAGGED_TRANSLATIONS):
    """Give up to ``limit`` random translations between 1 and 4 random tags."""
    ids = [row[0] for row in db.session.query(Translation.id).all()]
    chosen = rng.sample(ids, min(limit, len(ids)))

    for chunk_start in range(0, len(chosen), BATCH_SIZE):
        chunk = chosen[chunk_start:chunk_start + BATCH_SIZE]
        for translation in Translation.query.filter(Translation.id.in_(chunk)).all():
            translation.tags = rng.sample(tags, rng.randint(1, min(4, len(tags))))
        db.session.commit()

    logger.info(f"Attached tags to {len(chosen)} translations")
    return len(chosen)
