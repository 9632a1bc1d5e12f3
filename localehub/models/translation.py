"""Translation and tag models for localized content."""

from datetime import datetime
from sqlalchemy import func
from sqlalchemy.dialects import mysql
from localehub import db


# Dialects with a native full-text operator for content search
MYSQL_DIALECTS = ('mysql', 'mariadb')
FULLTEXT_DIALECTS = MYSQL_DIALECTS + ('postgresql',)


tag_translation = db.Table(
    'tag_translation',
    db.Column('translation_id', db.Integer, db.ForeignKey('translations.id', ondelete='CASCADE'), primary_key=True),
    db.Column('tag_id', db.Integer, db.ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True, index=True),
    db.Column('created_at', db.DateTime, default=datetime.utcnow, nullable=False),
)


class Tag(db.Model):
    """Label attached to translations for filtering (web, mobile, auth...)."""

    __tablename__ = 'tags'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @classmethod
    def first_or_create(cls, name):
        """Get a tag by name, creating it in the current session if missing."""
        tag = cls.query.filter_by(name=name).first()
        if not tag:
            tag = cls(name=name)
            db.session.add(tag)
        return tag

    def to_dict(self):
        return {'id': self.id, 'name': self.name}

    def __repr__(self):
        return f'<Tag {self.name}>'


class Translation(db.Model):
    """A piece of content for one dotted key in one locale."""

    __tablename__ = 'translations'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(255), nullable=False, index=True)  # e.g. 'auth.login.title'
    locale = db.Column(db.String(10), nullable=False, index=True)  # 'en', 'fr', ...
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint('key', 'locale', name='translations_key_locale_unique'),
    )

    # selectin keeps listing pages at two queries regardless of page size
    tags = db.relationship(
        'Tag',
        secondary=tag_translation,
        backref=db.backref('translations', lazy='dynamic'),
        lazy='selectin',
        order_by='Tag.name'
    )

    @property
    def tag_names(self):
        return [tag.name for tag in self.tags]

    def sync_tags(self, names):
        """Replace this translation's tags with the given names, creating new tags as needed."""
        # dict.fromkeys drops duplicates but keeps the caller's order
        self.tags = [Tag.first_or_create(name) for name in dict.fromkeys(names)]

    # ---- query helpers ----

    @classmethod
    def apply_filters(cls, query, locale=None, tags=None):
        """Restrict a query to a locale and/or translations carrying ANY of the tags."""
        if locale:
            query = query.filter(cls.locale == locale)
        if tags:
            query = query.filter(cls.tags.any(Tag.name.in_(tags)))
        return query

    @classmethod
    def filtered(cls, locale=None, tags=None):
        return cls.apply_filters(cls.query, locale, tags)

    @classmethod
    def uses_fulltext(cls):
        return db.engine.dialect.name in FULLTEXT_DIALECTS

    @classmethod
    def ranks_by_relevance(cls):
        """Only MySQL exposes a relevance score for natural-language matches."""
        return db.engine.dialect.name in MYSQL_DIALECTS

    @classmethod
    def content_relevance(cls, content):
        """MySQL natural-language relevance expression for content."""
        return mysql.match(cls.content, against=content).in_natural_language_mode()

    @classmethod
    def search_content(cls, query, content):
        """Full-text match where the engine supports it, substring match otherwise."""
        if not cls.uses_fulltext():
            return query.filter(cls.content.icontains(content, autoescape=True))
        if cls.ranks_by_relevance():
            return query.filter(cls.content_relevance(content))
        return query.filter(cls.content.match(content))

    @classmethod
    def search_key(cls, query, key):
        return query.filter(cls.key.icontains(key, autoescape=True))

    @classmethod
    def for_export(cls, locale=None, tags=None):
        """Return (key, content, locale) rows ordered by key."""
        query = db.session.query(cls.key, cls.content, cls.locale)
        query = cls.apply_filters(query, locale, tags)
        return query.order_by(cls.key).all()

    @classmethod
    def exists_for(cls, key, locale, exclude_id=None):
        """Check whether another translation already uses this key in this locale."""
        query = cls.query.filter_by(key=key, locale=locale)
        if exclude_id is not None:
            query = query.filter(cls.id != exclude_id)
        return db.session.query(query.exists()).scalar()

    @classmethod
    def available_locales(cls):
        rows = db.session.query(cls.locale).distinct().all()
        return sorted(row[0] for row in rows)

    @classmethod
    def statistics(cls):
        """Aggregate counts used by the stats endpoint and the benchmark script."""
        per_locale = db.session.query(
            cls.locale,
            func.count(cls.id)
        ).group_by(cls.locale).all()

        return {
            'total_translations': db.session.query(func.count(cls.id)).scalar(),
            'unique_keys': db.session.query(func.count(func.distinct(cls.key))).scalar(),
            'locales': cls.available_locales(),
            'translations_by_locale': {locale: count for locale, count in per_locale},
        }

    def to_dict(self):
        """Convert translation to dictionary."""
        return {
            'id': self.id,
            'key': self.key,
            'locale': self.locale,
            'content': self.content,
            'tags': [tag.to_dict() for tag in self.tags],
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat()
        }

    def __repr__(self):
        return f'<Translation {self.id}: {self.locale}/{self.key}>'
