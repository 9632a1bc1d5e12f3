"""Database models for the localization content API."""

from .user import User
from .translation import Translation, Tag, tag_translation

__all__ = ['User', 'Translation', 'Tag', 'tag_translation']
