"""Shared constants for the application."""

from localehub.constants.seed_data import (
    STANDARD_TAGS,
    SAMPLE_LOCALES,
    KEY_PREFIXES,
    KEY_SUFFIXES,
    CONTENT_TEMPLATES,
)

__all__ = [
    'STANDARD_TAGS',
    'SAMPLE_LOCALES',
    'KEY_PREFIXES',
    'KEY_SUFFIXES',
    'CONTENT_TEMPLATES',
]
