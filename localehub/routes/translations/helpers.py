"""Request parsing and validation shared by the translation routes."""

from flask import jsonify
import re

INVALID_DATA_MESSAGE = 'The given data was invalid.'
DUPLICATE_KEY_MESSAGE = 'A translation with this key already exists for the specified locale.'

KEY_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 65535
TAG_MAX_LENGTH = 50
SEARCH_TERM_MAX_LENGTH = 255
MAX_PER_PAGE = 1000


# Tags: letters, numbers, dashes and underscores
TAG_REGEX = re.compile(r'^[A-Za-z0-9_-]+$')


def validation_error(errors):
    """422 response in the {'error', 'errors': {field: [messages]}} shape."""
    return jsonify({'error': INVALID_DATA_MESSAGE, 'errors': errors}), 422


def _add_error(errors, field, message):
    errors.setdefault(field, []).append(message)


def clean_locale(value, errors, field='locale'):
    """Lowercase a 2-letter locale code. Records an error and returns None if invalid."""
    if not isinstance(value, str):
        _add_error(errors, field, f'The {field} must be a string.')
        return None

    locale = value.strip().lower()
    if len(locale) != 2:
        _add_error(errors, field, f'The {field} must be exactly 2 characters.')
        return None
    if not (locale.isascii() and locale.isalpha()):
        _add_error(errors, field, f'The {field} may only contain letters.')
        return None
    return locale


def clean_tags(value, errors):
    """Accept a list of names or a comma-separated string; return trimmed names."""
    if isinstance(value, str):
        value = value.split(',')
    if not isinstance(value, list):
        _add_error(errors, 'tags', 'The tags must be a list.')
        return None

    tags = []
    for item in value:
        if not isinstance(item, str):
            _add_error(errors, 'tags', 'Each tag must be a string.')
            continue
        tag = item.strip()
        if len(tag) > TAG_MAX_LENGTH:
            _add_error(errors, 'tags', f'Tags may not be greater than {TAG_MAX_LENGTH} characters.')
        elif not TAG_REGEX.match(tag):
            _add_error(errors, 'tags', 'Tags may only contain letters, numbers, dashes, and underscores.')
        else:
            tags.append(tag)
    return tags


def _clean_string(data, field, max_length, errors, required):
    if field not in data or data[field] is None:
        if required:
            _add_error(errors, field, f'The {field} field is required.')
        return None

    value = data[field]
    if not isinstance(value, str):
        _add_error(errors, field, f'The {field} must be a string.')
        return None
    if required and not value.strip():
        _add_error(errors, field, f'The {field} field is required.')
        return None
    if len(value) > max_length:
        _add_error(errors, field, f'The {field} may not be greater than {max_length} characters.')
        return None
    return value


def validate_translation_payload(data, partial=False):
    """
    Validate a create (partial=False) or update (partial=True) body.

    Returns (cleaned, errors). ``cleaned`` only holds the fields that were
    supplied; on update a missing 'tags' field means "leave tags alone".
    """
    errors = {}
    cleaned = {}

    if not isinstance(data, dict):
        return cleaned, {'body': ['A JSON object body is required.']}

    key = _clean_string(data, 'key', KEY_MAX_LENGTH, errors, required=not partial)
    if key is not None:
        cleaned['key'] = key.strip()

    if data.get('locale') is not None:
        locale = clean_locale(data['locale'], errors)
        if locale:
            cleaned['locale'] = locale
    elif not partial:
        _add_error(errors, 'locale', 'The locale field is required.')

    content = _clean_string(data, 'content', CONTENT_MAX_LENGTH, errors, required=not partial)
    if content is not None:
        cleaned['content'] = content

    if data.get('tags') is not None:
        tags = clean_tags(data['tags'], errors)
        if tags is not None:
            cleaned['tags'] = tags

    return cleaned, errors


def parse_filters(args, errors):
    """Read the locale/tags filters shared by list, search and export."""
    locale = None
    if args.get('locale'):
        locale = clean_locale(args['locale'], errors)

    tags = None
    if args.get('tags'):
        names = [tag for tag in args['tags'].split(',') if tag.strip()]
        tags = clean_tags(names, errors) or None

    return locale, tags


def _parse_int(args, field, default, errors, message):
    raw = args.get(field)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        _add_error(errors, field, message)
        return default


def parse_pagination(args, errors):
    """Read page/per_page query params (per_page 1..1000, default 50)."""
    page_message = 'The page must be a positive integer.'
    per_page_message = f'The per page must be an integer between 1 and {MAX_PER_PAGE}.'

    page = _parse_int(args, 'page', 1, errors, page_message)
    per_page = _parse_int(args, 'per_page', 50, errors, per_page_message)

    if page < 1:
        _add_error(errors, 'page', page_message)
        page = 1
    if not 1 <= per_page <= MAX_PER_PAGE:
        _add_error(errors, 'per_page', per_page_message)
        per_page = 50

    return page, per_page


def parse_search_terms(args, errors):
    terms = {}
    for field in ('key', 'content'):
        value = args.get(field)
        if not value:
            continue
        if len(value) > SEARCH_TERM_MAX_LENGTH:
            _add_error(errors, field, f'The {field} may not be greater than {SEARCH_TERM_MAX_LENGTH} characters.')
        else:
            terms[field] = value
    return terms


def paginated_response(pagination):
    """Serialize a Flask-SQLAlchemy pagination object."""
    return {
        'data': [translation.to_dict() for translation in pagination.items],
        'meta': {
            'current_page': pagination.page,
            'per_page': pagination.per_page,
            'total': pagination.total,
            'last_page': pagination.pages,
        }
    }
