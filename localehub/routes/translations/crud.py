"""Basic CRUD operations for translations."""

from flask import request, jsonify
from sqlalchemy.exc import IntegrityError
from localehub import db
from localehub.models import Translation
from localehub.routes.translations import translations_bp
from localehub.routes.translations.helpers import (
    DUPLICATE_KEY_MESSAGE,
    paginated_response,
    parse_filters,
    parse_pagination,
    validate_translation_payload,
    validation_error,
)
from localehub.services import translations as translation_service
from localehub.services.cache import get_cache
from localehub.services.translations import TranslationNotFound
from localehub.utils import token_required
import logging

logger = logging.getLogger(__name__)


@translations_bp.route('', methods=['GET'])
@token_required
def list_translations(current_user_id):
    """List translations, newest first.

    Query params:
        - locale: 2-letter locale filter
        - tags: comma-separated tag names (matches any)
        - page: page number (default 1)
        - per_page: page size, 1..1000 (default 50)
    """
    errors = {}
    locale, tags = parse_filters(request.args, errors)
    page, per_page = parse_pagination(request.args, errors)
    if errors:
        return validation_error(errors)

    try:
        pagination = translation_service.get_paginated(
            locale=locale,
            tags=tags,
            page=page,
            per_page=per_page
        )
        return jsonify(paginated_response(pagination)), 200
    except Exception as e:
        logger.error(f"Error listing translations: {e}")
        return jsonify({'error': str(e)}), 500


@translations_bp.route('', methods=['POST'])
@token_required
def create_translation(current_user_id):
    """Create a new translation with optional tags."""
    data = request.get_json(silent=True)
    cleaned, errors = validate_translation_payload(data)
    if errors:
        return validation_error(errors)

    if Translation.exists_for(cleaned['key'], cleaned['locale']):
        return validation_error({'key': [DUPLICATE_KEY_MESSAGE]})

    try:
        translation = translation_service.create(
            key=cleaned['key'],
            locale=cleaned['locale'],
            content=cleaned['content'],
            tags=cleaned.get('tags', []),
            cache=get_cache()
        )
        return jsonify({'data': translation.to_dict()}), 201
    except IntegrityError:
        # Lost a race with a concurrent insert of the same key/locale
        return validation_error({'key': [DUPLICATE_KEY_MESSAGE]})
    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating translation: {e}")
        return jsonify({'error': str(e)}), 500


@translations_bp.route('/<int:translation_id>', methods=['GET'])
@token_required
def get_translation(current_user_id, translation_id):
    """Get a specific translation by ID."""
    try:
        translation = translation_service.find_by_id(translation_id)
        return jsonify({'data': translation.to_dict()}), 200
    except TranslationNotFound:
        return jsonify({'error': 'Translation not found'}), 404
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@translations_bp.route('/<int:translation_id>', methods=['PUT', 'PATCH'])
@token_required
def update_translation(current_user_id, translation_id):
    """Update key, locale, content and/or tags of a translation.

    Omitted fields are left unchanged. Sending "tags": [] removes all tags.
    """
    data = request.get_json(silent=True)
    cleaned, errors = validate_translation_payload(data, partial=True)
    if errors:
        return validation_error(errors)

    try:
        translation = translation_service.find_by_id(translation_id)
    except TranslationNotFound:
        return jsonify({'error': 'Translation not found'}), 404

    new_key = cleaned.get('key', translation.key)
    new_locale = cleaned.get('locale', translation.locale)
    if Translation.exists_for(new_key, new_locale, exclude_id=translation_id):
        return validation_error({'key': [DUPLICATE_KEY_MESSAGE]})

    try:
        translation = translation_service.update(
            translation_id,
            key=cleaned.get('key'),
            locale=cleaned.get('locale'),
            content=cleaned.get('content'),
            tags=cleaned.get('tags'),
            cache=get_cache()
        )
        return jsonify({'data': translation.to_dict()}), 200
    except IntegrityError:
        return validation_error({'key': [DUPLICATE_KEY_MESSAGE]})
    except Exception as e:
        db.session.rollback()
        logger.error(f"Error updating translation {translation_id}: {e}")
        return jsonify({'error': str(e)}), 500


@translations_bp.route('/<int:translation_id>', methods=['DELETE'])
@token_required
def delete_translation(current_user_id, translation_id):
    """Delete a translation."""
    try:
        translation_service.delete(translation_id, cache=get_cache())
        return '', 204
    except TranslationNotFound:
        return jsonify({'error': 'Translation not found'}), 404
    except Exception as e:
        db.session.rollback()
        logger.error(f"Error deleting translation {translation_id}: {e}")
        return jsonify({'error': str(e)}), 500
