"""Translation search and repository statistics."""

from flask import request, jsonify
from localehub.routes.translations import translations_bp
from localehub.routes.translations.helpers import (
    paginated_response,
    parse_filters,
    parse_pagination,
    parse_search_terms,
    validation_error,
)
from localehub.services import translations as translation_service
from localehub.utils import token_required
import logging

logger = logging.getLogger(__name__)


@translations_bp.route('/search', methods=['GET'])
@token_required
def search_translations(current_user_id):
    """Search translations.

    Query params:
        - locale, tags: same filters as the listing
        - key: substring of the translation key
        - content: full-text (MySQL/PostgreSQL) or substring match on content
        - page, per_page: pagination
    """
    errors = {}
    locale, tags = parse_filters(request.args, errors)
    terms = parse_search_terms(request.args, errors)
    page, per_page = parse_pagination(request.args, errors)
    if errors:
        return validation_error(errors)

    try:
        pagination = translation_service.search(
            locale=locale,
            tags=tags,
            key=terms.get('key'),
            content=terms.get('content'),
            page=page,
            per_page=per_page
        )
        return jsonify(paginated_response(pagination)), 200
    except Exception as e:
        logger.error(f"Error searching translations: {e}")
        return jsonify({'error': str(e)}), 500


@translations_bp.route('/stats', methods=['GET'])
@token_required
def translation_stats(current_user_id):
    """Totals, unique keys and per-locale counts."""
    try:
        return jsonify(translation_service.statistics()), 200
    except Exception as e:
        logger.error(f"Error computing translation statistics: {e}")
        return jsonify({'error': str(e)}), 500
