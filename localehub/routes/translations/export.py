"""Translation export for frontend applications."""

from flask import request, jsonify, current_app
from localehub.routes.translations import translations_bp
from localehub.routes.translations.helpers import parse_filters, validation_error
from localehub.services.cache import get_cache
from localehub.services.cache_keys import EXPORT_FORMATS
from localehub.services.export import ExportOptions, export_translations
from localehub.utils import token_required
import logging

logger = logging.getLogger(__name__)


@translations_bp.route('/export', methods=['GET'])
@token_required
def export(current_user_id):
    """Export translations as JSON.

    Query params:
        - locale: 2-letter locale (all locales if omitted)
        - tags: comma-separated tag names, order matters for caching
        - format: 'flat' (default) or 'nested'
    """
    errors = {}
    locale, tags = parse_filters(request.args, errors)
    export_format = request.args.get('format', 'flat')
    if export_format not in EXPORT_FORMATS:
        errors['format'] = [f"The format must be one of: {', '.join(EXPORT_FORMATS)}."]
    if errors:
        return validation_error(errors)

    options = ExportOptions.from_request_args(
        locale=locale,
        tags=tags,
        format=export_format
    )

    try:
        result = export_translations(
            options,
            get_cache(),
            ttl_seconds=current_app.config['EXPORT_CACHE_TTL']
        )
    except Exception as e:
        logger.error(f"Error exporting translations: {e}")
        return jsonify({'error': str(e)}), 500

    response = jsonify(result)
    response.headers['Cache-Control'] = f"public, max-age={current_app.config['EXPORT_CACHE_TTL']}"
    return response, 200
