"""Health check with database and cache connectivity."""

from datetime import datetime, timezone
from flask import Blueprint, jsonify
from sqlalchemy import text
from localehub import db
from localehub.services.cache import get_cache
import logging

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Report database and cache status. 503 if either is down."""
    status = 'healthy'
    checks = {}

    try:
        db.session.execute(text('SELECT 1'))
        checks['database'] = 'connected'
    except Exception as e:
        logger.error(f"Health check database failure: {e}")
        checks['database'] = 'failed'
        status = 'unhealthy'

    cache = get_cache()
    checks['cache_backend'] = cache.name
    if cache.ping():
        checks['cache'] = 'connected'
    else:
        checks['cache'] = 'failed'
        status = 'unhealthy'

    return jsonify({
        'status': status,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'checks': checks
    }), 200 if status == 'healthy' else 503
