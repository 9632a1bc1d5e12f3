from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import logging
import os
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
limiter = Limiter(key_func=get_remote_address)

logger = logging.getLogger(__name__)


def _database_url(config_name):
    """Resolve the database URL for the given environment."""
    if config_name == 'testing':
        return os.getenv('TEST_DATABASE_URL', 'sqlite:///:memory:')

    url = os.getenv('DATABASE_URL', 'sqlite:///localehub.db')
    # Some hosts still hand out the old postgres:// scheme
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def create_app(config_name='development', config_overrides=None):
    app = Flask(__name__)

    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    # Config
    app.config['SQLALCHEMY_DATABASE_URI'] = _database_url(config_name)
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['JWT_SECRET_KEY'] = os.getenv('JWT_SECRET_KEY', 'dev-secret')
    app.config['JWT_EXPIRES_HOURS'] = int(os.getenv('JWT_EXPIRES_HOURS', 24))
    app.config['EXPORT_CACHE_TTL'] = int(os.getenv('EXPORT_CACHE_TTL', 3600))
    app.config['REDIS_URL'] = os.getenv('REDIS_URL')
    app.config['CACHE_BACKEND'] = os.getenv('CACHE_BACKEND')  # 'redis' or 'memory'; defaults by REDIS_URL
    app.config['RATELIMIT_STORAGE_URI'] = os.getenv('REDIS_URL') or 'memory://'

    if config_name == 'testing':
        app.config['TESTING'] = True
        app.config['REDIS_URL'] = None
        app.config['CACHE_BACKEND'] = 'memory'
        app.config['RATELIMIT_ENABLED'] = False
        app.config['RATELIMIT_STORAGE_URI'] = 'memory://'

    if config_overrides:
        app.config.update(config_overrides)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    CORS(app)

    from localehub.services.cache import init_cache
    init_cache(app)

    from localehub import models  # noqa: F401  (register tables on the metadata)

    # Create tables with error handling
    with app.app_context():
        try:
            db.create_all()
        except Exception as e:
            logger.warning(f"Could not create database tables: {e}")
            logger.warning("This is OK if database is not ready yet.")

    # Register routes
    from localehub.routes import register_routes
    register_routes(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200

    return app
