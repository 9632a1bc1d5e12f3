"""
Pytest configuration and fixtures for testing the localization API.
"""

import os
import sys
import pytest
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from localehub import create_app, db
from localehub.models import Translation, User
from localehub.services.cache import get_cache

fake = Faker()


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing', {'JWT_SECRET_KEY': 'test-secret-key-for-testing'})

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture(scope='function')
def cache(app):
    """The app's in-memory export cache, emptied for each test."""
    store = get_cache(app)
    store.clear()
    return store


@pytest.fixture(scope='function')
def db_session(app, cache):
    """Create a fresh database session for each test."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        yield db.session
        db.session.rollback()


def _create_user(password='testpassword123', **overrides):
    """Helper to create a user with sensible defaults."""
    data = {
        'name': fake.name(),
        'email': fake.unique.email(),
    }
    data.update(overrides)
    user = User(**data)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'password': password,
    }


@pytest.fixture
def test_user(app, db_session):
    """Create a test user."""
    return _create_user()


def _get_token(client, email, password):
    """Login and return JWT token."""
    resp = client.post('/api/auth/login', json={
        'email': email,
        'password': password,
    })
    data = resp.get_json()
    if not data or 'token' not in data:
        raise RuntimeError(
            f"Login failed: status={resp.status_code}, body={resp.data[:200]}"
        )
    return data['token']


@pytest.fixture
def auth_headers(client, test_user):
    """Get authentication headers for test user."""
    token = _get_token(client, test_user['email'], test_user['password'])
    return {'Authorization': f'Bearer {token}'}


def _create_translation(key=None, locale='en', content=None, tags=()):
    """Insert a translation directly, bypassing the service (no cache invalidation)."""
    translation = Translation(
        key=key or f"{fake.word()}.{fake.word()}.{fake.unique.random_int()}",
        locale=locale,
        content=content if content is not None else fake.sentence(),
    )
    db.session.add(translation)
    if tags:
        translation.sync_tags(list(tags))
    db.session.commit()
    return translation


@pytest.fixture
def make_translation(db_session):
    """Factory fixture: make_translation(key=..., locale=..., content=..., tags=[...])."""
    return _create_translation
