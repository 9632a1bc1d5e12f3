"""Authentication routes: registration and login for API consumers."""

from flask import Blueprint, request, jsonify
from localehub import db, limiter
from localehub.models import User
from localehub.utils import issue_token
import logging
import re

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

# Email validation regex
EMAIL_REGEX = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


@auth_bp.route('/register', methods=['POST'])
@limiter.limit("5 per minute")
def register():
    """Register a new API user and return a token."""
    try:
        data = request.get_json(silent=True)

        if not data or not all(k in data for k in ['name', 'email', 'password']):
            return jsonify({'error': 'Missing required fields'}), 400

        name = str(data['name']).strip()
        email = str(data['email']).strip().lower()
        password = str(data['password'])

        if not name or len(name) > 255:
            return jsonify({'error': 'Name must be between 1 and 255 characters'}), 400

        if not EMAIL_REGEX.match(email) or len(email) > 254:
            return jsonify({'error': 'Invalid email format'}), 400

        # Validate password: 8-128 chars
        if len(password) < 8:
            return jsonify({'error': 'Password must be at least 8 characters'}), 400

        if len(password) > 128:
            return jsonify({'error': 'Password must be less than 128 characters'}), 400

        if User.query.filter_by(email=email).first():
            return jsonify({'error': 'Email already exists'}), 409

        user = User(name=name, email=email)
        user.set_password(password)

        db.session.add(user)
        db.session.commit()

        logger.info(f"Registered API user {user.id}")

        return jsonify({
            'message': 'User registered successfully',
            'token': issue_token(user),
            'user': user.to_dict()
        }), 201
    except Exception:
        db.session.rollback()
        raise


@auth_bp.route('/login', methods=['POST'])
@limiter.limit("10 per minute")
def login():
    """Authenticate user and return JWT token."""
    data = request.get_json(silent=True)

    if not data or not all(k in data for k in ['email', 'password']):
        return jsonify({'error': 'Missing email or password'}), 400

    user = User.query.filter_by(email=str(data['email']).strip().lower()).first()

    if not user or not user.check_password(str(data['password'])):
        return jsonify({'error': 'Invalid email or password'}), 401

    if not user.is_active:
        return jsonify({'error': 'Account is disabled'}), 403

    return jsonify({
        'message': 'Login successful',
        'token': issue_token(user),
        'user': user.to_dict()
    }), 200
