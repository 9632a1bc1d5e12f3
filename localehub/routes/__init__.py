"""Routes package for the localization API."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .auth import auth_bp
    from .health import health_bp
    from .translations import translations_bp
    
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(health_bp, url_prefix='/api')
    app.register_blueprint(translations_bp, url_prefix='/api/translations')
