"""Routes package for the translation API."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .languages import languages_bp
    from .domains import domains_bp
    from .translations import translations_bp

    app.register_blueprint(languages_bp, url_prefix='/languages')
    app.register_blueprint(domains_bp, url_prefix='/domains')
    app.register_blueprint(translations_bp, url_prefix='/domains')
