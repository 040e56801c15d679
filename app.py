"""
Sixty4Bit Freelancing - Main Application Entry Point
Application Factory Pattern with one blueprint per site section

This module initializes the Flask application with its extensions, data
backend, template filters and hooks. All route handling lives in blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import db
from utils.data import init_data_client
from utils.formatters import register_template_filters
from utils.icons import register_icon_filters
from utils.site_content import QUICK_LINKS, SOCIAL_LINKS, SITE_TAGLINE

from blueprints.pages import pages_bp
from blueprints.services import services_bp
from blueprints.portfolio import portfolio_bp
from blueprints.blog import blog_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))

    proxies = app.config.get('TRUSTED_PROXY_COUNT', 0)
    if proxies:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxies, x_proto=proxies, x_host=proxies)

    initialize_extensions(app)

    register_template_filters(app)
    register_icon_filters(app)

    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'backend': app.config.get('DATA_BACKEND')}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions and the data backend with the app instance"""
    db.init_app(app)

    if app.config.get('DATA_BACKEND') == 'sql':
        # Create tables if they don't exist
        with app.app_context():
            try:
                from sqlalchemy import text
                db.create_all()
                db.session.execute(text('SELECT 1'))
                app.logger.info("✓ Database initialized successfully")
            except Exception as e:
                app.logger.error(f"✗ Database initialization failed: {str(e)}")

    init_data_client(app)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(services_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(blog_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values every template can use"""
        from utils.ui_helpers import inject_blueprint_assets, get_page_specific_class

        blueprint_assets = inject_blueprint_assets()
        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'site_name': app.config.get('SITE_NAME'),
            'site_tagline': SITE_TAGLINE,
            'current_year': datetime.now().year,
            'quick_links': QUICK_LINKS,
            'social_links': SOCIAL_LINKS,
            'default_meta': {
                'title': app.config.get('SITE_NAME'),
                'description': SITE_TAGLINE,
            },
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline' https://cdnjs.cloudflare.com; "
            "font-src 'self' https://cdnjs.cloudflare.com; "
            "img-src * data:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


def register_commands(app):
    from migrations.seed_content import seed_content_command
    app.cli.add_command(seed_content_command)


if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')

    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
