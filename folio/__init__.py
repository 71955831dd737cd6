"""
Folio - Portfolio Site with an Admin Panel
==========================================

A Flask portfolio site (projects, skills, experience, personal info) with a
single-password admin panel for editing the content.

Usage:
    from flask import Flask
    from folio import Folio

    app = Flask(__name__)
    Folio(app)

Or:
    flask --app folio:create_app run
"""

import os
import secrets

from flask import Flask, render_template

from .core.config import AuthConfig, Config
from .core.database import Database
from .core.logging_service import logger
from .core.store import ContentStore

__version__ = '0.1.0'

# Module name -> (import path, blueprint attribute)
MODULES = {
    'auth': ('folio.modules.auth', 'auth_bp'),
    'projects': ('folio.modules.projects', 'projects_bp'),
    'skills': ('folio.modules.skills', 'skills_bp'),
    'experiences': ('folio.modules.experiences', 'experiences_bp'),
    'personal_info': ('folio.modules.personal_info', 'personal_info_bp'),
    'public': ('folio.modules.public', 'public_bp'),
    'health': ('folio.modules.public', 'health_bp'),
}


class Folio:
    """
    Flask extension that wires the portfolio into an app: config, database,
    admin auth, blueprints, error pages.
    """

    def __init__(self, app=None, config=None):
        self._config = config or {}
        self._registered = []
        self.auth = None
        self.store = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._resolve_config(app)
        self._setup_database_dir(app)

        Database.init_schema(app.config['PORTFOLIO_DB'])
        self.store = ContentStore(app.config['PORTFOLIO_DB'])

        # Imported here so blueprints are created after the package is importable
        from .modules.auth.gate import AdminAuth
        self.auth = AdminAuth(AuthConfig.from_app_config(app.config))

        app.extensions['folio'] = self
        self._register_modules(app)
        self._register_error_handlers(app)

        @app.context_processor
        def inject_folio():
            return {'site_name': app.config.get('SITE_NAME', 'Portfolio')}

        if not self.auth.config.admin_password:
            print("ADMIN_PASSWORD is not set - admin login is disabled.")

    def _resolve_config(self, app):
        """App config wins, then the Config class, then defaults"""
        db_dir = app.config.get('DB_DIR') or Config.DB_DIR
        app.config['DB_DIR'] = db_dir
        app.config.setdefault('PORTFOLIO_DB', os.path.join(db_dir, 'portfolio.db'))
        app.config.setdefault('ENVIRONMENT', Config.ENVIRONMENT)
        app.config.setdefault('SITE_NAME', self._config.get('site_name', 'Portfolio'))

        # Flask's own session only carries flash messages
        if not app.config.get('SECRET_KEY'):
            app.config['SECRET_KEY'] = Config.SECRET_KEY or secrets.token_hex(32)

    def _setup_database_dir(self, app):
        for path in (app.config['DB_DIR'], os.path.dirname(app.config['PORTFOLIO_DB'])):
            if path:
                os.makedirs(path, exist_ok=True)

    def _register_modules(self, app):
        import importlib

        disabled = {name for name, enabled in self._config.get('features', {}).items() if not enabled}
        for name, (module_path, attr) in MODULES.items():
            if name in disabled:
                continue
            blueprint = getattr(importlib.import_module(module_path), attr)
            app.register_blueprint(blueprint)
            self._registered.append(name)

    def _register_error_handlers(self, app):

        @app.errorhandler(404)
        def not_found(error):
            message = getattr(error, 'description', None) or 'Page not found.'
            return render_template('errors/error.html', code=404, message=message), 404

        @app.errorhandler(500)
        def server_error(error):
            original = getattr(error, 'original_exception', None) or error
            logger.log_error_with_traceback('system', original)
            return render_template(
                'errors/error.html', code=500,
                message='An unexpected error occurred. Please try again.'
            ), 500

    def get_registered_modules(self):
        return list(self._registered)


def create_app(config=None):
    """Application factory"""
    app = Flask(__name__)
    app.config['SECRET_KEY'] = Config.SECRET_KEY
    app.config['ADMIN_PASSWORD'] = Config.ADMIN_PASSWORD
    app.config['SESSION_SECRET'] = Config.SESSION_SECRET
    app.config['DB_DIR'] = Config.DB_DIR
    app.config['PORTFOLIO_DB'] = Config.PORTFOLIO_DB
    app.config['ENVIRONMENT'] = Config.ENVIRONMENT
    if config:
        app.config.update(config)
    Folio(app)
    return app


__all__ = ['Folio', 'create_app']
