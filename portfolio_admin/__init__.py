"""
Portfolio Admin - A Flask admin dashboard for a personal portfolio
==================================================================

Modular admin for the content of a portfolio site, stored in a hosted
backend (PostgREST / Supabase REST):
- Session gate with admin login/logout
- Profile editor
- Projects editor with technology tags
- Skills editor
- Public JSON feed for the portfolio site

Usage:
    from flask import Flask
    from portfolio_admin import PortfolioAdmin

    app = Flask(__name__)
    PortfolioAdmin(app, {'brand_name': 'My Portfolio'})
"""

import os
import secrets

from .core.config import Config
from .core.editor import EditorRegistry
from .core.remote import RemoteDataClient

__version__ = '0.1.0'

DEFAULT_FEATURES = {
    'profile': True,
    'projects': True,
    'skills': True,
    'public_api': True,
}

_CONFIG_KEYS = (
    'SECRET_KEY', 'SUPABASE_URL', 'SUPABASE_KEY', 'REMOTE_TIMEOUT',
    'ADMIN_PASSWORD', 'ADMIN_PASSWORD_HASH', 'DB_DIR', 'LOGS_DB',
    'EDITOR_MAX_ENTRIES', 'EDITOR_IDLE_SECONDS',
)


class PortfolioAdmin:
    """Flask extension: registers the admin modules on an app."""

    def __init__(self, app=None, config=None, client=None):
        self._config = dict(config or {})
        self._features = dict(DEFAULT_FEATURES)
        self._features.update(self._config.get('features') or {})
        self._registered = []
        self.client = client
        self.editors = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._apply_config_defaults(app)
        self._setup_database_dir(app)

        if self.client is None:
            self.client = RemoteDataClient.from_config(app.config)
        self.editors = EditorRegistry(
            self.client,
            max_entries=app.config.get('EDITOR_MAX_ENTRIES'),
            idle_seconds=app.config.get('EDITOR_IDLE_SECONDS'),
        )

        app.extensions['portfolio_admin'] = self
        self._register_modules(app)
        self._setup_context_processor(app)

    def _apply_config_defaults(self, app):
        for key in _CONFIG_KEYS:
            if app.config.get(key) is None:
                value = getattr(Config, key, None)
                if value is not None:
                    app.config[key] = value

        if not app.config.get('SECRET_KEY'):
            print("WARNING: FLASK_SECRET_KEY not set, using a random key. Admin sessions will not survive a restart.")
            app.config['SECRET_KEY'] = secrets.token_hex(32)

        if not app.config.get('SUPABASE_URL'):
            print("WARNING: SUPABASE_URL not set. Editors will report every remote call as failed.")

        app.config.setdefault('BRAND_NAME', self._config.get('brand_name') or Config.BRAND_NAME)

    def _setup_database_dir(self, app):
        """Create the directory holding the log database"""
        logs_db = app.config.get('LOGS_DB')
        db_dir = os.path.dirname(logs_db) if logs_db else app.config.get('DB_DIR')
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    def _register_modules(self, app):
        from .modules.dashboard import dashboard_bp
        app.register_blueprint(dashboard_bp)
        self._registered.append('dashboard')

        if self.is_enabled('profile'):
            from .modules.profile import profile_bp, ProfileManager
            app.register_blueprint(profile_bp)
            self.editors.register('profile', ProfileManager)
            self._registered.append('profile')

        if self.is_enabled('projects'):
            from .modules.projects import projects_bp, ProjectManager
            app.register_blueprint(projects_bp)
            self.editors.register('projects', ProjectManager)
            self._registered.append('projects')

        if self.is_enabled('skills'):
            from .modules.skills import skills_bp, SkillManager
            app.register_blueprint(skills_bp)
            self.editors.register('skills', SkillManager)
            self._registered.append('skills')

        if self.is_enabled('public_api'):
            from .modules.public_api import public_api_bp
            app.register_blueprint(public_api_bp)
            self._registered.append('public_api')

    def _setup_context_processor(self, app):
        @app.context_processor
        def inject_admin_config():
            return {
                'admin_config': self._config,
                'brand_name': app.config.get('BRAND_NAME') or Config.BRAND_NAME,
            }

    def is_enabled(self, feature):
        return bool(self._features.get(feature))

    def get_registered_modules(self):
        return list(self._registered)


__all__ = ['PortfolioAdmin', '__version__']
