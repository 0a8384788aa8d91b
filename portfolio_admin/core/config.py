import os
from dotenv import load_dotenv

load_dotenv(override=True)


def _float_or_none(value):
    try:
        return float(value) if value else None
    except ValueError:
        return None


class Config:
    """
    Base configuration for the portfolio admin.
    Deployments provide the backend URL, key and admin password via environment variables.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Hosted backend (PostgREST / Supabase REST endpoint)
    SUPABASE_URL = os.getenv('SUPABASE_URL', '')
    SUPABASE_KEY = os.getenv('SUPABASE_KEY') or os.getenv('SUPABASE_ANON_KEY', '')
    # Seconds; unset means requests wait for the backend indefinitely
    REMOTE_TIMEOUT = _float_or_none(os.getenv('REMOTE_TIMEOUT'))

    # Per-session editor cache; idle sessions and the overflow are evicted
    EDITOR_MAX_ENTRIES = int(os.getenv('EDITOR_MAX_ENTRIES', '500'))
    EDITOR_IDLE_SECONDS = _float_or_none(os.getenv('EDITOR_IDLE_SECONDS', '3600'))

    # Admin login
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD')
    ADMIN_PASSWORD_HASH = os.getenv('ADMIN_PASSWORD_HASH')

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    LOGS_DB = os.getenv('LOGS_DB', os.path.join(DB_DIR, "app_logs.db"))

    # Remote table names
    PROFILES_TABLE = "profiles"
    PROJECTS_TABLE = "projects"
    SKILLS_TABLE = "Skills"

    # Public feed
    CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', 'http://localhost:3000,http://localhost:5173').split(',') if o.strip()]

    BRAND_NAME = os.getenv('BRAND_NAME', 'Portfolio Admin')

    # Port for local server
    port = int(os.getenv('PORT', '5000'))


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val:
        return val
    return os.getenv(key, default)
