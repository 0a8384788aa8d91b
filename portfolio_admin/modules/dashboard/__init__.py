"""
Dashboard Module
================

Session gate and editor shell for the portfolio admin.

Provides:
- Admin login/logout
- The editor shell linking the profile, projects and skills editors

This is the foundation module the editor modules plug into.
"""

from flask import Blueprint

# Blueprint name is 'admin' so url_for('admin.login') works from every module
dashboard_bp = Blueprint(
    'admin',
    __name__,
    url_prefix='/admin',
    template_folder='templates',
)

from . import routes
from .gate import SessionGate, admin_required, current_gate

__all__ = ['dashboard_bp', 'SessionGate', 'admin_required', 'current_gate']
