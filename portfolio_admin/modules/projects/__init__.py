"""
Projects Admin Module
=====================

Admin interface for the portfolio's project list.
Plugs into the admin dashboard module.

Provides:
- Project creation with category, links and featured flag
- Technologies tagging
- Project deletion with confirmation
"""

from flask import Blueprint

projects_bp = Blueprint(
    'projects_admin',
    __name__,
    url_prefix='/admin/projects',
    template_folder='templates',
)

from . import routes
from .manager import ProjectManager

__all__ = ['projects_bp', 'ProjectManager']
