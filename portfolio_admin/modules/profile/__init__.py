"""
Profile Admin Module
====================

Editor for the portfolio owner's profile: bio, avatar, CV link and social links.
"""

from flask import Blueprint

profile_bp = Blueprint(
    'profile_admin',
    __name__,
    url_prefix='/admin/profile',
    template_folder='templates',
)

from . import routes
from .manager import ProfileManager

__all__ = ['profile_bp', 'ProfileManager']
