"""
Skills Admin Module
===================

Admin interface for the skills shown on the portfolio.
"""

from flask import Blueprint

skills_bp = Blueprint(
    'skills_admin',
    __name__,
    url_prefix='/admin/skills',
    template_folder='templates',
)

from . import routes
from .manager import SkillManager

__all__ = ['skills_bp', 'SkillManager']
