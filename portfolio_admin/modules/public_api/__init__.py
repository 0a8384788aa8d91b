"""
Public API Module
=================

Read-only JSON feed of the portfolio content for the public site.
"""

from flask import Blueprint

public_api_bp = Blueprint('public_api', __name__, url_prefix='/api')

from . import routes

__all__ = ['public_api_bp']
