"""
Public portfolio feed for cross-site fetching.

GET /api/portfolio?featured=1

Returns the profile, projects (newest first) and skills with CORS headers.
"""

from flask import current_app, jsonify, request
from flask_cors import cross_origin

from . import public_api_bp
from ...core.config import Config
from ...core.logging_service import LoggingService


@public_api_bp.route('/portfolio', methods=['GET', 'OPTIONS'])
@cross_origin(origins=Config.CORS_ORIGINS, supports_credentials=False)
def portfolio_feed():
    """
    Query params:
        featured: when truthy, only featured projects are returned

    Returns JSON:
        { "success": bool, "profile": {...} | null, "projects": [...], "skills": [...], "errors": {...} }
    """
    client = current_app.extensions['portfolio_admin'].client

    try:
        profile = client.table(Config.PROFILES_TABLE).select('*').single().execute()

        projects_query = client.table(Config.PROJECTS_TABLE).select('*')
        if request.args.get('featured') in ('1', 'true'):
            projects_query = projects_query.eq('featured', True)
        projects = projects_query.order('created_at', ascending=False).execute()

        skills = client.table(Config.SKILLS_TABLE).select('*').order('created_at', ascending=False).execute()

        errors = {name: result.error.message
                  for name, result in (('projects', projects), ('skills', skills))
                  if result.error}

        return jsonify({
            'success': not errors,
            'profile': profile.data if not profile.error else None,
            'projects': projects.data or [],
            'skills': skills.data or [],
            'errors': errors,
        })
    except Exception as e:
        LoggingService.log_error_with_traceback('public_api', e)
        return jsonify({'success': False, 'error': str(e)}), 500
