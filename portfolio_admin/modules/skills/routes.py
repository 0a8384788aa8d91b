"""
Skills Admin Routes
===================
"""

from flask import render_template, request, url_for

from . import skills_bp
from .manager import CATEGORIES
from ..dashboard.gate import admin_required
from ...core.editor import get_editor


def _render(editor):
    return render_template('skills/skill_manager.html', editor=editor,
                           form=editor.form, categories=CATEGORIES)


@skills_bp.route('/', methods=['GET'])
@admin_required
def skills_editor():
    """Skills editor - fetches the list on every visit"""
    editor = get_editor('skills')
    editor.fetch_skills()
    return _render(editor)


@skills_bp.route('/', methods=['POST'])
@admin_required
def add_skill():
    editor = get_editor('skills')
    editor.add_skill(request.form)
    return _render(editor)


@skills_bp.route('/<skill_id>/delete', methods=['POST'])
@admin_required
def delete_skill(skill_id):
    """Delete a skill once the admin has confirmed"""
    if 'confirm' not in request.form:
        return render_template('dashboard/confirm.html',
                               message='Are you sure you want to delete this skill?',
                               action=url_for('skills_admin.delete_skill', skill_id=skill_id))

    editor = get_editor('skills')
    editor.delete_skill(skill_id, confirm=lambda: request.form.get('confirm') == 'yes')
    return _render(editor)
