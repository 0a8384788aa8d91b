"""
Projects Admin Routes
=====================

The editor form posts back with an ``action``:
- ``add_technology``: add the tag input to the pending technologies
  (also what pressing Enter in the tag input triggers)
- ``add_project``: insert the pending project
  (the form's default button, so Enter in any other field lands here)
A ``remove_technology`` button carries the tag to drop as its value.
"""

from flask import render_template, request, url_for

from . import projects_bp
from .manager import CATEGORIES
from ..dashboard.gate import admin_required
from ...core.editor import get_editor


def _render(editor):
    return render_template('projects/project_manager.html', editor=editor,
                           form=editor.form, categories=CATEGORIES)


@projects_bp.route('/', methods=['GET'])
@admin_required
def projects_editor():
    """Projects editor - fetches the list on every visit"""
    editor = get_editor('projects')
    editor.fetch_projects()
    return _render(editor)


@projects_bp.route('/', methods=['POST'])
@admin_required
def submit_project_form():
    editor = get_editor('projects')
    editor.bind_form(request.form)

    action = request.form.get('action')
    if 'remove_technology' in request.form:
        editor.remove_technology(request.form['remove_technology'])
    elif action == 'add_technology':
        editor.add_technology()
    elif action == 'add_project':
        editor.add_project()

    return _render(editor)


@projects_bp.route('/<project_id>/delete', methods=['POST'])
@admin_required
def delete_project(project_id):
    """Delete a project once the admin has confirmed"""
    if 'confirm' not in request.form:
        return render_template('dashboard/confirm.html',
                               message='Are you sure you want to delete this project?',
                               action=url_for('projects_admin.delete_project', project_id=project_id))

    editor = get_editor('projects')
    editor.delete_project(project_id, confirm=lambda: request.form.get('confirm') == 'yes')
    return _render(editor)
