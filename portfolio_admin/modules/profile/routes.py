"""
Profile Admin Routes
====================
"""

from flask import flash, render_template, request

from . import profile_bp
from ..dashboard.gate import admin_required
from ...core.editor import get_editor


def _render(editor):
    return render_template('profile/profile_manager.html', editor=editor, form=editor.form)


@profile_bp.route('/', methods=['GET'])
@admin_required
def profile_editor():
    """Profile editor - fetches the profile on every visit"""
    editor = get_editor('profile')
    editor.fetch_profile()
    return _render(editor)


@profile_bp.route('/', methods=['POST'])
@admin_required
def update_profile():
    """Save the profile form"""
    editor = get_editor('profile')
    editor.update_profile(request.form, notify=lambda message: flash(message, 'success'))
    return _render(editor)
