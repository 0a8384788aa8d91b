"""
Admin Dashboard Routes
======================

Login, logout and the editor shell.
"""

from flask import current_app, flash, redirect, render_template, request, url_for
from werkzeug.routing import BuildError

from . import dashboard_bp
from .gate import VIEW_SHELL, admin_required, check_admin_password, current_gate
from ...core.editor import drop_session_editors
from ...core.logging_service import LoggingService


def _safe_next(next_page):
    """Only allow local paths as post-login redirect targets"""
    if next_page and next_page.startswith('/') and not next_page.startswith('//'):
        return next_page
    return None


def _editor_links():
    ext = current_app.extensions['portfolio_admin']
    links = []
    if ext.is_enabled('profile'):
        links.append(('Profile', url_for('profile_admin.profile_editor')))
    if ext.is_enabled('projects'):
        links.append(('Projects', url_for('projects_admin.projects_editor')))
    if ext.is_enabled('skills'):
        links.append(('Skills', url_for('skills_admin.skills_editor')))
    return links


@dashboard_bp.app_context_processor
def inject_editor_links():
    try:
        return {'editor_links': _editor_links()}
    except BuildError:
        # An editor blueprint that is enabled but was never registered
        return {'editor_links': []}


@dashboard_bp.route('/')
@dashboard_bp.route('/dashboard')
def dashboard():
    """Gate: the editor shell when the flag is set, otherwise the login surface"""
    gate = current_gate()
    if gate.view() == VIEW_SHELL:
        return render_template('dashboard/dashboard.html')
    return render_template('dashboard/login.html', next=request.args.get('next', ''))


@dashboard_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login route"""
    gate = current_gate()

    if request.method == 'POST':
        password = request.form.get('password', '')
        next_page = _safe_next(request.form.get('next') or request.args.get('next'))

        if not password:
            flash('Please enter the admin password', 'error')
            return render_template('dashboard/login.html', next=next_page or '')

        success = check_admin_password(password)
        gate.handle_login(success)

        if success:
            LoggingService.log_user_action('auth', 'admin login')
            return redirect(next_page or url_for('admin.dashboard'))

        LoggingService.warning('auth', 'Failed admin login attempt')
        flash('Invalid password', 'error')
        return render_template('dashboard/login.html', next=next_page or '')

    if gate.is_authenticated:
        return redirect(url_for('admin.dashboard'))
    return render_template('dashboard/login.html', next=request.args.get('next', ''))


@dashboard_bp.route('/logout')
def logout():
    """Admin logout route"""
    current_gate().handle_logout()
    drop_session_editors()
    LoggingService.log_user_action('auth', 'admin logout')
    flash('You have been logged out', 'info')
    return redirect(url_for('admin.login'))


@dashboard_bp.route('/logs')
@admin_required
def logs():
    """Recent application log entries"""
    source = request.args.get('source') or None
    entries = LoggingService.recent_logs(limit=100, source=source)
    return render_template('dashboard/logs.html', entries=entries, source=source)
