"""
Session Gate
============

Decides whether the admin sees the login surface or the editor shell.

The only signal is a boolean flag kept in per-browser persistent storage
(the Flask session) under ``isAdmin``. It is advisory: nothing verifies it
against the backend, it never expires, and it is either set to "true" or absent.
"""

import hashlib
import hmac
from functools import wraps

from flask import g, redirect, request, session, url_for

from ...core.config import get_config_value

FLAG_KEY = 'isAdmin'

VIEW_LOADING = 'loading'
VIEW_LOGIN = 'login'
VIEW_SHELL = 'shell'


class SessionGate:

    def __init__(self, storage):
        self.storage = storage
        self.resolved = False
        self.is_authenticated = False

    def resolve(self):
        """Read the persisted flag. A missing flag means not authenticated."""
        self.is_authenticated = self.storage.get(FLAG_KEY) == 'true'
        self.resolved = True
        return self.is_authenticated

    def view(self):
        if not self.resolved:
            return VIEW_LOADING
        return VIEW_SHELL if self.is_authenticated else VIEW_LOGIN

    def handle_login(self, success):
        self.is_authenticated = bool(success)
        self.resolved = True
        if self.is_authenticated:
            self.storage[FLAG_KEY] = 'true'
        else:
            self.storage.pop(FLAG_KEY, None)

    def handle_logout(self):
        self.storage.pop(FLAG_KEY, None)
        self.is_authenticated = False
        self.resolved = True


def current_gate():
    """Gate for this request, resolved from the Flask session"""
    gate = g.get('session_gate')
    if gate is None:
        gate = SessionGate(session)
        gate.resolve()
        g.session_gate = gate
    return gate


def admin_required(f):
    """Decorator to require the admin flag"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_gate().is_authenticated:
            return redirect(url_for('admin.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function


def hash_password(password):
    """Simple password hashing"""
    return hashlib.sha256(password.encode()).hexdigest()


def check_admin_password(password):
    """Compare against ADMIN_PASSWORD_HASH (sha256 hex) or ADMIN_PASSWORD"""
    if not password:
        return False

    expected_hash = get_config_value('ADMIN_PASSWORD_HASH')
    if expected_hash:
        return hmac.compare_digest(hash_password(password).encode(), expected_hash.strip().lower().encode())

    expected = get_config_value('ADMIN_PASSWORD')
    if expected:
        return hmac.compare_digest(password.encode(), expected.encode())

    return False
