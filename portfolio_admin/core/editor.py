"""
Entity editor plumbing shared by the profile, projects and skills modules.

An editor owns a local copy of one remote table's rows. The copy is only a
cache: it is filled by a fetch on mount and afterwards follows the outcome of
each successful mutation (insert prepends the returned row, delete removes by
id). Every remote call moves the editor through idle -> loading -> success|error.
"""

import threading
import time
import uuid
from collections import OrderedDict

from flask import current_app, session

IDLE = 'idle'
LOADING = 'loading'
SUCCESS = 'success'
ERROR = 'error'


def same_id(a, b):
    """Row ids arrive as ints from the backend and as strings from URLs."""
    return str(a) == str(b)


class TableEditor:
    """Base class for editors bound to one remote table."""

    table = None
    order_column = 'created_at'

    def __init__(self, client):
        self.client = client
        self.rows = []
        self.status = IDLE
        self.last_error = None
        self.form = self.default_form()

    @property
    def loading(self):
        return self.status == LOADING

    def default_form(self):
        return {}

    def reset_form(self):
        self.form = self.default_form()

    def _run(self, query):
        """Execute one remote call, recording the status transition."""
        self.status = LOADING
        result = query.execute()
        if result.error:
            self.status = ERROR
            self.last_error = result.error
        else:
            self.status = SUCCESS
            self.last_error = None
        return result

    def _query(self):
        return self.client.table(self.table)

    def fetch_rows(self):
        """Replace the local list with all rows, newest first. Errors leave it unchanged."""
        result = self._run(self._query().select('*').order(self.order_column, ascending=False))
        if not result.error:
            self.rows = list(result.data or [])
        return result

    def insert_row(self, row):
        """Insert one row; on success prepend the server's copy and reset the form."""
        result = self._run(self._query().insert([row]).select())
        if not result.error and result.data:
            self.rows = [result.data[0]] + self.rows
            self.reset_form()
        return result

    def delete_row(self, row_id, confirm):
        """Delete by id once confirm() agrees. Returns None when declined."""
        if not confirm():
            return None
        result = self._run(self._query().delete().eq('id', row_id))
        if not result.error:
            self.rows = [row for row in self.rows if not same_id(row.get('id'), row_id)]
        return result


class EditorRegistry:
    """Keeps one editor per browser session and editor kind alive between requests.

    Sessions that stop making requests are never told to log out, so entries
    are evicted in ``get``: anything untouched for ``idle_seconds`` goes, and
    beyond ``max_entries`` the least recently used go first.
    """

    def __init__(self, client=None, max_entries=500, idle_seconds=3600, clock=time.monotonic):
        self.client = client
        self.max_entries = max_entries
        self.idle_seconds = idle_seconds
        self._clock = clock
        self._factories = {}
        # (session_key, name) -> (editor, last access), oldest access first
        self._editors = OrderedDict()
        self._lock = threading.Lock()

    def register(self, name, factory):
        self._factories[name] = factory

    def get(self, session_key, name):
        with self._lock:
            now = self._clock()
            self._evict_idle(now)
            key = (session_key, name)
            entry = self._editors.pop(key, None)
            editor = entry[0] if entry else self._factories[name](self.client)
            self._editors[key] = (editor, now)
            while self.max_entries and len(self._editors) > self.max_entries:
                self._editors.popitem(last=False)
            return editor

    def _evict_idle(self, now):
        if not self.idle_seconds:
            return
        while self._editors:
            key, (_, last_access) = next(iter(self._editors.items()))
            if now - last_access < self.idle_seconds:
                break
            del self._editors[key]

    def drop(self, session_key):
        with self._lock:
            for key in [k for k in self._editors if k[0] == session_key]:
                del self._editors[key]

    def __contains__(self, key):
        return key in self._editors

    def __len__(self):
        return len(self._editors)


def _session_key(create=True):
    key = session.get('editor_sid')
    if key is None and create:
        key = uuid.uuid4().hex
        session['editor_sid'] = key
    return key


def get_editor(name):
    """Editor of the given kind for the current browser session"""
    registry = current_app.extensions['portfolio_admin'].editors
    return registry.get(_session_key(), name)


def drop_session_editors():
    key = _session_key(create=False)
    if key is not None:
        current_app.extensions['portfolio_admin'].editors.drop(key)
        session.pop('editor_sid', None)
