"""
Remote Data Client
==================

Table-scoped query builder for the hosted backend (PostgREST / Supabase REST).

    client.table('projects').select('*').order('created_at', ascending=False).execute()
    client.table('profiles').update(patch).eq('id', 3).select().execute()

Every call resolves to a ``Result(data, error)`` pair. Remote failures are
returned as ``error``, never raised; when ``error`` is set ``data`` is None.
"""

from collections import namedtuple

import requests

Result = namedtuple('Result', ['data', 'error'])

SINGLE_OBJECT_MIME = 'application/vnd.pgrst.object+json'


class RemoteError(Exception):
    """Error reported by the backend or raised by the transport."""

    def __init__(self, message, code=None, status=None, details=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status
        self.details = details

    def to_dict(self):
        return {
            'message': self.message,
            'code': self.code,
            'status': self.status,
            'details': self.details,
        }

    @classmethod
    def from_response(cls, resp):
        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get('message') or resp.text or f'HTTP {resp.status_code}'
        return cls(message, code=body.get('code'), status=resp.status_code,
                   details=body.get('details') or body.get('hint'))


def _format_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return 'null'
    return str(value)


class QueryBuilder:
    """One request against one table. Chain filters, then call execute()."""

    def __init__(self, client, table):
        self._client = client
        self._table = table
        self._method = None
        self._params = []
        self._payload = None
        self._returning = False
        self._single = False

    def select(self, columns='*'):
        """Read rows, or return the written rows when chained after a write."""
        if self._method is None:
            self._method = 'GET'
        self._returning = True
        self._params.append(('select', columns))
        return self

    def insert(self, rows):
        self._method = 'POST'
        self._payload = rows if isinstance(rows, list) else [rows]
        return self

    def update(self, patch):
        self._method = 'PATCH'
        self._payload = patch
        return self

    def delete(self):
        self._method = 'DELETE'
        return self

    def eq(self, column, value):
        self._params.append((column, f'eq.{_format_value(value)}'))
        return self

    def order(self, column, ascending=True):
        self._params.append(('order', f"{column}.{'asc' if ascending else 'desc'}"))
        return self

    def single(self):
        """Expect exactly one row and return it as an object instead of a list."""
        self._single = True
        return self

    @property
    def method(self):
        return self._method or 'GET'

    @property
    def params(self):
        return list(self._params)

    @property
    def payload(self):
        return self._payload

    def _headers(self):
        headers = {
            'Content-Type': 'application/json',
            'Accept': SINGLE_OBJECT_MIME if self._single else 'application/json',
        }
        if self.method != 'GET':
            headers['Prefer'] = 'return=representation' if self._returning else 'return=minimal'
        return headers

    def execute(self):
        return self._client.request(self._table, self.method, self.params,
                                    payload=self._payload, headers=self._headers())


class RemoteDataClient:
    """HTTP client for the hosted backend's REST interface."""

    def __init__(self, url, key, timeout=None):
        self.url = (url or '').rstrip('/')
        self.key = key or ''
        self.timeout = timeout

    def table(self, name):
        return QueryBuilder(self, name)

    def _table_url(self, table):
        return f"{self.url}/rest/v1/{table}"

    def request(self, table, method, params, payload=None, headers=None):
        """Send one request and fold the outcome into a Result."""
        if not self.url:
            return Result(None, RemoteError('Remote backend URL not configured', code='not_configured'))

        all_headers = {
            'apikey': self.key,
            'Authorization': f'Bearer {self.key}',
        }
        all_headers.update(headers or {})

        try:
            resp = requests.request(
                method,
                self._table_url(table),
                params=params,
                json=payload,
                headers=all_headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return Result(None, RemoteError(f'Remote request failed: {e}', code='network'))

        if not resp.ok:
            return Result(None, RemoteError.from_response(resp))

        if not resp.content:
            return Result(None, None)

        try:
            return Result(resp.json(), None)
        except ValueError as e:
            return Result(None, RemoteError(f'Invalid JSON from backend: {e}', code='decode',
                                            status=resp.status_code))

    @classmethod
    def from_config(cls, config):
        return cls(config.get('SUPABASE_URL'), config.get('SUPABASE_KEY'),
                   timeout=config.get('REMOTE_TIMEOUT'))
