import os
import shutil
import tempfile
from collections import namedtuple

import pytest
from flask import Flask

from portfolio_admin import PortfolioAdmin
from portfolio_admin.core.remote import RemoteDataClient, RemoteError, Result

Call = namedtuple('Call', ['table', 'method', 'params', 'payload', 'headers'])


class FakeRemote(RemoteDataClient):
    """Records every request built by the real query builder and replays queued results."""

    def __init__(self):
        super().__init__('http://backend.test', 'test-key')
        self.calls = []
        self.responses = []

    def queue(self, data=None, error=None):
        self.responses.append(Result(data, error))

    def queue_error(self, message='boom', status=500):
        self.queue(error=RemoteError(message, code='test', status=status))

    def request(self, table, method, params, payload=None, headers=None):
        self.calls.append(Call(table, method, params, payload, headers))
        if self.responses:
            return self.responses.pop(0)
        return Result([], None)

    def calls_with(self, method):
        return [c for c in self.calls if c.method == method]


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def tmp_db_dir():
    """Create a temporary directory for the log database, cleaned up after."""
    d = tempfile.mkdtemp(prefix="portfolio-admin-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def app(tmp_db_dir, remote):
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["DB_DIR"] = tmp_db_dir
    app.config["LOGS_DB"] = os.path.join(tmp_db_dir, "app_logs.db")
    app.config["SUPABASE_URL"] = "http://backend.test"
    app.config["ADMIN_PASSWORD"] = "letmein"
    PortfolioAdmin(app, {'brand_name': 'Test Portfolio'}, client=remote)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['isAdmin'] = 'true'
    return client
