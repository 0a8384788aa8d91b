from portfolio_admin.modules.dashboard.gate import (
    FLAG_KEY, SessionGate, check_admin_password, hash_password,
)


def test_unresolved_gate_shows_loading():
    gate = SessionGate({})
    assert gate.view() == 'loading'


def test_absent_flag_resolves_to_login():
    gate = SessionGate({})
    assert gate.resolve() is False
    assert gate.view() == 'login'


def test_only_true_string_authenticates():
    assert SessionGate({FLAG_KEY: 'true'}).resolve() is True
    assert SessionGate({FLAG_KEY: 'false'}).resolve() is False
    assert SessionGate({FLAG_KEY: 'yes'}).resolve() is False


def test_login_then_logout_cycle():
    storage = {}
    gate = SessionGate(storage)
    gate.resolve()

    gate.handle_login(True)
    assert gate.view() == 'shell'
    assert storage[FLAG_KEY] == 'true'

    gate.handle_logout()
    assert FLAG_KEY not in storage
    assert gate.view() == 'login'


def test_failed_login_leaves_flag_absent():
    storage = {FLAG_KEY: 'true'}
    gate = SessionGate(storage)
    gate.resolve()

    gate.handle_login(False)

    assert gate.is_authenticated is False
    assert FLAG_KEY not in storage


def test_password_check_plain(app):
    with app.app_context():
        assert check_admin_password('letmein') is True
        assert check_admin_password('wrong') is False
        assert check_admin_password('') is False


def test_password_check_hash(app):
    app.config['ADMIN_PASSWORD_HASH'] = hash_password('s3cret')
    with app.app_context():
        assert check_admin_password('s3cret') is True
        assert check_admin_password('letmein') is False


# ---------------------------------------------------------------------------
# Through the HTTP surface
# ---------------------------------------------------------------------------

def test_gate_renders_login_without_flag(client):
    response = client.get('/admin/')
    assert response.status_code == 200
    assert b'Admin Login' in response.data


def test_gate_scenario_login_shell_logout(client):
    response = client.post('/admin/login', data={'password': 'letmein'})
    assert response.status_code == 302

    with client.session_transaction() as sess:
        assert sess[FLAG_KEY] == 'true'

    response = client.get('/admin/')
    assert b'Admin Dashboard' in response.data

    response = client.get('/admin/logout')
    assert response.status_code == 302
    with client.session_transaction() as sess:
        assert FLAG_KEY not in sess

    response = client.get('/admin/')
    assert b'Admin Login' in response.data


def test_wrong_password_stays_on_login(client):
    response = client.post('/admin/login', data={'password': 'nope'})
    assert response.status_code == 200
    assert b'Invalid password' in response.data
    with client.session_transaction() as sess:
        assert FLAG_KEY not in sess


def test_login_redirects_to_local_next_only(client):
    response = client.post('/admin/login', data={'password': 'letmein', 'next': '/admin/skills/'})
    assert response.headers['Location'].endswith('/admin/skills/')

    client.get('/admin/logout')
    response = client.post('/admin/login', data={'password': 'letmein', 'next': '//evil.example.com'})
    assert 'evil.example.com' not in response.headers['Location']


def test_logout_drops_session_editors(app, admin_client):
    admin_client.get('/admin/projects/')
    registry = app.extensions['portfolio_admin'].editors
    assert len(registry) == 1

    admin_client.get('/admin/logout')
    assert len(registry) == 0
