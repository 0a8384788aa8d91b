from datetime import datetime, timezone

import pytest

from portfolio_admin.modules.profile.manager import (
    ProfileManager, form_to_record, profile_to_form,
)

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

SCENARIO_FORM = {
    'bio': 'hi', 'avatar_url': '', 'cv_url': '',
    'linkedin_url': 'l', 'github_url': '', 'instagram_url': '',
}


def test_fetch_populates_flattened_form(remote):
    remote.queue({
        'id': 1, 'bio': 'About me', 'avatar_url': None, 'cv_url': 'https://cv',
        'social_links': {'github': 'https://github.com/me'},
    })
    manager = ProfileManager(remote)

    manager.fetch_profile()

    assert manager.profile['id'] == 1
    assert manager.form == {
        'bio': 'About me', 'avatar_url': '', 'cv_url': 'https://cv',
        'linkedin_url': '', 'github_url': 'https://github.com/me', 'instagram_url': '',
    }
    call = remote.calls[0]
    assert call.table == 'profiles'
    assert call.method == 'GET'


def test_fetch_error_keeps_prior_state(remote):
    manager = ProfileManager(remote)
    manager.form['bio'] = 'draft'
    remote.queue_error('JSON object requested, multiple (or no) rows returned', status=406)

    manager.fetch_profile()

    assert manager.profile is None
    assert manager.form['bio'] == 'draft'
    assert manager.status == 'error'
    assert manager.loading is False


def test_first_save_inserts(remote):
    """Fresh profile: one insert carrying the reassembled social links"""
    manager = ProfileManager(remote)
    remote.queue([{'id': 7, 'bio': 'hi'}])
    messages = []

    manager.update_profile(SCENARIO_FORM, notify=messages.append, now=NOW)

    assert len(remote.calls) == 1
    call = remote.calls[0]
    assert call.method == 'POST'
    assert call.payload == [{
        'bio': 'hi', 'avatar_url': '', 'cv_url': '',
        'social_links': {'linkedin': 'l', 'github': '', 'instagram': ''},
        'updated_at': NOW.isoformat(),
    }]
    assert manager.profile == {'id': 7, 'bio': 'hi'}
    assert messages == ['Profile updated successfully!']


def test_later_save_updates_by_captured_id(remote):
    manager = ProfileManager(remote)
    manager.profile = {'id': 42, 'bio': 'old'}
    remote.queue([{'id': 42, 'bio': 'hi'}])

    manager.update_profile(SCENARIO_FORM, now=NOW)

    assert remote.calls_with('POST') == []
    [call] = remote.calls_with('PATCH')
    assert ('id', 'eq.42') in call.params
    assert call.payload['bio'] == 'hi'


def test_insert_then_update_uses_new_id(remote):
    manager = ProfileManager(remote)
    remote.queue([{'id': 5}])
    remote.queue([{'id': 5}])

    manager.update_profile(SCENARIO_FORM)
    manager.update_profile(SCENARIO_FORM)

    assert [c.method for c in remote.calls] == ['POST', 'PATCH']
    assert ('id', 'eq.5') in remote.calls[1].params


def test_failed_save_is_silent(remote):
    manager = ProfileManager(remote)
    manager.profile = {'id': 1, 'bio': 'old'}
    remote.queue_error()
    messages = []

    manager.update_profile(SCENARIO_FORM, notify=messages.append)

    assert manager.profile == {'id': 1, 'bio': 'old'}
    assert messages == []
    assert manager.loading is False


def test_save_with_no_returned_rows_is_still_acknowledged(remote):
    manager = ProfileManager(remote)
    manager.profile = {'id': 9, 'bio': 'old'}
    remote.queue([])
    messages = []

    result = manager.update_profile({'bio': 'x'}, notify=messages.append)

    assert result.error is None
    assert messages == ['Profile updated successfully!']
    assert manager.profile == {'id': 9, 'bio': 'old'}
    assert manager.status == 'success'


@pytest.mark.parametrize('social_links', [
    {},
    {'linkedin': 'https://linkedin.com/in/me'},
    {'github': 'https://github.com/me', 'instagram': 'https://instagram.com/me'},
    {'linkedin': 'a', 'github': 'b', 'instagram': 'c'},
])
def test_social_links_round_trip(social_links):
    record = form_to_record(profile_to_form({'social_links': social_links}))
    rebuilt = record['social_links']

    for provider, url in social_links.items():
        assert rebuilt[provider] == url
    assert {k: v for k, v in rebuilt.items() if v} == social_links


def test_profile_to_form_handles_missing_social_links():
    form = profile_to_form({'bio': None, 'social_links': None})
    assert form['bio'] == ''
    assert form['linkedin_url'] == ''
