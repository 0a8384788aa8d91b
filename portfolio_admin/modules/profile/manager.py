"""
Profile editor state.

The profile is a single row. Its nested ``social_links`` mapping is edited as
three flat URL fields; ``profile_to_form`` and ``form_to_record`` convert
between the two shapes. For every provider key present in ``social_links``,
``form_to_record(profile_to_form(p))['social_links']`` carries the same value;
providers missing from the row come back as empty strings.
"""

from datetime import datetime, timezone

from ...core.config import Config
from ...core.editor import TableEditor

SOCIAL_PROVIDERS = ('linkedin', 'github', 'instagram')
FORM_FIELDS = ('bio', 'avatar_url', 'cv_url') + tuple(f'{p}_url' for p in SOCIAL_PROVIDERS)


def profile_to_form(profile):
    """Flatten a profile row into form fields; missing values become ''."""
    social_links = profile.get('social_links') or {}
    form = {
        'bio': profile.get('bio') or '',
        'avatar_url': profile.get('avatar_url') or '',
        'cv_url': profile.get('cv_url') or '',
    }
    for provider in SOCIAL_PROVIDERS:
        form[f'{provider}_url'] = social_links.get(provider) or ''
    return form


def form_to_record(form, now=None):
    """Rebuild the row to write from form fields and stamp updated_at."""
    now = now or datetime.now(timezone.utc)
    return {
        'bio': form.get('bio', ''),
        'avatar_url': form.get('avatar_url', ''),
        'cv_url': form.get('cv_url', ''),
        'social_links': {p: form.get(f'{p}_url', '') for p in SOCIAL_PROVIDERS},
        'updated_at': now.isoformat(),
    }


class ProfileManager(TableEditor):
    table = Config.PROFILES_TABLE

    def __init__(self, client):
        super().__init__(client)
        self.profile = None

    def default_form(self):
        return {field: '' for field in FORM_FIELDS}

    def bind_form(self, values):
        self.form = {field: values.get(field, '') for field in FORM_FIELDS}

    def fetch_profile(self):
        """Load the single profile row. Errors (including no row yet) are ignored."""
        result = self._run(self._query().select('*').single())
        if not result.error and result.data:
            self.profile = result.data
            self.form = profile_to_form(result.data)
        return result

    def update_profile(self, form=None, notify=None, now=None):
        """Insert the profile on first save, otherwise update it by id.

        The id is taken from the profile held when the save starts.
        ``notify`` receives the success message; failures are not reported.
        """
        if form is not None:
            self.bind_form(form)

        record = form_to_record(self.form, now)
        profile = self.profile

        if profile:
            query = self._query().update(record).eq('id', profile['id']).select()
        else:
            query = self._query().insert([record]).select()

        result = self._run(query)

        if not result.error:
            if result.data:
                self.profile = result.data[0]
            if notify:
                notify('Profile updated successfully!')
        return result
