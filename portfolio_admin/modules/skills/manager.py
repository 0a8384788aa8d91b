from ...core.config import Config
from ...core.editor import TableEditor
from ...core.logging_service import LoggingService

CATEGORIES = ('Development', 'Design')
FORM_FIELDS = ('name', 'category', 'icon_url')


class SkillManager(TableEditor):
    """Skills list editor. Remote failures are logged, never shown."""

    table = Config.SKILLS_TABLE

    def default_form(self):
        return {'name': '', 'category': '', 'icon_url': ''}

    @property
    def skills(self):
        return self.rows

    def bind_form(self, values):
        self.form = {field: values.get(field) or '' for field in FORM_FIELDS}

    def fetch_skills(self):
        result = self.fetch_rows()
        if result.error:
            LoggingService.error('skills', 'fetchSkills error', result.error.to_dict())
        return result

    def add_skill(self, form=None):
        """Insert the pending skill. Blank name or no category is a no-op (returns None)."""
        if form is not None:
            self.bind_form(form)

        if not self.form['name'].strip() or not self.form['category']:
            return None

        result = self.insert_row(dict(self.form))
        if result.error:
            LoggingService.error('skills', 'insert error', result.error.to_dict())
        return result

    def delete_skill(self, skill_id, confirm):
        result = self.delete_row(skill_id, confirm)
        if result is not None and result.error:
            LoggingService.error('skills', 'delete error',
                                 {'id': skill_id, **result.error.to_dict()})
        return result
