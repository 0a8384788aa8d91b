"""
Project list editor state.

Technologies are collected locally on the pending form and only reach the
backend as part of the inserted project.
"""

from ...core.config import Config
from ...core.editor import TableEditor

CATEGORIES = ('Front-end', 'Back-end', 'Full-stack', 'Web App')
DEFAULT_CATEGORY = 'Front-end'
TEXT_FIELDS = ('title', 'description', 'project_url', 'github_url', 'image_url', 'category')

TRUE_VALUES = (True, 'on', 'true', '1')


class ProjectManager(TableEditor):
    table = Config.PROJECTS_TABLE

    def __init__(self, client):
        super().__init__(client)
        self.tech_input = ''

    def default_form(self):
        return {
            'title': '',
            'description': '',
            'technologies': [],
            'project_url': '',
            'github_url': '',
            'image_url': '',
            'category': DEFAULT_CATEGORY,
            'featured': False,
        }

    @property
    def projects(self):
        return self.rows

    def bind_form(self, values):
        """Copy submitted field values onto the pending form; technologies stay local."""
        for field in TEXT_FIELDS:
            if field in values:
                self.form[field] = values.get(field) or ''
        self.form['featured'] = values.get('featured') in TRUE_VALUES
        if 'tech_input' in values:
            self.tech_input = values.get('tech_input') or ''

    def fetch_projects(self):
        return self.fetch_rows()

    def add_technology(self, term=None):
        """Append a trimmed, non-empty term unless it is already listed."""
        if term is None:
            term = self.tech_input
        term = (term or '').strip()
        technologies = self.form['technologies']
        if not term or term in technologies:
            return False
        self.form['technologies'] = technologies + [term]
        self.tech_input = ''
        return True

    def remove_technology(self, term):
        self.form['technologies'] = [t for t in self.form['technologies'] if t != term]

    def add_project(self, form=None):
        """Insert the pending project. Blank title or description is a no-op (returns None)."""
        if form is not None:
            self.bind_form(form)

        if not self.form['title'].strip() or not self.form['description'].strip():
            return None

        snapshot = dict(self.form)
        snapshot['technologies'] = list(self.form['technologies'])
        return self.insert_row(snapshot)

    def delete_project(self, project_id, confirm):
        """Delete after confirmation. Failures leave the list as it was, silently."""
        return self.delete_row(project_id, confirm)
