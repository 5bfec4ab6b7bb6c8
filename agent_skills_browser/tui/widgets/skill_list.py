"""Skill List Widget - Filterable table of catalog skills"""

from typing import List, Optional

from textual.message import Message
from textual.widgets import DataTable

from ...catalog import ALL, SkillFilter, filter_skills
from ...models import Catalog, SkillRecord


class SkillList(DataTable):
    """A filterable DataTable showing catalog skills"""

    class SkillSelected(Message):
        """Sent when a skill is selected"""

        def __init__(self, skill: SkillRecord) -> None:
            self.skill = skill
            super().__init__()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog: Optional[Catalog] = None
        self.filtered_skills: List[SkillRecord] = []
        self.skill_filter = SkillFilter()

    def on_mount(self) -> None:
        """Set up the table columns"""
        self.add_columns("Name", "Platform", "Category", "Source")
        self.cursor_type = "row"
        self.zebra_stripes = True

    def load_catalog(self, catalog: Catalog) -> None:
        """Show every skill of a freshly loaded catalog"""
        self.catalog = catalog
        self._apply_filters()

    def filter_by_text(self, text: str) -> None:
        self._update_filter(search_text=text)

    def filter_by_platform(self, platform: Optional[str]) -> None:
        self._update_filter(platform=platform or ALL)

    def filter_by_category(self, category: Optional[str]) -> None:
        self._update_filter(category=category or ALL)

    def _update_filter(self, **changes) -> None:
        current = self.skill_filter
        self.skill_filter = SkillFilter(
            platform=changes.get("platform", current.platform),
            category=changes.get("category", current.category),
            search_text=changes.get("search_text", current.search_text),
        )
        self._apply_filters()

    def _apply_filters(self) -> None:
        """Apply all active filters"""
        if self.catalog is None:
            self.filtered_skills = []
        else:
            self.filtered_skills = filter_skills(self.catalog, self.skill_filter)
        self._refresh_table()

    def _refresh_table(self) -> None:
        """Refresh the table with current filtered data"""
        self.clear()

        for skill in self.filtered_skills:
            self.add_row(
                skill.name,
                f"{skill.platform_icon} {skill.platform}".strip(),
                skill.category,
                skill.source,
                key=skill.id,
            )

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle row selection"""
        if event.row_key:
            key = str(event.row_key.value)
            for skill in self.filtered_skills:
                if skill.id == key:
                    self.post_message(self.SkillSelected(skill))
                    break
