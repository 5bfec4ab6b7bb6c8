"""Main TUI application for the skills browser."""

from pathlib import Path
from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Select, Static

from ..catalog import ALL, LoadError, distinct_categories, distinct_platforms, load_catalog, resolve_skill_body
from ..config import DEFAULT_CATALOG_PATH
from ..models import Catalog, SkillRecord
from .widgets import DetailView, SearchBar, SkillList


class StatsPanel(Static):
    """One-line summary of the catalog and the current filter result."""

    DEFAULT_CSS = """
    StatsPanel {
        height: auto;
        width: 100%;
        background: $surface;
        padding: 0 1;
    }
    """

    def update_stats(self, catalog: Optional[Catalog], shown: int) -> None:
        if catalog is None:
            self.update("[dim]Loading skills...[/dim]")
            return

        accent = "#F5A524"
        lines = [
            f"[bold {accent}]⚡[/bold {accent}] [{accent}]{catalog.total_skills}[/{accent}] skills"
            f" from [{accent}]{len(catalog.sources)}[/{accent}] open-source repositories"
            f"  │  Generated: {catalog.generated_at[:10]}",
            f"Showing [{accent}]{shown}[/{accent}] of {catalog.total_skills} skills",
        ]
        if shown == 0:
            lines.append("[dim]No skills match your filters.[/dim]")
        self.update("\n".join(lines))


class SkillsBrowserTUI(App):
    """Terminal UI for browsing the agent skills catalog."""

    CSS_PATH = "styles.tcss"
    TITLE = "⚡ Agent Skills Browser"
    SUB_TITLE = "Browse and search skills for AI coding agents"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "focus_list", "Focus List"),
        Binding("/", "focus_search", "Search"),
        Binding("r", "refresh", "Reload"),
    ]

    def __init__(self, *args, **kwargs):
        self.catalog_path = Path(kwargs.pop("catalog_path", None) or DEFAULT_CATALOG_PATH)
        super().__init__(*args, **kwargs)
        self.catalog: Optional[Catalog] = None

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()

        with Horizontal(id="main-container"):
            with Vertical(id="sidebar"):
                yield SearchBar(id="search")
                with Horizontal(id="filters"):
                    yield Select(
                        [("All Platforms", ALL)],
                        value=ALL,
                        allow_blank=False,
                        id="platform-select",
                    )
                    yield Select(
                        [("All Categories", ALL)],
                        value=ALL,
                        allow_blank=False,
                        id="category-select",
                    )
                yield SkillList(id="skill-list")
                yield StatsPanel(id="stats")

            with Vertical(id="detail-panel"):
                yield DetailView(id="detail-view")

        yield Footer()

    def on_mount(self) -> None:
        """Load data once the widgets are mounted."""
        self.query_one("#stats", StatsPanel).update_stats(None, 0)
        self.call_after_refresh(self._load_catalog)

    def _load_catalog(self) -> None:
        """Load the catalog file and reset the views."""
        stats = self.query_one("#stats", StatsPanel)
        detail_view = self.query_one("#detail-view", DetailView)

        try:
            catalog = load_catalog(self.catalog_path)
        except LoadError as e:
            self.catalog = None
            stats.update_stats(None, 0)
            detail_view.clear(message=f"{e}. Run 'skills-browser build' first.")
            self.notify(str(e), severity="error")
            return

        self.catalog = catalog
        self.query_one("#platform-select", Select).set_options(
            [(p if p != ALL else "All Platforms", p) for p in distinct_platforms(catalog)]
        )
        self.query_one("#category-select", Select).set_options(
            [(c if c != ALL else "All Categories", c) for c in distinct_categories(catalog)]
        )

        skill_list = self.query_one("#skill-list", SkillList)
        skill_list.load_catalog(catalog)
        stats.update_stats(catalog, len(skill_list.filtered_skills))
        detail_view.clear()
        self.notify(f"Loaded {catalog.total_skills} skills")

    def _refresh_stats(self) -> None:
        skill_list = self.query_one("#skill-list", SkillList)
        self.query_one("#stats", StatsPanel).update_stats(
            self.catalog, len(skill_list.filtered_skills)
        )

    def on_search_bar_search_changed(self, event: SearchBar.SearchChanged) -> None:
        """Handle search input changes."""
        self.query_one("#skill-list", SkillList).filter_by_text(event.query)
        self._refresh_stats()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Handle platform/category selection."""
        value = event.value if isinstance(event.value, str) else ALL
        skill_list = self.query_one("#skill-list", SkillList)
        if event.select.id == "platform-select":
            skill_list.filter_by_platform(value)
        elif event.select.id == "category-select":
            skill_list.filter_by_category(value)
        else:
            return
        self._refresh_stats()

    def on_skill_list_skill_selected(self, event: SkillList.SkillSelected) -> None:
        """Show the selected skill and resolve its content in the background."""
        self.query_one("#detail-view", DetailView).show_skill(event.skill)
        self.load_skill_body(event.skill)

    @work(thread=True, exclusive=True, group="skill-body")
    def load_skill_body(self, skill: SkillRecord) -> None:
        body = resolve_skill_body(skill)
        self.call_from_thread(self._show_body, skill, body)

    def _show_body(self, skill: SkillRecord, body: str) -> None:
        self.query_one("#detail-view", DetailView).show_body(skill, body)

    def action_focus_search(self) -> None:
        """Focus the search bar."""
        self.query_one("#search", SearchBar).focus()

    def action_focus_list(self) -> None:
        """Focus the skill list."""
        self.query_one("#skill-list", SkillList).focus()

    def action_refresh(self) -> None:
        """Reload the catalog file."""
        self.notify("Reloading catalog...")
        self._load_catalog()


def main():
    """Run the TUI application."""
    app = SkillsBrowserTUI()
    app.run()


if __name__ == "__main__":
    main()
