"""Detail view widget - shows one skill with its install command and content."""

from typing import Optional

from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import Static

from ...catalog import install_command
from ...models import SkillRecord

ACCENT = "#F5A524"


class DetailView(VerticalScroll):
    """Panel showing detailed skill information."""

    DEFAULT_CSS = """
    DetailView {
        width: 100%;
        height: 100%;
        padding: 1;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.current_skill: Optional[SkillRecord] = None
        self.current_body: Optional[str] = None

    def compose(self):
        yield Static(id="detail-content")

    def show_skill(self, skill: SkillRecord) -> None:
        """Display a skill; its content shows a loading line until `show_body`."""
        self.current_skill = skill
        self.current_body = None
        self.query_one("#detail-content", Static).update(self._build_content(skill))

    def show_body(self, skill: SkillRecord, body: str) -> bool:
        """Fill in resolved content. Ignored if another skill is shown now."""
        if self.current_skill is None or self.current_skill.id != skill.id:
            return False
        self.current_body = body
        self.query_one("#detail-content", Static).update(
            self._build_content(skill, body)
        )
        return True

    def clear(self, message: Optional[str] = None) -> None:
        """Clear the detail view."""
        self.current_skill = None
        self.current_body = None
        welcome = Text()
        welcome.append("⚡ ", style=ACCENT)
        welcome.append(message or "Select a skill to view details", style="dim italic")
        self.query_one("#detail-content", Static).update(welcome)

    def _build_content(self, skill: SkillRecord, body: Optional[str] = None) -> Panel:
        """Build rich content for the skill."""
        content = []

        header = Text()
        header.append(f"{skill.platform_icon} {skill.platform}".strip(), style="bold")
        header.append(f"  [{skill.category}]", style="dim")
        content.append(header)
        content.append(Text(skill.name, style=f"bold {ACCENT}"))
        content.append(
            Text(skill.description or "No description available.", style="italic")
        )
        content.append(Text(""))

        info_table = Table(show_header=False, box=None, padding=(0, 1))
        info_table.add_column("Key", style="bold")
        info_table.add_column("Value")
        info_table.add_row("ID:", skill.id)
        info_table.add_row("Source:", skill.source)
        if skill.source_url:
            info_table.add_row("GitHub:", skill.source_url)
        content.append(info_table)
        content.append(Text(""))

        content.append(Text("Quick Install", style=f"bold underline {ACCENT}"))
        content.append(Syntax(install_command(skill), "bash", word_wrap=True))
        content.append(Text(""))

        content.append(Text("Skill Content", style=f"bold underline {ACCENT}"))
        if body is None:
            content.append(Text("Loading...", style="dim italic"))
        else:
            content.append(Text(body))

        return Panel(Group(*content), border_style=ACCENT, title=skill.slug)
