from __future__ import annotations

import pytest
from rich.console import Console

from agent_skills_browser.catalog import ALL
from agent_skills_browser.tui.app import StatsPanel
from agent_skills_browser.tui.widgets import DetailView, SearchBar, SkillList
from conftest import make_skill


def _render(renderable) -> str:
    console = Console(width=120, record=True)
    console.print(renderable)
    return console.export_text()


def test_skill_list_filters_by_platform_category_and_text(sample_catalog) -> None:
    widget = SkillList()
    rows = []
    widget.clear = lambda: rows.clear()  # type: ignore[method-assign]
    widget.add_row = lambda *args, **kwargs: rows.append((args, kwargs))  # type: ignore[method-assign]

    widget.load_catalog(sample_catalog)
    assert len(widget.filtered_skills) == 4
    assert rows[0][1]["key"] == sample_catalog.skills[0].id

    widget.filter_by_platform("HuggingFace")
    assert [s.slug for s in widget.filtered_skills] == ["hf-datasets", "hub-cli"]

    widget.filter_by_category("Tools")
    assert [s.slug for s in widget.filtered_skills] == ["hub-cli"]

    widget.filter_by_platform(None)
    widget.filter_by_category(ALL)
    widget.filter_by_text("docker")
    assert [s.slug for s in widget.filtered_skills] == ["docker-deploy"]
    assert len(rows) == 1

    widget.filter_by_text("")
    assert len(widget.filtered_skills) == 4


def test_skill_list_without_catalog_is_empty() -> None:
    widget = SkillList()
    widget.clear = lambda: None  # type: ignore[method-assign]
    widget.add_row = lambda *args, **kwargs: None  # type: ignore[method-assign]

    widget.filter_by_text("anything")
    assert widget.filtered_skills == []


def test_detail_view_renders_skill_and_install_command() -> None:
    skill = make_skill("hf-datasets", description="Upload datasets", category="ML & Data")

    rendered = _render(DetailView()._build_content(skill))
    assert "hf-datasets" in rendered
    assert "ML & Data" in rendered
    assert "Quick Install" in rendered
    assert "curl -sL" in rendered
    assert "Loading..." in rendered

    rendered = _render(DetailView()._build_content(skill, "# Resolved body"))
    assert "# Resolved body" in rendered
    assert "Loading..." not in rendered


def test_detail_view_show_body_ignores_stale_results() -> None:
    view = DetailView()
    updates = []

    class _Static:
        def update(self, content) -> None:
            updates.append(content)

    view.query_one = lambda selector, cls=None: _Static()  # type: ignore[method-assign]

    first = make_skill("first")
    second = make_skill("second")
    view.show_skill(first)
    view.show_skill(second)

    assert view.show_body(first, "late body") is False
    assert view.current_body is None
    assert view.show_body(second, "fresh body") is True
    assert view.current_body == "fresh body"
    assert len(updates) == 3


def test_stats_panel_states(sample_catalog) -> None:
    panel = StatsPanel()
    rendered = {}
    panel.update = lambda text: rendered.__setitem__("text", text)  # type: ignore[method-assign]

    panel.update_stats(None, 0)
    assert "Loading skills" in rendered["text"]

    panel.update_stats(sample_catalog, 4)
    assert "4[/" in rendered["text"]
    assert "open-source repositories" in rendered["text"]
    assert "Showing" in rendered["text"]

    panel.update_stats(sample_catalog, 0)
    assert "No skills match your filters." in rendered["text"]


@pytest.mark.asyncio
async def test_search_bar_clear_sets_empty_value() -> None:
    from textual.app import App, ComposeResult

    class TestApp(App[None]):
        def compose(self) -> ComposeResult:
            yield SearchBar(id="search")

    app = TestApp()
    async with app.run_test() as pilot:
        _ = pilot  # keep `pilot` alive for the active app context
        bar = app.query_one(SearchBar)
        bar.value = "abc"
        bar.clear_search()
        assert bar.value == ""


def test_search_bar_normalizes_query() -> None:
    assert SearchBar.normalize_query("  docker   deploy ") == "docker deploy"
    assert SearchBar.normalize_query(" \t ") == ""


@pytest.mark.asyncio
async def test_search_bar_reports_only_effective_changes() -> None:
    from textual.app import App, ComposeResult

    class TestApp(App[None]):
        def __init__(self) -> None:
            super().__init__()
            self.queries = []

        def compose(self) -> ComposeResult:
            yield SearchBar(id="search")

        def on_search_bar_search_changed(self, event: SearchBar.SearchChanged) -> None:
            self.queries.append(event.query)

    app = TestApp()
    async with app.run_test() as pilot:
        bar = app.query_one(SearchBar)
        bar.value = " docker"
        await pilot.pause()
        bar.value = "docker  "
        await pilot.pause()
        bar.clear_search()
        await pilot.pause()

    assert app.queries == ["docker", ""]
