"""CLI entry point for skills-browser"""

import logging
from pathlib import Path

import click

from agent_skills_browser import __version__
from agent_skills_browser.config import BuilderSettings, ConfigError

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(path_type=Path),
    help="Catalog JSON file (default: $SKILLS_BROWSER_CATALOG or public/skills-data.json)",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _settings() -> BuilderSettings:
    try:
        return BuilderSettings.from_env()
    except ConfigError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()


def _load(catalog_path):
    from agent_skills_browser.catalog import LoadError, load_catalog

    path = catalog_path or _settings().catalog_path
    try:
        return load_catalog(path)
    except LoadError as e:
        click.echo(f"❌ Error: {e}", err=True)
        click.echo("   Run 'skills-browser build' first.", err=True)
        raise click.Abort()


def _print_table(skills) -> None:
    click.echo(f"\n{'Name':<32} {'Platform':<20} {'Category':<16} {'ID'}")
    click.echo("=" * 100)
    for skill in skills:
        name = skill.name[:30]
        click.echo(f"{name:<32} {skill.platform:<20} {skill.category:<16} {skill.id}")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Agent Skills Browser - Catalog and search skills for AI coding agents"""
    pass


@cli.command()
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Where to write the catalog JSON")
@click.option("--sources", "sources_file", type=click.Path(exists=True, path_type=Path), help="YAML file listing source repositories")
@click.option("--parallel/--sequential", default=False, help="Fetch skills of a source in parallel")
@click.option("--context-source/--no-context-source", default=True, help="Include the Context Engineering repository")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def build(output, sources_file, parallel, context_source, verbose):
    """Fetch skills from GitHub and write the catalog"""
    _configure_logging(verbose)
    settings = _settings()
    try:
        from agent_skills_browser.builder import CatalogBuilder
        from agent_skills_browser.config import load_sources
        from agent_skills_browser.exporters import CatalogJSONExporter
        from agent_skills_browser.github import GitHubClient

        sources = load_sources(sources_file) if sources_file else None
        output_path = output or settings.catalog_path

        click.echo("🔍 Fetching skills from GitHub...")
        with GitHubClient(token=settings.github_token, timeout=settings.timeout) as client:
            builder = CatalogBuilder(
                client, sources=sources, include_context_source=context_source
            )
            catalog = builder.build_catalog(parallel=parallel)

        CatalogJSONExporter().export_to_file(catalog, output_path)

        click.echo("\n✅ Build complete!")
        click.echo(f"   Total skills: {catalog.total_skills}")
        for name, count in builder.counts:
            click.echo(f"   {name}: {count}")

        if builder.errors:
            click.echo("\n⚠️  Errors encountered:")
            for error in builder.errors:
                click.echo(f"   - {error}")

        click.echo(f"\n💾 Written to {output_path}")

    except ConfigError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()
    except OSError as e:
        click.echo(f"❌ Error writing catalog: {e}", err=True)
        raise click.Abort()


@cli.command(name="list")
@catalog_option
@click.option("--platform", default="All", help="Filter by platform")
@click.option("--category", default="All", help="Filter by category")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def list_skills(catalog_path, platform, category, output_json):
    """List skills in the catalog"""
    from agent_skills_browser.catalog import SkillFilter, filter_skills
    from agent_skills_browser.exporters.json_exporter import serialize_skill

    catalog = _load(catalog_path)
    skills = filter_skills(catalog, SkillFilter(platform=platform, category=category))

    if output_json:
        import json

        click.echo(json.dumps([serialize_skill(s) for s in skills], indent=2, ensure_ascii=False))
        return

    click.echo(f"📋 Skills ({len(skills)} of {catalog.total_skills})")
    _print_table(skills)


@cli.command()
@click.argument("query")
@catalog_option
@click.option("--platform", default="All", help="Filter by platform")
@click.option("--category", default="All", help="Filter by category")
def search(query, catalog_path, platform, category):
    """Search skills by name, description or category"""
    from agent_skills_browser.catalog import SkillFilter, filter_skills

    catalog = _load(catalog_path)
    results = filter_skills(
        catalog, SkillFilter(platform=platform, category=category, search_text=query)
    )

    if not results:
        click.echo(f"🔍 No skills match '{query}'")
        return

    click.echo(f"🔍 Found {len(results)} skills matching '{query}'")
    _print_table(results)


@cli.command()
@click.argument("skill_id")
@catalog_option
@click.option("--no-body", is_flag=True, help="Skip the skill content")
def show(skill_id, catalog_path, no_body):
    """Show one skill with its install command and content"""
    from agent_skills_browser.catalog import find_skill, install_command, resolve_skill_body

    catalog = _load(catalog_path)
    skill = find_skill(catalog, skill_id)
    if skill is None:
        click.echo(f"❌ Error: no skill with id '{skill_id}'", err=True)
        raise click.Abort()

    click.echo(f"{skill.platform_icon} {skill.platform}  [{skill.category}]")
    click.echo(f"\n{skill.name}")
    click.echo(skill.description or "No description available.")
    click.echo(f"\nSource: {skill.source}  {skill.source_url}")
    click.echo("\nQuick Install:")
    click.echo(install_command(skill))

    if not no_body:
        click.echo("\nSkill Content:")
        click.echo(resolve_skill_body(skill))


@cli.command()
@catalog_option
def facets(catalog_path):
    """Show the platforms and categories present in the catalog"""
    from agent_skills_browser.catalog import distinct_categories, distinct_platforms

    catalog = _load(catalog_path)
    click.echo("Platforms:")
    for platform in distinct_platforms(catalog):
        click.echo(f"  - {platform}")
    click.echo("\nCategories:")
    for category in distinct_categories(catalog):
        click.echo(f"  - {category}")


@cli.command()
@catalog_option
@click.option("--format", "output_format", type=click.Choice(["json", "markdown"]), default="markdown", help="Export format")
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Output file path")
def export(catalog_path, output_format, output):
    """Export the catalog to Markdown or JSON"""
    from agent_skills_browser.exporters import CatalogJSONExporter, CatalogMarkdownExporter

    catalog = _load(catalog_path)

    if output_format == "json":
        exporter = CatalogJSONExporter()
        default_filename = "skills-catalog.json"
    else:
        exporter = CatalogMarkdownExporter()
        default_filename = "skills-catalog.md"

    output_path = output or Path.cwd() / default_filename
    try:
        exporter.export_to_file(catalog, output_path)
    except OSError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()

    click.echo(f"✅ Exported to {output_path}")
    click.echo(f"   {catalog.total_skills} skills")


@cli.command()
@catalog_option
def tui(catalog_path):
    """Launch the interactive skills browser"""
    try:
        from agent_skills_browser.tui import SkillsBrowserTUI
    except ImportError as e:
        click.echo("❌ TUI requires 'textual' package. Install with: pip install textual", err=True)
        click.echo(f"   Error: {e}", err=True)
        raise click.Abort()

    app = SkillsBrowserTUI(catalog_path=catalog_path or _settings().catalog_path)
    app.run()


if __name__ == "__main__":
    cli()
