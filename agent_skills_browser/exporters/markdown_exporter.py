"""Markdown Exporter - Human-readable overview of the skills catalog"""

from collections import Counter
from pathlib import Path
from typing import List

from ..models import Catalog, SkillRecord


class CatalogMarkdownExporter:
    """Export a Catalog as Markdown documentation"""

    def __init__(self, include_toc: bool = True, description_width: int = 80):
        self.include_toc = include_toc
        self.description_width = description_width

    def export_catalog(self, catalog: Catalog) -> str:
        """Export full catalog to Markdown"""
        lines = []

        lines.append("# Agent Skills Catalog")
        lines.append("")
        lines.append(f"*Generated: {catalog.generated_at}*")
        lines.append("")

        # Summary
        lines.append("## Summary")
        lines.append("")
        lines.append(f"**Total Skills:** {catalog.total_skills}")
        lines.append("")
        lines.extend(self._format_counts("Platform", [s.platform for s in catalog.skills]))
        lines.append("")
        lines.extend(self._format_counts("Category", [s.category for s in catalog.skills]))
        lines.append("")

        if self.include_toc:
            lines.append("## Table of Contents")
            lines.append("")
            lines.append("- [Skills](#skills)")
            lines.append("- [Sources](#sources)")
            lines.append("")

        if catalog.skills:
            lines.append("## Skills")
            lines.append("")
            lines.extend(self._format_skills_table(catalog.skills))
            lines.append("")

        lines.append("## Sources")
        lines.append("")
        for source in catalog.sources:
            lines.append(f"- [{source.name}]({source.url})")
        lines.append("")

        return "\n".join(lines)

    def export_to_file(self, catalog: Catalog, output_path: Path) -> None:
        """Export to a Markdown file"""
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.export_catalog(catalog))

    def _format_counts(self, label: str, values: List[str]) -> List[str]:
        counts = Counter(values)
        lines = [f"| {label} | Count |", "|------|-------|"]
        for value, count in sorted(counts.items(), key=lambda x: (-x[1], x[0])):
            lines.append(f"| {value} | {count} |")
        return lines

    def _format_skills_table(self, skills: List[SkillRecord]) -> List[str]:
        """Format skills as a table"""
        lines = []
        lines.append("| Name | Platform | Category | Source | Description |")
        lines.append("|------|----------|----------|--------|-------------|")
        for skill in skills:
            desc = self._cell(skill.description)
            if len(desc) > self.description_width:
                desc = desc[: self.description_width - 3] + "..."
            lines.append(
                f"| [{self._cell(skill.name)}]({skill.source_url}) | {skill.platform} "
                f"| {skill.category} | {skill.source} | {desc} |"
            )
        return lines

    @staticmethod
    def _cell(text: str) -> str:
        return (text or "").replace("|", "\\|").replace("\n", " ")
