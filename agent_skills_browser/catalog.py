"""Catalog consumer - load the persisted catalog and derive filtered views."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .categories import CATEGORIES
from .github import GitHubClient, GitHubError
from .models import Catalog, CatalogSource, SkillRecord

logger = logging.getLogger(__name__)

ALL = "All"
BODY_LOAD_FAILED = "Failed to load skill content."

_SKILL_FIELDS = {
    "id": "id",
    "name": "name",
    "slug": "slug",
    "description": "description",
    "category": "category",
    "platform": "platform",
    "platformIcon": "platform_icon",
    "source": "source",
    "sourceUrl": "source_url",
    "skillMdUrl": "skill_md_url",
    "body": "body",
}
_REQUIRED_SKILL_KEYS = ("id", "name", "slug", "category", "platform")


class LoadError(Exception):
    """The persisted catalog is missing or structurally invalid."""


@dataclass(frozen=True)
class SkillFilter:
    """Active browse filters; ``ALL`` disables platform/category filtering"""

    platform: str = ALL
    category: str = ALL
    search_text: str = ""


def _parse_skill(raw: Any, index: int) -> SkillRecord:
    if not isinstance(raw, dict):
        raise LoadError(f"skills[{index}] is not an object")
    missing = [k for k in _REQUIRED_SKILL_KEYS if not isinstance(raw.get(k), str)]
    if missing:
        raise LoadError(f"skills[{index}] missing {', '.join(missing)}")

    values = {}
    for key, attr in _SKILL_FIELDS.items():
        value = raw.get(key)
        values[attr] = value if isinstance(value, str) else ""
    return SkillRecord(**values)


def catalog_from_dict(data: Dict[str, Any]) -> Catalog:
    """Validate a decoded catalog document and build a Catalog."""
    if not isinstance(data, dict):
        raise LoadError("catalog root must be an object")

    for key in ("generatedAt", "sources", "skills"):
        if key not in data:
            raise LoadError(f"catalog missing '{key}'")
    if not isinstance(data["skills"], list) or not isinstance(data["sources"], list):
        raise LoadError("'skills' and 'sources' must be lists")

    sources = []
    for i, raw in enumerate(data["sources"]):
        if not isinstance(raw, dict) or "name" not in raw or "url" not in raw:
            raise LoadError(f"sources[{i}] must have name and url")
        sources.append(CatalogSource(name=str(raw["name"]), url=str(raw["url"])))

    skills = [_parse_skill(raw, i) for i, raw in enumerate(data["skills"])]

    total = data.get("totalSkills")
    if total is None:
        logger.warning("catalog has no totalSkills; using %d", len(skills))
    elif total != len(skills):
        logger.warning("totalSkills=%s but catalog holds %d skills", total, len(skills))

    unknown = sorted({s.category for s in skills if s.category not in CATEGORIES})
    if unknown:
        logger.warning("catalog uses unknown categories: %s", ", ".join(unknown))

    return Catalog(generated_at=str(data["generatedAt"]), sources=sources, skills=skills)


def load_catalog(path: Path) -> Catalog:
    """Read and validate the persisted catalog.

    Raises:
        LoadError: if the file is absent, not JSON, or missing required fields.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise LoadError(f"Catalog not found: {path}") from e
    except OSError as e:
        raise LoadError(f"Cannot read catalog {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"Catalog {path} is not UTF-8 text: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"Catalog {path} is not valid JSON: {e}") from e

    return catalog_from_dict(data)


def matches_search(skill: SkillRecord, search_text: str) -> bool:
    q = search_text.lower()
    return (
        q in skill.name.lower()
        or q in skill.description.lower()
        or q in skill.category.lower()
    )


def filter_skills(catalog: Catalog, skill_filter: Optional[SkillFilter] = None) -> List[SkillRecord]:
    """Skills matching every active filter, in catalog order"""
    f = skill_filter or SkillFilter()
    results = []
    for skill in catalog.skills:
        if f.platform != ALL and skill.platform != f.platform:
            continue
        if f.category != ALL and skill.category != f.category:
            continue
        if f.search_text and not matches_search(skill, f.search_text):
            continue
        results.append(skill)
    return results


def distinct_platforms(catalog: Catalog) -> List[str]:
    """``All`` followed by platforms in first-seen order"""
    return [ALL] + list(dict.fromkeys(s.platform for s in catalog.skills))


def distinct_categories(catalog: Catalog) -> List[str]:
    """``All`` followed by the sorted unique categories"""
    return [ALL] + sorted({s.category for s in catalog.skills})


def find_skill(catalog: Catalog, skill_id: str) -> Optional[SkillRecord]:
    for skill in catalog.skills:
        if skill.id == skill_id:
            return skill
    return None


def resolve_skill_body(skill: SkillRecord, client: Optional[GitHubClient] = None) -> str:
    """The skill's stored body, or its descriptor downloaded on demand.

    Never raises; failures come back as a placeholder message.
    """
    if skill.body:
        return skill.body
    if not skill.skill_md_url:
        return BODY_LOAD_FAILED

    owns_client = client is None
    client = client or GitHubClient()
    try:
        text = client.fetch_text(skill.skill_md_url)
    except GitHubError as e:
        logger.warning("Could not load %s: %s", skill.skill_md_url, e)
        return BODY_LOAD_FAILED
    finally:
        if owns_client:
            client.close()

    return text if text is not None else BODY_LOAD_FAILED


def install_command(skill: SkillRecord) -> str:
    """Shell snippet shown next to a skill for installing it locally."""
    if skill.platform in ("Superpowers", "HuggingFace"):
        return (
            "# Add to your .claude/skills/ directory\n"
            f"curl -sL {skill.skill_md_url} > .claude/skills/{skill.slug}/SKILL.md"
        )
    return f"# View source\nopen {skill.source_url}"
