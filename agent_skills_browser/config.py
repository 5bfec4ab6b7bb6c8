"""Builder configuration - source repositories and environment settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

from .models import CatalogSource, SourceRepository

DEFAULT_CATALOG_PATH = Path("public") / "skills-data.json"
DEFAULT_TIMEOUT = 20.0

DEFAULT_SOURCES: List[SourceRepository] = [
    SourceRepository(
        owner="huggingface",
        repo="skills",
        skills_path="skills",
        platform="HuggingFace",
        platform_icon="🤗",
    ),
    SourceRepository(
        owner="obra",
        repo="superpowers",
        skills_path="skills",
        platform="Superpowers",
        platform_icon="⚡",
    ),
]

# Skills live in top-level folders and are described by README.md rather
# than SKILL.md, so this repo is handled by ContextRepoScanner.
CONTEXT_SOURCE = SourceRepository(
    owner="muratcankoylan",
    repo="Agent-Skills-for-Context-Engineering",
    skills_path="",
    platform="Context Engineering",
    platform_icon="🧠",
)

_REQUIRED_SOURCE_KEYS = ("owner", "repo")


class ConfigError(Exception):
    """Raised when a sources file cannot be used."""


def catalog_sources(
    sources: List[SourceRepository], include_context_source: bool = True
) -> List[CatalogSource]:
    """Provenance list written into the catalog envelope."""
    repos = list(sources)
    if include_context_source:
        repos.append(CONTEXT_SOURCE)
    return [CatalogSource(name=r.full_name, url=r.url) for r in repos]


def load_sources(path: Path) -> List[SourceRepository]:
    """Load source repositories from a YAML file.

    Expected layout::

        sources:
          - owner: huggingface
            repo: skills
            skills_path: skills
            platform: HuggingFace
            platform_icon: "🤗"
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read sources file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("sources"), list):
        raise ConfigError(f"{path}: expected a top-level 'sources' list")

    sources = []
    for i, entry in enumerate(data["sources"]):
        if not isinstance(entry, dict):
            raise ConfigError(f"{path}: sources[{i}] must be a mapping")
        missing = [k for k in _REQUIRED_SOURCE_KEYS if not entry.get(k)]
        if missing:
            raise ConfigError(f"{path}: sources[{i}] missing {', '.join(missing)}")

        sources.append(
            SourceRepository(
                owner=str(entry["owner"]),
                repo=str(entry["repo"]),
                skills_path=str(entry.get("skills_path", "skills") or "").strip("/"),
                platform=str(entry.get("platform") or entry["repo"]),
                platform_icon=str(entry.get("platform_icon") or ""),
            )
        )
    return sources


@dataclass
class BuilderSettings:
    """Runtime settings read from the environment"""

    github_token: Optional[str] = None
    catalog_path: Path = DEFAULT_CATALOG_PATH
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ=None) -> "BuilderSettings":
        env = os.environ if environ is None else environ

        token = (env.get("GITHUB_TOKEN") or "").strip() or None
        catalog_path = Path(env.get("SKILLS_BROWSER_CATALOG") or DEFAULT_CATALOG_PATH)

        timeout = DEFAULT_TIMEOUT
        raw_timeout = env.get("SKILLS_BROWSER_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigError(
                    f"SKILLS_BROWSER_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from e

        return cls(github_token=token, catalog_path=catalog_path, timeout=timeout)
