"""Shared pytest fixtures for skills-browser tests."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pytest
import respx

from agent_skills_browser.exporters import CatalogJSONExporter
from agent_skills_browser.github import ListingError
from agent_skills_browser.models import Catalog, CatalogSource, SkillRecord

SAMPLE_SKILL_MD = """---
name: hf-datasets
description: "Create and upload datasets to the Hub"
license: Apache-2.0
---

# Datasets

Use this skill to publish datasets.
"""


def make_skill(
    slug: str,
    name: Optional[str] = None,
    platform: str = "HuggingFace",
    category: str = "General",
    description: str = "",
    owner: str = "huggingface",
    repo: str = "skills",
    body: str = "",
) -> SkillRecord:
    return SkillRecord(
        id=f"{owner}-{repo}-{slug}",
        name=name or slug,
        slug=slug,
        description=description,
        category=category,
        platform=platform,
        platform_icon="🤗" if platform == "HuggingFace" else "⚡",
        source=f"{owner}/{repo}",
        source_url=f"https://github.com/{owner}/{repo}/tree/main/skills/{slug}",
        skill_md_url=f"https://raw.githubusercontent.com/{owner}/{repo}/main/skills/{slug}/SKILL.md",
        body=body,
    )


class FakeGitHubClient:
    """In-memory stand-in for GitHubClient.

    ``listings`` maps "owner/repo/path" (or a full URL) to entries or an
    exception; ``files`` maps raw URLs to text, None (404) or an exception.
    """

    def __init__(
        self,
        listings: Optional[Dict[str, Union[List[Dict[str, Any]], Exception]]] = None,
        files: Optional[Dict[str, Union[str, None, Exception]]] = None,
    ):
        self.listings = listings or {}
        self.files = files or {}
        self.fetched: List[str] = []

    def list_contents(self, owner: str, repo: str, path: str = ""):
        return self.list_url(f"{owner}/{repo}/{path.strip('/')}")

    def list_url(self, url: str):
        if url not in self.listings:
            raise ListingError(f"GitHub API error 404: {url}")
        value = self.listings[url]
        if isinstance(value, Exception):
            raise value
        return value

    def fetch_text(self, url: str):
        self.fetched.append(url)
        if url not in self.files:
            return None
        value = self.files[url]
        if isinstance(value, Exception):
            raise value
        return value

    def close(self) -> None:
        return None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@pytest.fixture
def sample_catalog() -> Catalog:
    """Catalog with skills from two platforms, already sorted by name."""
    skills = [
        make_skill("brainstorming", platform="Superpowers", owner="obra", repo="superpowers",
                   category="Planning", description="Refine rough ideas into designs",
                   body="# Brainstorming"),
        make_skill("docker-deploy", platform="Superpowers", owner="obra", repo="superpowers",
                   category="DevOps", description="Ship containers with Docker"),
        make_skill("hf-datasets", category="ML & Data",
                   description="Create and upload datasets to the Hub", body="# Datasets"),
        make_skill("hub-cli", category="Tools", description="Use the hf command line"),
    ]
    return Catalog(
        generated_at="2026-10-19T08:00:00.000Z",
        sources=[
            CatalogSource(name="huggingface/skills", url="https://github.com/huggingface/skills"),
            CatalogSource(name="obra/superpowers", url="https://github.com/obra/superpowers"),
        ],
        skills=skills,
    )


@pytest.fixture
def catalog_file(tmp_path: Path, sample_catalog: Catalog) -> Path:
    path = tmp_path / "public" / "skills-data.json"
    CatalogJSONExporter().export_to_file(sample_catalog, path)
    return path


@pytest.fixture
def github_mock():
    """respx router for httpx; every request made in a test must be routed."""
    with respx.mock(assert_all_called=False) as router:
        yield router


