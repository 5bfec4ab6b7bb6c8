"""Data models for the agent skills catalog
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class SourceRepository:
    """One upstream GitHub repository that holds skill folders"""

    owner: str
    repo: str
    skills_path: str = "skills"
    platform: str = ""
    platform_icon: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"


@dataclass(frozen=True)
class SkillRecord:
    """A single skill entry in the catalog"""

    id: str
    name: str
    slug: str
    description: str = ""
    category: str = "General"
    platform: str = ""
    platform_icon: str = ""
    source: str = ""  # "owner/repo"
    source_url: str = ""
    skill_md_url: str = ""
    body: str = ""


@dataclass(frozen=True)
class CatalogSource:
    """Provenance entry listed in the catalog envelope"""

    name: str
    url: str


@dataclass
class Catalog:
    """Aggregated skills plus provenance metadata"""

    generated_at: str
    sources: List[CatalogSource] = field(default_factory=list)
    skills: List[SkillRecord] = field(default_factory=list)

    @property
    def total_skills(self) -> int:
        """Number of skills in the catalog"""
        return len(self.skills)


def skill_id(owner: str, repo: str, slug: str) -> str:
    """Build the deterministic catalog id for a skill"""
    return f"{owner}-{repo}-{slug}"
