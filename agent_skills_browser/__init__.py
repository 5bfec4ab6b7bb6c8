"""Agent Skills Browser.

Aggregate agent skills from public GitHub repositories into one catalog and
browse it from the terminal.
"""

__version__ = "1.0.0"

from .builder import CatalogBuilder
from .catalog import (
    ALL,
    LoadError,
    SkillFilter,
    distinct_categories,
    distinct_platforms,
    filter_skills,
    load_catalog,
    resolve_skill_body,
)
from .categories import CATEGORIES, categorize
from .github import DescriptorFetchError, GitHubClient, ListingError
from .models import Catalog, CatalogSource, SkillRecord, SourceRepository

__all__ = [
    "ALL",
    "CATEGORIES",
    "Catalog",
    "CatalogBuilder",
    "CatalogSource",
    "DescriptorFetchError",
    "GitHubClient",
    "ListingError",
    "LoadError",
    "SkillFilter",
    "SkillRecord",
    "SourceRepository",
    "categorize",
    "distinct_categories",
    "distinct_platforms",
    "filter_skills",
    "load_catalog",
    "resolve_skill_body",
]
