"""Catalog builder - runs every source scanner and assembles the catalog"""

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_SOURCES, catalog_sources
from .github import GitHubClient, ListingError
from .models import Catalog, SkillRecord, SourceRepository
from .scanners import ContextRepoScanner, SkillRepoScanner

logger = logging.getLogger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC time with millisecond precision and a ``Z`` suffix"""
    now = now or datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def sort_key(skill: SkillRecord) -> Tuple[str, str]:
    """Case-insensitive name ordering, ties broken by the raw name"""
    return (skill.name.casefold(), skill.name)


def dedupe_by_id(skills: Iterable[SkillRecord]) -> Tuple[SkillRecord, ...]:
    """Drop records whose id was already seen, keeping the first"""
    seen = set()
    unique: List[SkillRecord] = []
    for skill in skills:
        if skill.id in seen:
            logger.warning("Duplicate skill id %s dropped", skill.id)
            continue
        seen.add(skill.id)
        unique.append(skill)
    return tuple(unique)


class CatalogBuilder:
    """Builds a fresh Catalog from the configured source repositories"""

    def __init__(
        self,
        client: GitHubClient,
        sources: Optional[List[SourceRepository]] = None,
        include_context_source: bool = True,
    ):
        self.client = client
        self.sources = list(DEFAULT_SOURCES if sources is None else sources)
        self.include_context_source = include_context_source
        self.errors: List[str] = []
        self.counts: List[Tuple[str, int]] = []

    def build_catalog(self, parallel: bool = False) -> Catalog:
        """
        Scan every source in order and assemble the catalog.

        Args:
            parallel: Fetch descriptors within a source concurrently.

        Returns:
            Catalog sorted by skill name
        """
        self.errors = []
        self.counts = []

        contributions: List[Tuple[SkillRecord, ...]] = []
        for source in self.sources:
            contributions.append(self._safe_scan(source, parallel))

        if self.include_context_source:
            context_scanner = ContextRepoScanner(self.client)
            context_skills = context_scanner.scan()
            self.counts.append((context_scanner.source.full_name, len(context_skills)))
            contributions.append(context_skills)

        combined = dedupe_by_id(skill for part in contributions for skill in part)
        skills = sorted(combined, key=sort_key)

        return Catalog(
            generated_at=utc_timestamp(),
            sources=catalog_sources(self.sources, self.include_context_source),
            skills=skills,
        )

    def _safe_scan(self, source: SourceRepository, parallel: bool) -> Tuple[SkillRecord, ...]:
        """Scan one source; a failed listing only loses that source"""
        try:
            skills = SkillRepoScanner(source, self.client).scan(parallel=parallel)
        except ListingError as e:
            error_msg = f"Error listing {source.full_name}: {e}"
            logger.error(error_msg)
            self.errors.append(error_msg)
            skills = ()
        self.counts.append((source.full_name, len(skills)))
        return skills
