"""Skill scanner - builds catalog records from `SKILL.md` descriptors."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..categories import categorize
from ..github import DescriptorFetchError, GitHubClient, raw_url, tree_url
from ..models import SkillRecord, SourceRepository, skill_id

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r"^---\n(.*?)\n---", re.DOTALL)
FRONTMATTER_LINE_PATTERN = re.compile(r'^(\w[\w-]*):\s*"?(.*?)"?\s*$')

DESCRIPTOR_FILENAME = "SKILL.md"


@dataclass
class ParsedDescriptor:
    """Header metadata and body text of a descriptor file"""

    metadata: Dict[str, str] = field(default_factory=dict)
    body: str = ""


def parse_descriptor(raw_text: str) -> ParsedDescriptor:
    """Split a `SKILL.md` into its `---` fenced header and body.

    Header lines look like ``key: value``; a value may be wrapped in double
    quotes. Lines that do not match are ignored. Text without a leading
    header yields empty metadata and an empty body.
    """
    content = (raw_text or "").replace("\r\n", "\n")
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return ParsedDescriptor()

    metadata: Dict[str, str] = {}
    for line in match.group(1).split("\n"):
        m = FRONTMATTER_LINE_PATTERN.match(line)
        if m:
            metadata[m.group(1)] = m.group(2)

    body = content[match.end():].strip()
    return ParsedDescriptor(metadata=metadata, body=body)


class SkillRepoScanner:
    """Scan one source repository whose skills live in `<skills_path>/<slug>/SKILL.md`."""

    def __init__(self, source: SourceRepository, client: GitHubClient, max_workers: int = 8):
        self.source = source
        self.client = client
        self.max_workers = max_workers

    def list_skill_directories(self) -> List[str]:
        """Names of the skill folders under the configured path.

        Raises:
            ListingError: if the listing call itself fails.
        """
        entries = self.client.list_contents(
            self.source.owner, self.source.repo, self.source.skills_path
        )
        return [
            entry["name"]
            for entry in entries
            if isinstance(entry, dict)
            and entry.get("type") == "dir"
            and isinstance(entry.get("name"), str)
            and entry["name"]
        ]

    def descriptor_url(self, slug: str) -> str:
        return raw_url(
            self.source.owner,
            self.source.repo,
            self.source.skills_path,
            slug,
            DESCRIPTOR_FILENAME,
        )

    def fetch_skill_descriptor(self, slug: str) -> Optional[SkillRecord]:
        """Fetch and normalize one skill, or return None if it must be skipped."""
        url = self.descriptor_url(slug)
        try:
            content = self.client.fetch_text(url)
        except DescriptorFetchError as e:
            logger.warning("Skipping %s/%s: %s", self.source.full_name, slug, e)
            return None

        if content is None:
            logger.debug("No %s for %s/%s", DESCRIPTOR_FILENAME, self.source.full_name, slug)
            return None

        parsed = parse_descriptor(content)
        description = parsed.metadata.get("description", "")

        return SkillRecord(
            id=skill_id(self.source.owner, self.source.repo, slug),
            name=parsed.metadata.get("name") or slug,
            slug=slug,
            description=description,
            category=categorize(slug, description),
            platform=self.source.platform,
            platform_icon=self.source.platform_icon,
            source=self.source.full_name,
            source_url=tree_url(
                self.source.owner, self.source.repo, self.source.skills_path, slug
            ),
            skill_md_url=url,
            body=parsed.body,
        )

    def scan(self, parallel: bool = False) -> Tuple[SkillRecord, ...]:
        """Scan every skill folder of the source.

        Args:
            parallel: Fetch descriptors concurrently. Output order is the
                listing order either way.
        """
        logger.info("Fetching from %s...", self.source.full_name)
        slugs = self.list_skill_directories()

        if parallel and len(slugs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                fetched = list(executor.map(self.fetch_skill_descriptor, slugs))
        else:
            fetched = [self.fetch_skill_descriptor(slug) for slug in slugs]

        skills = tuple(skill for skill in fetched if skill is not None)
        logger.info("  Found %d skills in %s", len(skills), self.source.full_name)
        return skills
