"""Scanner for repositories that keep one skill per top-level folder.

Each folder is described by a markdown file rather than a `SKILL.md` with a
header block, so the title and description are pulled from the markdown
itself.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from ..categories import categorize
from ..config import CONTEXT_SOURCE
from ..github import GitHubClient, GitHubError, ListingError, tree_url
from ..models import SkillRecord, SourceRepository, skill_id

logger = logging.getLogger(__name__)

DESCRIPTION_PATTERN = re.compile(r"\n\n([^#\n].{10,})")
HEADING_PREFIX_PATTERN = re.compile(r"^#+\s*")

MAX_DESCRIPTION_CHARS = 200
MAX_BODY_CHARS = 2000


def _exact(filename: str):
    return lambda name: name == filename


def _is_markdown(name: str) -> bool:
    return name.endswith(".md")


# Most preferred first.
MARKDOWN_PREFERENCE = [
    _exact("README.md"),
    _exact("SKILL.md"),
    _is_markdown,
]


def select_markdown_file(entries: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Pick the best description file from a directory listing."""
    files = [
        e
        for e in entries
        if isinstance(e, dict)
        and isinstance(e.get("name"), str)
        and e.get("type") != "dir"
    ]
    for matches in MARKDOWN_PREFERENCE:
        for entry in files:
            if matches(entry["name"]):
                return entry
    return None


def extract_title(content: str, fallback: str) -> str:
    """First markdown heading with its `#` markers stripped."""
    for line in content.split("\n"):
        if line.startswith("#"):
            return HEADING_PREFIX_PATTERN.sub("", line).strip()
    return fallback


def extract_description(content: str) -> str:
    """First paragraph that follows a blank line, or "" when there is none."""
    match = DESCRIPTION_PATTERN.search(content)
    if not match:
        return ""
    return match.group(1).strip()[:MAX_DESCRIPTION_CHARS]


class ContextRepoScanner:
    """Scan a repository laid out as `<slug>/README.md` (or any `*.md`)."""

    def __init__(self, client: GitHubClient, source: SourceRepository = CONTEXT_SOURCE):
        self.client = client
        self.source = source

    def list_skill_directories(self) -> List[Dict[str, Any]]:
        entries = self.client.list_contents(
            self.source.owner, self.source.repo, self.source.skills_path
        )
        return [
            entry
            for entry in entries
            if isinstance(entry, dict)
            and entry.get("type") == "dir"
            and isinstance(entry.get("name"), str)
            and entry["name"]
            and not entry["name"].startswith(".")
        ]

    def fetch_skill(self, item: Dict[str, Any]) -> Optional[SkillRecord]:
        """Build a record for one folder.

        Raises:
            GitHubError: when the folder listing or the file download fails.
        """
        slug = item["name"]
        listing_url = item.get("url")
        if listing_url:
            dir_entries = self.client.list_url(listing_url)
        else:
            dir_entries = self.client.list_contents(
                self.source.owner,
                self.source.repo,
                "/".join(p for p in (self.source.skills_path, slug) if p),
            )

        md_file = select_markdown_file(dir_entries)
        if not md_file or not md_file.get("download_url"):
            return None

        download_url = md_file["download_url"]
        content = self.client.fetch_text(download_url)
        if content is None:
            return None
        content = content.replace("\r\n", "\n")

        title = extract_title(content, slug)
        return SkillRecord(
            id=skill_id(self.source.owner, self.source.repo, slug),
            name=title,
            slug=slug,
            description=extract_description(content),
            category=categorize(slug, title),
            platform=self.source.platform,
            platform_icon=self.source.platform_icon,
            source=self.source.full_name,
            source_url=tree_url(
                self.source.owner, self.source.repo, self.source.skills_path, slug
            ),
            skill_md_url=download_url,
            body=content[:MAX_BODY_CHARS],
        )

    def scan(self) -> Tuple[SkillRecord, ...]:
        """Scan all folders; failures never propagate."""
        logger.info("Fetching from %s...", self.source.full_name)
        try:
            items = self.list_skill_directories()
        except ListingError as e:
            logger.warning("  Failed: %s", e)
            return ()

        skills = []
        for item in items:
            try:
                skill = self.fetch_skill(item)
            except (GitHubError, KeyError, TypeError, AttributeError) as e:
                logger.debug("  Skipping %s: %s", item.get("name"), e)
                continue
            if skill is not None:
                skills.append(skill)

        logger.info("  Found %d skills in %s", len(skills), self.source.full_name)
        return tuple(skills)
