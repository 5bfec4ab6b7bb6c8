"""Keyword heuristics that assign each skill one category label."""

import re
from typing import List, Tuple

DEFAULT_CATEGORY = "General"

# Evaluated top to bottom; the first matching rule wins.
CATEGORY_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"debug|test|verify|review|lint", re.IGNORECASE), "Quality"),
    (re.compile(r"git|branch|commit|worktree|pr", re.IGNORECASE), "Git & Workflow"),
    (re.compile(r"plan|design|brainstorm|spec", re.IGNORECASE), "Planning"),
    (re.compile(r"deploy|ci|cd|docker|hosting", re.IGNORECASE), "DevOps"),
    (re.compile(r"data|model|train|evaluat|dataset", re.IGNORECASE), "ML & Data"),
    (re.compile(r"cli|tool|hub|upload|download|cache", re.IGNORECASE), "Tools"),
    (re.compile(r"agent|subagent|dispatch|parallel", re.IGNORECASE), "Agents"),
    (re.compile(r"code|develop|implement|build|scaffold", re.IGNORECASE), "Development"),
]

CATEGORIES: Tuple[str, ...] = tuple(label for _, label in CATEGORY_RULES) + (
    DEFAULT_CATEGORY,
)


def categorize(name: str, description: str = "") -> str:
    """Return the category label for a skill.

    Args:
        name: Skill name or directory slug.
        description: Free-text description (may be empty).

    Returns:
        The label of the first rule whose pattern matches
        ``"{name} {description}"``, or ``"General"``.
    """
    text = f"{name or ''} {description or ''}"
    for pattern, label in CATEGORY_RULES:
        if pattern.search(text):
            return label
    return DEFAULT_CATEGORY
