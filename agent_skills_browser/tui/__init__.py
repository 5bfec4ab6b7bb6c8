"""Terminal browser for the skills catalog."""

from .app import SkillsBrowserTUI

__all__ = ["SkillsBrowserTUI"]
