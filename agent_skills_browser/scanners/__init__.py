"""Source scanners for the skills catalog"""

from .context import ContextRepoScanner
from .skills import ParsedDescriptor, SkillRepoScanner, parse_descriptor

__all__ = [
    "ContextRepoScanner",
    "ParsedDescriptor",
    "SkillRepoScanner",
    "parse_descriptor",
]
