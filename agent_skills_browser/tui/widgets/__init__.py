"""TUI widgets for the skills browser."""

from .detail_view import DetailView
from .search_bar import SearchBar
from .skill_list import SkillList

__all__ = ["DetailView", "SearchBar", "SkillList"]
