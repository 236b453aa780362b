"""
Operation handlers.

Each handler takes the adapter plus the operation's typed request and returns
the adapter's result unchanged.
"""

from .cycles import get_cycles
from .issues import create_issue, search_issues, update_issue
from .projects import get_projects
from .teams import get_teams

__all__ = [
    "get_teams",
    "search_issues",
    "get_cycles",
    "get_projects",
    "create_issue",
    "update_issue",
]
