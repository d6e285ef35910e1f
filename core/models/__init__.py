"""
SQLAlchemy models for the Issue Tracker.

Usage:
    from core.models import Issue, Comment
"""

from core.db import Base
from .issue import DEFAULT_ISSUE_STATUS, Comment, Issue

__all__ = [
    "Base",
    "Issue",
    "Comment",
    "DEFAULT_ISSUE_STATUS",
]
