"""
Repository pattern implementations for data access.

Usage:
    from core.repositories import IssueRepository
    from core.db import db

    with db.session() as session:
        repo = IssueRepository(session)
        issues = repo.list_for_project("P1")
"""

from .base import BaseRepository
from .comment_repository import CommentRepository
from .issue_repository import IssueRepository

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "IssueRepository",
]
