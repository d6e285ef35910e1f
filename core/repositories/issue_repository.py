"""Issue repository."""

from sqlalchemy.orm import selectinload

from core.models import Issue

from .base import BaseRepository


class IssueRepository(BaseRepository[Issue]):
    """Repository for Issue operations."""

    model = Issue

    def list_for_project(self, project_id: str) -> list[Issue]:
        """All issues whose project id matches exactly."""
        return self.session.query(Issue).filter(Issue.project_id == project_id).all()

    def get_with_comments(self, issue_id: str) -> Issue | None:
        """Get an issue with its comments relation loaded."""
        return (
            self.session.query(Issue)
            .options(selectinload(Issue.comments))
            .populate_existing()
            .filter(Issue.id == issue_id)
            .first()
        )
