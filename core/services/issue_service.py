"""
Issue lifecycle service.

Owns every issue and comment mutation and the events that accompany them.
Each mutation is committed before its events are published, so a broker
failure leaves the stored change in place and surfaces to the caller as-is.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.enums import FIELD_UPDATE_SCOPES, UpdateScope
from core.exceptions import NotFoundError, PersistenceError
from core.logging import get_logger
from core.messaging import Publisher, events
from core.models import Comment, Issue
from core.repositories import CommentRepository, IssueRepository
from core.schemas import CommentCreate, IssueCreate, IssueUpdate

logger = get_logger("services.issue")

ISSUE_NOT_FOUND = "Issue not found"


def compute_update_scopes(fields: Mapping[str, Any]) -> list[UpdateScope]:
    """
    Scopes for the keys present in an update, whatever their values.

    A status update that repeats the current status still reports STATUS.
    """
    return [scope for field, scope in FIELD_UPDATE_SCOPES if field in fields]


class IssueService:
    """
    Service for issue and comment operations.

    Usage:
        service = IssueService(session, publisher)
        issue = service.create(IssueCreate(title="Bug A", project_id="P1"))
    """

    def __init__(self, session: Session, publisher: Publisher):
        self.session = session
        self.publisher = publisher
        self.issues = IssueRepository(session)
        self.comments = CommentRepository(session)

    # =========================================================================
    # Issues
    # =========================================================================

    def create(self, issue_input: IssueCreate) -> Issue:
        """Persist a new issue and announce it on both exchanges."""
        # Explicit nulls are treated as absent, in the row and in the event alike
        fields = issue_input.model_dump(exclude_unset=True, exclude_none=True)

        try:
            issue = self.issues.create(**fields)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("issue_save_failed", error=str(e), error_type=type(e).__name__)
            raise PersistenceError("Could not save issue") from e

        logger.info("issue_created", issue_id=issue.id, project_id=issue.project_id)

        self.publisher.publish(
            events.DIRECT_EXCHANGE,
            events.ISSUE_CREATED,
            events.issue_reference(issue.id),
        )
        self.publisher.publish(
            events.NEWS_EXCHANGE,
            events.NEWS_ISSUE_CREATE,
            events.issue_created(
                issue_input.model_dump(by_alias=True, exclude_unset=True, exclude_none=True), issue.id
            ),
        )
        return issue

    def find_all(self) -> list[Issue]:
        return self.issues.get_all()

    def find_all_for_project(self, project_id: str) -> list[Issue]:
        return self.issues.list_for_project(project_id)

    def find_one(self, issue_id: str) -> Issue:
        issue = self.issues.get_by_id(issue_id)
        if issue is None:
            raise NotFoundError(ISSUE_NOT_FOUND)
        return issue

    def update(self, issue_id: str, changes: IssueUpdate) -> Issue:
        """
        Apply the fields present in ``changes`` and publish a news update.

        Scopes come from which keys were sent, not from which values changed.
        """
        fields = changes.present_fields()

        self.issues.update(issue_id, **fields)
        self.session.commit()

        issue = self.issues.get_by_id(issue_id, refresh=True)
        if issue is None:
            raise NotFoundError(ISSUE_NOT_FOUND)

        scopes = compute_update_scopes(fields)
        logger.info(
            "issue_updated",
            issue_id=issue.id,
            scopes=[scope.value for scope in scopes],
        )

        self.publisher.publish(
            events.NEWS_EXCHANGE,
            events.NEWS_ISSUE_UPDATE,
            events.issue_updated(
                changes.model_dump(by_alias=True, exclude_unset=True),
                issue.project_id,
                issue.id,
                scopes,
            ),
        )
        return issue

    def remove(self, issue_id: str) -> None:
        """Delete an issue, then publish the direct notice and the news snapshot."""
        issue = self.find_one(issue_id)
        # Captured before the row (and the loaded instance) go away
        snapshot = events.issue_deleted(
            issue.title, issue.description, issue.project_id, issue.id
        )

        affected = self.issues.delete(issue_id)
        if not affected:
            raise NotFoundError(ISSUE_NOT_FOUND)
        self.session.commit()

        logger.info("issue_deleted", issue_id=issue_id, project_id=snapshot["projectId"])

        self.publisher.publish(
            events.DIRECT_EXCHANGE,
            events.ISSUE_DELETED,
            events.issue_reference(issue_id),
        )
        self.publisher.publish(events.NEWS_EXCHANGE, events.NEWS_ISSUE_DELETE, snapshot)

    # =========================================================================
    # Comments
    # =========================================================================

    def add_comment(self, issue_id: str, comment_input: CommentCreate) -> Comment:
        """Attach a comment to an existing issue and publish a COMMENT-scoped update."""
        issue = self.find_one(issue_id)

        comment = self.comments.create(issue=issue, **comment_input.model_dump())
        self.session.commit()

        logger.info("comment_added", issue_id=issue.id, comment_id=comment.id)

        self.publisher.publish(
            events.NEWS_EXCHANGE,
            events.NEWS_ISSUE_UPDATE,
            events.comment_added(
                comment_input.model_dump(by_alias=True), issue.id, issue.project_id
            ),
        )
        return comment

    def find_all_comments_for_issue(self, issue_id: str) -> Issue:
        issue = self.issues.get_with_comments(issue_id)
        if issue is None:
            raise NotFoundError(ISSUE_NOT_FOUND)
        return issue

    def find_all_comments(self) -> list[Comment]:
        return self.comments.get_all()


__all__ = ["IssueService", "compute_update_scopes"]
