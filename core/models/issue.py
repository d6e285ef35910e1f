"""
Issue and comment SQLAlchemy models.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db import Base

DEFAULT_ISSUE_STATUS = "OPEN"


def generate_id() -> str:
    return str(uuid.uuid4())


class Issue(Base):
    """
    A tracked issue belonging to a project.

    The project itself lives in another service; only its identifier is
    stored here and matched by exact string equality.
    """
    __tablename__ = "issues"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(64), default=DEFAULT_ISSUE_STATUS)
    project_id: Mapped[str] = mapped_column(String(255), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Comment rows are removed by the database (ON DELETE CASCADE)
    comments: Mapped[List["Comment"]] = relationship(
        "Comment",
        back_populates="issue",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Comment.created_at",
    )

    def __repr__(self) -> str:
        return f"<Issue {self.id} project={self.project_id!r} title={self.title!r}>"


class Comment(Base):
    """A comment attached to exactly one issue."""
    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    issue_id: Mapped[str] = mapped_column(
        ForeignKey("issues.id", ondelete="CASCADE"), index=True
    )
    content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    issue: Mapped[Issue] = relationship("Issue", back_populates="comments")

    def __repr__(self) -> str:
        return f"<Comment {self.id} issue={self.issue_id}>"
