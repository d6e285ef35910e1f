"""
Pydantic schemas for API responses.

Request bodies are validated with the DTOs in ``core.schemas``.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from core.schemas import CamelModel


class TokenClaims(BaseModel):
    """Identity extracted from a verified access token."""

    sub: str
    username: str | None = None


class CommentResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    content: str
    issue_id: str
    created_at: datetime | None = None


class IssueResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None = None
    status: str
    project_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IssueWithCommentsResponse(IssueResponse):
    comments: list[CommentResponse] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
