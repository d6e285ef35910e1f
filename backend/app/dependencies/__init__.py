"""
FastAPI dependency injection module.

Provides:
- The process-wide event publisher opened in the application lifespan
- A per-request IssueService bound to the request's database session
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from core.db import get_db
from core.messaging import Publisher
from core.services import IssueService


def get_publisher(request: Request) -> Publisher:
    """Get the event publisher stored on the application state."""
    publisher = getattr(request.app.state, "publisher", None)
    if publisher is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Event publisher not available",
        )
    return publisher


def get_issue_service(
    db: Session = Depends(get_db),
    publisher: Publisher = Depends(get_publisher),
) -> IssueService:
    """Get IssueService instance with injected session and publisher."""
    return IssueService(db, publisher)


__all__ = [
    "get_publisher",
    "get_issue_service",
]
