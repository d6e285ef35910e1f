"""Base repository class with common CRUD operations."""

from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from core.db import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Usage:
        class IssueRepository(BaseRepository[Issue]):
            model = Issue

        repo = IssueRepository(session)
        issue = repo.get_by_id(issue_id)
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, id: str, refresh: bool = False) -> T | None:
        """Get a single record by ID. ``refresh`` bypasses the identity map."""
        return self.session.get(self.model, id, populate_existing=refresh)

    def get_all(self) -> list[T]:
        """Get all records."""
        return self.session.query(self.model).all()

    def create(self, **kwargs) -> T:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        self.session.flush()
        return instance

    def update(self, id: str, **kwargs) -> int:
        """
        Update columns of a record in place.

        Returns:
            Number of affected rows (0 when the record does not exist).
        """
        for key in kwargs:
            if not hasattr(self.model, key):
                raise ValueError(f"Unknown column: {key}")
        if not kwargs:
            return 0
        result = (
            self.session.query(self.model)
            .filter(self.model.id == id)  # type: ignore[attr-defined]
            .update(kwargs, synchronize_session="fetch")  # type: ignore[arg-type]
        )
        self.session.flush()
        return result

    def delete(self, id: str) -> int:
        """
        Delete a record by ID.

        Returns:
            Number of affected rows.
        """
        result = (
            self.session.query(self.model)
            .filter(self.model.id == id)  # type: ignore[attr-defined]
            .delete(synchronize_session="fetch")
        )
        self.session.flush()
        return result
