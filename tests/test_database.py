"""
Tests for the DatabaseManager singleton.
"""

import pytest
from sqlalchemy import text

from core.db import Base, DatabaseManager, db
from core.models import Comment, Issue


@pytest.fixture
def manager():
    db.reset()
    db.initialize("sqlite://")
    Base.metadata.create_all(bind=db.engine)
    yield db
    db.reset()


class TestDatabaseManager:
    """Tests for session handling and health checks."""

    def test_is_a_singleton(self):
        assert DatabaseManager() is db

    def test_health_check_before_initialize(self):
        db.reset()

        result = db.health_check()

        assert result["healthy"] is False
        assert result["error"] == "Database not initialized"

    def test_session_requires_initialize(self):
        db.reset()

        with pytest.raises(RuntimeError, match="not initialized"):
            with db.session():
                pass

    def test_health_check(self, manager):
        result = manager.health_check()

        assert result["healthy"] is True
        assert result["error"] is None

    def test_session_commits_on_success(self, manager):
        with manager.session() as session:
            session.add(Issue(title="Bug A", project_id="P1"))

        with manager.session() as session:
            assert session.query(Issue).count() == 1

    def test_session_rolls_back_on_error(self, manager):
        with pytest.raises(RuntimeError):
            with manager.session() as session:
                session.add(Issue(title="Bug A", project_id="P1"))
                session.flush()
                raise RuntimeError("boom")

        with manager.session() as session:
            assert session.query(Issue).count() == 0

    def test_sqlite_enforces_cascade(self, manager):
        with manager.session() as session:
            issue = Issue(title="Bug A", project_id="P1")
            session.add(issue)
            session.flush()
            session.add(Comment(issue_id=issue.id, content="first"))
            issue_id = issue.id

        with manager.session() as session:
            session.execute(text("DELETE FROM issues WHERE id = :id"), {"id": issue_id})

        with manager.session() as session:
            assert session.query(Comment).count() == 0
