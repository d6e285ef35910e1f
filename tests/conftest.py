"""
Pytest fixtures for Issue Tracker tests.

Every test gets a fresh in-memory SQLite database and a publisher double that
records what would have gone to the broker.
"""

import os

# Must be set before core.config builds the cached settings
os.environ["ENV"] = "development"
os.environ["JWT_SECRET_KEY"] = "test-signing-secret-0123456789-abcdefghij"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AMQP_URL"] = "memory://"

import pytest  # noqa: E402
from kombu.exceptions import OperationalError  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from core import models  # noqa: F401,E402
from core.db import Base, enable_sqlite_foreign_keys  # noqa: E402
from core.schemas import IssueCreate  # noqa: E402
from core.services import IssueService  # noqa: E402


class RecordingPublisher:
    """Publisher double. Set ``fail_on`` to a routing key to simulate a broker outage."""

    def __init__(self):
        self.published: list[tuple[str, str, dict]] = []
        self.fail_on: str | None = None

    def publish(self, exchange, routing_key, payload):
        if routing_key == self.fail_on:
            raise OperationalError("broker unavailable")
        self.published.append((exchange, routing_key, dict(payload)))

    @property
    def routing_keys(self) -> list[str]:
        return [routing_key for _, routing_key, _ in self.published]


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )

    yield TestingSessionLocal, engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def issue_service(test_session, publisher):
    return IssueService(test_session, publisher)


@pytest.fixture
def sample_issue_input():
    """The issue used throughout the lifecycle scenarios."""
    return IssueCreate(title="Bug A", description="desc", project_id="P1")


@pytest.fixture
def created_issue(issue_service, publisher, sample_issue_input):
    """An issue already in the database, with the creation events cleared."""
    issue = issue_service.create(sample_issue_input)
    publisher.published.clear()
    return issue
