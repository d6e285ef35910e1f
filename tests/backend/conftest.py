import os
import sys
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.orm import Session, sessionmaker

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from backend.app.dependencies import get_publisher  # noqa: E402
from backend.app.main import create_app  # noqa: E402
from core.config import get_settings  # noqa: E402
from core.db import get_db  # noqa: E402


def make_token(sub: str | None = "user-1", expires_in: timedelta = timedelta(minutes=15), **claims) -> str:
    """Sign a token the way the issuing service would."""
    settings = get_settings()
    payload = {"exp": datetime.now(timezone.utc) + expires_in, **claims}
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


@pytest.fixture
def test_app_client(test_db, publisher) -> Iterator[tuple[TestClient, sessionmaker]]:
    TestingSessionLocal, engine = test_db

    app = create_app()

    def override_get_db() -> Iterator[Session]:
        db = TestingSessionLocal()
        try:
            yield db
            db.commit()  # Auto-commit on success like production
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_publisher] = lambda: publisher

    with TestClient(app) as client:
        yield client, TestingSessionLocal


@pytest.fixture
def authorized_client(test_app_client) -> Iterator[tuple[TestClient, sessionmaker]]:
    client, TestingSessionLocal = test_app_client
    client.headers["Authorization"] = f"Bearer {make_token(username='tester')}"

    yield client, TestingSessionLocal

    client.headers.pop("Authorization", None)


@pytest.fixture
def token_factory():
    return make_token
