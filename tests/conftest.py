"""Shared test fixtures."""

from datetime import datetime

import httpx
import pytest
import sqlalchemy as sa
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

import feedback_console.models  # noqa: F401  (registers every table)
from feedback_console.db.base import Base
from feedback_console.models.feedback import UserFeedback
from feedback_console.models.recommender import Recommender


@pytest.fixture(scope="session", autouse=True)
def set_test_env(monkeypatch_session):
    """Set test environment variables before any tests run."""
    monkeypatch_session.setenv("FEEDBACK_CONSOLE_DATABASE_URL", "sqlite:///:memory:")
    from feedback_console.core.config import get_settings
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def monkeypatch_session():
    """Session-scoped monkeypatch for environment setup."""
    from _pytest.monkeypatch import MonkeyPatch
    mp = MonkeyPatch()
    yield mp
    mp.undo()


@pytest.fixture
def db_engine():
    """Create in-memory SQLite engine for test isolation."""
    engine = sa.create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=sa.pool.StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Session:
    session = Session(db_engine)
    yield session
    session.close()


@pytest.fixture
def app(db_engine, db_session: Session) -> FastAPI:
    """Create test app with overridden database dependency.

    The console pages talk to this same app in-process through
    ``httpx.ASGITransport``, so console tests exercise the real REST API.
    """
    from sqlalchemy.orm import sessionmaker

    from feedback_console.app import create_app
    from feedback_console.console.resources import build_pages
    from feedback_console.db.session import get_db

    app = create_app()

    app.state.db_engine = db_engine
    app.state.db_session_factory = sessionmaker(bind=db_engine)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    console_client = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    )
    app.state.console_pages = build_pages(console_client)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def api_client(app: FastAPI):
    """Async client bound to the app, for service-level tests."""
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    )


def _set_timestamps(db_session: Session, model, record, created_at, updated_at) -> None:
    updates = {}
    if created_at is not None:
        updates["created_at"] = created_at
    if updated_at is not None:
        updates["updated_at"] = updated_at
    if updates:
        db_session.execute(sa.update(model).where(model.id == record.id).values(**updates))


@pytest.fixture
def feedback_factory(db_session: Session):
    """Factory fixture for persisting feedback records.

    Usage:
        def test_something(feedback_factory):
            record = feedback_factory(feedback="Great", rating=5)
    """

    def _create_feedback(
        feedback: str = "Helpful suggestions",
        rating: int = 4,
        email: str | None = None,
        user_id: str | None = None,
        submitted_by: str | None = None,
        is_resolved: bool = False,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> UserFeedback:
        record = UserFeedback(
            feedback=feedback,
            rating=rating,
            email=email,
            user_id=user_id,
            submitted_by=submitted_by,
            is_resolved=is_resolved,
        )
        db_session.add(record)
        db_session.flush()
        _set_timestamps(db_session, UserFeedback, record, created_at, updated_at)
        db_session.commit()
        db_session.refresh(record)
        return record

    return _create_feedback


@pytest.fixture
def recommender_factory(db_session: Session):
    def _create_recommender(
        name: str = "follow-up",
        description: str | None = None,
        model_version: str | None = None,
        is_active: bool = True,
        created_at: datetime | None = None,
    ) -> Recommender:
        record = Recommender(
            name=name,
            description=description,
            model_version=model_version,
            is_active=is_active,
        )
        db_session.add(record)
        db_session.flush()
        _set_timestamps(db_session, Recommender, record, created_at, None)
        db_session.commit()
        db_session.refresh(record)
        return record

    return _create_recommender
