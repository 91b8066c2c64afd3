from __future__ import annotations

import logging
from collections.abc import Generator
from typing import TYPE_CHECKING

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from feedback_console.core.config import get_settings
from feedback_console.db.base import Base

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)


def init_db(app: FastAPI) -> None:
    """Create the engine and session factory and store them on ``app.state``.

    Missing tables are created so a fresh SQLite file is usable right away.
    Called from the lifespan startup.
    """
    # Register every model on Base.metadata before create_all
    import feedback_console.models  # noqa: F401

    settings = get_settings()
    engine = create_engine(settings.database_url)
    Base.metadata.create_all(engine)
    session_factory = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    app.state.db_engine = engine
    app.state.db_session_factory = session_factory
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))


def close_db(app: FastAPI) -> None:
    """Dispose the engine at shutdown."""
    if hasattr(app.state, "db_engine"):
        app.state.db_engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield one session per request, rolled back if the handler raises."""
    session_factory: sessionmaker = request.app.state.db_session_factory
    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
