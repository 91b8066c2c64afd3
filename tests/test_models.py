import re
import time
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.orm import Session

from feedback_console.db.base import Base
from feedback_console.models.feedback import UserFeedback
from feedback_console.models.recommender import Recommender


def setup_in_memory_db() -> Session:
    engine = sa.create_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(engine)
    return Session(engine)


def test_feedback_id_generated_and_format() -> None:
    session = setup_in_memory_db()

    record = UserFeedback(feedback="Nice", rating=5)
    session.add(record)
    session.commit()
    session.refresh(record)

    assert isinstance(record.id, str)
    assert re.fullmatch(r"[a-z0-9]{32}", record.id)


def test_feedback_defaults() -> None:
    session = setup_in_memory_db()

    record = UserFeedback(feedback="Nice", rating=5)
    session.add(record)
    session.commit()
    session.refresh(record)

    assert record.is_resolved is False
    assert record.email is None
    assert record.submitted_by is None


def test_recommender_timestamps_create_and_update() -> None:
    session = setup_in_memory_db()

    before_create = datetime.now(timezone.utc).replace(tzinfo=None)
    record = Recommender(name="follow-up")
    session.add(record)
    session.commit()
    session.refresh(record)
    after_create = datetime.now(timezone.utc).replace(tzinfo=None)

    # SQLite doesn't preserve timezone, so compare naive values
    assert before_create <= record.created_at <= after_create
    assert before_create <= record.updated_at <= after_create
    assert record.is_active is True

    original_updated = record.updated_at

    time.sleep(0.01)
    record.model_version = "v2"
    session.add(record)
    session.commit()
    session.refresh(record)

    assert record.updated_at > original_updated
    assert record.created_at <= original_updated


def test_ids_are_unique() -> None:
    session = setup_in_memory_db()

    records = [Recommender(name=f"r-{i}") for i in range(20)]
    session.add_all(records)
    session.commit()

    assert len({record.id for record in records}) == 20
