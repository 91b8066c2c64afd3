from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone

from sqlalchemy import DateTime, event
from sqlalchemy.orm import DeclarativeBase, Mapped, MappedAsDataclass, mapped_column

_ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 32
ID_PATTERN = rf"^[a-z0-9]{{{ID_LENGTH}}}$"


def generate_id() -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(MappedAsDataclass, DeclarativeBase):
    pass


class RecordBase(Base):
    """Server-assigned id plus creation/modification timestamps.

    Ids are never supplied by clients; every resource table derives from
    this base.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        primary_key=True,
        init=False,
        default_factory=generate_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        init=False,
        default_factory=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        init=False,
        default_factory=utcnow,
    )


@event.listens_for(RecordBase, "before_update", propagate=True)
def _touch_updated_at(mapper, connection, target) -> None:
    target.updated_at = utcnow()
