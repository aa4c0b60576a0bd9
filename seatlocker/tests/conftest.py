from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from seatlocker.core.entities.locker import LockerStatus
from seatlocker.core.entities.zone import Zone
from seatlocker.infrastructure.database import Base, build_engine
from seatlocker.infrastructure.models.models import LockerModel


@pytest.fixture()
def session_factory(tmp_path: Path) -> Iterator[sessionmaker]:
    """
    File-backed SQLite per test so that several connections (threads) can share the data.
    """
    engine = build_engine(f"sqlite+pysqlite:///{tmp_path / 'lockers.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture()
def add_lockers(session_factory: sessionmaker) -> Callable[..., list[int]]:
    """Provision `count` lockers in `zone` directly through the ORM and return their ids."""

    def _add(zone: Zone, count: int = 1, *, status: LockerStatus = LockerStatus.AVAILABLE, **fields) -> list[int]:
        with session_factory() as db:
            rows = [LockerModel(zone=zone, status=status, **fields) for _ in range(count)]
            db.add_all(rows)
            db.commit()
            return [row.id for row in rows]

    return _add


@pytest.fixture()
def locker_rows(session_factory: sessionmaker) -> Callable[[], dict[int, tuple]]:
    """Snapshot of every locker as id -> (zone, status, user_id, seat_block)."""

    def _snapshot() -> dict[int, tuple]:
        with session_factory() as db:
            rows = db.execute(select(LockerModel)).scalars().all()
            return {r.id: (r.zone, r.status, r.user_id, r.seat_block) for r in rows}

    return _snapshot
