from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from sqlalchemy import Update, select, update
from sqlalchemy.orm import Session

from seatlocker.core.entities.locker import Locker, LockerStatus
from seatlocker.core.entities.zone import Zone
from seatlocker.core.repositories.locker_repository import LockerRepository
from seatlocker.infrastructure.models.models import LockerModel

lockers = LockerModel.__table__


def build_claim_statement(zone: Zone, *, user_id: str, seat_block: str, at: datetime) -> Update:
    """
    UPDATE ... RETURNING that occupies one available locker of `zone`.

    The target row comes from a LIMIT 1 subquery; the outer status predicate re-checks
    availability on the row actually written. On backends with row locks the subquery skips rows
    another transaction is already claiming (SQLite renders no FOR UPDATE clause).
    """
    # aliased so the subquery is not correlated to the UPDATE target
    pool = lockers.alias("pool")
    candidate = (
        select(pool.c.id)
        .where(pool.c.zone == zone, pool.c.status == LockerStatus.AVAILABLE)
        .limit(1)
        .with_for_update(skip_locked=True)
        .scalar_subquery()
    )
    return (
        update(lockers)
        .where(lockers.c.id == candidate, lockers.c.status == LockerStatus.AVAILABLE)
        .values(
            status=LockerStatus.OCCUPIED,
            user_id=user_id,
            seat_block=seat_block,
            assigned_at=at,
            updated_at=at,
        )
        .returning(*lockers.c)
    )


class LockerRepositoryImpl(LockerRepository):
    """Simple SQLAlchemy implementation for Locker."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def get(self, pk: int) -> Locker | None:
        row = self._db.execute(select(lockers).where(lockers.c.id == pk)).mappings().one_or_none()
        if row is None:
            return None
        return self._to_entity(row)

    def claim_available(self, zone: Zone, *, user_id: str, seat_block: str, at: datetime) -> Locker | None:
        stmt = build_claim_statement(zone, user_id=user_id, seat_block=seat_block, at=at)
        row = self._db.execute(stmt).mappings().one_or_none()
        if row is None:
            return None
        return self._to_entity(row)

    @staticmethod
    def _to_entity(row: Mapping[str, Any]) -> Locker:
        return Locker(
            id=row["id"],
            zone=Zone(row["zone"]),
            status=LockerStatus(row["status"]),
            locker_id=row["locker_id"],
            location=row["location"],
            user_id=row["user_id"],
            seat_block=row["seat_block"],
            assigned_at=row["assigned_at"],
            updated_at=row["updated_at"],
        )
