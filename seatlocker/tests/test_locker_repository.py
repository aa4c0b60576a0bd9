from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql, sqlite

from seatlocker.core.entities.locker import LockerStatus
from seatlocker.core.entities.zone import Zone
from seatlocker.infrastructure.repositories.locker_repository_impl import build_claim_statement
from seatlocker.infrastructure.unit_of_work import SqlAlchemyUnitOfWork

NOW = datetime(2026, 5, 1, 18, 30, tzinfo=timezone.utc)


def _claim(uow, zone: Zone, user_id: str = "u-1"):
    return uow.lockers.claim_available(zone, user_id=user_id, seat_block="105", at=NOW)


def test_claim_returns_none_for_empty_zone(session_factory, add_lockers) -> None:
    add_lockers(Zone.ZONE_B)

    with SqlAlchemyUnitOfWork(session_factory) as uow:
        assert _claim(uow, Zone.ZONE_A) is None


def test_claim_skips_occupied_lockers(session_factory, add_lockers) -> None:
    add_lockers(Zone.ZONE_A, 2, status=LockerStatus.OCCUPIED, user_id="other", seat_block="101")
    [free_pk] = add_lockers(Zone.ZONE_A)

    with SqlAlchemyUnitOfWork(session_factory) as uow:
        locker = _claim(uow, Zone.ZONE_A)
        uow.commit()

    assert locker.id == free_pk
    assert locker.status is LockerStatus.OCCUPIED
    assert locker.user_id == "u-1"


def test_claims_in_one_transaction_take_distinct_lockers(session_factory, add_lockers) -> None:
    add_lockers(Zone.ZONE_A, 2)

    with SqlAlchemyUnitOfWork(session_factory) as uow:
        first = _claim(uow, Zone.ZONE_A, "u-1")
        second = _claim(uow, Zone.ZONE_A, "u-2")
        third = _claim(uow, Zone.ZONE_A, "u-3")

    assert first.id != second.id
    assert third is None


def test_uncommitted_claim_is_rolled_back(session_factory, add_lockers) -> None:
    [locker_pk] = add_lockers(Zone.ZONE_A)

    with SqlAlchemyUnitOfWork(session_factory) as uow:
        assert _claim(uow, Zone.ZONE_A) is not None

    with SqlAlchemyUnitOfWork(session_factory) as uow:
        assert uow.lockers.get(locker_pk).status is LockerStatus.AVAILABLE


def test_get_unknown_locker_returns_none(session_factory) -> None:
    with SqlAlchemyUnitOfWork(session_factory) as uow:
        assert uow.lockers.get(12345) is None


def test_claim_statement_skips_locked_rows_on_postgresql() -> None:
    stmt = build_claim_statement(Zone.ZONE_A, user_id="u", seat_block="105", at=NOW)

    sql = str(stmt.compile(dialect=postgresql.dialect()))

    assert sql.startswith("UPDATE lockers SET")
    assert "FOR UPDATE SKIP LOCKED" in sql
    assert "LIMIT" in sql
    assert "RETURNING" in sql


def test_claim_statement_is_a_single_update_on_sqlite() -> None:
    stmt = build_claim_statement(Zone.ZONE_A, user_id="u", seat_block="105", at=NOW)

    sql = str(stmt.compile(dialect=sqlite.dialect()))

    assert sql.startswith("UPDATE lockers SET")
    assert "FROM lockers AS pool" in sql
    assert "FOR UPDATE" not in sql
    assert "RETURNING" in sql
