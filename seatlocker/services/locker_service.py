from __future__ import annotations

from typing import Any

from sqlalchemy.orm import sessionmaker

from seatlocker.core.use_cases.assign_locker import AssignLockerUseCase
from seatlocker.infrastructure.database import SessionLocal
from seatlocker.infrastructure.unit_of_work import SqlAlchemyUnitOfWork
from seatlocker.schemas.models import LockerAssignment, Status


def assign_locker_service(seat_block: Any, user_id: str, session_factory: sessionmaker = SessionLocal) -> LockerAssignment:
    """
    Claim a locker for `user_id` near `seat_block` in its own transaction.

    Raises InvalidBlockError / NoLockerAvailableError from the use case; store errors propagate.
    """
    use_case = AssignLockerUseCase(uow_factory=lambda: SqlAlchemyUnitOfWork(session_factory))

    dto = use_case.execute(seat_block=seat_block, user_id=user_id)

    return LockerAssignment(
        locker_id=dto.locker_id,
        location=dto.location,
        zone=dto.zone,
        status=Status(dto.status),
    )
