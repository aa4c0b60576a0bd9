from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from seatlocker.core.use_cases.assign_locker import InvalidBlockError, NoLockerAvailableError
from seatlocker.infrastructure.database import SessionLocal
from seatlocker.infrastructure.logging import get_logger
from seatlocker.schemas.models import LockerAssignment, LockerAssignmentRequest
from seatlocker.services.locker_service import assign_locker_service

logger = get_logger(__name__)
router = APIRouter()


def get_session_factory() -> sessionmaker:
    return SessionLocal


@router.post("/lockers/assignments", response_model=LockerAssignment, status_code=201)
def post_lockers_assignments(
    body: LockerAssignmentRequest,
    session_factory: sessionmaker = Depends(get_session_factory),
) -> LockerAssignment:
    """
    Assign a locker to a user based on their seat block

    Returns:
      - 201 with the assigned locker
      - 409 when neither the seat block's zone nor the overflow zone has a free locker
      - 422 when the seat block maps to no zone
      - 503 when the locker store fails
    """
    try:
        return assign_locker_service(body.seat_block, body.user_id, session_factory)
    except InvalidBlockError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except NoLockerAvailableError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except SQLAlchemyError:
        logger.exception("locker_store_fault", seat_block=body.seat_block, user_id=body.user_id)
        raise HTTPException(status_code=503, detail="Locker store unavailable")
