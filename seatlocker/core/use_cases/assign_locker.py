from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

import structlog

from seatlocker.core.entities.locker import Locker
from seatlocker.core.entities.zone import OVERFLOW_ZONE, Zone, resolve_zone
from seatlocker.core.repositories.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class LockerAssignmentError(Exception):
    """Base class for assignment failures the caller is expected to handle."""


class InvalidBlockError(LockerAssignmentError):
    """Raise to map to HTTP 422 (seat block maps to no zone)."""


class NoLockerAvailableError(LockerAssignmentError):
    """Raise to map to HTTP 409 (target and overflow zones are exhausted)."""


@dataclass(frozen=True, slots=True)
class LockerAssignmentDTO:
    """
    Use-case return type for POST /lockers/assignments
    """
    locker_id: str
    location: str
    zone: str
    status: str


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def candidate_zones(target: Zone) -> list[Zone]:
    """Zones to try, in order, for a request whose seat block resolves to `target`."""
    zones = [target]
    if target is not OVERFLOW_ZONE:
        zones.append(OVERFLOW_ZONE)
    return zones


class AssignLockerUseCase:
    """
    Claims one available locker for a user, preferring the zone of their seat block and
    falling back to the overflow zone.

    All claim attempts of one call share a single unit of work: either exactly one locker
    becomes occupied or nothing is committed. Calls are not deduplicated per user; a repeated
    call claims another locker.
    """

    def __init__(
            self,
            *,
            uow_factory: Callable[[], UnitOfWork],
            clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock

    def execute(self, *, seat_block: Any, user_id: str) -> LockerAssignmentDTO:
        target = resolve_zone(seat_block)
        if target is None:
            logger.warning("invalid_seat_block", seat_block=seat_block, user_id=user_id)
            raise InvalidBlockError(f"Seat block does not map to any zone: {seat_block!r}")

        zones = candidate_zones(target)
        with self._uow_factory() as uow:
            locker = self._claim_first_available(uow, zones, seat_block=str(seat_block), user_id=user_id)
            if locker is None:
                logger.warning("locker_unavailable", seat_block=seat_block, target_zone=target.value)
                raise NoLockerAvailableError(
                    "No locker available in " + ", ".join(zone.value for zone in zones)
                )
            uow.commit()

        logger.info(
            "locker_assigned",
            locker_id=locker.public_id,
            zone=locker.zone.value,
            target_zone=target.value,
            user_id=user_id,
        )
        return LockerAssignmentDTO(
            locker_id=locker.public_id,
            location=locker.display_location,
            zone=locker.zone.value,
            status=locker.status.value,
        )

    def _claim_first_available(
            self,
            uow: UnitOfWork,
            zones: list[Zone],
            *,
            seat_block: str,
            user_id: str,
    ) -> Locker | None:
        now = self._clock()
        for attempt, zone in enumerate(zones):
            if attempt:
                logger.info("locker_fallback", from_zone=zones[attempt - 1].value, to_zone=zone.value)
            locker = uow.lockers.claim_available(zone, user_id=user_id, seat_block=seat_block, at=now)
            if locker is not None:
                return locker
        return None
