from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from seatlocker.core.entities.zone import Zone


class LockerStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"


@dataclass(slots=True)
class Locker:
    id: int
    zone: Zone
    status: LockerStatus
    locker_id: str | None = None
    location: str | None = None
    user_id: str | None = None
    seat_block: str | None = None
    assigned_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def public_id(self) -> str:
        """Domain locker code when provisioned with one, the store id otherwise."""
        return self.locker_id or str(self.id)

    @property
    def display_location(self) -> str:
        return self.location or f"{self.zone.value} locker area"
