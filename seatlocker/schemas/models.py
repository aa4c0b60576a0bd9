from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Zone(Enum):
    Zone_A = 'Zone_A'
    Zone_B = 'Zone_B'
    Zone_C = 'Zone_C'


class Status(Enum):
    available = 'available'
    occupied = 'occupied'


class LockerAssignmentRequest(BaseModel):
    seat_block: str | int
    user_id: str


class LockerAssignment(BaseModel):
    locker_id: str
    location: str
    zone: Zone
    status: Status
