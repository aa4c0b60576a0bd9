from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from seatlocker.core.entities.locker import Locker
from seatlocker.core.entities.zone import Zone


class LockerRepository(ABC):
    @abstractmethod
    def get(self, pk: int) -> Locker | None:
        raise NotImplementedError

    @abstractmethod
    def claim_available(self, zone: Zone, *, user_id: str, seat_block: str, at: datetime) -> Locker | None:
        """
        Atomically pick one available locker in `zone`, mark it occupied by `user_id` and return
        the updated record. Returns None when the zone has no available locker.

        Match and update must be a single indivisible store operation: two concurrent callers
        never get the same locker back.
        """
        raise NotImplementedError
