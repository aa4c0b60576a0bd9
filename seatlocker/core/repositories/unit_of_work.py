from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from seatlocker.core.repositories.locker_repository import LockerRepository

logger = structlog.get_logger(__name__)


class UnitOfWork(ABC):
    """
    Transaction scope around one or more repository operations.

    Usage::

        with uow:
            uow.lockers.claim_available(...)
            uow.commit()

    Leaving the block without commit() rolls everything back; the underlying session is
    released on every exit path. When the block is already failing, a rollback error is
    logged and the original exception keeps propagating.
    """

    lockers: LockerRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        except Exception:
            if exc is None:
                raise
            logger.warning("rollback_failed", original_error=repr(exc), exc_info=True)

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError
