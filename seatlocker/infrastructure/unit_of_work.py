from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from seatlocker.core.repositories.unit_of_work import UnitOfWork
from seatlocker.infrastructure.database import SessionLocal
from seatlocker.infrastructure.repositories.locker_repository_impl import LockerRepositoryImpl


class SqlAlchemyUnitOfWork(UnitOfWork):
    """One Session per `with` block; the transaction begins on the first statement."""

    def __init__(self, session_factory: sessionmaker = SessionLocal) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.lockers = LockerRepositoryImpl(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._session.close()
            self._session = None

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
