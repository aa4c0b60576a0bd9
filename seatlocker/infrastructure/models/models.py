from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from seatlocker.core.entities.locker import LockerStatus
from seatlocker.core.entities.zone import Zone
from seatlocker.infrastructure.database import Base


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class LockerModel(Base):
    __tablename__ = "lockers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    locker_id: Mapped[str | None] = mapped_column(String, nullable=True, unique=True)
    zone: Mapped[Zone] = mapped_column(Enum(Zone, values_callable=_enum_values, native_enum=False), nullable=False)
    status: Mapped[LockerStatus] = mapped_column(
        Enum(LockerStatus, values_callable=_enum_values, native_enum=False),
        nullable=False,
        default=LockerStatus.AVAILABLE,
    )
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    user_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    seat_block: Mapped[str | None] = mapped_column(String, nullable=True)
    assigned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        # claim lookups filter on (zone, status)
        Index("ix_lockers_zone_status", "zone", "status"),
    )
