"""ScheduleGroup SQLAlchemy model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hulltrack.core.database import Base


class ScheduleGroup(Base):
    """A named day-offset rule anchored to a station."""

    __tablename__ = "schedule_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    schedule_group: Mapped[str] = mapped_column(String(100), nullable=False)
    days_offset: Mapped[int | None] = mapped_column(Integer, nullable=True)
    offset_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    station: Mapped[str | None] = mapped_column(String(100), nullable=True)
