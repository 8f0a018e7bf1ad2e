"""TaskInstance SQLAlchemy model (the ``tasks_per_hull`` table)."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from hulltrack.core.database import Base
from hulltrack.models.boat_order import HULL_NUMBER_MAX_LENGTH

TASK_STATUSES = ("Upcoming", "In Progress", "Completed", "Overdue")
DEFAULT_TASK_STATUS = "Upcoming"


class TaskInstance(Base):
    """A concrete task for one hull, expanded from a master task."""

    __tablename__ = "tasks_per_hull"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hull_number: Mapped[str] = mapped_column(
        String(HULL_NUMBER_MAX_LENGTH), nullable=False, index=True
    )
    model: Mapped[int] = mapped_column(Integer, ForeignKey("models.id"), nullable=False)
    station: Mapped[str] = mapped_column(String(100), nullable=False)
    task_name: Mapped[str] = mapped_column(String(300), nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, server_default=DEFAULT_TASK_STATUS
    )
    completed_by: Mapped[str | None] = mapped_column(
        String(50), nullable=True, comment="Employee id scanned at status change"
    )
    applicable: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="true"
    )
    schedule_group: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("schedule_groups.id", ondelete="SET NULL"), nullable=True
    )
    task_data_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("task_data.id"), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
