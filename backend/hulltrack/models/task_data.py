"""MasterTask SQLAlchemy model (the ``task_data`` catalog)."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from hulltrack.core.database import Base


class MasterTask(Base):
    """Template task for one model at one station.

    Every boat order for ``model`` gets one ``TaskInstance`` per row.
    """

    __tablename__ = "task_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    model: Mapped[int] = mapped_column(
        Integer, ForeignKey("models.id"), nullable=False, index=True
    )
    station: Mapped[str] = mapped_column(
        String(100), nullable=False, comment="Station name"
    )
    task_name: Mapped[str] = mapped_column(String(300), nullable=False)
    labor_hours: Mapped[float] = mapped_column(
        Float, nullable=False, server_default="0"
    )
    associated_options: Mapped[list | None] = mapped_column(
        JSONB, nullable=True, comment="Model option ids that trigger this task"
    )
    schedule_group: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("schedule_groups.id", ondelete="SET NULL"), nullable=True
    )
    duration_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
