"""Station SQLAlchemy model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from hulltrack.core.database import Base


class Station(Base):
    """A physical stage on the production floor."""

    __tablename__ = "stations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    station_sequence: Mapped[int | None] = mapped_column(
        Integer, nullable=True, comment="Presentation order; not a state machine"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
