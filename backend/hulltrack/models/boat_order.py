"""BoatOrder and BoatOrderOption SQLAlchemy models."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hulltrack.core.database import Base

HULL_NUMBER_MAX_LENGTH = 20
FILE_NAME_MAX_LENGTH = 255


class BoatOrder(Base):
    """One ingested production order document."""

    __tablename__ = "boat_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hull_number: Mapped[str] = mapped_column(
        String(HULL_NUMBER_MAX_LENGTH), nullable=False, index=True
    )
    revision_date: Mapped[date] = mapped_column(Date, nullable=False)
    file_name: Mapped[str] = mapped_column(String(FILE_NAME_MAX_LENGTH), nullable=False)
    model: Mapped[int] = mapped_column(Integer, ForeignKey("models.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    options: Mapped[list["BoatOrderOption"]] = relationship(
        back_populates="boat_order", cascade="all, delete-orphan"
    )


class BoatOrderOption(Base):
    """A line of text extracted from a boat order PDF."""

    __tablename__ = "boat_order_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    boat_order_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("boat_orders.id", ondelete="CASCADE"),
        nullable=False,
    )
    option_text: Mapped[str] = mapped_column(Text, nullable=False)
    is_header: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="false"
    )

    boat_order: Mapped["BoatOrder"] = relationship(back_populates="options")
