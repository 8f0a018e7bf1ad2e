"""Boat model catalog: models, their options, and their order headers."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hulltrack.core.database import Base


class BoatModel(Base):
    """A boat product line, e.g. ``39CC``."""

    __tablename__ = "models"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    options: Mapped[list["ModelOption"]] = relationship(
        back_populates="model", cascade="all, delete-orphan"
    )
    headers: Mapped[list["BoatOrderHeader"]] = relationship(
        back_populates="model", cascade="all, delete-orphan"
    )


class ModelOption(Base):
    """An orderable option offered on a model."""

    __tablename__ = "model_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    model_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("models.id", ondelete="CASCADE"), nullable=False
    )
    option_text: Mapped[str] = mapped_column(Text, nullable=False)

    model: Mapped["BoatModel"] = relationship(back_populates="options")


class BoatOrderHeader(Base):
    """A section heading that appears in a model's production order PDF."""

    __tablename__ = "boat_order_headers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    model_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("models.id", ondelete="CASCADE"), nullable=False
    )
    header_text: Mapped[str] = mapped_column(Text, nullable=False)

    model: Mapped["BoatModel"] = relationship(back_populates="headers")
