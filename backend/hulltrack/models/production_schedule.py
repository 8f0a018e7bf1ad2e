"""ProductionScheduleRow SQLAlchemy model (the ``production_schedule`` table)."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hulltrack.core.database import Base

# Display label -> date column, in line order.
SCHEDULE_STATIONS: tuple[tuple[str, str], ...] = (
    ("LAM Grid", "lam_grid"),
    ("LAM Hull", "lam_hull"),
    ("LAM Deck", "lam_deck"),
    ("T&G Grid", "trimandgrind_grid"),
    ("T&G Hull", "trimandgrind_hull"),
    ("T&G Deck", "trimandgrind_deck"),
    ("P&D Hull", "patchanddetail_hull"),
    ("P&D Deck", "patchanddetail_deck"),
    ("Open Hull 1", "open_hull_1"),
    ("Open Deck 1", "open_deck_1"),
    ("Open Hull 2", "open_hull_2"),
    ("Open Deck 2", "open_deck_2"),
    ("Final 1", "final_1"),
    ("Final 2", "final_2"),
    ("Final 3", "final_3"),
    ("Comm.", "commissioning"),
    ("Shipment", "shipment"),
)

SCHEDULE_DATE_COLUMNS: tuple[str, ...] = tuple(column for _, column in SCHEDULE_STATIONS)


class ProductionScheduleRow(Base):
    """One production slot with a planned date per station."""

    __tablename__ = "production_schedule"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slot_number: Mapped[str] = mapped_column(String(20), nullable=False, comment="E.g. FY24-1")
    takt: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="Days between stations")
    boat_model: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("models.id", ondelete="SET NULL"), nullable=True
    )
    hull_number: Mapped[str | None] = mapped_column(String(20), nullable=True)

    lam_grid: Mapped[date | None] = mapped_column(Date, nullable=True)
    lam_hull: Mapped[date | None] = mapped_column(Date, nullable=True)
    lam_deck: Mapped[date | None] = mapped_column(Date, nullable=True)
    trimandgrind_grid: Mapped[date | None] = mapped_column(Date, nullable=True)
    trimandgrind_hull: Mapped[date | None] = mapped_column(Date, nullable=True)
    trimandgrind_deck: Mapped[date | None] = mapped_column(Date, nullable=True)
    patchanddetail_hull: Mapped[date | None] = mapped_column(Date, nullable=True)
    patchanddetail_deck: Mapped[date | None] = mapped_column(Date, nullable=True)
    open_hull_1: Mapped[date | None] = mapped_column(Date, nullable=True)
    open_deck_1: Mapped[date | None] = mapped_column(Date, nullable=True)
    open_hull_2: Mapped[date | None] = mapped_column(Date, nullable=True)
    open_deck_2: Mapped[date | None] = mapped_column(Date, nullable=True)
    final_1: Mapped[date | None] = mapped_column(Date, nullable=True)
    final_2: Mapped[date | None] = mapped_column(Date, nullable=True)
    final_3: Mapped[date | None] = mapped_column(Date, nullable=True)
    commissioning: Mapped[date | None] = mapped_column(Date, nullable=True)
    shipment: Mapped[date | None] = mapped_column(Date, nullable=True)

    schedule_from: Mapped[str | None] = mapped_column(String(30), nullable=True)
    schedule_direction: Mapped[str | None] = mapped_column(String(20), nullable=True)
