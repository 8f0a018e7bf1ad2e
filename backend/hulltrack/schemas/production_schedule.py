"""Production schedule Pydantic schemas."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

ScheduleStation = Literal[
    "LAM Grid",
    "LAM Hull",
    "LAM Deck",
    "T&G Grid",
    "T&G Hull",
    "T&G Deck",
    "P&D Hull",
    "P&D Deck",
    "Open Hull 1",
    "Open Deck 1",
    "Open Hull 2",
    "Open Deck 2",
    "Final 1",
    "Final 2",
    "Final 3",
    "Comm.",
    "Shipment",
]
ScheduleDirection = Literal["Forward", "Backwards"]

# Upper bound on days between consecutive stations
MAX_TAKT_DAYS = 365


class ScheduleRowCreate(BaseModel):
    """Schema for adding a production slot."""

    slot_number: str = Field(..., min_length=1, max_length=20)
    takt: int | None = Field(None, gt=0, le=MAX_TAKT_DAYS)
    boat_model: int | None = None
    hull_number: str | None = Field(None, max_length=20)

    model_config = {"str_strip_whitespace": True}


class ScheduleRowResponse(BaseModel):
    id: int
    slot_number: str
    takt: int | None
    boat_model: int | None
    hull_number: str | None
    lam_grid: date | None
    lam_hull: date | None
    lam_deck: date | None
    trimandgrind_grid: date | None
    trimandgrind_hull: date | None
    trimandgrind_deck: date | None
    patchanddetail_hull: date | None
    patchanddetail_deck: date | None
    open_hull_1: date | None
    open_deck_1: date | None
    open_hull_2: date | None
    open_deck_2: date | None
    final_1: date | None
    final_2: date | None
    final_3: date | None
    commissioning: date | None
    shipment: date | None
    schedule_from: str | None
    schedule_direction: str | None

    model_config = {"from_attributes": True}


class ScheduleCellUpdate(BaseModel):
    """Edit of a single cell; an empty value clears it."""

    column: str
    value: str | None = None


class AutoScheduleRequest(BaseModel):
    """Parameters for filling a slot's station dates from one station."""

    schedule_from: ScheduleStation
    direction: ScheduleDirection = "Forward"
    takt: int = Field(
        ..., gt=0, le=MAX_TAKT_DAYS, description="Days between consecutive stations"
    )
    start_date: date
    slot_number: str | None = Field(None, max_length=20)
    boat_model: int | None = None
    hull_number: str | None = Field(None, max_length=20)
