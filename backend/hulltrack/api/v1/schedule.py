"""Production schedule endpoints: slot rows, cell edits, and auto-schedule."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.core.auth import RequireAdmin
from hulltrack.core.database import get_db
from hulltrack.models.production_schedule import SCHEDULE_DATE_COLUMNS, ProductionScheduleRow
from hulltrack.schemas.production_schedule import (
    MAX_TAKT_DAYS,
    AutoScheduleRequest,
    ScheduleCellUpdate,
    ScheduleRowCreate,
    ScheduleRowResponse,
)
from hulltrack.services.auto_schedule import AutoScheduleError, apply_auto_schedule
from hulltrack.services.catalog_helpers import fetch_holiday_dates, get_or_404

router = APIRouter(prefix="/production-schedule", tags=["production-schedule"])

TEXT_COLUMNS = ("slot_number", "hull_number")
INTEGER_COLUMNS = ("takt", "boat_model")


def parse_cell_value(column: str, value: str | None) -> Any:
    """Convert a submitted cell value to the column's type; blank clears it."""
    text = (value or "").strip()
    if column in SCHEDULE_DATE_COLUMNS:
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise HTTPException(status_code=422, detail=f"Invalid date for {column}: {text}")
    if column in INTEGER_COLUMNS:
        if not text:
            return None
        try:
            number = int(text)
        except ValueError:
            raise HTTPException(status_code=422, detail=f"{column} must be a whole number")
        if column == "takt" and not 0 < number <= MAX_TAKT_DAYS:
            raise HTTPException(
                status_code=422, detail=f"takt must be between 1 and {MAX_TAKT_DAYS}"
            )
        return number
    if column in TEXT_COLUMNS:
        if column == "slot_number" and not text:
            raise HTTPException(status_code=422, detail="slot_number cannot be empty")
        return text or None
    raise HTTPException(status_code=422, detail=f"Column {column} cannot be edited")


@router.get("", response_model=list[ScheduleRowResponse])
async def list_schedule_rows(db: AsyncSession = Depends(get_db)) -> list[ProductionScheduleRow]:
    result = await db.execute(select(ProductionScheduleRow).order_by(ProductionScheduleRow.id))
    return list(result.scalars().all())


@router.post(
    "",
    response_model=ScheduleRowResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_schedule_row(
    payload: ScheduleRowCreate,
    db: AsyncSession = Depends(get_db),
) -> ProductionScheduleRow:
    row = ProductionScheduleRow(**payload.model_dump())
    db.add(row)
    await db.flush()
    await db.refresh(row)
    return row


@router.get("/{row_id}", response_model=ScheduleRowResponse)
async def get_schedule_row(
    row_id: int,
    db: AsyncSession = Depends(get_db),
) -> ProductionScheduleRow:
    return await get_or_404(db, ProductionScheduleRow, row_id, "Schedule row")


@router.put("/{row_id}", response_model=ScheduleRowResponse, dependencies=[RequireAdmin])
async def update_schedule_row(
    row_id: int,
    payload: ScheduleRowCreate,
    db: AsyncSession = Depends(get_db),
) -> ProductionScheduleRow:
    row = await get_or_404(db, ProductionScheduleRow, row_id, "Schedule row")
    for field, value in payload.model_dump().items():
        setattr(row, field, value)
    await db.flush()
    await db.refresh(row)
    return row


@router.patch(
    "/{row_id}/cell", response_model=ScheduleRowResponse, dependencies=[RequireAdmin]
)
async def update_schedule_cell(
    row_id: int,
    payload: ScheduleCellUpdate,
    db: AsyncSession = Depends(get_db),
) -> ProductionScheduleRow:
    """Edit one cell of a slot row."""
    row = await get_or_404(db, ProductionScheduleRow, row_id, "Schedule row")
    setattr(row, payload.column, parse_cell_value(payload.column, payload.value))
    await db.flush()
    await db.refresh(row)
    return row


@router.post(
    "/{row_id}/auto-schedule",
    response_model=ScheduleRowResponse,
    dependencies=[RequireAdmin],
)
async def auto_schedule_row(
    row_id: int,
    payload: AutoScheduleRequest,
    db: AsyncSession = Depends(get_db),
) -> ProductionScheduleRow:
    """Fill station dates from one station outward by TAKT days, skipping holidays."""
    row = await get_or_404(db, ProductionScheduleRow, row_id, "Schedule row")
    try:
        apply_auto_schedule(row, payload, await fetch_holiday_dates(db))
    except AutoScheduleError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    await db.flush()
    await db.refresh(row)
    return row


@router.delete(
    "/{row_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[RequireAdmin]
)
async def delete_schedule_row(row_id: int, db: AsyncSession = Depends(get_db)) -> None:
    row = await get_or_404(db, ProductionScheduleRow, row_id, "Schedule row")
    await db.delete(row)
