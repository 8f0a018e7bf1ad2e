"""Company holiday CRUD API endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.core.auth import RequireAdmin
from hulltrack.core.database import get_db
from hulltrack.models.holiday import CompanyHoliday
from hulltrack.schemas.holiday import CompanyHolidayCreate, CompanyHolidayResponse
from hulltrack.services.catalog_helpers import get_or_404

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.get("", response_model=list[CompanyHolidayResponse])
async def list_holidays(
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
    db: AsyncSession = Depends(get_db),
) -> list[CompanyHoliday]:
    """List holidays by date, optionally within a range."""
    query = select(CompanyHoliday)
    if date_from is not None:
        query = query.where(CompanyHoliday.holiday_date >= date_from)
    if date_to is not None:
        query = query.where(CompanyHoliday.holiday_date <= date_to)
    result = await db.execute(query.order_by(CompanyHoliday.holiday_date))
    return list(result.scalars().all())


@router.post(
    "",
    response_model=CompanyHolidayResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_holiday(
    payload: CompanyHolidayCreate,
    db: AsyncSession = Depends(get_db),
) -> CompanyHoliday:
    holiday = CompanyHoliday(
        holiday_name=payload.holiday_name,
        holiday_date=payload.holiday_date,
    )
    db.add(holiday)
    await db.flush()
    await db.refresh(holiday)
    return holiday


@router.get("/{holiday_id}", response_model=CompanyHolidayResponse)
async def get_holiday(holiday_id: int, db: AsyncSession = Depends(get_db)) -> CompanyHoliday:
    return await get_or_404(db, CompanyHoliday, holiday_id, "Holiday")


@router.put("/{holiday_id}", response_model=CompanyHolidayResponse, dependencies=[RequireAdmin])
async def update_holiday(
    holiday_id: int,
    payload: CompanyHolidayCreate,
    db: AsyncSession = Depends(get_db),
) -> CompanyHoliday:
    holiday = await get_or_404(db, CompanyHoliday, holiday_id, "Holiday")
    holiday.holiday_name = payload.holiday_name
    holiday.holiday_date = payload.holiday_date
    await db.flush()
    await db.refresh(holiday)
    return holiday


@router.delete(
    "/{holiday_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[RequireAdmin]
)
async def delete_holiday(holiday_id: int, db: AsyncSession = Depends(get_db)) -> None:
    holiday = await get_or_404(db, CompanyHoliday, holiday_id, "Holiday")
    await db.delete(holiday)
