"""Shared catalog lookups used by routers and import validation."""

from datetime import date
from typing import Any, TypeVar

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.models.boat_model import BoatModel
from hulltrack.models.holiday import CompanyHoliday
from hulltrack.models.station import Station

RowT = TypeVar("RowT")


async def get_or_404(db: AsyncSession, model_cls: type[RowT], row_id: Any, label: str) -> RowT:
    """Fetch one row by primary key or raise HTTP 404 ``"<label> not found"``."""
    result = await db.execute(select(model_cls).where(model_cls.id == row_id))
    row = result.scalar_one_or_none()
    if row is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return row


async def fetch_model_ids_by_name(db: AsyncSession) -> dict[str, int]:
    result = await db.execute(select(BoatModel.name, BoatModel.id))
    return {name: model_id for name, model_id in result.all()}


async def fetch_model_names(db: AsyncSession) -> dict[int, str]:
    result = await db.execute(select(BoatModel.id, BoatModel.name))
    return {model_id: name for model_id, name in result.all()}


async def fetch_station_names(db: AsyncSession) -> list[str]:
    result = await db.execute(select(Station.name).order_by(Station.station_sequence))
    return list(result.scalars().all())


async def fetch_holiday_dates(db: AsyncSession) -> list[date]:
    result = await db.execute(select(CompanyHoliday.holiday_date))
    return list(result.scalars().all())
