"""Stations CRUD API endpoints."""

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.api.v1.spreadsheet_io import read_upload_rows, sheet_download
from hulltrack.core.auth import RequireAdmin
from hulltrack.core.database import get_db
from hulltrack.models.station import Station
from hulltrack.schemas.imports import ImportResult
from hulltrack.schemas.station import StationCreate, StationReorder, StationResponse
from hulltrack.services.catalog_helpers import fetch_station_names, get_or_404
from hulltrack.services.importers import (
    STATION_LAYOUT,
    RowInvalid,
    parse_station_rows,
    station_export_rows,
)
from hulltrack.services.spreadsheets import ExportFormat

router = APIRouter(prefix="/stations", tags=["stations"])


def _ordered(query):
    return query.order_by(Station.station_sequence.asc().nulls_last(), Station.name)


@router.get("", response_model=list[StationResponse])
async def list_stations(db: AsyncSession = Depends(get_db)) -> list[Station]:
    """List stations in line order; unsequenced stations come last."""
    result = await db.execute(_ordered(select(Station)))
    return list(result.scalars().all())


@router.post(
    "",
    response_model=StationResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_station(
    payload: StationCreate,
    db: AsyncSession = Depends(get_db),
) -> Station:
    existing = await db.execute(select(Station).where(Station.name == payload.name))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail=f"Station '{payload.name}' already exists")
    station = Station(name=payload.name, station_sequence=payload.station_sequence)
    db.add(station)
    await db.flush()
    await db.refresh(station)
    return station


@router.put("/reorder", response_model=list[StationResponse], dependencies=[RequireAdmin])
async def reorder_stations(
    payload: StationReorder,
    db: AsyncSession = Depends(get_db),
) -> list[Station]:
    """Renumber stations 1..n in the order given."""
    result = await db.execute(select(Station).where(Station.id.in_(payload.station_ids)))
    by_id = {station.id: station for station in result.scalars().all()}
    missing = [station_id for station_id in payload.station_ids if station_id not in by_id]
    if missing:
        raise HTTPException(
            status_code=404,
            detail=f"Station(s) not found: {', '.join(str(i) for i in missing)}",
        )

    for sequence, station_id in enumerate(payload.station_ids, start=1):
        by_id[station_id].station_sequence = sequence
    await db.flush()
    return [by_id[station_id] for station_id in payload.station_ids]


@router.post("/import", response_model=ImportResult, dependencies=[RequireAdmin])
async def import_stations(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    """Bulk insert stations; names that already exist are reported, not inserted."""
    sheet = parse_station_rows(await read_upload_rows(file))
    known = set(await fetch_station_names(db))

    new_rows = []
    for row in sheet.ok:
        if row.record.name in known:
            sheet.invalid.append(
                RowInvalid(
                    row_number=row.row_number,
                    errors={"name": f'Station "{row.record.name}" already exists.'},
                    values=row.record.model_dump(),
                )
            )
            continue
        known.add(row.record.name)
        new_rows.append(row)
    sheet.ok = new_rows

    db.add_all(
        [
            Station(name=row.record.name, station_sequence=row.record.station_sequence)
            for row in sheet.ok
        ]
    )
    await db.flush()
    return sheet.result(inserted=len(sheet.ok))


@router.get("/export")
async def export_stations(
    fmt: ExportFormat = Query("xlsx", alias="format"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    stations = await list_stations(db=db)
    return sheet_download(STATION_LAYOUT, station_export_rows(stations), fmt, file_stem="Stations")


@router.get("/template")
async def stations_template(fmt: ExportFormat = Query("xlsx", alias="format")) -> Response:
    return sheet_download(STATION_LAYOUT, [], fmt)


@router.get("/{station_id}", response_model=StationResponse)
async def get_station(station_id: int, db: AsyncSession = Depends(get_db)) -> Station:
    return await get_or_404(db, Station, station_id, "Station")


@router.put("/{station_id}", response_model=StationResponse, dependencies=[RequireAdmin])
async def update_station(
    station_id: int,
    payload: StationCreate,
    db: AsyncSession = Depends(get_db),
) -> Station:
    station = await get_or_404(db, Station, station_id, "Station")
    station.name = payload.name
    station.station_sequence = payload.station_sequence
    await db.flush()
    await db.refresh(station)
    return station


@router.delete(
    "/{station_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[RequireAdmin]
)
async def delete_station(station_id: int, db: AsyncSession = Depends(get_db)) -> None:
    station = await get_or_404(db, Station, station_id, "Station")
    await db.delete(station)
