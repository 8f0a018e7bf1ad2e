"""Master task catalog endpoints, including validated bulk import."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.api.v1.spreadsheet_io import read_upload_rows, sheet_download
from hulltrack.core.auth import RequireAdmin
from hulltrack.core.database import get_db
from hulltrack.models.boat_model import BoatModel
from hulltrack.models.task_data import MasterTask
from hulltrack.schemas.imports import ImportPreview, ImportResult
from hulltrack.schemas.task_data import MasterTaskCreate, MasterTaskResponse
from hulltrack.services.catalog_helpers import (
    fetch_model_ids_by_name,
    fetch_model_names,
    fetch_station_names,
    get_or_404,
)
from hulltrack.services.importers import (
    MASTER_TASK_LAYOUT,
    ParsedSheet,
    master_task_export_rows,
    parse_master_task_rows,
)
from hulltrack.services.spreadsheets import ExportFormat

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/task-data", tags=["task-data"])


@router.get("", response_model=list[MasterTaskResponse])
async def list_master_tasks(
    model: int | None = Query(None),
    station: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(500, ge=1, le=5000),
    db: AsyncSession = Depends(get_db),
) -> list[MasterTask]:
    """List master tasks, optionally for one model and/or station."""
    query = select(MasterTask)
    if model is not None:
        query = query.where(MasterTask.model == model)
    if station is not None:
        query = query.where(MasterTask.station == station)
    query = query.order_by(MasterTask.id).offset(skip).limit(limit)
    result = await db.execute(query)
    return list(result.scalars().all())


@router.post(
    "",
    response_model=MasterTaskResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_master_task(
    payload: MasterTaskCreate,
    db: AsyncSession = Depends(get_db),
) -> MasterTask:
    await get_or_404(db, BoatModel, payload.model, "Model")
    task = MasterTask(**payload.model_dump())
    db.add(task)
    await db.flush()
    await db.refresh(task)
    return task


async def _parse_upload(file: UploadFile, db: AsyncSession) -> ParsedSheet:
    rows = await read_upload_rows(file)
    return parse_master_task_rows(
        rows,
        model_ids=await fetch_model_ids_by_name(db),
        station_names=await fetch_station_names(db),
    )


@router.post("/import/preview", response_model=ImportPreview, dependencies=[RequireAdmin])
async def preview_master_task_import(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
) -> ImportPreview:
    """Validate a task sheet without writing; every rejected row is listed."""
    return (await _parse_upload(file, db)).preview()


@router.post("/import", response_model=ImportResult, dependencies=[RequireAdmin])
async def import_master_tasks(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    """Insert every row of a task sheet, or nothing if any row is invalid."""
    sheet = await _parse_upload(file, db)
    if sheet.invalid:
        logger.info("Task import refused: %d invalid rows", len(sheet.invalid))
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Fix the invalid rows before importing.",
                "errors": [error.model_dump() for error in sheet.row_errors()],
            },
        )

    db.add_all([MasterTask(**record.model_dump()) for record in sheet.records])
    await db.flush()
    logger.info("Imported %d master tasks", len(sheet.ok))
    return sheet.result(inserted=len(sheet.ok))


@router.get("/export")
async def export_master_tasks(
    model: int | None = Query(None),
    fmt: ExportFormat = Query("xlsx", alias="format"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    query = select(MasterTask).order_by(MasterTask.id)
    if model is not None:
        query = query.where(MasterTask.model == model)
    result = await db.execute(query)
    rows = master_task_export_rows(result.scalars().all(), await fetch_model_names(db))
    return sheet_download(MASTER_TASK_LAYOUT, rows, fmt, file_stem="Task_Data")


@router.get("/template")
async def master_task_template(fmt: ExportFormat = Query("xlsx", alias="format")) -> Response:
    return sheet_download(MASTER_TASK_LAYOUT, [], fmt)


@router.get("/{task_id}", response_model=MasterTaskResponse)
async def get_master_task(task_id: int, db: AsyncSession = Depends(get_db)) -> MasterTask:
    return await get_or_404(db, MasterTask, task_id, "Task")


@router.put("/{task_id}", response_model=MasterTaskResponse, dependencies=[RequireAdmin])
async def update_master_task(
    task_id: int,
    payload: MasterTaskCreate,
    db: AsyncSession = Depends(get_db),
) -> MasterTask:
    task = await get_or_404(db, MasterTask, task_id, "Task")
    for field, value in payload.model_dump().items():
        setattr(task, field, value)
    await db.flush()
    await db.refresh(task)
    return task


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[RequireAdmin]
)
async def delete_master_task(task_id: int, db: AsyncSession = Depends(get_db)) -> None:
    task = await get_or_404(db, MasterTask, task_id, "Task")
    await db.delete(task)
    await db.flush()
