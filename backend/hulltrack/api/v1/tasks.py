"""Per-hull task endpoints: listing, status changes, dates, and print export."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.api.v1.spreadsheet_io import file_response
from hulltrack.core.database import get_db
from hulltrack.models.task_instance import TaskInstance
from hulltrack.schemas.task_instance import (
    TaskDatesUpdate,
    TaskInstanceResponse,
    TaskStatusUpdate,
)
from hulltrack.services.catalog_helpers import get_or_404
from hulltrack.services.spreadsheets import ExportFormat, media_type_for, write_sheet
from hulltrack.services.task_listing import (
    build_task_query,
    print_rows,
    sort_tasks,
    validate_columns,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


async def _filtered_tasks(
    db: AsyncSession,
    stations: list[str] | None,
    statuses: list[str] | None,
    hull_number: str | None,
    sort_by: str | None,
    descending: bool,
) -> list[TaskInstance]:
    result = await db.execute(build_task_query(stations, statuses, hull_number))
    try:
        return sort_tasks(result.scalars().all(), sort_by, descending)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@router.get("", response_model=list[TaskInstanceResponse])
async def list_tasks(
    station: list[str] | None = Query(None),
    status_filter: list[str] | None = Query(None, alias="status"),
    hull_number: str | None = Query(None),
    sort_by: str | None = Query(None),
    descending: bool = Query(False),
    db: AsyncSession = Depends(get_db),
) -> list[TaskInstance]:
    """List tasks for any of the given stations and statuses, optionally one hull."""
    return await _filtered_tasks(db, station, status_filter, hull_number, sort_by, descending)


@router.get("/print")
async def print_tasks(
    station: list[str] | None = Query(None),
    status_filter: list[str] | None = Query(None, alias="status"),
    hull_number: str | None = Query(None),
    sort_by: str | None = Query(None),
    descending: bool = Query(False),
    columns: list[str] | None = Query(None),
    fmt: ExportFormat = Query("xlsx", alias="format"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Export the filtered task list with the chosen columns."""
    try:
        selected = validate_columns(columns)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    tasks = await _filtered_tasks(db, station, status_filter, hull_number, sort_by, descending)
    content = write_sheet(selected, print_rows(tasks, selected), "Tasks", fmt)
    return file_response(content, f"Tasks.{fmt}", media_type_for(fmt))


@router.get("/{task_id}", response_model=TaskInstanceResponse)
async def get_task(task_id: int, db: AsyncSession = Depends(get_db)) -> TaskInstance:
    return await get_or_404(db, TaskInstance, task_id, "Task")


@router.patch("/{task_id}/status", response_model=TaskInstanceResponse)
async def update_task_status(
    task_id: int,
    payload: TaskStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> TaskInstance:
    """Set a task's status; any status may follow any other."""
    task = await get_or_404(db, TaskInstance, task_id, "Task")
    previous = task.status
    task.status = payload.status
    task.completed_by = payload.completed_by
    await db.flush()
    await db.refresh(task)
    logger.info(
        "Task %d (hull %s) %s -> %s by %s",
        task_id,
        task.hull_number,
        previous,
        payload.status,
        payload.completed_by or "unknown",
    )
    return task


@router.patch("/{task_id}/dates", response_model=TaskInstanceResponse)
async def update_task_dates(
    task_id: int,
    payload: TaskDatesUpdate,
    db: AsyncSession = Depends(get_db),
) -> TaskInstance:
    """Change start and/or end date; omitted fields are left alone."""
    task = await get_or_404(db, TaskInstance, task_id, "Task")
    changes = payload.model_dump(exclude_unset=True)
    start = changes.get("start_date", task.start_date)
    end = changes.get("end_date", task.end_date)
    if start is not None and end is not None and end < start:
        raise HTTPException(status_code=422, detail="end_date must not be before start_date")
    for field, value in changes.items():
        setattr(task, field, value)
    await db.flush()
    await db.refresh(task)
    return task
