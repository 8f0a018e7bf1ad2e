"""Schedule group CRUD, bulk delete, and spreadsheet import/export."""

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.api.v1.spreadsheet_io import read_upload_rows, sheet_download
from hulltrack.core.auth import RequireAdmin
from hulltrack.core.database import get_db
from hulltrack.models.schedule_group import ScheduleGroup
from hulltrack.schemas.imports import ImportResult
from hulltrack.schemas.schedule_group import (
    BulkDelete,
    ScheduleGroupCreate,
    ScheduleGroupResponse,
)
from hulltrack.services.catalog_helpers import get_or_404
from hulltrack.services.importers import (
    SCHEDULE_GROUP_LAYOUT,
    parse_schedule_group_rows,
    schedule_group_export_rows,
)
from hulltrack.services.spreadsheets import ExportFormat

router = APIRouter(prefix="/schedule-groups", tags=["schedule-groups"])


@router.get("", response_model=list[ScheduleGroupResponse])
async def list_schedule_groups(db: AsyncSession = Depends(get_db)) -> list[ScheduleGroup]:
    result = await db.execute(select(ScheduleGroup).order_by(ScheduleGroup.id))
    return list(result.scalars().all())


@router.post(
    "",
    response_model=ScheduleGroupResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_schedule_group(
    payload: ScheduleGroupCreate,
    db: AsyncSession = Depends(get_db),
) -> ScheduleGroup:
    group = ScheduleGroup(**payload.model_dump())
    db.add(group)
    await db.flush()
    await db.refresh(group)
    return group


@router.post("/bulk-delete", dependencies=[RequireAdmin])
async def bulk_delete_schedule_groups(
    payload: BulkDelete,
    db: AsyncSession = Depends(get_db),
) -> dict[str, int]:
    """Delete the given groups; tasks that used them keep a null group."""
    result = await db.execute(delete(ScheduleGroup).where(ScheduleGroup.id.in_(payload.ids)))
    return {"deleted": result.rowcount or 0}


@router.post("/import", response_model=ImportResult, dependencies=[RequireAdmin])
async def import_schedule_groups(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    sheet = parse_schedule_group_rows(await read_upload_rows(file))
    db.add_all([ScheduleGroup(**record.model_dump()) for record in sheet.records])
    await db.flush()
    return sheet.result(inserted=len(sheet.ok))


@router.get("/export")
async def export_schedule_groups(
    fmt: ExportFormat = Query("xlsx", alias="format"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    groups = await list_schedule_groups(db=db)
    return sheet_download(
        SCHEDULE_GROUP_LAYOUT, schedule_group_export_rows(groups), fmt, file_stem="ScheduleGroups"
    )


@router.get("/template")
async def schedule_groups_template(fmt: ExportFormat = Query("xlsx", alias="format")) -> Response:
    return sheet_download(SCHEDULE_GROUP_LAYOUT, [], fmt)


@router.get("/{group_id}", response_model=ScheduleGroupResponse)
async def get_schedule_group(group_id: int, db: AsyncSession = Depends(get_db)) -> ScheduleGroup:
    return await get_or_404(db, ScheduleGroup, group_id, "Schedule group")


@router.put("/{group_id}", response_model=ScheduleGroupResponse, dependencies=[RequireAdmin])
async def update_schedule_group(
    group_id: int,
    payload: ScheduleGroupCreate,
    db: AsyncSession = Depends(get_db),
) -> ScheduleGroup:
    group = await get_or_404(db, ScheduleGroup, group_id, "Schedule group")
    for field, value in payload.model_dump().items():
        setattr(group, field, value)
    await db.flush()
    await db.refresh(group)
    return group


@router.delete(
    "/{group_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[RequireAdmin]
)
async def delete_schedule_group(group_id: int, db: AsyncSession = Depends(get_db)) -> None:
    group = await get_or_404(db, ScheduleGroup, group_id, "Schedule group")
    await db.delete(group)
