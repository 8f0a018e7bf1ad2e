"""Do-not-show option endpoints.

Text listed here is dropped from extracted boat order options.
"""

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.api.v1.spreadsheet_io import read_upload_rows, sheet_download
from hulltrack.core.auth import RequireAdmin
from hulltrack.core.database import get_db
from hulltrack.models.do_not_show import DoNotShowOption
from hulltrack.schemas.do_not_show import DoNotShowCreate, DoNotShowResponse
from hulltrack.schemas.imports import ImportResult
from hulltrack.services.catalog_helpers import get_or_404
from hulltrack.services.importers import (
    DO_NOT_SHOW_LAYOUT,
    parse_do_not_show_rows,
    text_export_rows,
)
from hulltrack.services.spreadsheets import ExportFormat

router = APIRouter(prefix="/do-not-show", tags=["do-not-show"])


@router.get("", response_model=list[DoNotShowResponse])
async def list_do_not_show(db: AsyncSession = Depends(get_db)) -> list[DoNotShowOption]:
    result = await db.execute(select(DoNotShowOption).order_by(DoNotShowOption.option_text))
    return list(result.scalars().all())


@router.post(
    "",
    response_model=DoNotShowResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_do_not_show(
    payload: DoNotShowCreate,
    db: AsyncSession = Depends(get_db),
) -> DoNotShowOption:
    option = DoNotShowOption(option_text=payload.option_text)
    db.add(option)
    await db.flush()
    await db.refresh(option)
    return option


@router.post("/import", response_model=ImportResult, dependencies=[RequireAdmin])
async def import_do_not_show(
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    sheet = parse_do_not_show_rows(await read_upload_rows(file))
    db.add_all([DoNotShowOption(option_text=record.option_text) for record in sheet.records])
    await db.flush()
    return sheet.result(inserted=len(sheet.ok))


@router.get("/export")
async def export_do_not_show(
    fmt: ExportFormat = Query("xlsx", alias="format"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    options = await list_do_not_show(db=db)
    return sheet_download(
        DO_NOT_SHOW_LAYOUT, text_export_rows(options, "option_text"), fmt, file_stem="Do_Not_Show"
    )


@router.get("/template")
async def do_not_show_template(fmt: ExportFormat = Query("xlsx", alias="format")) -> Response:
    return sheet_download(DO_NOT_SHOW_LAYOUT, [], fmt)


@router.put("/{option_id}", response_model=DoNotShowResponse, dependencies=[RequireAdmin])
async def update_do_not_show(
    option_id: int,
    payload: DoNotShowCreate,
    db: AsyncSession = Depends(get_db),
) -> DoNotShowOption:
    option = await get_or_404(db, DoNotShowOption, option_id, "Option")
    option.option_text = payload.option_text
    await db.flush()
    await db.refresh(option)
    return option


@router.delete(
    "/{option_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[RequireAdmin]
)
async def delete_do_not_show(option_id: int, db: AsyncSession = Depends(get_db)) -> None:
    option = await get_or_404(db, DoNotShowOption, option_id, "Option")
    await db.delete(option)
