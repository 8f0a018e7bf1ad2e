"""Boat model CRUD with nested model options and order headers."""

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.api.v1.spreadsheet_io import read_upload_rows, sheet_download
from hulltrack.core.auth import RequireAdmin
from hulltrack.core.database import get_db
from hulltrack.models.boat_model import BoatModel, BoatOrderHeader, ModelOption
from hulltrack.schemas.boat_model import (
    BoatModelCreate,
    BoatModelResponse,
    BoatOrderHeaderCreate,
    BoatOrderHeaderResponse,
    ModelOptionCreate,
    ModelOptionResponse,
)
from hulltrack.schemas.imports import ImportResult
from hulltrack.services.catalog_helpers import get_or_404
from hulltrack.services.importers import (
    BOAT_ORDER_HEADER_LAYOUT,
    MODEL_OPTION_LAYOUT,
    parse_boat_order_header_rows,
    parse_model_option_rows,
    text_export_rows,
)
from hulltrack.services.spreadsheets import ExportFormat

router = APIRouter(prefix="/models", tags=["models"])


async def _ensure_unique_name(db: AsyncSession, name: str, exclude_id: int | None = None) -> None:
    query = select(BoatModel).where(BoatModel.name == name)
    if exclude_id is not None:
        query = query.where(BoatModel.id != exclude_id)
    result = await db.execute(query)
    if result.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail=f"Model '{name}' already exists")


@router.get("", response_model=list[BoatModelResponse])
async def list_models(db: AsyncSession = Depends(get_db)) -> list[BoatModel]:
    """List boat models by name."""
    result = await db.execute(select(BoatModel).order_by(BoatModel.name))
    return list(result.scalars().all())


@router.post(
    "",
    response_model=BoatModelResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_model(
    payload: BoatModelCreate,
    db: AsyncSession = Depends(get_db),
) -> BoatModel:
    await _ensure_unique_name(db, payload.name)
    model = BoatModel(name=payload.name)
    db.add(model)
    await db.flush()
    await db.refresh(model)
    return model


@router.get("/{model_id}", response_model=BoatModelResponse)
async def get_model(model_id: int, db: AsyncSession = Depends(get_db)) -> BoatModel:
    return await get_or_404(db, BoatModel, model_id, "Model")


@router.put("/{model_id}", response_model=BoatModelResponse, dependencies=[RequireAdmin])
async def update_model(
    model_id: int,
    payload: BoatModelCreate,
    db: AsyncSession = Depends(get_db),
) -> BoatModel:
    """Rename a boat model."""
    model = await get_or_404(db, BoatModel, model_id, "Model")
    await _ensure_unique_name(db, payload.name, exclude_id=model_id)
    model.name = payload.name
    await db.flush()
    await db.refresh(model)
    return model


@router.delete(
    "/{model_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[RequireAdmin]
)
async def delete_model(model_id: int, db: AsyncSession = Depends(get_db)) -> None:
    """Delete a model together with its options and headers."""
    model = await get_or_404(db, BoatModel, model_id, "Model")
    await db.delete(model)
    await db.flush()


# ---------------------------------------------------------------------------
# Model options
# ---------------------------------------------------------------------------


@router.get("/{model_id}/options", response_model=list[ModelOptionResponse])
async def list_model_options(
    model_id: int,
    db: AsyncSession = Depends(get_db),
) -> list[ModelOption]:
    result = await db.execute(
        select(ModelOption).where(ModelOption.model_id == model_id).order_by(ModelOption.id)
    )
    return list(result.scalars().all())


@router.post(
    "/{model_id}/options",
    response_model=ModelOptionResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_model_option(
    model_id: int,
    payload: ModelOptionCreate,
    db: AsyncSession = Depends(get_db),
) -> ModelOption:
    await get_or_404(db, BoatModel, model_id, "Model")
    option = ModelOption(model_id=model_id, option_text=payload.option_text)
    db.add(option)
    await db.flush()
    await db.refresh(option)
    return option


@router.put(
    "/{model_id}/options/{option_id}",
    response_model=ModelOptionResponse,
    dependencies=[RequireAdmin],
)
async def update_model_option(
    model_id: int,
    option_id: int,
    payload: ModelOptionCreate,
    db: AsyncSession = Depends(get_db),
) -> ModelOption:
    option = await get_or_404(db, ModelOption, option_id, "Model option")
    if option.model_id != model_id:
        raise HTTPException(status_code=404, detail="Model option not found")
    option.option_text = payload.option_text
    await db.flush()
    await db.refresh(option)
    return option


@router.delete(
    "/{model_id}/options/{option_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[RequireAdmin],
)
async def delete_model_option(
    model_id: int,
    option_id: int,
    db: AsyncSession = Depends(get_db),
) -> None:
    option = await get_or_404(db, ModelOption, option_id, "Model option")
    if option.model_id != model_id:
        raise HTTPException(status_code=404, detail="Model option not found")
    await db.delete(option)


@router.post(
    "/{model_id}/options/import", response_model=ImportResult, dependencies=[RequireAdmin]
)
async def import_model_options(
    model_id: int,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    """Bulk insert options from a one-column ``option_text`` sheet."""
    await get_or_404(db, BoatModel, model_id, "Model")
    sheet = parse_model_option_rows(await read_upload_rows(file))
    db.add_all(
        [ModelOption(model_id=model_id, option_text=record.option_text) for record in sheet.records]
    )
    await db.flush()
    return sheet.result(inserted=len(sheet.ok))


@router.get("/{model_id}/options/export")
async def export_model_options(
    model_id: int,
    fmt: ExportFormat = Query("xlsx", alias="format"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    model = await get_or_404(db, BoatModel, model_id, "Model")
    options = await list_model_options(model_id=model_id, db=db)
    return sheet_download(
        MODEL_OPTION_LAYOUT,
        text_export_rows(options, "option_text"),
        fmt,
        file_stem=f"{model.name}_Options",
    )


@router.get("/{model_id}/options/template")
async def model_options_template(
    model_id: int,
    fmt: ExportFormat = Query("xlsx", alias="format"),
) -> Response:
    return sheet_download(MODEL_OPTION_LAYOUT, [], fmt)


# ---------------------------------------------------------------------------
# Boat order headers
# ---------------------------------------------------------------------------


@router.get("/{model_id}/headers", response_model=list[BoatOrderHeaderResponse])
async def list_headers(
    model_id: int,
    db: AsyncSession = Depends(get_db),
) -> list[BoatOrderHeader]:
    result = await db.execute(
        select(BoatOrderHeader)
        .where(BoatOrderHeader.model_id == model_id)
        .order_by(BoatOrderHeader.id)
    )
    return list(result.scalars().all())


@router.post(
    "/{model_id}/headers",
    response_model=BoatOrderHeaderResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[RequireAdmin],
)
async def create_header(
    model_id: int,
    payload: BoatOrderHeaderCreate,
    db: AsyncSession = Depends(get_db),
) -> BoatOrderHeader:
    await get_or_404(db, BoatModel, model_id, "Model")
    header = BoatOrderHeader(model_id=model_id, header_text=payload.header_text)
    db.add(header)
    await db.flush()
    await db.refresh(header)
    return header


@router.put(
    "/{model_id}/headers/{header_id}",
    response_model=BoatOrderHeaderResponse,
    dependencies=[RequireAdmin],
)
async def update_header(
    model_id: int,
    header_id: int,
    payload: BoatOrderHeaderCreate,
    db: AsyncSession = Depends(get_db),
) -> BoatOrderHeader:
    header = await get_or_404(db, BoatOrderHeader, header_id, "Header")
    if header.model_id != model_id:
        raise HTTPException(status_code=404, detail="Header not found")
    header.header_text = payload.header_text
    await db.flush()
    await db.refresh(header)
    return header


@router.delete(
    "/{model_id}/headers/{header_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[RequireAdmin],
)
async def delete_header(
    model_id: int,
    header_id: int,
    db: AsyncSession = Depends(get_db),
) -> None:
    header = await get_or_404(db, BoatOrderHeader, header_id, "Header")
    if header.model_id != model_id:
        raise HTTPException(status_code=404, detail="Header not found")
    await db.delete(header)


@router.post(
    "/{model_id}/headers/import", response_model=ImportResult, dependencies=[RequireAdmin]
)
async def import_headers(
    model_id: int,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
) -> ImportResult:
    await get_or_404(db, BoatModel, model_id, "Model")
    sheet = parse_boat_order_header_rows(await read_upload_rows(file))
    db.add_all(
        [
            BoatOrderHeader(model_id=model_id, header_text=record.header_text)
            for record in sheet.records
        ]
    )
    await db.flush()
    return sheet.result(inserted=len(sheet.ok))


@router.get("/{model_id}/headers/export")
async def export_headers(
    model_id: int,
    fmt: ExportFormat = Query("xlsx", alias="format"),
    db: AsyncSession = Depends(get_db),
) -> Response:
    model = await get_or_404(db, BoatModel, model_id, "Model")
    headers = await list_headers(model_id=model_id, db=db)
    return sheet_download(
        BOAT_ORDER_HEADER_LAYOUT,
        text_export_rows(headers, "header_text"),
        fmt,
        file_stem=f"{model.name}_Headers",
    )


@router.get("/{model_id}/headers/template")
async def headers_template(
    model_id: int,
    fmt: ExportFormat = Query("xlsx", alias="format"),
) -> Response:
    return sheet_download(BOAT_ORDER_HEADER_LAYOUT, [], fmt)
