"""Boat order upload, search, and PDF lookup endpoints."""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hulltrack.core.database import get_db
from hulltrack.core.storage import BucketStore, get_order_bucket
from hulltrack.models.boat_model import BoatModel
from hulltrack.models.boat_order import BoatOrder
from hulltrack.schemas.boat_order import (
    BoatOrderDetail,
    BoatOrderResponse,
    IngestionResult,
    PdfUrlResponse,
)
from hulltrack.services.catalog_helpers import get_or_404
from hulltrack.services.order_ingest import IngestionError, OrderIngestionService

router = APIRouter(prefix="/boat-orders", tags=["boat-orders"])


@router.post("/upload", response_model=IngestionResult, status_code=status.HTTP_201_CREATED)
async def upload_boat_order(
    file: UploadFile = File(...),
    model_id: int | None = Form(None),
    db: AsyncSession = Depends(get_db),
    bucket: BucketStore = Depends(get_order_bucket),
) -> IngestionResult:
    """Ingest a production order PDF.

    Creates the boat order, its option lines and one task per master task of
    the order's model. Steps already committed stay in place on failure.
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="Please select a file to upload.")
    data = await file.read()
    try:
        service = OrderIngestionService(db, bucket)
        return await service.ingest(file.filename, data, model_id=model_id)
    except IngestionError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message)


@router.get("", response_model=list[BoatOrderResponse])
async def list_boat_orders(
    search: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> list[BoatOrder]:
    """List boat orders, newest first.

    ``search`` matches hull number, revision date, file name, the two-digit
    model code, or the model name, case-insensitively.
    """
    query = select(BoatOrder)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.outerjoin(BoatModel, BoatModel.id == BoatOrder.model).where(
            or_(
                BoatOrder.hull_number.ilike(pattern),
                cast(BoatOrder.revision_date, String).ilike(pattern),
                BoatOrder.file_name.ilike(pattern),
                func.substr(BoatOrder.hull_number, 1, 2).ilike(pattern),
                BoatModel.name.ilike(pattern),
            )
        )
    query = query.order_by(BoatOrder.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return list(result.scalars().all())


@router.get("/{order_id}", response_model=BoatOrderDetail)
async def get_boat_order(order_id: int, db: AsyncSession = Depends(get_db)) -> BoatOrder:
    """Get a boat order with its extracted option lines."""
    result = await db.execute(
        select(BoatOrder).options(selectinload(BoatOrder.options)).where(BoatOrder.id == order_id)
    )
    order = result.scalar_one_or_none()
    if order is None:
        raise HTTPException(status_code=404, detail="Boat order not found")
    return order


@router.get("/{order_id}/pdf-url", response_model=PdfUrlResponse)
async def get_boat_order_pdf_url(
    order_id: int,
    db: AsyncSession = Depends(get_db),
    bucket: BucketStore = Depends(get_order_bucket),
) -> PdfUrlResponse:
    """Public URL of the order's stored PDF."""
    order = await get_or_404(db, BoatOrder, order_id, "Boat order")
    if not bucket.exists(order.file_name):
        raise HTTPException(status_code=404, detail="PDF not found in storage")
    return PdfUrlResponse(file_name=order.file_name, public_url=bucket.public_url(order.file_name))
