"""Boat order ingestion pipeline.

Steps, in order:
1. Parse hull number and revision date from the file name
2. Extract option lines from the PDF (when EXTRACT_ORDER_OPTIONS is on)
3. Resolve the boat model
4. Store the PDF in the order bucket
5. Insert the boat order and commit
6. Insert option lines and commit
7. Expand the model's master tasks into per-hull tasks and commit

Each step commits on its own, so a failure late in the pipeline leaves the
earlier rows in place. The caller reports the failure; nothing is undone.
"""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.core.config import settings
from hulltrack.core.storage import BucketStore, StorageError
from hulltrack.models.boat_model import BoatModel, BoatOrderHeader
from hulltrack.models.boat_order import (
    FILE_NAME_MAX_LENGTH,
    HULL_NUMBER_MAX_LENGTH,
    BoatOrder,
    BoatOrderOption,
)
from hulltrack.models.do_not_show import DoNotShowOption
from hulltrack.schemas.boat_order import BoatOrderResponse, IngestionResult
from hulltrack.services.filename_parser import parse_order_filename
from hulltrack.services.pdf_text import PdfExtractionError, extract_pdf_text, split_option_lines
from hulltrack.services.task_expander import expand_master_tasks, fetch_master_tasks

logger = logging.getLogger(__name__)

FILENAME_PARSE_FAILED = "Failed to parse Hull # or Revision Date from file name."
PDF_EXTRACT_FAILED = "Failed to extract data from PDF."


class IngestionError(Exception):
    """Raised when a pipeline step fails; carries the user-facing message."""

    def __init__(self, message: str, status_code: int = 422) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _normalize(text: str) -> str:
    return text.strip().casefold()


def classify_option_lines(
    lines: list[str],
    hidden_texts: list[str],
    header_texts: list[str],
) -> list[tuple[str, bool]]:
    """Drop hidden lines and flag headers; returns ``(line, is_header)`` pairs."""
    hidden = {_normalize(text) for text in hidden_texts}
    headers = {_normalize(text) for text in header_texts}
    return [
        (line, _normalize(line) in headers)
        for line in lines
        if _normalize(line) not in hidden
    ]


class OrderIngestionService:
    """Turns an uploaded production order PDF into an order and its tasks."""

    def __init__(
        self,
        db: AsyncSession,
        bucket: BucketStore,
        extract_options: bool | None = None,
    ) -> None:
        self.db = db
        self.bucket = bucket
        self.extract_options = (
            settings.EXTRACT_ORDER_OPTIONS if extract_options is None else extract_options
        )

    async def ingest(
        self,
        file_name: str,
        data: bytes,
        model_id: int | None = None,
    ) -> IngestionResult:
        hull_number, revision = parse_order_filename(file_name)
        if hull_number is None or revision is None:
            raise IngestionError(FILENAME_PARSE_FAILED)
        if len(file_name) > FILE_NAME_MAX_LENGTH:
            raise IngestionError(f"File name is longer than {FILE_NAME_MAX_LENGTH} characters.")
        if len(hull_number) > HULL_NUMBER_MAX_LENGTH:
            raise IngestionError(
                f"Hull # {hull_number} is longer than {HULL_NUMBER_MAX_LENGTH} digits."
            )
        try:
            revision_date = date.fromisoformat(revision)
        except ValueError as exc:
            raise IngestionError(f"Invalid revision date {revision} in file name.") from exc
        logger.info("Ingesting %s: hull %s, revision %s", file_name, hull_number, revision)

        option_lines: list[str] = []
        if self.extract_options:
            try:
                option_lines = split_option_lines(extract_pdf_text(data))
            except PdfExtractionError as exc:
                logger.error("PDF extraction failed for %s: %s", file_name, exc)
                raise IngestionError(PDF_EXTRACT_FAILED) from exc

        model = await self._resolve_model(hull_number, model_id)

        try:
            self.bucket.upload(file_name, data)
        except StorageError as exc:
            status_code = 409 if "already exists" in str(exc) else 502
            raise IngestionError(f"Error uploading file: {exc}", status_code=status_code) from exc

        order = await self._insert_order(hull_number, revision_date, file_name, model.id)

        try:
            options_created = await self._insert_options(order.id, model.id, option_lines)
            tasks_created = await self._insert_tasks(hull_number, model.id)
        except SQLAlchemyError as exc:
            logger.exception("Ingestion of %s failed after order %d was saved", file_name, order.id)
            raise IngestionError(
                f"Boat order saved but follow-up step failed: {exc}", status_code=500
            ) from exc

        warnings: list[str] = []
        if tasks_created == 0:
            message = f"No master tasks are defined for model {model.name}; no tasks were created."
            logger.warning("Order %d (hull %s): %s", order.id, hull_number, message)
            warnings.append(message)

        logger.info(
            "Order %d ingested: %d options, %d tasks", order.id, options_created, tasks_created
        )
        return IngestionResult(
            boat_order=BoatOrderResponse.model_validate(order),
            options_created=options_created,
            tasks_created=tasks_created,
            warnings=warnings,
        )

    async def _resolve_model(self, hull_number: str, model_id: int | None) -> BoatModel:
        """An explicit model id wins; otherwise match the hull's two-digit prefix."""
        if model_id is not None:
            result = await self.db.execute(select(BoatModel).where(BoatModel.id == model_id))
            model = result.scalar_one_or_none()
            if model is None:
                raise IngestionError(f"Model {model_id} not found.", status_code=404)
            return model

        prefix = hull_number[:2]
        result = await self.db.execute(
            select(BoatModel)
            .where(BoatModel.name.startswith(prefix))
            .order_by(BoatModel.name)
            .limit(1)
        )
        model = result.scalars().first()
        if model is None:
            raise IngestionError(
                f"No model matches hull number {hull_number}; choose a model and retry."
            )
        return model

    async def _insert_order(
        self,
        hull_number: str,
        revision_date: date,
        file_name: str,
        model_id: int,
    ) -> BoatOrder:
        order = BoatOrder(
            hull_number=hull_number,
            revision_date=revision_date,
            file_name=file_name,
            model=model_id,
        )
        try:
            self.db.add(order)
            await self.db.flush()
            await self.db.commit()
            await self.db.refresh(order)
        except SQLAlchemyError as exc:
            logger.exception("Inserting boat order for %s failed", file_name)
            raise IngestionError(f"Error inserting boat order: {exc}", status_code=500) from exc
        return order

    async def _insert_options(self, order_id: int, model_id: int, lines: list[str]) -> int:
        if not lines:
            return 0

        hidden = await self.db.execute(select(DoNotShowOption.option_text))
        headers = await self.db.execute(
            select(BoatOrderHeader.header_text).where(BoatOrderHeader.model_id == model_id)
        )
        classified = classify_option_lines(
            lines, list(hidden.scalars().all()), list(headers.scalars().all())
        )
        if not classified:
            return 0

        self.db.add_all(
            [
                BoatOrderOption(boat_order_id=order_id, option_text=line, is_header=is_header)
                for line, is_header in classified
            ]
        )
        await self.db.commit()
        return len(classified)

    async def _insert_tasks(self, hull_number: str, model_id: int) -> int:
        master_tasks = await fetch_master_tasks(self.db, model_id)
        instances = expand_master_tasks(master_tasks, hull_number, model_id)
        if not instances:
            return 0
        self.db.add_all(instances)
        await self.db.commit()
        return len(instances)
