"""BoatOrder, BoatOrderOption, and ingestion result Pydantic schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class BoatOrderOptionResponse(BaseModel):
    id: int
    boat_order_id: int
    option_text: str
    is_header: bool

    model_config = {"from_attributes": True}


class BoatOrderResponse(BaseModel):
    """Schema for boat order responses."""

    id: int
    hull_number: str
    revision_date: date
    file_name: str
    model: int
    created_at: datetime

    model_config = {"from_attributes": True}


class BoatOrderDetail(BoatOrderResponse):
    """A boat order together with its extracted option lines."""

    options: list[BoatOrderOptionResponse] = Field(default_factory=list)


class IngestionResult(BaseModel):
    """Outcome of uploading one production order PDF."""

    boat_order: BoatOrderResponse
    options_created: int = 0
    tasks_created: int = 0
    warnings: list[str] = Field(default_factory=list)


class PdfUrlResponse(BaseModel):
    file_name: str
    public_url: str
