"""Station Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class StationCreate(BaseModel):
    """Schema for creating or updating a station."""

    name: str = Field(..., min_length=1, max_length=100)
    station_sequence: int | None = Field(None, ge=0, description="Presentation order")

    model_config = {"str_strip_whitespace": True}


class StationResponse(BaseModel):
    """Schema for station responses."""

    id: int
    name: str
    station_sequence: int | None
    created_at: datetime

    model_config = {"from_attributes": True}


class StationReorder(BaseModel):
    """Station ids in their new presentation order."""

    station_ids: list[int] = Field(..., min_length=1)

    @field_validator("station_ids")
    @classmethod
    def reject_duplicates(cls, station_ids: list[int]) -> list[int]:
        duplicates = sorted({i for i in station_ids if station_ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate station ids: {', '.join(map(str, duplicates))}")
        return station_ids
