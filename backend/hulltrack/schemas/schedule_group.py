"""ScheduleGroup Pydantic schemas."""

from pydantic import BaseModel, Field


class ScheduleGroupCreate(BaseModel):
    """Schema for creating or updating a schedule group."""

    schedule_group: str = Field(..., min_length=1, max_length=100)
    days_offset: int | None = None
    offset_type: str | None = Field(None, max_length=50)
    station: str | None = Field(None, max_length=100)

    model_config = {"str_strip_whitespace": True}


class ScheduleGroupResponse(BaseModel):
    id: int
    schedule_group: str
    days_offset: int | None
    offset_type: str | None
    station: str | None

    model_config = {"from_attributes": True}


class BulkDelete(BaseModel):
    """Ids of rows to delete in one request."""

    ids: list[int] = Field(..., min_length=1)
