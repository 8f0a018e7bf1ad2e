"""MasterTask Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class MasterTaskCreate(BaseModel):
    """Schema for creating or updating a master task."""

    model: int = Field(..., description="Boat model id")
    station: str = Field(..., min_length=1, max_length=100)
    task_name: str = Field(..., min_length=1, max_length=300)
    labor_hours: float = Field(default=0.0, ge=0)
    associated_options: list[int] | None = None
    schedule_group: int | None = None
    duration_days: int | None = Field(None, ge=0)

    model_config = {"str_strip_whitespace": True}


class MasterTaskResponse(BaseModel):
    """Schema for master task responses."""

    id: int
    model: int
    station: str
    task_name: str
    labor_hours: float
    associated_options: list[int] | None
    schedule_group: int | None
    duration_days: int | None
    created_at: datetime

    model_config = {"from_attributes": True}
