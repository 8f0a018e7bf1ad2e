"""TaskInstance Pydantic schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator

TaskStatus = Literal["Upcoming", "In Progress", "Completed", "Overdue"]

PRINT_COLUMNS: tuple[str, ...] = (
    "hull_number",
    "task_name",
    "station",
    "start_date",
    "end_date",
    "status",
    "schedule_group",
)


class TaskInstanceResponse(BaseModel):
    """Schema for per-hull task responses."""

    id: int
    hull_number: str
    model: int
    station: str
    task_name: str
    start_date: date | None
    end_date: date | None
    status: str
    completed_by: str | None
    applicable: bool
    schedule_group: int | None
    task_data_id: int
    updated_at: datetime

    model_config = {"from_attributes": True}


class TaskStatusUpdate(BaseModel):
    """A status change, optionally signed by the employee who made it."""

    status: TaskStatus
    completed_by: str | None = Field(None, max_length=50)

    model_config = {"str_strip_whitespace": True}


class TaskDatesUpdate(BaseModel):
    start_date: date | None = None
    end_date: date | None = None

    @model_validator(mode="after")
    def check_order(self) -> "TaskDatesUpdate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
