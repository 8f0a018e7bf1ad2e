"""Bulk import result schemas."""

from typing import Any

from pydantic import BaseModel, Field


class ImportRowError(BaseModel):
    """Why one spreadsheet row was rejected."""

    row_number: int
    errors: dict[str, str]
    values: dict[str, Any] = Field(default_factory=dict)


class ImportPreview(BaseModel):
    """Parsed rows of an uploaded sheet, before anything is written."""

    records: list[dict[str, Any]] = Field(default_factory=list)
    errors: list[ImportRowError] = Field(default_factory=list)
    skipped_rows: int = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class ImportResult(BaseModel):
    inserted: int = 0
    skipped_rows: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)
