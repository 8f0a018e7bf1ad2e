"""CompanyHoliday Pydantic schemas."""

from datetime import date

from pydantic import BaseModel, Field


class CompanyHolidayCreate(BaseModel):
    holiday_name: str = Field(..., min_length=1, max_length=100)
    holiday_date: date

    model_config = {"str_strip_whitespace": True}


class CompanyHolidayResponse(BaseModel):
    id: int
    holiday_name: str
    holiday_date: date

    model_config = {"from_attributes": True}
