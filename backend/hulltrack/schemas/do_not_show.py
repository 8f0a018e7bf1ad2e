"""DoNotShowOption Pydantic schemas."""

from pydantic import BaseModel, Field


class DoNotShowCreate(BaseModel):
    option_text: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}


class DoNotShowResponse(BaseModel):
    id: int
    option_text: str

    model_config = {"from_attributes": True}
