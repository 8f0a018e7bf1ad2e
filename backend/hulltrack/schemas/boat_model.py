"""Boat model, model option, and order header Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class BoatModelCreate(BaseModel):
    """Schema for creating or renaming a boat model."""

    name: str = Field(..., min_length=1, max_length=100)

    model_config = {"str_strip_whitespace": True}


class BoatModelResponse(BaseModel):
    """Schema for boat model responses."""

    id: int
    name: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ModelOptionCreate(BaseModel):
    option_text: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}


class ModelOptionResponse(BaseModel):
    id: int
    model_id: int
    option_text: str

    model_config = {"from_attributes": True, "protected_namespaces": ()}


class BoatOrderHeaderCreate(BaseModel):
    header_text: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": True}


class BoatOrderHeaderResponse(BaseModel):
    id: int
    model_id: int
    header_text: str

    model_config = {"from_attributes": True, "protected_namespaces": ()}
