"""
Medical text schemas for the normalization, extraction, detection and
autocomplete endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class NormalizeRequest(BaseModel):
    """A single medicine mention to normalize."""

    medicine: str = Field(..., max_length=500, description="Raw medicine mention")

    class Config:
        json_schema_extra = {"example": {"medicine": "crocin 500mg"}}


class NormalizeResponse(BaseModel):
    original: str
    normalized: str


class TextRequest(BaseModel):
    """Free-text clinical note; null or empty yields an empty result."""

    text: Optional[str] = Field(None, max_length=20000)

    class Config:
        json_schema_extra = {"example": {"text": "Paracetamol 500mg\nCrocin"}}


class ExtractMedicinesResponse(BaseModel):
    medicines: list[str] = Field(default_factory=list, description="Normalized names in input order")


class GroupMedicinesRequest(BaseModel):
    medicines: list[str] = Field(..., max_length=5000, description="Normalized medicine names")


class GroupMedicinesResponse(BaseModel):
    groups: dict[str, int] = Field(default_factory=dict, description="Dosage-free name -> count")


class DetectConditionsResponse(BaseModel):
    conditions: list[str] = Field(default_factory=list, description="Detected canonical conditions")


class SuggestionsResponse(BaseModel):
    query: str
    suggestions: list[str] = Field(default_factory=list)
