"""
Common schemas used across multiple endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        json_schema_extra = {
            "example": {
                "error": "ServiceUnavailable",
                "message": "Clinic records are temporarily unavailable",
                "timestamp": "2025-01-15T10:30:00Z"
            }
        }


class VocabularyStatus(BaseModel):
    """Sizes of the loaded medical vocabulary tables."""

    conditions: int = Field(..., ge=0)
    synonym_entries: int = Field(..., ge=0)
    brand_aliases: int = Field(..., ge=0)
    medicine_suggestions: int = Field(..., ge=0)


class HealthResponse(BaseModel):
    """Health check response."""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    vocabulary: VocabularyStatus
    redis: bool = Field(default=False, description="Redis connection status")
    uptime_seconds: float = Field(default=0, description="Service uptime")

    class Config:
        json_schema_extra = {
            "example": {
                "service": "Clinic Analytics Engine",
                "version": "1.0.0",
                "status": "healthy",
                "timestamp": "2025-01-15T10:30:00Z",
                "vocabulary": {
                    "conditions": 41,
                    "synonym_entries": 10,
                    "brand_aliases": 26,
                    "medicine_suggestions": 54
                },
                "redis": True,
                "uptime_seconds": 3600.5
            }
        }
