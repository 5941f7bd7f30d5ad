"""API v1 routes."""

from app.api.v1 import analytics, health, medical_text

__all__ = ["analytics", "health", "medical_text"]
