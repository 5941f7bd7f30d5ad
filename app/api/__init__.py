"""API routes for the Clinic Analytics Engine."""

from fastapi import APIRouter

from app.api.v1 import analytics, health, medical_text

# Create main API router
api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(analytics.router)
api_router.include_router(medical_text.router)

__all__ = ["api_router"]
