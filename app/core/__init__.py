"""Core modules for the Clinic Analytics Engine."""

from app.core.auth import verify_api_key
from app.core.cache import CacheService, get_cache_service
from app.core.exceptions import ClinicAnalyticsError, MedicalDataError
from app.core.logging import get_logger, setup_logging
from app.core.rate_limit import limiter

__all__ = [
    "verify_api_key",
    "CacheService",
    "get_cache_service",
    "ClinicAnalyticsError",
    "MedicalDataError",
    "get_logger",
    "setup_logging",
    "limiter",
]
