"""
FastAPI dependency injection utilities.
"""

from typing import Optional

from app.config import get_settings
from app.core.auth import verify_api_key
from app.core.cache import get_cache_service
from app.core.logging import get_logger
from app.services.analytics_service import AnalyticsService
from app.services.clinic_data import ClinicDataSource, InMemoryClinicDataSource

logger = get_logger(__name__)

# Process-wide clinic data source
_data_source: Optional[ClinicDataSource] = None


def get_clinic_data_source() -> ClinicDataSource:
    """Get the clinic data source, loading the configured snapshot once."""
    global _data_source

    if _data_source is None:
        settings = get_settings()
        if settings.CLINIC_SNAPSHOT_PATH:
            _data_source = InMemoryClinicDataSource.from_file(settings.CLINIC_SNAPSHOT_PATH)
        else:
            logger.warning("CLINIC_SNAPSHOT_PATH not set; serving an empty clinic")
            _data_source = InMemoryClinicDataSource()

    return _data_source


def set_clinic_data_source(source: Optional[ClinicDataSource]) -> None:
    """Replace the process-wide data source (None resets it)."""
    global _data_source
    _data_source = source


async def get_analytics_service() -> AnalyticsService:
    """Get an analytics service wired to the data source and cache."""
    cache = await get_cache_service()
    return AnalyticsService(get_clinic_data_source(), cache=cache)


__all__ = [
    "verify_api_key",
    "get_clinic_data_source",
    "set_clinic_data_source",
    "get_analytics_service",
]
