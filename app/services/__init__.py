"""Services for the Clinic Analytics Engine."""

from app.services.analytics_service import AnalyticsService, rank_frequencies
from app.services.clinic_data import ClinicDataSource, InMemoryClinicDataSource
from app.services.condition_detector import detect_conditions
from app.services.medicine_normalizer import (
    extract_medicines,
    group_medicines,
    normalize_medicine,
)
from app.services.suggestions import suggest_conditions, suggest_medicines

__all__ = [
    "AnalyticsService",
    "rank_frequencies",
    "ClinicDataSource",
    "InMemoryClinicDataSource",
    "detect_conditions",
    "extract_medicines",
    "group_medicines",
    "normalize_medicine",
    "suggest_conditions",
    "suggest_medicines",
]
