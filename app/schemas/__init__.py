"""Pydantic schemas for request/response validation."""

from app.schemas.common import (
    ErrorResponse,
    HealthResponse,
    VocabularyStatus,
)
from app.schemas.clinic import (
    AppointmentRecord,
    ClinicSnapshot,
    PatientRecord,
    VisitRecord,
)
from app.schemas.analytics import (
    AnalyticsReport,
    AppointmentStats,
    CacheInvalidationResponse,
    FollowUpStats,
    GenderDistribution,
    OverviewStats,
    RankedEntry,
    WeeklyRegistration,
)
from app.schemas.medical_text import (
    DetectConditionsResponse,
    ExtractMedicinesResponse,
    GroupMedicinesRequest,
    GroupMedicinesResponse,
    NormalizeRequest,
    NormalizeResponse,
    SuggestionsResponse,
    TextRequest,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    "VocabularyStatus",
    # Clinic records
    "AppointmentRecord",
    "ClinicSnapshot",
    "PatientRecord",
    "VisitRecord",
    # Analytics
    "AnalyticsReport",
    "AppointmentStats",
    "CacheInvalidationResponse",
    "FollowUpStats",
    "GenderDistribution",
    "OverviewStats",
    "RankedEntry",
    "WeeklyRegistration",
    # Medical text
    "DetectConditionsResponse",
    "ExtractMedicinesResponse",
    "GroupMedicinesRequest",
    "GroupMedicinesResponse",
    "NormalizeRequest",
    "NormalizeResponse",
    "SuggestionsResponse",
    "TextRequest",
]
