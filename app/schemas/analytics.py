"""
Analytics dashboard schemas.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class RankedEntry(BaseModel):
    """A label and its occurrence count."""

    name: str = Field(..., description="Condition or medicine name")
    count: int = Field(..., ge=1, description="Number of occurrences")


class OverviewStats(BaseModel):
    """Headline patient and consultation figures."""

    total_patients: int = Field(..., ge=0)
    patients_this_month: int = Field(..., ge=0)
    patients_last_month: int = Field(..., ge=0)
    patients_this_week: int = Field(..., ge=0)
    consultations_today: int = Field(..., ge=0)
    patients_with_complete_records: int = Field(..., ge=0)
    avg_patients_per_day: float = Field(..., ge=0, description="This month's registrations per elapsed day")
    growth_rate: float = Field(..., description="Month-over-month registration growth (%)")
    completion_rate: float = Field(..., ge=0, description="Patients with complete records (%)")


class FollowUpStats(BaseModel):
    """Follow-up tracking counts."""

    upcoming: int = Field(..., ge=0)
    this_week: int = Field(..., ge=0)
    overdue: int = Field(..., ge=0)


class GenderDistribution(BaseModel):
    """Patients per recorded gender."""

    male: int = Field(..., ge=0)
    female: int = Field(..., ge=0)
    other: int = Field(..., ge=0)


class AppointmentStats(BaseModel):
    """Existing-patient vs walk-in appointments."""

    total: int = Field(..., ge=0)
    existing_patients: int = Field(..., ge=0)
    new_patients: int = Field(..., ge=0)
    existing_percent: float = Field(..., ge=0, le=100)
    new_percent: float = Field(..., ge=0, le=100)


class WeeklyRegistration(BaseModel):
    """New patient registrations for one Sunday-started week."""

    label: str = Field(..., description="Week 1 is the oldest week")
    week_start: datetime
    week_end: datetime
    count: int = Field(..., ge=0)
    change: int = Field(0, description="Difference from the previous week")
    change_percent: int = Field(0, description="Percent change from the previous week")
    is_current: bool = False


class AnalyticsReport(BaseModel):
    """Complete analytics dashboard payload."""

    generated_at: datetime = Field(default_factory=datetime.utcnow)
    overview: OverviewStats
    follow_ups: FollowUpStats
    top_conditions: list[RankedEntry] = Field(default_factory=list)
    top_medicines: list[RankedEntry] = Field(default_factory=list)
    gender: GenderDistribution
    age_groups: dict[str, int] = Field(..., description="Patients per age band")
    appointments: AppointmentStats
    weekly_registrations: list[WeeklyRegistration] = Field(default_factory=list)
    visits_analyzed: int = Field(..., ge=0, description="Visits in the text window")

    class Config:
        json_schema_extra = {
            "example": {
                "top_conditions": [
                    {"name": "Headache", "count": 2},
                    {"name": "Fever", "count": 1}
                ],
                "top_medicines": [{"name": "Paracetamol", "count": 3}],
                "age_groups": {"0-18": 1, "19-35": 4, "36-50": 2, "51-65": 0, "65+": 1}
            }
        }


class CacheInvalidationResponse(BaseModel):
    """Result of flushing cached dashboard reports."""

    cleared: int = Field(..., ge=0, description="Cache entries removed")
