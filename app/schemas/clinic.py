"""
Clinic record schemas.

Read-side views of the records owned by the clinic's storage layer.
Timestamps are held as naive local time; offset-aware values (such as the
`Z`-suffixed ISO strings of a JSON export) are converted on the way in.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an offset-aware datetime to naive local time."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class VisitRecord(BaseModel):
    """A consultation with its free-text clinical notes."""

    signs: Optional[str] = Field(None, description="Signs/symptoms text")
    medicines: Optional[str] = Field(None, description="Medicines text, one per line")
    treatment: Optional[str] = Field(None, description="Treatment notes")
    diagnosis: Optional[str] = Field(None, description="Diagnosis notes")
    visit_date: datetime = Field(..., description="When the visit took place")
    follow_up_date: Optional[datetime] = Field(None, description="Scheduled follow-up")

    @field_validator("visit_date", "follow_up_date")
    @classmethod
    def validate_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Normalize timestamps to naive local time."""
        return to_local_naive(v)

    @property
    def is_complete(self) -> bool:
        """Signs, treatment and diagnosis are all recorded."""
        return (
            self.signs is not None
            and self.treatment is not None
            and self.diagnosis is not None
        )


class PatientRecord(BaseModel):
    """A registered patient and their visits."""

    patient_id: str = Field(..., description="Clinic patient ID, e.g. FC-001")
    name: str = Field(..., min_length=1)
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = Field(None, description="Male, Female or Other")
    created_at: datetime = Field(..., description="Registration time")
    visits: list[VisitRecord] = Field(default_factory=list)

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: datetime) -> datetime:
        """Normalize registration time to naive local time."""
        return to_local_naive(v)


class AppointmentRecord(BaseModel):
    """A booked appointment; walk-ins have no linked patient."""

    patient_id: Optional[str] = None
    scheduled_for: datetime

    @field_validator("scheduled_for")
    @classmethod
    def validate_scheduled_for(cls, v: datetime) -> datetime:
        return to_local_naive(v)


class ClinicSnapshot(BaseModel):
    """Serialized clinic data, loadable from a JSON file."""

    patients: list[PatientRecord] = Field(default_factory=list)
    appointments: list[AppointmentRecord] = Field(default_factory=list)
    custom_medicines: list[str] = Field(default_factory=list)
