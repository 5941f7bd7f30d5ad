"""
Clinic data source contract and an in-memory implementation.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from app.core.logging import get_logger
from app.schemas.clinic import (
    AppointmentRecord,
    ClinicSnapshot,
    PatientRecord,
    VisitRecord,
)

logger = get_logger(__name__)


def _in_range(
    value: Optional[datetime],
    start: Optional[datetime],
    end: Optional[datetime]
) -> bool:
    """Half-open range check: start <= value < end."""
    if value is None:
        return False
    if start is not None and value < start:
        return False
    if end is not None and value >= end:
        return False
    return True


class ClinicDataSource(ABC):
    """Read-only access to the clinic's stored records."""

    @abstractmethod
    async def fetch_recent_visits(self, limit: int) -> list[VisitRecord]:
        """
        Fetch the most recent visits that carry signs or medicines text.

        Args:
            limit: Maximum number of visits to return.

        Returns:
            Visits ordered most-recent-first.
        """

    @abstractmethod
    async def count_patients(
        self,
        created_from: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        gender: Optional[str] = None
    ) -> int:
        """Count patients registered in [created_from, created_before)."""

    @abstractmethod
    async def count_patients_with_complete_records(self) -> int:
        """Count patients with at least one visit that has signs, treatment and diagnosis."""

    @abstractmethod
    async def fetch_patient_ages(self) -> list[int]:
        """Ages of patients whose age is recorded."""

    @abstractmethod
    async def count_visits(self, start: datetime, end: datetime) -> int:
        """Count visits dated in [start, end)."""

    @abstractmethod
    async def count_follow_ups(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None
    ) -> int:
        """Count visits whose follow-up date falls in [start, end)."""

    @abstractmethod
    async def count_appointments(self, linked_to_patient: Optional[bool] = None) -> int:
        """Count appointments, optionally only linked or only walk-in ones."""

    @abstractmethod
    async def fetch_custom_medicines(self) -> list[str]:
        """Clinic-specific medicine names, most used first."""


class InMemoryClinicDataSource(ClinicDataSource):
    """Clinic data source backed by in-process records."""

    def __init__(
        self,
        patients: Iterable[PatientRecord] = (),
        appointments: Iterable[AppointmentRecord] = (),
        custom_medicines: Iterable[str] = ()
    ):
        self._patients = list(patients)
        self._appointments = list(appointments)
        self._custom_medicines = list(custom_medicines)

    @classmethod
    def from_snapshot(cls, snapshot: ClinicSnapshot) -> "InMemoryClinicDataSource":
        return cls(
            patients=snapshot.patients,
            appointments=snapshot.appointments,
            custom_medicines=snapshot.custom_medicines
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "InMemoryClinicDataSource":
        """Load a JSON clinic snapshot from disk."""
        raw = Path(path).read_text(encoding="utf-8")
        snapshot = ClinicSnapshot.model_validate_json(raw)
        logger.info(
            f"Loaded clinic snapshot from {path}",
            extra={
                "patients": len(snapshot.patients),
                "appointments": len(snapshot.appointments)
            }
        )
        return cls.from_snapshot(snapshot)

    def _visits(self) -> list[VisitRecord]:
        return [visit for patient in self._patients for visit in patient.visits]

    async def fetch_recent_visits(self, limit: int) -> list[VisitRecord]:
        with_text = [
            v for v in self._visits()
            if v.signs is not None or v.medicines is not None
        ]
        with_text.sort(key=lambda v: v.visit_date, reverse=True)
        return with_text[:limit]

    async def count_patients(
        self,
        created_from: Optional[datetime] = None,
        created_before: Optional[datetime] = None,
        gender: Optional[str] = None
    ) -> int:
        return sum(
            1 for p in self._patients
            if _in_range(p.created_at, created_from, created_before)
            and (gender is None or p.gender == gender)
        )

    async def count_patients_with_complete_records(self) -> int:
        return sum(
            1 for p in self._patients
            if any(v.is_complete for v in p.visits)
        )

    async def fetch_patient_ages(self) -> list[int]:
        return [p.age for p in self._patients if p.age is not None]

    async def count_visits(self, start: datetime, end: datetime) -> int:
        return sum(1 for v in self._visits() if _in_range(v.visit_date, start, end))

    async def count_follow_ups(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None
    ) -> int:
        return sum(
            1 for v in self._visits()
            if _in_range(v.follow_up_date, start, end)
        )

    async def count_appointments(self, linked_to_patient: Optional[bool] = None) -> int:
        if linked_to_patient is None:
            return len(self._appointments)
        return sum(
            1 for a in self._appointments
            if (a.patient_id is not None) == linked_to_patient
        )

    async def fetch_custom_medicines(self) -> list[str]:
        return list(self._custom_medicines)
