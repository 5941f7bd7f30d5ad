"""
Pytest fixtures for Clinic Analytics Engine tests.
"""

import os
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

# Set environment variables before imports
os.environ["CLINIC_SERVICE_API_KEY"] = "test-api-key-12345"
os.environ["REDIS_URL"] = "redis://localhost:6379"
os.environ["DEBUG"] = "true"

from app.main import app
from app.schemas.clinic import AppointmentRecord, PatientRecord, VisitRecord
from app.services.clinic_data import InMemoryClinicDataSource


@pytest.fixture
def test_client():
    """Create synchronous test client."""
    return TestClient(app)


@pytest.fixture
def api_key_headers():
    """Headers with valid API key."""
    return {"X-API-Key": "test-api-key-12345"}


@pytest.fixture
def clinic_now() -> datetime:
    """Reference time for report tests: Wednesday 12 March 2025, 10:00."""
    return datetime(2025, 3, 12, 10, 0)


@pytest.fixture
def sample_patients() -> list[PatientRecord]:
    """Five patients spread over this week, this month, last month and earlier."""
    return [
        PatientRecord(
            patient_id="FC-001",
            name="Asha",
            age=10,
            gender="Male",
            created_at=datetime(2025, 3, 10, 9, 0),
            visits=[
                VisitRecord(
                    signs="fever and headache",
                    medicines="Crocin 500mg\nAugmentin 625mg",
                    treatment="Rest and fluids",
                    diagnosis="Viral fever",
                    visit_date=datetime(2025, 3, 12, 9, 0),
                    follow_up_date=datetime(2025, 3, 15, 10, 0),
                )
            ],
        ),
        PatientRecord(
            patient_id="FC-002",
            name="Bina",
            age=30,
            gender="Female",
            created_at=datetime(2025, 3, 2, 12, 0),
            visits=[
                VisitRecord(
                    signs="no fever, just headache",
                    medicines="Paracetamol 650mg\n\nDolo 650",
                    visit_date=datetime(2025, 3, 5, 11, 0),
                    follow_up_date=datetime(2025, 3, 10, 10, 0),
                )
            ],
        ),
        PatientRecord(
            patient_id="FC-003",
            name="Chetan",
            age=None,
            gender="Female",
            created_at=datetime(2025, 2, 20, 8, 30),
            visits=[
                VisitRecord(
                    signs="hypertension",
                    medicines="Amlodipine 5mg",
                    treatment="Medication",
                    diagnosis="Hypertension",
                    visit_date=datetime(2025, 2, 20, 10, 0),
                )
            ],
        ),
        PatientRecord(
            patient_id="FC-004",
            name="Devi",
            age=70,
            gender="Other",
            created_at=datetime(2025, 2, 1, 9, 0),
        ),
        PatientRecord(
            patient_id="FC-005",
            name="Eshan",
            age=50,
            gender="Male",
            created_at=datetime(2025, 1, 15, 9, 0),
            visits=[VisitRecord(visit_date=datetime(2025, 1, 15, 9, 30))],
        ),
    ]


@pytest.fixture
def sample_data_source(sample_patients) -> InMemoryClinicDataSource:
    """In-memory clinic with two linked appointments and one walk-in."""
    return InMemoryClinicDataSource(
        patients=sample_patients,
        appointments=[
            AppointmentRecord(patient_id="FC-001", scheduled_for=datetime(2025, 3, 15, 10, 0)),
            AppointmentRecord(patient_id="FC-002", scheduled_for=datetime(2025, 3, 10, 10, 0)),
            AppointmentRecord(patient_id=None, scheduled_for=datetime(2025, 3, 12, 16, 0)),
        ],
        custom_medicines=["Becocnx Plus", "paracetamol 500MG"],
    )
