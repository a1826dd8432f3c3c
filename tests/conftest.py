"""
Test configuration for the clinic records service.
"""
import pytest
from fastapi.testclient import TestClient

from clinic_records.config import Settings
from clinic_records.container import build_services
from clinic_records.core.providers import FixedClock, SequentialIds
from clinic_records.doctors.schemas import DoctorPayload
from clinic_records.main import create_app
from clinic_records.patients.schemas import PatientPayload

# Test database URL - in-memory SQLite, fresh for every test
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def settings():
    return Settings(database_url=TEST_DATABASE_URL, log_level="DEBUG")


@pytest.fixture
def clock():
    """A clock starting at 1000 that ticks 10 units per reading."""
    return FixedClock(start=1_000, step=10)


@pytest.fixture
def services(settings, clock):
    """
    Create services over a fresh in-memory database.
    """
    return build_services(settings, ids=SequentialIds("id"), clock=clock)


@pytest.fixture
def client(settings, services):
    """
    Create a test client bound to the test services.
    """
    app = create_app(settings=settings, services=services)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def patient_payload():
    return PatientPayload(
        name="Alice",
        age=30,
        gender="female",
        bloodType="O",
        medicalHistory="",
    )


@pytest.fixture
def patient(services, patient_payload):
    return services.patients.add_patient(patient_payload)


@pytest.fixture
def doctor(services):
    return services.doctors.add_doctor(DoctorPayload(name="Dr. Grey", specialization="Cardiology"))
