"""
Service wiring.

``ClinicServices`` owns one store per table and the five entity services
built over them. Nothing in the core reaches for a module-level store; the
container is built once per process (or per test) and passed around.
"""
from typing import Dict, Optional
import logging

from sqlalchemy.orm import sessionmaker

from .config import Settings
from .core.providers import Clock, IdProvider, SystemClock, UuidProvider
from .core.store import Store
from .database import create_db_engine, create_session_factory
from .doctors.models import Doctor
from .doctors.schemas import DoctorRecord
from .doctors.service import DoctorService
from .health_records.models import HealthRecord
from .health_records.schemas import HealthRecordEntry
from .health_records.service import HealthRecordService
from .lab_tests.models import LabTest
from .lab_tests.schemas import LabTestRecord
from .lab_tests.service import LabTestService
from .patients.models import Patient
from .patients.schemas import PatientRecord
from .patients.service import PatientService
from .prescriptions.models import Prescription
from .prescriptions.schemas import PrescriptionRecord
from .prescriptions.service import PrescriptionService

# Set up logging
logger = logging.getLogger(__name__)

class ClinicServices:
    """
    The five entity services and the stores they share.
    
    Attributes:
        patients: Patient service
        doctors: Doctor service
        health_records: Health record service
        prescriptions: Prescription service
        lab_tests: Lab test service
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        ids: Optional[IdProvider] = None,
        clock: Optional[Clock] = None,
    ):
        ids = ids or UuidProvider()
        clock = clock or SystemClock()

        self.patient_store = Store(session_factory, Patient, PatientRecord)
        self.doctor_store = Store(session_factory, Doctor, DoctorRecord)
        self.health_record_store = Store(session_factory, HealthRecord, HealthRecordEntry)
        self.prescription_store = Store(session_factory, Prescription, PrescriptionRecord)
        self.lab_test_store = Store(session_factory, LabTest, LabTestRecord)

        self.patients = PatientService(self.patient_store, ids, clock)
        self.doctors = DoctorService(self.doctor_store, ids, clock)
        self.health_records = HealthRecordService(
            self.health_record_store, self.patient_store, ids, clock
        )
        self.prescriptions = PrescriptionService(
            self.prescription_store, self.doctor_store, self.patient_store,
            self.health_records, ids, clock
        )
        self.lab_tests = LabTestService(
            self.lab_test_store, self.doctor_store, self.patient_store,
            self.health_records, ids, clock
        )

    def counts(self) -> Dict[str, int]:
        """Number of records held by each table."""
        stores = (
            self.patient_store,
            self.doctor_store,
            self.health_record_store,
            self.prescription_store,
            self.lab_test_store,
        )
        return {store.name: len(store) for store in stores}


def build_services(
    settings: Settings,
    ids: Optional[IdProvider] = None,
    clock: Optional[Clock] = None,
) -> ClinicServices:
    """
    Build the services over the database named in the settings.
    
    Args:
        settings: Application settings
        ids: Identifier provider (defaults to random UUIDs)
        clock: Timestamp provider (defaults to the system clock)
        
    Returns:
        ClinicServices: Wired services
    """
    engine = create_db_engine(settings.database_url)
    logger.info(f"Opening record tables on {engine.url.render_as_string(hide_password=True)}")
    return ClinicServices(create_session_factory(engine), ids=ids, clock=clock)
