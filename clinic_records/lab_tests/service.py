"""
Lab Test Service - Business logic for lab tests.
"""
from typing import List
import logging

from ..core.providers import Clock, IdProvider
from ..core.store import Store
from ..core.validation import check_lab_test_payload
from ..doctors.schemas import DoctorRecord
from ..exceptions import InvalidPayloadError, NotFoundError
from ..health_records.service import HealthRecordService
from ..patients.schemas import PatientRecord
from .schemas import LabTestPayload, LabTestRecord

# Set up logging
logger = logging.getLogger(__name__)

class LabTestService:
    """
    Lab test operations over injected stores.
    
    Mirrors the prescription flow: both references are checked before the
    lab test is stored, then its id is linked to the patient's current
    health record when one exists.
    """

    def __init__(
        self,
        store: Store[LabTestRecord],
        doctors: Store[DoctorRecord],
        patients: Store[PatientRecord],
        health_records: HealthRecordService,
        ids: IdProvider,
        clock: Clock,
    ):
        self.store = store
        self.doctors = doctors
        self.patients = patients
        self.health_records = health_records
        self.ids = ids
        self.clock = clock

    def add_lab_test(self, payload: LabTestPayload) -> LabTestRecord:
        """
        Record a lab test and link it to the patient's health record.
        
        Raises:
            InvalidPayloadError: If a required field is empty
            NotFoundError: If the doctor or the patient does not exist
        """
        reason = check_lab_test_payload(payload)
        if reason:
            logger.warning(f"Rejected lab test payload: {reason}")
            raise InvalidPayloadError(reason)
        if payload.doctor_id not in self.doctors:
            raise NotFoundError(f"The doctor with ID {payload.doctor_id} not found")
        if payload.patient_id not in self.patients:
            raise NotFoundError(f"The patient with ID {payload.patient_id} not found")

        lab_test = LabTestRecord(
            id=self.ids.new_id(),
            patient_id=payload.patient_id,
            doctor_id=payload.doctor_id,
            test_type=payload.test_type,
            results=payload.results,
            created_at=self.clock.now(),
        )
        self.store.insert(lab_test.id, lab_test)
        logger.info(f"Created lab test {lab_test.id} ({lab_test.test_type}) for patient {lab_test.patient_id}")

        self.health_records.link_lab_test(lab_test.patient_id, lab_test.id)
        return lab_test

    def get_lab_tests(self) -> List[LabTestRecord]:
        return self.store.values()
