"""
Prescription Service - Business logic for prescriptions.

A prescription must name an existing doctor and patient. Once stored, its id
is appended to the patient's current health record when the patient has one.
"""
from typing import List
import logging

from ..core.providers import Clock, IdProvider
from ..core.store import Store
from ..core.validation import check_prescription_payload
from ..doctors.schemas import DoctorRecord
from ..exceptions import InvalidPayloadError, NotFoundError
from ..health_records.service import HealthRecordService
from ..patients.schemas import PatientRecord
from .schemas import PrescriptionPayload, PrescriptionRecord

# Set up logging
logger = logging.getLogger(__name__)

class PrescriptionService:
    """Prescription operations over injected stores."""

    def __init__(
        self,
        store: Store[PrescriptionRecord],
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

    def add_prescription(self, payload: PrescriptionPayload) -> PrescriptionRecord:
        """
        Issue a prescription and link it to the patient's health record.
        
        Args:
            payload: Doctor id, patient id, medication and dosage
            
        Returns:
            PrescriptionRecord: The stored prescription, whether or not it was linked
            
        Raises:
            InvalidPayloadError: If a required field is empty
            NotFoundError: If the doctor or the patient does not exist
        """
        reason = check_prescription_payload(payload)
        if reason:
            logger.warning(f"Rejected prescription payload: {reason}")
            raise InvalidPayloadError(reason)
        if payload.doctor_id not in self.doctors:
            raise NotFoundError(f"The doctor with ID {payload.doctor_id} not found")
        if payload.patient_id not in self.patients:
            raise NotFoundError(f"The patient with ID {payload.patient_id} not found")

        prescription = PrescriptionRecord(
            id=self.ids.new_id(),
            doctor_id=payload.doctor_id,
            patient_id=payload.patient_id,
            medication=payload.medication,
            dosage=payload.dosage,
            created_at=self.clock.now(),
        )
        self.store.insert(prescription.id, prescription)
        logger.info(f"Created prescription {prescription.id} for patient {prescription.patient_id}")

        self.health_records.link_prescription(prescription.patient_id, prescription.id)
        return prescription

    def get_prescriptions(self) -> List[PrescriptionRecord]:
        return self.store.values()
