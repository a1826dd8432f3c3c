"""
Health Record Service - Business logic for health records.

Besides create/read, this module owns linkage: appending the id of a newly
created prescription or lab test onto the patient's current health record.
The current record is the most recently created one for that patient, found
with an indexed query on ``patient_id``.
"""
from typing import List, Optional
import logging

from ..core.providers import Clock, IdProvider
from ..core.store import Store
from ..core.validation import check_health_record_payload, check_record_id, is_blank
from ..exceptions import InvalidPayloadError, NotFoundError
from ..patients.schemas import PatientRecord
from .schemas import HealthRecordPayload, HealthRecordEntry

# Set up logging
logger = logging.getLogger(__name__)

class HealthRecordService:
    """
    Health record operations over an injected store.
    
    Attributes:
        store: Health record table
        patients: Patient table, read for reference checks
        ids: Identifier provider (record ids and generated record numbers)
        clock: Timestamp provider
    """

    def __init__(
        self,
        store: Store[HealthRecordEntry],
        patients: Store[PatientRecord],
        ids: IdProvider,
        clock: Clock,
    ):
        self.store = store
        self.patients = patients
        self.ids = ids
        self.clock = clock

    def add_health_record(self, payload: HealthRecordPayload) -> HealthRecordEntry:
        """
        Open a health record for an existing patient.
        
        Args:
            payload: Patient id, officer id, diagnosis notes and an optional record number
            
        Returns:
            HealthRecordEntry: The stored record, with no lab tests and no prescriptions
            
        Raises:
            InvalidPayloadError: If a required field is empty
            NotFoundError: If the patient does not exist
        """
        reason = check_health_record_payload(payload)
        if reason:
            logger.warning(f"Rejected health record payload: {reason}")
            raise InvalidPayloadError(reason)
        if payload.patient_id not in self.patients:
            raise NotFoundError(f"The patient with ID {payload.patient_id} not found")

        unique_number = payload.unique_number
        if is_blank(unique_number):
            unique_number = self.ids.new_id()

        record = HealthRecordEntry(
            id=self.ids.new_id(),
            patient_id=payload.patient_id,
            unique_number=unique_number,
            officer_id=payload.officer_id,
            diagnosis_notes=payload.diagnosis_notes,
            lab_test_ids=None,
            prescription_ids=[],
            created_at=self.clock.now(),
        )
        self.store.insert(record.id, record)
        logger.info(f"Created health record {record.id} for patient {record.patient_id}")
        return record

    def get_health_record(self, record_id: str) -> HealthRecordEntry:
        """
        Get a health record by ID.
        
        Raises:
            NotFoundError: If the id is empty or unknown
        """
        reason = check_record_id(record_id, "health record")
        if reason:
            raise NotFoundError(reason)
        record = self.store.get(record_id)
        if record is None:
            raise NotFoundError(f"The health record with ID {record_id} not found")
        return record

    def get_health_records(self) -> List[HealthRecordEntry]:
        return self.store.values()

    def current_for_patient(self, patient_id: str) -> Optional[HealthRecordEntry]:
        """
        The patient's most recently created health record.
        
        Returns:
            Optional[HealthRecordEntry]: The record, or None if the patient has none
        """
        return self.store.latest(patient_id=patient_id)

    def link_prescription(self, patient_id: str, prescription_id: str) -> Optional[HealthRecordEntry]:
        """
        Append a prescription id to the patient's current health record.
        
        Returns:
            Optional[HealthRecordEntry]: The updated record, or None if the patient has no record
        """
        with self.store.lock:
            record = self.current_for_patient(patient_id)
            if record is None:
                logger.info(f"No health record for patient {patient_id}; prescription {prescription_id} not linked")
                return None
            updated = record.model_copy(
                update={"prescription_ids": [*record.prescription_ids, prescription_id]}
            )
            self.store.insert(record.id, updated)
        logger.info(f"Linked prescription {prescription_id} to health record {record.id}")
        return updated

    def link_lab_test(self, patient_id: str, lab_test_id: str) -> Optional[HealthRecordEntry]:
        """
        Append a lab test id to the patient's current health record.
        
        The record's lab test list is created on the first link.
        
        Returns:
            Optional[HealthRecordEntry]: The updated record, or None if the patient has no record
        """
        with self.store.lock:
            record = self.current_for_patient(patient_id)
            if record is None:
                logger.info(f"No health record for patient {patient_id}; lab test {lab_test_id} not linked")
                return None
            updated = record.model_copy(
                update={"lab_test_ids": [*(record.lab_test_ids or []), lab_test_id]}
            )
            self.store.insert(record.id, updated)
        logger.info(f"Linked lab test {lab_test_id} to health record {record.id}")
        return updated
