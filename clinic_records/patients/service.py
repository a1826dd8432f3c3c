"""
Patient Service - Business logic for patient records.

This module provides the create, read, update and delete operations over the
patient table. Validation always runs before the store is touched, so a
rejected request leaves no trace.
"""
from typing import List
import logging

from ..core.providers import Clock, IdProvider
from ..core.store import Store
from ..core.validation import check_patient_payload, check_record_id
from ..exceptions import InvalidPayloadError, NotFoundError
from .schemas import PatientPayload, PatientRecord

# Set up logging
logger = logging.getLogger(__name__)

class PatientService:
    """
    Patient operations over an injected store.
    
    Attributes:
        store: Patient table
        ids: Identifier provider
        clock: Timestamp provider
    """

    def __init__(self, store: Store[PatientRecord], ids: IdProvider, clock: Clock):
        self.store = store
        self.ids = ids
        self.clock = clock

    def _require_valid(self, payload: PatientPayload) -> None:
        reason = check_patient_payload(payload)
        if reason:
            logger.warning(f"Rejected patient payload: {reason}")
            raise InvalidPayloadError(reason)

    def add_patient(self, payload: PatientPayload) -> PatientRecord:
        """
        Register a new patient.
        
        Args:
            payload: Patient fields
            
        Returns:
            PatientRecord: The stored patient
            
        Raises:
            InvalidPayloadError: If the payload fails validation
        """
        self._require_valid(payload)
        patient = PatientRecord(
            id=self.ids.new_id(),
            name=payload.name,
            age=payload.age,
            gender=payload.gender,
            blood_type=payload.blood_type,
            medical_history=payload.medical_history,
            created_at=self.clock.now(),
            updated_at=None,
        )
        self.store.insert(patient.id, patient)
        logger.info(f"Created patient {patient.id}")
        return patient

    def get_patient(self, patient_id: str) -> PatientRecord:
        """
        Get a patient by ID.
        
        Args:
            patient_id: ID of the patient
            
        Returns:
            PatientRecord: The stored patient
            
        Raises:
            NotFoundError: If the id is empty or unknown
        """
        reason = check_record_id(patient_id, "patient")
        if reason:
            raise NotFoundError(reason)
        patient = self.store.get(patient_id)
        if patient is None:
            raise NotFoundError(f"The patient with ID {patient_id} not found")
        return patient

    def get_patients(self) -> List[PatientRecord]:
        """All patients in registration order."""
        return self.store.values()

    def update_patient(self, patient_id: str, payload: PatientPayload) -> PatientRecord:
        """
        Replace a patient's fields and stamp the update time.
        
        The id and creation time are kept; ``updated_at`` is never earlier
        than ``created_at``.
        
        Args:
            patient_id: ID of the patient
            payload: New patient fields
            
        Returns:
            PatientRecord: The updated patient
            
        Raises:
            NotFoundError: If the patient does not exist
            InvalidPayloadError: If the payload fails validation
        """
        reason = check_record_id(patient_id, "patient")
        if reason:
            raise NotFoundError(reason)
        with self.store.lock:
            existing = self.store.get(patient_id)
            if existing is None:
                raise NotFoundError(f"Couldn't update a patient with ID {patient_id}. Patient not found")
            self._require_valid(payload)

            updated = existing.model_copy(update={
                "name": payload.name,
                "age": payload.age,
                "gender": payload.gender,
                "blood_type": payload.blood_type,
                "medical_history": payload.medical_history,
                "updated_at": max(self.clock.now(), existing.created_at),
            })
            self.store.insert(patient_id, updated)
        logger.info(f"Updated patient {patient_id}")
        return updated

    def delete_patient(self, patient_id: str) -> PatientRecord:
        """
        Delete a patient.
        
        Args:
            patient_id: ID of the patient
            
        Returns:
            PatientRecord: The removed patient
            
        Raises:
            NotFoundError: If the patient does not exist
        """
        reason = check_record_id(patient_id, "patient")
        if reason:
            raise NotFoundError(reason)
        removed = self.store.remove(patient_id)
        if removed is None:
            raise NotFoundError(f"Couldn't delete a patient with ID {patient_id}. Patient not found")
        logger.info(f"Deleted patient {patient_id}")
        return removed
