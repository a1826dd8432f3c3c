"""
Doctor Service - Business logic for doctor records.
"""
from typing import List
import logging

from ..core.providers import Clock, IdProvider
from ..core.store import Store
from ..core.validation import check_doctor_payload, check_record_id
from ..exceptions import InvalidPayloadError, NotFoundError
from .schemas import DoctorPayload, DoctorRecord

# Set up logging
logger = logging.getLogger(__name__)

class DoctorService:
    """Doctor operations over an injected store."""

    def __init__(self, store: Store[DoctorRecord], ids: IdProvider, clock: Clock):
        self.store = store
        self.ids = ids
        self.clock = clock

    def add_doctor(self, payload: DoctorPayload) -> DoctorRecord:
        """
        Register a doctor.
        
        Args:
            payload: Doctor name and specialization
            
        Returns:
            DoctorRecord: The stored doctor
            
        Raises:
            InvalidPayloadError: If name or specialization is empty
        """
        reason = check_doctor_payload(payload)
        if reason:
            logger.warning(f"Rejected doctor payload: {reason}")
            raise InvalidPayloadError(reason)

        doctor = DoctorRecord(
            id=self.ids.new_id(),
            name=payload.name,
            specialization=payload.specialization,
            created_at=self.clock.now(),
        )
        self.store.insert(doctor.id, doctor)
        logger.info(f"Created doctor {doctor.id} ({doctor.specialization})")
        return doctor

    def get_doctor(self, doctor_id: str) -> DoctorRecord:
        """
        Get a doctor by ID.
        
        Raises:
            NotFoundError: If the id is empty or unknown
        """
        reason = check_record_id(doctor_id, "doctor")
        if reason:
            raise NotFoundError(reason)
        doctor = self.store.get(doctor_id)
        if doctor is None:
            raise NotFoundError(f"The doctor with ID {doctor_id} not found")
        return doctor

    def get_doctors(self) -> List[DoctorRecord]:
        return self.store.values()
