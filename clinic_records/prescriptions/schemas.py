"""
Prescription Schemas - Pydantic models for prescription payloads and stored records.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class PrescriptionPayload(BaseModel):
    """
    Prescription Payload Schema - Used when issuing a prescription
    
    Fields:
    - doctorID: Id of an existing doctor
    - patientID: Id of an existing patient
    - medication: Prescribed medication
    - dosage: Dosage instructions
    """
    model_config = ConfigDict(populate_by_name=True)

    doctor_id: Optional[str] = Field(None, alias="doctorID")
    patient_id: Optional[str] = Field(None, alias="patientID")
    medication: Optional[str] = None
    dosage: Optional[str] = None

class PrescriptionRecord(BaseModel):
    """Prescription Record Schema - A stored prescription as returned to callers"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    doctor_id: str = Field(alias="doctorID")
    patient_id: str = Field(alias="patientID")
    medication: str
    dosage: str
    created_at: int = Field(alias="createdAt")
