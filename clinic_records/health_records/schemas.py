"""
Health Record Schemas - Pydantic models for health record payloads and stored records.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class HealthRecordPayload(BaseModel):
    """
    Health Record Payload Schema - Used when opening a health record
    
    Fields:
    - patientID: Id of an existing patient
    - uniqueNumber: Record number (optional, generated when omitted)
    - officerID: Id of the officer opening the record
    - diagnosisNotes: Diagnosis notes
    """
    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field(None, alias="patientID")
    unique_number: Optional[str] = Field(None, alias="uniqueNumber")
    officer_id: Optional[str] = Field(None, alias="officerID")
    diagnosis_notes: Optional[str] = Field(None, alias="diagnosisNotes")

class HealthRecordEntry(BaseModel):
    """
    Health Record Entry Schema - A stored health record as returned to callers
    
    ``labTestIDs`` is absent until the first lab test is linked;
    ``prescriptionIDs`` starts empty. Both only ever grow.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    patient_id: str = Field(alias="patientID")
    unique_number: str = Field(alias="uniqueNumber")
    officer_id: str = Field(alias="officerID")
    diagnosis_notes: str = Field(alias="diagnosisNotes")
    lab_test_ids: Optional[List[str]] = Field(None, alias="labTestIDs")
    prescription_ids: List[str] = Field(default_factory=list, alias="prescriptionIDs")
    created_at: int = Field(alias="createdAt")
