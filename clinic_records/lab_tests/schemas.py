"""
Lab Test Schemas - Pydantic models for lab test payloads and stored records.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class LabTestPayload(BaseModel):
    """
    Lab Test Payload Schema - Used when recording a lab test
    
    Fields:
    - patientID: Id of an existing patient
    - doctorID: Id of an existing doctor
    - testType: Kind of test
    - results: Test results
    """
    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field(None, alias="patientID")
    doctor_id: Optional[str] = Field(None, alias="doctorID")
    test_type: Optional[str] = Field(None, alias="testType")
    results: Optional[str] = None

class LabTestRecord(BaseModel):
    """Lab Test Record Schema - A stored lab test as returned to callers"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    patient_id: str = Field(alias="patientID")
    doctor_id: str = Field(alias="doctorID")
    test_type: str = Field(alias="testType")
    results: str
    created_at: int = Field(alias="createdAt")
