"""
Doctor Schemas - Pydantic models for doctor payloads and stored records.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class DoctorPayload(BaseModel):
    """
    Doctor Payload Schema - Used when registering a doctor
    
    Fields:
    - name: Doctor's full name
    - specialization: Doctor's medical specialization
    """
    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Dr. Grey", "specialization": "Cardiology"}}
    )

    name: Optional[str] = Field(None, description="Doctor's full name")
    specialization: Optional[str] = Field(None, description="Doctor's medical specialization")

class DoctorRecord(BaseModel):
    """Doctor Record Schema - A stored doctor as returned to callers"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    specialization: str
    created_at: int = Field(alias="createdAt")
