"""
Patient Schemas - Pydantic models for patient payloads and stored records.

Wire names are camelCase (``bloodType``, ``medicalHistory``, ``createdAt``);
Python attributes are snake_case. Both spellings are accepted on input.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt

class PatientPayload(BaseModel):
    """
    Patient Payload Schema - Used when creating or updating a patient
    
    Every field is optional at the schema level so that missing fields are
    reported by the validation rules as InvalidPayload.
    
    Fields:
    - name: Patient's full name
    - age: Age in years (a JSON integer; booleans and numeric strings are rejected)
    - gender: "male" or "female"
    - bloodType: One of A, B, AB, O
    - medicalHistory: Free-text history, up to 1000 characters
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Alice",
                "age": 30,
                "gender": "female",
                "bloodType": "O",
                "medicalHistory": "",
            }
        },
    )

    name: Optional[str] = None
    age: Optional[StrictInt] = None
    gender: Optional[str] = None
    blood_type: Optional[str] = Field(None, alias="bloodType")
    medical_history: Optional[str] = Field(None, alias="medicalHistory")

class PatientRecord(BaseModel):
    """
    Patient Record Schema - A stored patient as returned to callers
    
    Fields:
    - id: Generated unique identifier
    - name, age, gender, bloodType, medicalHistory: As supplied in the payload
    - createdAt: Creation timestamp
    - updatedAt: Last update timestamp, absent until the first update
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    age: int
    gender: str
    blood_type: str = Field(alias="bloodType")
    medical_history: str = Field(alias="medicalHistory")
    created_at: int = Field(alias="createdAt")
    updated_at: Optional[int] = Field(None, alias="updatedAt")
