"""
Health Record Model - Stores patient health records and their linked sub-records.
"""
from sqlalchemy import Column, Integer, String, Text, BigInteger, JSON
from ..database import Base

class HealthRecord(Base):
    """
    Health Record Model - Stores a patient's health record
    
    Fields:
    - id: Generated unique identifier
    - position: Insertion sequence used for ordered enumeration
    - patient_id: Id of the patient the record belongs to
    - unique_number: Record number
    - officer_id: Id of the officer who opened the record
    - diagnosis_notes: Diagnosis notes
    - lab_test_ids: Ordered lab test ids (JSON list), NULL until the first lab test
    - prescription_ids: Ordered prescription ids (JSON list)
    - created_at: Creation timestamp
    """
    __tablename__ = "health_records"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    patient_id = Column(String, nullable=False, index=True)
    unique_number = Column(String, nullable=False)
    officer_id = Column(String, nullable=False)
    diagnosis_notes = Column(Text, nullable=False)
    lab_test_ids = Column(JSON, nullable=True)
    prescription_ids = Column(JSON, nullable=False, default=list)
    created_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        """String representation of the HealthRecord model"""
        return f"<HealthRecord(id={self.id}, patient_id={self.patient_id})>"
