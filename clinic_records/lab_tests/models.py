"""
Lab Test Model - Stores lab tests and their results.
"""
from sqlalchemy import Column, Integer, String, Text, BigInteger
from ..database import Base

class LabTest(Base):
    """
    Lab Test Model - Stores a lab test
    
    Fields:
    - id: Generated unique identifier
    - position: Insertion sequence used for ordered enumeration
    - patient_id: Id of the patient
    - doctor_id: Id of the ordering doctor
    - test_type: Kind of test
    - results: Test results
    - created_at: Creation timestamp
    """
    __tablename__ = "lab_tests"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    patient_id = Column(String, nullable=False, index=True)
    doctor_id = Column(String, nullable=False, index=True)
    test_type = Column(String, nullable=False)
    results = Column(Text, nullable=False)
    created_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        """String representation of the LabTest model"""
        return f"<LabTest(id={self.id}, patient_id={self.patient_id}, test_type='{self.test_type}')>"
