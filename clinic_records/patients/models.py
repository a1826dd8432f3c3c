"""
Patient Model - Stores patient demographics and medical history.
"""
from sqlalchemy import Column, Integer, String, Text, BigInteger
from ..database import Base

class Patient(Base):
    """
    Patient Model - Stores patient information
    
    Fields:
    - id: Generated unique identifier
    - position: Insertion sequence used for ordered enumeration
    - name: Patient's full name
    - age: Age in years (positive)
    - gender: "male" or "female"
    - blood_type: One of A, B, AB, O
    - medical_history: Free-text history, up to 1000 characters
    - created_at: Creation timestamp
    - updated_at: Timestamp of the last update, NULL until the first update
    """
    __tablename__ = "patients"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String, nullable=False)
    blood_type = Column(String(2), nullable=False)
    medical_history = Column(Text, nullable=False, default="")
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=True)

    def __repr__(self):
        """String representation of the Patient model"""
        return f"<Patient(id={self.id}, name='{self.name}')>"
