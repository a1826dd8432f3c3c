"""
Prescription Model - Stores medications prescribed to patients.
"""
from sqlalchemy import Column, Integer, String, BigInteger
from ..database import Base

class Prescription(Base):
    """
    Prescription Model - Stores a prescription
    
    Fields:
    - id: Generated unique identifier
    - position: Insertion sequence used for ordered enumeration
    - doctor_id: Id of the prescribing doctor
    - patient_id: Id of the patient
    - medication: Prescribed medication
    - dosage: Dosage instructions
    - created_at: Creation timestamp
    """
    __tablename__ = "prescriptions"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    doctor_id = Column(String, nullable=False, index=True)
    patient_id = Column(String, nullable=False, index=True)
    medication = Column(String, nullable=False)
    dosage = Column(String, nullable=False)
    created_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        """String representation of the Prescription model"""
        return f"<Prescription(id={self.id}, patient_id={self.patient_id}, doctor_id={self.doctor_id})>"
