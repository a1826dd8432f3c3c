"""
Doctor Model - Stores doctor names and specializations.
"""
from sqlalchemy import Column, Integer, String, BigInteger
from ..database import Base

class Doctor(Base):
    """
    Doctor Model - Stores doctor information
    
    Fields:
    - id: Generated unique identifier
    - position: Insertion sequence used for ordered enumeration
    - name: Doctor's full name
    - specialization: Doctor's medical specialization
    - created_at: Creation timestamp
    """
    __tablename__ = "doctors"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    specialization = Column(String, nullable=False)
    created_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        """String representation of the Doctor model"""
        return f"<Doctor(id={self.id}, specialization='{self.specialization}')>"
