"""
Prescription Router - API endpoints for prescriptions.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from ..dependencies import get_services
from ..container import ClinicServices
from .schemas import PrescriptionPayload, PrescriptionRecord

router = APIRouter()

@router.post("/", response_model=PrescriptionRecord, status_code=status.HTTP_201_CREATED)
def add_prescription(
    payload: PrescriptionPayload,
    services: ClinicServices = Depends(get_services)
):
    """
    Issue a prescription
    
    The prescription is appended to the patient's current health record when one exists.
    """
    return services.prescriptions.add_prescription(payload)

@router.get("/", response_model=List[PrescriptionRecord])
def list_prescriptions(services: ClinicServices = Depends(get_services)):
    """
    Get every prescription in issue order
    """
    return services.prescriptions.get_prescriptions()
