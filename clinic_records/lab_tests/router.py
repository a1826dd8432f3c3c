"""
Lab Test Router - API endpoints for lab tests.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from ..dependencies import get_services
from ..container import ClinicServices
from .schemas import LabTestPayload, LabTestRecord

router = APIRouter()

@router.post("/", response_model=LabTestRecord, status_code=status.HTTP_201_CREATED)
def add_lab_test(
    payload: LabTestPayload,
    services: ClinicServices = Depends(get_services)
):
    """
    Record a lab test
    
    The lab test is appended to the patient's current health record when one exists.
    """
    return services.lab_tests.add_lab_test(payload)

@router.get("/", response_model=List[LabTestRecord])
def list_lab_tests(services: ClinicServices = Depends(get_services)):
    """
    Get every lab test in recording order
    """
    return services.lab_tests.get_lab_tests()
