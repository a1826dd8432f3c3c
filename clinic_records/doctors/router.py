"""
Doctor Router - API endpoints for doctor records.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from ..dependencies import get_services
from ..container import ClinicServices
from .schemas import DoctorPayload, DoctorRecord

router = APIRouter()

@router.post("/", response_model=DoctorRecord, status_code=status.HTTP_201_CREATED)
def add_doctor(
    payload: DoctorPayload,
    services: ClinicServices = Depends(get_services)
):
    """
    Register a doctor
    """
    return services.doctors.add_doctor(payload)

@router.get("/", response_model=List[DoctorRecord])
def list_doctors(services: ClinicServices = Depends(get_services)):
    """
    Get every doctor in registration order
    """
    return services.doctors.get_doctors()

@router.get("/{doctor_id}", response_model=DoctorRecord)
def get_doctor(doctor_id: str, services: ClinicServices = Depends(get_services)):
    """
    Get a doctor by ID
    """
    return services.doctors.get_doctor(doctor_id)
