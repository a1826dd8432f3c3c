"""
Patient Router - API endpoints for patient records.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from ..dependencies import get_services
from ..container import ClinicServices
from .schemas import PatientPayload, PatientRecord

router = APIRouter()

@router.post("/", response_model=PatientRecord, status_code=status.HTTP_201_CREATED)
def add_patient(
    payload: PatientPayload,
    services: ClinicServices = Depends(get_services)
):
    """
    Register a new patient
    
    Returns the stored patient with its generated id and creation time.
    """
    return services.patients.add_patient(payload)

@router.get("/", response_model=List[PatientRecord])
def list_patients(services: ClinicServices = Depends(get_services)):
    """
    Get every patient in registration order
    """
    return services.patients.get_patients()

@router.get("/{patient_id}", response_model=PatientRecord)
def get_patient(patient_id: str, services: ClinicServices = Depends(get_services)):
    """
    Get a patient by ID
    """
    return services.patients.get_patient(patient_id)

@router.put("/{patient_id}", response_model=PatientRecord)
def update_patient(
    patient_id: str,
    payload: PatientPayload,
    services: ClinicServices = Depends(get_services)
):
    """
    Update a patient
    
    All patient fields are replaced; the update time is stamped.
    """
    return services.patients.update_patient(patient_id, payload)

@router.delete("/{patient_id}", response_model=PatientRecord)
def delete_patient(patient_id: str, services: ClinicServices = Depends(get_services)):
    """
    Delete a patient
    
    Returns the removed patient.
    """
    return services.patients.delete_patient(patient_id)
