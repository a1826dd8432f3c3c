"""
Health Record Router - API endpoints for health records.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from ..dependencies import get_services
from ..container import ClinicServices
from .schemas import HealthRecordPayload, HealthRecordEntry

router = APIRouter()

@router.post("/", response_model=HealthRecordEntry, status_code=status.HTTP_201_CREATED)
def add_health_record(
    payload: HealthRecordPayload,
    services: ClinicServices = Depends(get_services)
):
    """
    Open a health record for an existing patient
    """
    return services.health_records.add_health_record(payload)

@router.get("/", response_model=List[HealthRecordEntry])
def list_health_records(services: ClinicServices = Depends(get_services)):
    """
    Get every health record in creation order
    """
    return services.health_records.get_health_records()

@router.get("/{record_id}", response_model=HealthRecordEntry)
def get_health_record(record_id: str, services: ClinicServices = Depends(get_services)):
    """
    Get a health record by ID
    """
    return services.health_records.get_health_record(record_id)
