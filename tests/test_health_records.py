"""
Tests for the health record service.
"""
import pytest

from clinic_records.exceptions import InvalidPayloadError, NotFoundError
from clinic_records.health_records.schemas import HealthRecordPayload


def test_add_health_record(services, patient):
    record = services.health_records.add_health_record(HealthRecordPayload(
        patientID=patient.id, uniqueNumber="HR-001", officerID="officer-7", diagnosisNotes="flu"
    ))
    assert record.patient_id == patient.id
    assert record.unique_number == "HR-001"
    assert record.lab_test_ids is None
    assert record.prescription_ids == []
    assert services.health_records.get_health_record(record.id) == record


def test_unique_number_generated_when_missing(services, patient):
    record = services.health_records.add_health_record(HealthRecordPayload(
        patientID=patient.id, officerID="officer-7", diagnosisNotes="flu"
    ))
    assert record.unique_number
    assert record.unique_number != record.id


def test_add_health_record_for_unknown_patient(services):
    with pytest.raises(NotFoundError):
        services.health_records.add_health_record(HealthRecordPayload(
            patientID="ghost", officerID="officer-7", diagnosisNotes="flu"
        ))
    assert services.health_records.get_health_records() == []


def test_add_health_record_requires_notes(services, patient):
    with pytest.raises(InvalidPayloadError) as exc_info:
        services.health_records.add_health_record(HealthRecordPayload(
            patientID=patient.id, officerID="officer-7"
        ))
    assert exc_info.value.detail == "diagnosisNotes is required"


def test_current_for_patient_is_latest(services, patient):
    payload = HealthRecordPayload(patientID=patient.id, officerID="officer-7", diagnosisNotes="first")
    services.health_records.add_health_record(payload)
    latest = services.health_records.add_health_record(payload.model_copy(update={"diagnosis_notes": "second"}))
    assert services.health_records.current_for_patient(patient.id) == latest
    assert services.health_records.current_for_patient("someone-else") is None


def test_get_unknown_health_record(services):
    with pytest.raises(NotFoundError):
        services.health_records.get_health_record("nope")
