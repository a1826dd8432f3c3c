"""
Tests for the payload validation rules.
"""
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from clinic_records.core.validation import (
    check_doctor_payload,
    check_health_record_payload,
    check_lab_test_payload,
    check_patient_payload,
    check_prescription_payload,
    check_record_id,
)
from clinic_records.doctors.schemas import DoctorPayload
from clinic_records.health_records.schemas import HealthRecordPayload
from clinic_records.lab_tests.schemas import LabTestPayload
from clinic_records.patients.schemas import PatientPayload
from clinic_records.prescriptions.schemas import PrescriptionPayload


def patient(**overrides):
    fields = dict(name="Alice", age=30, gender="female", bloodType="O", medicalHistory="")
    fields.update(overrides)
    return PatientPayload(**fields)


def test_valid_patient_payload():
    assert check_patient_payload(patient()) is None


def test_empty_medical_history_is_accepted():
    assert check_patient_payload(patient(medicalHistory="")) is None


@pytest.mark.parametrize("overrides, expected", [
    ({"name": ""}, "name is required"),
    ({"name": "   "}, "name is required"),
    ({"age": None}, "age is required"),
    ({"gender": None}, "gender is required"),
    ({"bloodType": ""}, "bloodType is required"),
    ({"medicalHistory": None}, "medicalHistory is required"),
    ({"age": 0}, "age must be a positive integer"),
    ({"age": -4}, "age must be a positive integer"),
    ({"gender": "other"}, "gender must be one of male, female"),
    ({"bloodType": "C"}, "bloodType must be one of A, B, AB, O"),
    ({"medicalHistory": "x" * 1001}, "medicalHistory must be at most 1000 characters"),
    ({"age": 151}, "age must be at most 150"),
    ({"age": 10**19}, "age must be at most 150"),
])
def test_invalid_patient_payload(overrides, expected):
    assert check_patient_payload(patient(**overrides)) == expected


def test_medical_history_at_limit_is_accepted():
    assert check_patient_payload(patient(medicalHistory="x" * 1000)) is None


def test_first_failing_rule_wins():
    assert check_patient_payload(patient(name="", age=-1, gender="x")) == "name is required"


def test_doctor_payload():
    assert check_doctor_payload(DoctorPayload(name="Dr. Grey", specialization="Cardiology")) is None
    assert check_doctor_payload(DoctorPayload(name="Dr. Grey")) == "specialization is required"
    assert check_doctor_payload(DoctorPayload(specialization="Cardiology")) == "name is required"


def test_health_record_payload():
    payload = HealthRecordPayload(patientID="p", officerID="o", diagnosisNotes="flu")
    assert check_health_record_payload(payload) is None
    assert check_health_record_payload(
        HealthRecordPayload(patientID="p", diagnosisNotes="flu")
    ) == "officerID is required"


def test_prescription_payload():
    payload = PrescriptionPayload(doctorID="d", patientID="p", medication="aspirin", dosage="1/day")
    assert check_prescription_payload(payload) is None
    assert check_prescription_payload(
        PrescriptionPayload(doctorID="d", patientID="p", medication="aspirin", dosage="")
    ) == "dosage is required"


def test_lab_test_payload():
    payload = LabTestPayload(doctorID="d", patientID="p", testType="CBC", results="normal")
    assert check_lab_test_payload(payload) is None
    assert check_lab_test_payload(
        LabTestPayload(patientID="p", testType="CBC", results="normal")
    ) == "doctorID is required"


def test_record_id():
    assert check_record_id("abc", "patient") is None
    assert check_record_id("", "patient") == "Invalid patient ID"
    assert check_record_id(None, "doctor") == "Invalid doctor ID"


def test_age_at_limit_is_accepted():
    assert check_patient_payload(patient(age=150)) is None


def test_age_rejects_booleans_on_schema():
    with pytest.raises(ValidationError):
        patient(age=True)
    with pytest.raises(ValidationError):
        patient(age="30")


def test_age_rejects_booleans_on_plain_objects():
    payload = SimpleNamespace(
        name="Alice", age=True, gender="female", blood_type="O", medical_history=""
    )
    assert check_patient_payload(payload) == "age must be a positive integer"
