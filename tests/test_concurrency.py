"""
Tests for concurrent linkage against a file-backed database.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from clinic_records.config import Settings
from clinic_records.container import build_services
from clinic_records.doctors.schemas import DoctorPayload
from clinic_records.health_records.schemas import HealthRecordPayload
from clinic_records.lab_tests.schemas import LabTestPayload
from clinic_records.patients.schemas import PatientPayload
from clinic_records.prescriptions.schemas import PrescriptionPayload

WORKERS = 8
REQUESTS = 24


@pytest.fixture
def file_services(tmp_path):
    """
    Services over a SQLite file, so every thread gets its own connection.
    """
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'records.db'}")
    return build_services(settings)


@pytest.fixture
def chart(file_services):
    patient = file_services.patients.add_patient(PatientPayload(
        name="Alice", age=30, gender="female", bloodType="O", medicalHistory=""
    ))
    doctor = file_services.doctors.add_doctor(DoctorPayload(name="Dr. Grey", specialization="Cardiology"))
    record = file_services.health_records.add_health_record(HealthRecordPayload(
        patientID=patient.id, officerID="officer-7", diagnosisNotes="follow-up"
    ))
    return patient, doctor, record


def test_concurrent_prescriptions_are_each_linked_once(file_services, chart):
    patient, doctor, record = chart

    def prescribe(n):
        return file_services.prescriptions.add_prescription(PrescriptionPayload(
            doctorID=doctor.id, patientID=patient.id, medication=f"med-{n}", dosage="1/day"
        ))

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        created = list(pool.map(prescribe, range(REQUESTS)))

    linked = file_services.health_records.get_health_record(record.id).prescription_ids
    assert len(linked) == REQUESTS
    assert sorted(linked) == sorted(p.id for p in created)
    assert len(file_services.prescriptions.get_prescriptions()) == REQUESTS


def test_concurrent_mixed_children_are_all_linked(file_services, chart):
    patient, doctor, record = chart

    def add_child(n):
        if n % 2:
            return file_services.lab_tests.add_lab_test(LabTestPayload(
                doctorID=doctor.id, patientID=patient.id, testType=f"test-{n}", results="ok"
            ))
        return file_services.prescriptions.add_prescription(PrescriptionPayload(
            doctorID=doctor.id, patientID=patient.id, medication=f"med-{n}", dosage="1/day"
        ))

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        created = list(pool.map(add_child, range(REQUESTS)))

    linked = file_services.health_records.get_health_record(record.id)
    lab_test_ids = {c.id for c in created if hasattr(c, "test_type")}
    prescription_ids = {c.id for c in created if hasattr(c, "medication")}
    assert sorted(linked.lab_test_ids) == sorted(lab_test_ids)
    assert sorted(linked.prescription_ids) == sorted(prescription_ids)
    assert len(linked.lab_test_ids) + len(linked.prescription_ids) == REQUESTS
