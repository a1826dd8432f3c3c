"""
Payload validation rules.

Each ``check_*`` function is pure: it inspects a payload and returns ``None``
when the payload is acceptable, or a reason naming the first failing field
and what was expected. Services turn a reason into ``InvalidPayloadError``
before touching any store.
"""
from typing import Any, Iterable, Optional, Tuple

GENDERS = ("male", "female")
BLOOD_TYPES = ("A", "B", "AB", "O")
MAX_MEDICAL_HISTORY_LENGTH = 1000
MAX_AGE = 150


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty or whitespace only."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _first_blank(payload: Any, fields: Iterable[Tuple[str, str]]) -> Optional[str]:
    # fields are (attribute, wire name) pairs
    for attribute, label in fields:
        if is_blank(getattr(payload, attribute, None)):
            return f"{label} is required"
    return None


def check_patient_payload(payload: Any) -> Optional[str]:
    """
    Validate a patient create/update payload.
    
    Rules, in order: name, age, gender and bloodType present; medicalHistory
    present (it may be empty); age a positive integer no greater than
    150; gender and bloodType from their fixed sets; medicalHistory at most 1000 characters.
    
    Args:
        payload: Object exposing name, age, gender, blood_type, medical_history
        
    Returns:
        Optional[str]: Failure reason, or None if the payload is valid
    """
    reason = _first_blank(
        payload,
        (("name", "name"), ("age", "age"), ("gender", "gender"), ("blood_type", "bloodType")),
    )
    if reason:
        return reason
    if payload.medical_history is None:
        return "medicalHistory is required"

    if isinstance(payload.age, bool) or not isinstance(payload.age, int) or payload.age <= 0:
        return "age must be a positive integer"
    if payload.age > MAX_AGE:
        return f"age must be at most {MAX_AGE}"
    if payload.gender not in GENDERS:
        return f"gender must be one of {', '.join(GENDERS)}"
    if payload.blood_type not in BLOOD_TYPES:
        return f"bloodType must be one of {', '.join(BLOOD_TYPES)}"
    if len(payload.medical_history) > MAX_MEDICAL_HISTORY_LENGTH:
        return f"medicalHistory must be at most {MAX_MEDICAL_HISTORY_LENGTH} characters"
    return None


def check_doctor_payload(payload: Any) -> Optional[str]:
    """Doctor payload: name and specialization non-empty."""
    return _first_blank(payload, (("name", "name"), ("specialization", "specialization")))


def check_health_record_payload(payload: Any) -> Optional[str]:
    """Health record payload: patientID, officerID and diagnosisNotes non-empty."""
    return _first_blank(
        payload,
        (("patient_id", "patientID"), ("officer_id", "officerID"), ("diagnosis_notes", "diagnosisNotes")),
    )


def check_prescription_payload(payload: Any) -> Optional[str]:
    """Prescription payload: doctorID, patientID, medication and dosage non-empty."""
    return _first_blank(
        payload,
        (("doctor_id", "doctorID"), ("patient_id", "patientID"), ("medication", "medication"), ("dosage", "dosage")),
    )


def check_lab_test_payload(payload: Any) -> Optional[str]:
    """Lab test payload: doctorID, patientID, testType and results non-empty."""
    return _first_blank(
        payload,
        (("doctor_id", "doctorID"), ("patient_id", "patientID"), ("test_type", "testType"), ("results", "results")),
    )


def check_record_id(record_id: Any, entity: str) -> Optional[str]:
    """
    Validate an id used for a lookup.
    
    Args:
        record_id: Id supplied by the caller
        entity: Entity name used in the message (e.g. "patient")
        
    Returns:
        Optional[str]: Failure reason, or None if the id is usable
    """
    if not isinstance(record_id, str) or is_blank(record_id):
        return f"Invalid {entity} ID"
    return None
