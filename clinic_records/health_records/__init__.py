"""
Health records: per-patient diagnosis records that collect the ids of the
prescriptions and lab tests issued to the patient.
"""
