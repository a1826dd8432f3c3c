"""
Prescriptions issued by a doctor to a patient.
"""
