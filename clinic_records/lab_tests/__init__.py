"""
Lab tests ordered by a doctor for a patient.
"""
