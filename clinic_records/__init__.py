"""
Clinic records service.

Tracks patients, doctors, health records, prescriptions and lab tests over
five durable key-value tables, with payload validation and cross-entity
linkage layered on top.
"""
__version__ = "1.0.0"
