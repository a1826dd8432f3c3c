"""
Patient records: registration, lookup, update and removal.
"""
