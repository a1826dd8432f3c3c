"""
Doctor records: registration and lookup.
"""
