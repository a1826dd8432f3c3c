"""
Core building blocks shared by every entity package: the ordered record
store, payload validation rules, id/clock providers and HTTP middleware.
"""
