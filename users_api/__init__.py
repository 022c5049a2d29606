"""Users API package: CRUD service for user records.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
