"""API Layer: FastAPI routes, response writing and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with the ServiceResponse envelope shape
"""
