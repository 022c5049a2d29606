"""Core: pure domain types, rules and the response envelope.

Invariants:
    - Nothing in core/ performs IO or imports from api/, infrastructure/ or services/
    - Repository implementations are reached only through repository_protocols
"""
