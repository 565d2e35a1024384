"""Core Layer — pure parsing rules, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic
"""
