"""TabRelay — HTTP relay exposing a stable JSON contract over the Ultimate Guitar tab API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
