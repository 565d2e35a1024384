"""Pydantic Schemas — the local JSON contract and the upstream decoding shapes.

Invariants:
    - Wire field names (song_name, artist_name, type) are aliases; Python names are descriptive
    - Every schema is frozen: built once per request, never mutated
"""
