"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes validate input, delegate to the upstream client, and map its errors
"""
