"""Infrastructure Layer — upstream HTTP client and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Every outbound failure is mapped to an UpstreamError subclass (core/errors.py)
"""
