"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - The person store is the only holder of the backing collection
"""
