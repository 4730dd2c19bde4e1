"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes a route table plus a build_router() factory
    - Routes never contain business logic (delegate to services)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
