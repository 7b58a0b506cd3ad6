"""Infrastructure Layer — database lifecycle and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All database failures leave this layer as core/errors.py types

Design Decisions:
    - Session manager and logging setup owned here, wired in main.py lifespan
"""
