"""Infrastructure Layer — persistence adapters and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer

Design Decisions:
    - Repositories implement core.repository_protocols structurally (no base class)
"""
