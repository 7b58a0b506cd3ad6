"""Persistence Layer — declarative Base and SQLAlchemy-backed repositories.

Invariants:
    - Repositories are bound to one AsyncSession (request scope)
    - SQLAlchemy exceptions never escape a repository: mapped to core/errors.py

Design Decisions:
    - Repositories implement core/repository_protocols.py structurally
"""
