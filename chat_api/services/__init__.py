"""Services Layer — chat and message rules over injected repositories.

Invariants:
    - Services raise core/errors.py types only
    - Repositories arrive through __init__, never imported as globals
"""
