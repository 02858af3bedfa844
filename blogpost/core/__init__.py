"""Core Layer — entity shapes, identifiers, errors and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Nothing here performs IO

Design Decisions:
    - Pure shapes separated from the IO shell so every layer shares one vocabulary
"""
