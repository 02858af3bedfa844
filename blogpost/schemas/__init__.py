"""Pydantic Schemas — wire request/response shapes for the RPC surface.

Invariants:
    - Schemas validate at the system boundary; entities in core/ stay unvalidated

Design Decisions:
    - Separate from core entities: schemas are wire contracts, entities are the internal vocabulary
"""
