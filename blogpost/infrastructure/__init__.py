"""Infrastructure Layer — database access, persistence and logging setup.

Invariants:
    - Infrastructure never reaches into api/ or services/
    - All store failures surface as PersistenceError
"""
