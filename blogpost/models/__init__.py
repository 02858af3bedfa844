"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all or autogenerate
"""

from blogpost.models.post import Post  # noqa: F401
