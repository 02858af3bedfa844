"""Post Entities — request and response shapes shared by service and repository.

Invariants:
    - UpdatePostRequest: None means "leave unchanged" for scalar fields
    - UpdatePostRequest.tags: empty list means "leave unchanged" (tags cannot be cleared)
    - PostDetail timestamps are timezone-aware UTC

Design Decisions:
    - Frozen dataclasses over pydantic: entities are internal, validation happens at the wire boundary
"""

from dataclasses import dataclass, field
from datetime import datetime

from blogpost.core.domain_types import PostId


@dataclass(frozen=True)
class CreatePostRequest:
    title: str
    content: str
    author: str
    published_on: datetime
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdatePostRequest:
    title: str | None = None
    content: str | None = None
    author: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PostDetail:
    """A live post as returned to callers."""
    id: PostId
    title: str
    content: str
    author: str
    published_on: datetime
    tags: list[str]
    created_at: datetime
    updated_at: datetime
