"""Domain Types — identifier type and its wire parsing.

Invariants:
    - PostId wraps a UUID — never pass a bare string id past the transport layer
    - parse_post_id either returns a PostId or raises InvalidIdentifierError

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID

from blogpost.core.errors import InvalidIdentifierError

PostId = NewType("PostId", UUID)


def parse_post_id(raw_id: str) -> PostId:
    """Parse the string form of a post id (canonical, braced or urn:uuid)."""
    try:
        return PostId(UUID(raw_id))
    except (ValueError, TypeError, AttributeError):
        raise InvalidIdentifierError(str(raw_id)) from None
