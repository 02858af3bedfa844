"""Post RPC Schemas — request/response messages of post.v1.PostService.

Invariants:
    - JSON keys are camelCase (publishedOn); snake_case names accepted on input too
    - Response fields default to their zero values, so a failure response carries only
      success=false and message
    - Timestamps travel as RFC 3339 strings

Design Decisions:
    - One shared PostResponse shape for Create/Get/Update: the three messages are identical
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Message(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateRequest(_Message):
    title: str
    content: str
    author: str
    published_on: datetime
    tags: list[str] = Field(default_factory=list)


class GetRequest(_Message):
    id: str


class UpdateRequest(_Message):
    """Absent or null fields are left unchanged; an empty tags list is too."""
    id: str
    title: str | None = None
    content: str | None = None
    author: str | None = None
    tags: list[str] | None = None


class DeleteRequest(_Message):
    id: str


class PostResponse(_Message):
    success: bool = False
    message: str = ""
    id: str = ""
    title: str = ""
    content: str = ""
    author: str = ""
    published_on: datetime | None = None
    tags: list[str] = Field(default_factory=list)


class CreateResponse(PostResponse):
    pass


class GetResponse(PostResponse):
    pass


class UpdateResponse(PostResponse):
    pass


class DeleteResponse(_Message):
    success: bool = False
    message: str = ""
