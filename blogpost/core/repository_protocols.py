"""Boundary Protocols — contracts between the transport, service and persistence layers.

Invariants:
    - Core NEVER imports from the shell — dependency arrows point inward only
    - Every method is a point operation on exactly one post

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol

from blogpost.core.domain_types import PostId
from blogpost.core.entities import CreatePostRequest, PostDetail, UpdatePostRequest


class PostRepository(Protocol):
    """Contract for post persistence — implemented by infrastructure."""
    async def create_post(self, request: CreatePostRequest) -> PostDetail: ...
    async def get_post(self, post_id: PostId) -> PostDetail: ...
    async def update_post(
        self, post_id: PostId, request: UpdatePostRequest,
    ) -> PostDetail: ...
    async def delete_post(self, post_id: PostId) -> bool: ...


class PostServiceProtocol(Protocol):
    """Contract the RPC handler depends on — implemented by services."""
    async def create_post(self, request: CreatePostRequest) -> PostDetail: ...
    async def get_post(self, post_id: PostId) -> PostDetail: ...
    async def update_post(
        self, post_id: PostId, request: UpdatePostRequest,
    ) -> PostDetail: ...
    async def delete_post(self, post_id: PostId) -> bool: ...
