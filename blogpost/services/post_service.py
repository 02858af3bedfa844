"""Post Service — business rules on top of the post repository.

Invariants:
    - create/get/delete are straight pass-through to the repository
    - update requires a live post: if get_post fails for any domain reason the caller sees
      InvalidTargetError("post is not available or is deleted") and the repository update
      is never invoked; the original error is logged, not surfaced
    - A delete racing between the check and the update surfaces as the repository's
      PersistenceError (accepted window, no locking)
"""

import logging
from dataclasses import dataclass

from blogpost.core.domain_types import PostId
from blogpost.core.entities import CreatePostRequest, PostDetail, UpdatePostRequest
from blogpost.core.errors import BlogPostError, InvalidTargetError, require_collaborators
from blogpost.core.repository_protocols import PostRepository


@dataclass(frozen=True)
class PostServiceConfig:
    repository: PostRepository
    logger: logging.Logger

    def __post_init__(self):
        require_collaborators(
            "PostServiceConfig", repository=self.repository, logger=self.logger,
        )


class PostService:
    """Orchestrates post operations."""

    def __init__(self, config: PostServiceConfig):
        self._repository = config.repository
        self._logger = config.logger

    async def create_post(self, request: CreatePostRequest) -> PostDetail:
        return await self._repository.create_post(request)

    async def get_post(self, post_id: PostId) -> PostDetail:
        return await self._repository.get_post(post_id)

    async def update_post(
        self, post_id: PostId, request: UpdatePostRequest,
    ) -> PostDetail:
        try:
            await self._repository.get_post(post_id)
        except BlogPostError as e:
            self._logger.error(
                f"invalid post id for update: {e.message}",
                extra={"error_code": e.code, "post_id": str(post_id)},
            )
            raise InvalidTargetError(str(post_id)) from e
        return await self._repository.update_post(post_id, request)

    async def delete_post(self, post_id: PostId) -> bool:
        return await self._repository.delete_post(post_id)
