"""API Dependencies — builds the post stack once and hands it to routes.

Invariants:
    - The handler is built in the lifespan and stored on app.state (one per process)
    - get_post_rpc fails loudly if the app was not started

Design Decisions:
    - Explicit wiring in one function: repository -> service -> handler, each from its config
"""

import logging

from fastapi import Request

from blogpost.api.post_rpc import PostRPCHandler
from blogpost.infrastructure.post_repository import (
    PostRepositoryConfig, SessionProvider, SqlAlchemyPostRepository,
)
from blogpost.services.post_service import PostService, PostServiceConfig


def build_post_rpc(
    db: SessionProvider, operation_timeout: float | None = None,
) -> PostRPCHandler:
    """Compose repository, service and RPC handler over a session provider."""
    repository = SqlAlchemyPostRepository(PostRepositoryConfig(
        db=db,
        logger=logging.getLogger("blogpost.infrastructure.post_repository"),
        operation_timeout=operation_timeout,
    ))
    service = PostService(PostServiceConfig(
        repository=repository,
        logger=logging.getLogger("blogpost.services.post_service"),
    ))
    return PostRPCHandler(service, logging.getLogger("blogpost.api.post_rpc"))


def get_post_rpc(request: Request) -> PostRPCHandler:
    """FastAPI dependency for the post RPC handler."""
    handler = getattr(request.app.state, "post_rpc", None)
    if handler is None:
        raise RuntimeError("Post RPC handler not initialized")
    return handler
