"""Post RPC Handler — translation between post.v1.PostService messages and the service.

Invariants:
    - get/update/delete parse the id first; a malformed id fails with InvalidIdentifierError
      and the service is never called
    - Every failure produces BOTH signals: a response with success=false and a non-empty
      message, and an RPCCallError carrying the transport status (error channel)
    - delete returning False without an error is an InvariantViolationError, never a
      silent success=false
    - No business logic here: decode, call, encode

Design Decisions:
    - RPCCallError wraps the failure response: Python cannot return a value and raise at
      once, so the exception carries the response and the route's handler renders both
    - Non-domain exceptions are encoded with a generic message (never leak internals)
"""

import logging
from typing import TypeVar

from blogpost.core.domain_types import parse_post_id
from blogpost.core.entities import CreatePostRequest, PostDetail, UpdatePostRequest
from blogpost.core.errors import (
    BlogPostError, InvariantViolationError, require_collaborators,
)
from blogpost.core.repository_protocols import PostServiceProtocol
from blogpost.schemas.post_rpc import (
    CreateRequest, CreateResponse,
    GetRequest, GetResponse,
    UpdateRequest, UpdateResponse,
    DeleteRequest, DeleteResponse,
    PostResponse,
)

R = TypeVar("R", bound=PostResponse)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class RPCCallError(Exception):
    """A failed RPC: the failure response plus the status for the error channel."""

    def __init__(
        self,
        method: str,
        response: PostResponse | DeleteResponse,
        status_code: int,
        error_code: str,
    ):
        super().__init__(response.message)
        self.method = method
        self.response = response
        self.status_code = status_code
        self.error_code = error_code


class PostRPCHandler:
    """Implements the four unary operations of post.v1.PostService."""

    def __init__(self, service: PostServiceProtocol, logger: logging.Logger):
        require_collaborators("PostRPCHandler", service=service, logger=logger)
        self._service = service
        self._logger = logger

    async def create(self, request: CreateRequest) -> CreateResponse:
        entity_request = CreatePostRequest(
            title=request.title,
            content=request.content,
            author=request.author,
            published_on=request.published_on,
            tags=list(request.tags),
        )
        try:
            post = await self._service.create_post(entity_request)
        except Exception as e:
            raise self._failure(
                "Create", "error in creating post", CreateResponse, e, request,
            ) from e
        return _encode_post(CreateResponse, post)

    async def get(self, request: GetRequest) -> GetResponse:
        try:
            post = await self._service.get_post(parse_post_id(request.id))
        except Exception as e:
            raise self._failure(
                "Get", "error in fetching post", GetResponse, e, request,
            ) from e
        return _encode_post(GetResponse, post)

    async def update(self, request: UpdateRequest) -> UpdateResponse:
        entity_request = UpdatePostRequest(
            title=request.title,
            content=request.content,
            author=request.author,
            tags=list(request.tags or []),
        )
        try:
            post = await self._service.update_post(
                parse_post_id(request.id), entity_request,
            )
        except Exception as e:
            raise self._failure(
                "Update", "error in updating post", UpdateResponse, e, request,
            ) from e
        return _encode_post(UpdateResponse, post)

    async def delete(self, request: DeleteRequest) -> DeleteResponse:
        try:
            deleted = await self._service.delete_post(parse_post_id(request.id))
            if not deleted:
                raise InvariantViolationError("post deletion was not acknowledged")
        except Exception as e:
            raise self._failure(
                "Delete", "error in deleting post", DeleteResponse, e, request,
            ) from e
        return DeleteResponse(success=True)

    def _failure(
        self, method: str, log_message: str, response_cls: type,
        error: Exception, request,
    ) -> RPCCallError:
        """Log the error once and build the paired failure signals."""
        extra = {
            "rpc_method": method,
            "request": request.model_dump(mode="json"),
        }
        if isinstance(error, BlogPostError):
            message, status_code, error_code = (
                error.message, error.http_status, error.code,
            )
            self._logger.error(
                f"{log_message}: {message}",
                extra={**extra, "error_code": error_code},
            )
        else:
            message, status_code, error_code = (
                UNEXPECTED_ERROR_MESSAGE, 500, "INTERNAL_ERROR",
            )
            self._logger.error(
                f"{log_message}: unexpected {type(error).__name__}",
                extra={**extra, "error_code": error_code},
                exc_info=error,
            )
        if not message:
            message = f"{method} failed ({error_code})"
        return RPCCallError(
            method, response_cls(success=False, message=message),
            status_code, error_code,
        )


def _encode_post(response_cls: type[R], post: PostDetail) -> R:
    return response_cls(
        success=True,
        id=str(post.id),
        title=post.title,
        content=post.content,
        author=post.author,
        published_on=post.published_on,
        tags=list(post.tags),
    )
