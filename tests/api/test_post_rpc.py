"""Post RPC Handler — wire translation and the paired failure signals.

Tests cover:
    - Malformed ids fail before the service is called
    - Every failure raises RPCCallError carrying success=false and a non-empty message
    - delete returning False without an error becomes an invariant violation
    - Unexpected exceptions never leak their text
"""

import logging
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from blogpost.api.post_rpc import PostRPCHandler, RPCCallError
from blogpost.core.domain_types import PostId
from blogpost.core.entities import CreatePostRequest, PostDetail, UpdatePostRequest
from blogpost.core.errors import ConfigurationError, InvalidTargetError, NotFoundError
from blogpost.schemas.post_rpc import (
    CreateRequest, DeleteRequest, GetRequest, UpdateRequest,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_service():
    return AsyncMock()


@pytest.fixture
def handler(mock_service):
    return PostRPCHandler(mock_service, logging.getLogger("tests.post_rpc"))


def _post(post_id: PostId) -> PostDetail:
    return PostDetail(
        id=post_id, title="success post", content="body", author="sam",
        published_on=NOW, tags=["a", "b"], created_at=NOW, updated_at=NOW,
    )


async def test_create_decodes_request_and_encodes_post(handler, mock_service):
    post_id = PostId(uuid4())
    mock_service.create_post.return_value = _post(post_id)

    response = await handler.create(CreateRequest(
        title="success post", content="body", author="sam",
        publishedOn=NOW, tags=["a", "b"],
    ))

    mock_service.create_post.assert_awaited_once_with(CreatePostRequest(
        title="success post", content="body", author="sam",
        published_on=NOW, tags=["a", "b"],
    ))
    assert response.success is True
    assert response.id == str(post_id)
    assert response.published_on == NOW
    assert response.tags == ["a", "b"]
    assert response.message == ""


async def test_update_decodes_optional_fields(handler, mock_service):
    post_id = PostId(uuid4())
    mock_service.update_post.return_value = _post(post_id)

    await handler.update(UpdateRequest(id=str(post_id), content="new"))

    mock_service.update_post.assert_awaited_once_with(
        post_id, UpdatePostRequest(content="new"),
    )


async def test_update_null_tags_decode_as_unchanged(handler, mock_service):
    post_id = PostId(uuid4())
    mock_service.update_post.return_value = _post(post_id)

    await handler.update(UpdateRequest(id=str(post_id), tags=None))

    mock_service.update_post.assert_awaited_once_with(
        post_id, UpdatePostRequest(tags=[]),
    )


@pytest.mark.parametrize("method, request_cls", [
    ("get", GetRequest), ("update", UpdateRequest), ("delete", DeleteRequest),
])
async def test_invalid_id_fails_before_service(handler, mock_service, method, request_cls):
    with pytest.raises(RPCCallError) as exc_info:
        await getattr(handler, method)(request_cls(id="not-a-uuid"))

    err = exc_info.value
    assert err.status_code == 400
    assert err.error_code == "INVALID_IDENTIFIER"
    assert err.response.success is False
    assert err.response.message == "invalid post id"
    assert mock_service.mock_calls == []


async def test_service_error_produces_both_signals(handler, mock_service):
    post_id = str(uuid4())
    mock_service.get_post.side_effect = NotFoundError(post_id)

    with pytest.raises(RPCCallError) as exc_info:
        await handler.get(GetRequest(id=post_id))

    err = exc_info.value
    assert err.status_code == 404
    assert err.response.success is False
    assert "is not available" in err.response.message
    assert isinstance(err.__cause__, NotFoundError)


async def test_update_invalid_target_message(handler, mock_service):
    mock_service.update_post.side_effect = InvalidTargetError()

    with pytest.raises(RPCCallError) as exc_info:
        await handler.update(UpdateRequest(id=str(uuid4()), title="x"))

    assert exc_info.value.response.message == "post is not available or is deleted"


async def test_delete_success(handler, mock_service):
    mock_service.delete_post.return_value = True

    response = await handler.delete(DeleteRequest(id=str(uuid4())))

    assert response.success is True


async def test_delete_false_without_error_is_invariant_violation(handler, mock_service):
    mock_service.delete_post.return_value = False

    with pytest.raises(RPCCallError) as exc_info:
        await handler.delete(DeleteRequest(id=str(uuid4())))

    err = exc_info.value
    assert err.status_code == 500
    assert err.error_code == "INVARIANT_VIOLATION"
    assert err.response.success is False
    assert err.response.message == "post deletion was not acknowledged"


async def test_unexpected_error_is_not_leaked(handler, mock_service):
    mock_service.create_post.side_effect = RuntimeError("secret dsn in here")

    with pytest.raises(RPCCallError) as exc_info:
        await handler.create(CreateRequest(
            title="t", content="c", author="a", publishedOn=NOW,
        ))

    err = exc_info.value
    assert err.status_code == 500
    assert "secret" not in err.response.message
    assert err.response.message == "An unexpected error occurred"


def test_handler_requires_service():
    with pytest.raises(ConfigurationError):
        PostRPCHandler(None, logging.getLogger("x"))
