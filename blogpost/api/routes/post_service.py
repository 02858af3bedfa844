"""Post Service Routes — post.v1.PostService unary operations over HTTP POST.

Invariants:
    - One POST endpoint per operation: /rpc/post.v1.PostService/{Create,Get,Update,Delete}
    - Routes only bind wire bodies to PostRPCHandler; failures raise RPCCallError,
      rendered by error_handlers with the failure body and the error status
"""

from fastapi import APIRouter, Depends

from blogpost.api.dependencies import get_post_rpc
from blogpost.api.post_rpc import PostRPCHandler
from blogpost.schemas.post_rpc import (
    CreateRequest, CreateResponse,
    GetRequest, GetResponse,
    UpdateRequest, UpdateResponse,
    DeleteRequest, DeleteResponse,
)

RPC_PREFIX = "/rpc/post.v1.PostService"

router = APIRouter(prefix=RPC_PREFIX, tags=["posts"])

# Failure response message per operation, for bodies that fail to decode
RESPONSE_TYPES = {
    "Create": CreateResponse,
    "Get": GetResponse,
    "Update": UpdateResponse,
    "Delete": DeleteResponse,
}


def response_type_for(path: str) -> type | None:
    """Response message class of the RPC route at path, or None for other routes."""
    if not path.startswith(RPC_PREFIX + "/"):
        return None
    return RESPONSE_TYPES.get(path[len(RPC_PREFIX) + 1:])


@router.post("/Create", response_model=CreateResponse)
async def create_post(
    body: CreateRequest, rpc: PostRPCHandler = Depends(get_post_rpc),
):
    """Create a post."""
    return await rpc.create(body)


@router.post("/Get", response_model=GetResponse)
async def get_post(
    body: GetRequest, rpc: PostRPCHandler = Depends(get_post_rpc),
):
    """Fetch a live post by id."""
    return await rpc.get(body)


@router.post("/Update", response_model=UpdateResponse)
async def update_post(
    body: UpdateRequest, rpc: PostRPCHandler = Depends(get_post_rpc),
):
    """Update the supplied fields of a live post."""
    return await rpc.update(body)


@router.post("/Delete", response_model=DeleteResponse)
async def delete_post(
    body: DeleteRequest, rpc: PostRPCHandler = Depends(get_post_rpc),
):
    """Soft-delete a post."""
    return await rpc.delete(body)
