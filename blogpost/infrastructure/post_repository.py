"""Post Repository — SQLAlchemy persistence for posts.

Invariants:
    - LIVE_POST (is_deleted IS false) is applied to every read and update query:
      a soft-deleted row is unreachable through this repository except by delete
    - Each operation runs in its own session; failures roll back (DatabaseSessionManager)
    - Store failures surface as PersistenceError; a missing live row on get is NotFoundError
    - update_post applies only supplied fields: non-None scalars, non-empty tags
    - delete_post is idempotent: unknown or already-deleted ids do not raise

Design Decisions:
    - Config record over keyword soup: missing collaborators fail at construction
    - Timestamps normalized to UTC on write and read: SQLite drops tzinfo
"""

import asyncio
import logging
import uuid
from contextlib import AbstractAsyncContextManager
from dataclasses import asdict, dataclass
from typing import Awaitable, Callable, Protocol, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogpost.core.domain_types import PostId
from blogpost.core.entities import CreatePostRequest, PostDetail, UpdatePostRequest
from blogpost.core.errors import (
    BlogPostError, NotFoundError, PersistenceError, require_collaborators,
)
from blogpost.models.post import Post, as_utc, utcnow

T = TypeVar("T")

LIVE_POST = Post.is_deleted.is_(False)


class SessionProvider(Protocol):
    """Anything that hands out rollback-on-error sessions (DatabaseSessionManager)."""
    def session(self) -> AbstractAsyncContextManager[AsyncSession]: ...


@dataclass(frozen=True)
class PostRepositoryConfig:
    db: SessionProvider
    logger: logging.Logger
    operation_timeout: float | None = None

    def __post_init__(self):
        require_collaborators(
            "PostRepositoryConfig", db=self.db, logger=self.logger,
        )


class SqlAlchemyPostRepository:
    """PostRepository backed by a relational store."""

    def __init__(self, config: PostRepositoryConfig):
        self._db = config.db
        self._logger = config.logger
        self._timeout = config.operation_timeout

    async def create_post(self, request: CreatePostRequest) -> PostDetail:
        async def insert() -> PostDetail:
            now = utcnow()
            row = Post(
                id=uuid.uuid4(),
                title=request.title,
                content=request.content,
                author=request.author,
                published_on=as_utc(request.published_on),
                tags=list(request.tags),
                is_deleted=False,
                created_at=now,
                updated_at=now,
            )
            async with self._db.session() as db:
                db.add(row)
                await db.commit()
            return _to_detail(row)

        try:
            return await self._run("insert", insert)
        except PersistenceError as e:
            self._logger.error(
                "error in saving post",
                extra={"error_code": e.code, "request": asdict(request)},
            )
            raise

    async def get_post(self, post_id: PostId) -> PostDetail:
        async def fetch() -> PostDetail:
            async with self._db.session() as db:
                row = await db.scalar(_live_post(post_id))
            if row is None:
                raise NotFoundError(str(post_id))
            return _to_detail(row)

        try:
            return await self._run("query", fetch)
        except BlogPostError as e:
            self._logger.error(
                f"error in fetching post: {e.message}",
                extra={"error_code": e.code, "post_id": str(post_id)},
            )
            raise

    async def update_post(
        self, post_id: PostId, request: UpdatePostRequest,
    ) -> PostDetail:
        changes = _changed_fields(request)

        async def write() -> PostDetail:
            async with self._db.session() as db:
                row = await db.scalar(_live_post(post_id))
                if row is None:
                    raise PersistenceError(
                        f"post '{post_id}' does not exist", "update",
                    )
                for name, value in changes.items():
                    setattr(row, name, value)
                row.updated_at = utcnow()
                await db.commit()
            return _to_detail(row)

        try:
            return await self._run("update", write)
        except PersistenceError as e:
            self._logger.error(
                "error in updating post",
                extra={
                    "error_code": e.code,
                    "post_id": str(post_id),
                    "request": asdict(request),
                },
            )
            raise

    async def delete_post(self, post_id: PostId) -> bool:
        async def tombstone() -> bool:
            async with self._db.session() as db:
                await db.execute(
                    update(Post)
                    .where(Post.id == post_id)
                    .values(is_deleted=True, updated_at=utcnow()),
                )
                await db.commit()
            return True

        try:
            return await self._run("delete", tombstone)
        except PersistenceError as e:
            self._logger.error(
                "error in deleting post",
                extra={"error_code": e.code, "post_id": str(post_id)},
            )
            raise

    async def _run(self, operation: str, work: Callable[[], Awaitable[T]]) -> T:
        """Run one store operation under the configured timeout."""
        try:
            return await asyncio.wait_for(work(), timeout=self._timeout)
        except asyncio.TimeoutError:
            raise PersistenceError(
                f"{operation} exceeded {self._timeout}s", "timeout",
            ) from None


def _live_post(post_id: PostId):
    return select(Post).where(Post.id == post_id, LIVE_POST)


def _changed_fields(request: UpdatePostRequest) -> dict:
    """Fields the caller supplied. Empty tags count as absent."""
    changes = {
        name: value
        for name, value in (
            ("title", request.title),
            ("content", request.content),
            ("author", request.author),
        )
        if value is not None
    }
    if request.tags:
        changes["tags"] = list(request.tags)
    return changes


def _to_detail(row: Post) -> PostDetail:
    return PostDetail(
        id=PostId(row.id),
        title=row.title,
        content=row.content,
        author=row.author,
        published_on=as_utc(row.published_on),
        tags=list(row.tags or []),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )
