"""Post Store — persistence for auxiliary posts.

Invariants:
    - Listings are newest first
    - Writes require a real auxiliary slug; auxiliary never changes on update
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wardsite.core import auxiliary
from wardsite.core.errors import ResourceNotFoundError, UnknownAuxiliaryError
from wardsite.models.post import Post
from wardsite.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


class PostStore:
    """Post persistence scoped by auxiliary."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_auxiliary(self, slug: str, limit: int | None = None) -> list[Post]:
        query = (
            select(Post)
            .where(Post.auxiliary.in_(auxiliary.resolve(slug)))
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_all(self) -> list[Post]:
        """Every post across all auxiliaries (admin overview)."""
        result = await self.db.execute(
            select(Post).order_by(Post.created_at.desc(), Post.id.desc()),
        )
        return list(result.scalars().all())

    async def get(self, post_id: int) -> Post:
        post = await self.db.get(Post, post_id)
        if post is None:
            raise ResourceNotFoundError("Post", str(post_id))
        return post

    async def create(self, slug: str, data: PostCreate) -> Post:
        if not auxiliary.is_real_slug(slug):
            raise UnknownAuxiliaryError(slug)
        post = Post(auxiliary=slug, title=data.title, body=data.body)
        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        logger.info(
            f"Created post '{post.title}'",
            extra={"auxiliary": slug, "post_id": post.id},
        )
        return post

    async def update(self, post_id: int, data: PostUpdate) -> Post:
        post = await self.get(post_id)
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(post, key, value)
        await self.db.commit()
        await self.db.refresh(post)
        return post

    async def delete(self, post_id: int) -> None:
        post = await self.get(post_id)
        await self.db.delete(post)
        await self.db.commit()
        logger.info("Deleted post", extra={"post_id": post_id})
