"""Post Routes — CRUD for auxiliary posts plus the all-posts admin listing."""


from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wardsite.infrastructure.database import get_db
from wardsite.schemas.post import PostCreate, PostResponse, PostUpdate
from wardsite.services.calendar_page import get_auxiliary_or_404
from wardsite.services.post_store import PostStore

router = APIRouter(prefix="/api/v1", tags=["posts"])


@router.get("/posts", response_model=list[PostResponse])
async def list_all_posts(db: AsyncSession = Depends(get_db)):
    """Every post, newest first."""
    return await PostStore(db).list_all()


@router.get("/auxiliaries/{slug}/posts", response_model=list[PostResponse])
async def list_posts(
    slug: str,
    limit: int | None = Query(None, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    get_auxiliary_or_404(slug)
    return await PostStore(db).list_for_auxiliary(slug, limit=limit)


@router.post(
    "/auxiliaries/{slug}/posts", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    slug: str, body: PostCreate, db: AsyncSession = Depends(get_db),
):
    get_auxiliary_or_404(slug)
    return await PostStore(db).create(slug, body)


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    return await PostStore(db).get(post_id)


@router.patch("/posts/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int, body: PostUpdate, db: AsyncSession = Depends(get_db),
):
    return await PostStore(db).update(post_id, body)


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db)):
    await PostStore(db).delete(post_id)
