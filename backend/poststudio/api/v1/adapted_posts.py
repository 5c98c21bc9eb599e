"""
Saved platform adaptations: the output of /adapt kept for later reuse.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import Field
from supabase import Client

from ...db.repositories import AdaptedPostRepository
from ...db.supabase import get_supabase_client
from ...errors import NotFoundError, ValidationError
from ...models.content import CamelModel, Language, Platform
from ...models.records import AdaptedPost

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/adapted-posts", tags=["adapted-posts"])


class SaveAdaptedPostRequest(CamelModel):
    source_content: str = Field(..., min_length=1)
    platform: Platform
    adapted_content: str = Field(..., min_length=1)
    character_count: Optional[int] = Field(None, ge=0)
    changes: List[str] = Field(default_factory=list)
    language: Language


class AdaptedPostList(CamelModel):
    posts: List[AdaptedPost]


class AdaptedPostEnvelope(CamelModel):
    post: AdaptedPost


def get_adapted_post_repository(supabase: Client = Depends(get_supabase_client)) -> AdaptedPostRepository:
    return AdaptedPostRepository(supabase)


@router.get("", response_model=AdaptedPostList)
async def list_adapted_posts(repository: AdaptedPostRepository = Depends(get_adapted_post_repository)):
    """List saved adaptations, newest first."""
    return AdaptedPostList(posts=repository.list())


@router.post("", response_model=AdaptedPostEnvelope, status_code=201)
async def save_adapted_post(
    request: SaveAdaptedPostRequest,
    repository: AdaptedPostRepository = Depends(get_adapted_post_repository),
):
    """Save an adaptation. The character count defaults to the adapted text's length."""
    character_count = request.character_count
    if character_count is None:
        character_count = len(request.adapted_content)

    post = repository.save({
        "source_content": request.source_content,
        "platform": request.platform.value,
        "adapted_content": request.adapted_content,
        "character_count": character_count,
        "changes": request.changes,
        "language": request.language.value,
    })
    logger.info(f"Saved adapted post {post.id} for {post.platform.value}")
    return AdaptedPostEnvelope(post=post)


@router.delete("")
async def delete_adapted_post(
    id: Optional[str] = None,
    repository: AdaptedPostRepository = Depends(get_adapted_post_repository),
):
    if not id:
        raise ValidationError("Missing required parameter: id")
    try:
        post_id = int(id)
    except ValueError:
        raise ValidationError("Invalid post ID")

    if not repository.delete(post_id):
        raise NotFoundError("Adapted post not found")
    return {"success": True}
