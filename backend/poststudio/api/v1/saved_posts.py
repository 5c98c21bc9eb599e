"""
Saved trending posts API endpoints.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import field_validator
from supabase import Client

from ...db.repositories import SavedPostRepository
from ...db.supabase import get_supabase_client
from ...errors import NotFoundError, ValidationError
from ...models.content import CamelModel
from ...models.records import SavedTrendingPost

router = APIRouter(prefix="/saved-posts", tags=["saved-posts"])


class SavePostRequest(CamelModel):
    post: Dict[str, Any]
    notes: Optional[str] = None

    @field_validator("post")
    @classmethod
    def check_post(cls, value):
        if not value.get("id"):
            raise ValueError("Post data is required")
        return value


class DeleteResponse(CamelModel):
    success: bool
    message: str


def get_saved_post_repository(supabase: Client = Depends(get_supabase_client)) -> SavedPostRepository:
    return SavedPostRepository(supabase)


@router.get("", response_model=List[SavedTrendingPost])
async def list_saved_posts(repository: SavedPostRepository = Depends(get_saved_post_repository)):
    """List saved trending posts, newest first."""
    return repository.list()


@router.post("", response_model=SavedTrendingPost, status_code=201)
async def save_post(
    request: SavePostRequest,
    repository: SavedPostRepository = Depends(get_saved_post_repository),
):
    """Save a trending post. Saving the same post again updates its notes."""
    return repository.save(request.post, request.notes)


@router.delete("/{post_id}", response_model=DeleteResponse)
async def delete_saved_post(
    post_id: str,
    repository: SavedPostRepository = Depends(get_saved_post_repository),
):
    """Delete a saved post by its LinkedIn post id."""
    if not post_id.strip():
        raise ValidationError("Post ID is required")
    if not repository.delete(post_id):
        raise NotFoundError("Saved post not found")
    return DeleteResponse(success=True, message="Post deleted successfully")
