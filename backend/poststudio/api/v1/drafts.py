"""
Draft endpoints backed by the session-scoped DraftStore.

Clients identify their session with the X-Session-Id header.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Header
from pydantic import Field, ValidationInfo, field_validator

from ...errors import NotFoundError, ValidationError
from ...models.content import CamelModel, Language, PostLength, reject_null
from ...models.records import Draft
from ...storage.drafts import DraftStore, get_draft_store

router = APIRouter(prefix="/drafts", tags=["drafts"])


class DraftCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    language: Language
    tone: str = Field(..., min_length=1)
    length: PostLength
    hashtags: List[str] = Field(default_factory=list)
    original_context: Optional[str] = None


class DraftUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    language: Optional[Language] = None
    tone: Optional[str] = Field(None, min_length=1)
    length: Optional[PostLength] = None
    hashtags: Optional[List[str]] = None
    original_context: Optional[str] = None

    @field_validator("title", "content", "language", "tone", "length", "hashtags")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class MessageResponse(CamelModel):
    message: str


def get_session_id(x_session_id: Optional[str] = Header(None)) -> str:
    if not x_session_id or not x_session_id.strip():
        raise ValidationError("X-Session-Id header is required")
    return x_session_id.strip()


@router.get("", response_model=List[Draft])
async def list_drafts(
    session_id: str = Depends(get_session_id),
    store: DraftStore = Depends(get_draft_store),
):
    return store.list(session_id)


@router.post("", response_model=Draft, status_code=201)
async def create_draft(
    draft: DraftCreate,
    session_id: str = Depends(get_session_id),
    store: DraftStore = Depends(get_draft_store),
):
    return store.save(session_id, draft.model_dump())


@router.delete("", response_model=MessageResponse)
async def clear_drafts(
    session_id: str = Depends(get_session_id),
    store: DraftStore = Depends(get_draft_store),
):
    """Remove every draft in the session."""
    store.clear(session_id)
    return MessageResponse(message="Drafts cleared")


@router.get("/{draft_id}", response_model=Draft)
async def get_draft(
    draft_id: str,
    session_id: str = Depends(get_session_id),
    store: DraftStore = Depends(get_draft_store),
):
    draft = store.get(session_id, draft_id)
    if draft is None:
        raise NotFoundError("Draft not found")
    return draft


@router.put("/{draft_id}", response_model=Draft)
async def update_draft(
    draft_id: str,
    draft: DraftUpdate,
    session_id: str = Depends(get_session_id),
    store: DraftStore = Depends(get_draft_store),
):
    update_data = draft.model_dump(exclude_unset=True)
    if not update_data:
        raise ValidationError("No fields to update")

    updated = store.update(session_id, draft_id, update_data)
    if updated is None:
        raise NotFoundError("Draft not found")
    return updated


@router.delete("/{draft_id}", response_model=MessageResponse)
async def delete_draft(
    draft_id: str,
    session_id: str = Depends(get_session_id),
    store: DraftStore = Depends(get_draft_store),
):
    if not store.delete(session_id, draft_id):
        raise NotFoundError("Draft not found")
    return MessageResponse(message="Draft deleted successfully")
