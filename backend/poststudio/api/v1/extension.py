"""
Browser extension endpoints: debug logging, the swipe file, analytics sync
and the typed message relay.

The relay (POST /extension/messages) accepts the same messages the extension's
background worker handles and dispatches them to the functions behind the
plain HTTP endpoints, so both paths share one implementation.
"""
import json
import logging
from typing import Any, Dict, List, Literal, Optional, Union

from fastapi import APIRouter, Body, Depends, Query
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from supabase import Client

from ...db.repositories import AnalyticsRepository, SwipeFileRepository
from ...db.supabase import get_supabase_client
from ...errors import NotFoundError, ValidationError
from ...models.content import CamelModel
from ..handlers import format_validation_errors

logger = logging.getLogger(__name__)
extension_logger = logging.getLogger("poststudio.extension")

router = APIRouter(prefix="/extension", tags=["extension"])

SUMMARY_FOLLOWER_DAYS = 30
TOP_POSTS = 5


# Request/Response Models
class LogRequest(BaseModel):
    message: str = ""
    key: Optional[str] = None
    data: Any = None


class SwipeAuthor(CamelModel):
    name: Optional[str] = None
    profile_url: Optional[str] = None


class SwipeEngagement(CamelModel):
    likes: int = 0
    comments: int = 0


class SwipePostRequest(CamelModel):
    content: Optional[str] = None
    author: Optional[SwipeAuthor] = None
    engagement: Optional[SwipeEngagement] = None
    post_url: Optional[str] = None


class FollowerEntry(CamelModel):
    date: str = Field(..., min_length=1)
    count: int


class PostAnalyticsInput(CamelModel):
    post_url: str = Field(..., min_length=1)
    content: Optional[str] = None
    impressions: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0


class AnalyticsSyncRequest(BaseModel):
    type: str
    data: Any = None


class SavePostMessage(CamelModel):
    type: Literal["SAVE_POST"]
    post_data: SwipePostRequest


class GetStatsMessage(CamelModel):
    type: Literal["GET_STATS"]


class SyncAnalyticsMessage(CamelModel):
    type: Literal["SYNC_ANALYTICS"]
    analytics_data: AnalyticsSyncRequest


ExtensionMessage = Union[SavePostMessage, GetStatsMessage, SyncAnalyticsMessage]


def _parse(model, data):
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(format_validation_errors(e.errors()))


def engagement_rate(impressions: int, likes: int, comments: int, shares: int) -> float:
    """Engagement as a percentage of impressions, rounded to two decimals."""
    if impressions <= 0:
        return 0.0
    return round((likes + comments + shares) / impressions * 100, 2)


# Shared operations
def save_swipe_post(request: SwipePostRequest, repository: SwipeFileRepository) -> Dict[str, Any]:
    """Save a captured post to the swipe file unless it is already there."""
    if not request.content or not request.content.strip():
        raise ValidationError("Post content is required")

    author = request.author or SwipeAuthor()
    engagement = request.engagement or SwipeEngagement()
    logger.info(
        f"Save-post request: author={author.name}, {len(request.content)} chars, url={request.post_url}"
    )

    existing_id = repository.find_existing(request.content, request.post_url)
    if existing_id is not None:
        logger.info(f"Post already in swipe file (id {existing_id})")
        return {"message": "Post already saved", "id": existing_id}

    row = repository.insert({
        "content": request.content,
        "author_name": author.name or "Unknown",
        "author_profile_url": author.profile_url or "",
        "post_url": request.post_url or "",
        "likes": engagement.likes,
        "comments": engagement.comments,
    })
    logger.info(f"Saved post to swipe file (id {row['id']})")
    return {"success": True, "id": row["id"], "message": "Post saved to swipe file"}


def sync_analytics(request: AnalyticsSyncRequest, repository: AnalyticsRepository) -> Dict[str, Any]:
    if request.type == "follower_history":
        entries = [_parse(FollowerEntry, entry) for entry in _parse_list(request.data)]
        synced = repository.upsert_follower_history([entry.model_dump() for entry in entries])
        return {"success": True, "message": f"Synced {synced} follower entries"}

    if request.type == "post_analytics":
        post = _parse(PostAnalyticsInput, request.data)
        repository.upsert_post_analytics({
            "post_url": post.post_url,
            "content": post.content,
            "impressions": post.impressions,
            "likes": post.likes,
            "comments": post.comments,
            "shares": post.shares,
            "engagement_rate": engagement_rate(post.impressions, post.likes, post.comments, post.shares),
        })
        return {"success": True}

    raise ValidationError("Invalid analytics type")


def _parse_list(data) -> List[Any]:
    if not isinstance(data, list):
        raise ValidationError("Follower history data must be a list")
    return data


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def analytics_summary(repository: AnalyticsRepository) -> Dict[str, Any]:
    """Follower growth over the last month plus post engagement averages."""
    history = repository.follower_history(limit=SUMMARY_FOLLOWER_DAYS)
    posts = repository.post_analytics(limit=None)

    growth = history[0]["count"] - history[-1]["count"] if len(history) >= 2 else 0
    top = sorted(
        posts,
        key=lambda post: (post.get("likes") or 0) + (post.get("comments") or 0),
        reverse=True,
    )[:TOP_POSTS]

    return {
        "followers": {
            "history": history,
            "current": history[0]["count"] if history else 0,
            "growth": growth,
        },
        "posts": {
            "total": len(posts),
            "avgLikes": _mean([post.get("likes") or 0 for post in posts]),
            "avgComments": _mean([post.get("comments") or 0 for post in posts]),
            "avgEngagement": _mean([float(post.get("engagement_rate") or 0) for post in posts]),
            "top": top,
        },
    }


def get_swipe_file_repository(supabase: Client = Depends(get_supabase_client)) -> SwipeFileRepository:
    return SwipeFileRepository(supabase)


def get_analytics_repository(supabase: Client = Depends(get_supabase_client)) -> AnalyticsRepository:
    return AnalyticsRepository(supabase)


# Endpoints
@router.post("/log")
async def log_extension_message(request: LogRequest):
    """Write a debug message from the extension to the server log."""
    extension_logger.info(f"[EXT-DEBUG] {request.message}")
    if request.data is not None:
        if isinstance(request.data, (dict, list)):
            extension_logger.info(json.dumps(request.data, indent=2, ensure_ascii=False))
        else:
            extension_logger.info(str(request.data))
    return {"success": True}


@router.post("/save-post")
async def save_post(
    request: SwipePostRequest,
    repository: SwipeFileRepository = Depends(get_swipe_file_repository),
):
    return save_swipe_post(request, repository)


@router.get("/save-post")
async def list_swipe_posts(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    search: str = "",
    repository: SwipeFileRepository = Depends(get_swipe_file_repository),
):
    """List swipe file posts, newest first, optionally filtered by content or author."""
    posts, total = repository.list(limit=limit, offset=offset, search=search)
    return {
        "posts": posts,
        "pagination": {
            "total": total,
            "limit": limit,
            "offset": offset,
            "hasMore": offset + len(posts) < total,
        },
    }


@router.delete("/save-post")
async def delete_swipe_post(
    id: Optional[str] = None,
    repository: SwipeFileRepository = Depends(get_swipe_file_repository),
):
    if not id:
        raise ValidationError("Post ID is required")
    try:
        post_id = int(id)
    except ValueError:
        raise ValidationError("Invalid post ID")

    if not repository.delete(post_id):
        raise NotFoundError("Post not found")
    return {"success": True}


@router.post("/analytics")
async def post_analytics(
    request: AnalyticsSyncRequest,
    repository: AnalyticsRepository = Depends(get_analytics_repository),
):
    """Sync follower history or a single post's metrics."""
    return sync_analytics(request, repository)


@router.get("/analytics")
async def get_analytics(
    type: str = "summary",
    repository: AnalyticsRepository = Depends(get_analytics_repository),
):
    if type == "followers":
        return {"history": repository.follower_history()}
    if type == "posts":
        return {"posts": repository.post_analytics()}
    return analytics_summary(repository)


@router.post("/messages")
async def relay_message(
    message: ExtensionMessage = Body(..., discriminator="type"),
    swipe_file: SwipeFileRepository = Depends(get_swipe_file_repository),
    analytics: AnalyticsRepository = Depends(get_analytics_repository),
):
    """Dispatch a typed extension message; replies with {"success": true, "result": ...}."""
    if isinstance(message, SavePostMessage):
        result = save_swipe_post(message.post_data, swipe_file)
    elif isinstance(message, SyncAnalyticsMessage):
        result = sync_analytics(message.analytics_data, analytics)
    else:
        result = analytics_summary(analytics)
    return {"success": True, "result": result}
