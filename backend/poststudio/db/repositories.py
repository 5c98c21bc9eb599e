"""
Table access for custom tones, saved trending posts, adapted posts, the swipe
file and extension analytics.

Each repository takes a Supabase client so routes can inject it with
Depends(get_supabase_client). Driver errors are re-raised as StorageError.
"""
from __future__ import annotations

import functools
import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

from supabase import Client

from ..errors import handle_database_error
from ..models.records import AdaptedPost, CustomTone, SavedTrendingPost

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def storage_errors(func):
    """Convert any exception raised by the database client into a StorageError."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__qualname__} failed: {e}")
            raise handle_database_error(e)

    return wrapper


class CustomToneRepository:
    table = "custom_tones"

    def __init__(self, supabase: Client):
        self.supabase = supabase

    @storage_errors
    def list(self, include_presets: bool = False) -> list[CustomTone]:
        query = self.supabase.table(self.table).select("*")
        if not include_presets:
            query = query.eq("is_preset", False)
        result = query.order("name").execute()
        return [CustomTone.from_row(row) for row in result.data or []]

    @storage_errors
    def list_presets(self, industry: str) -> list[CustomTone]:
        result = (
            self.supabase.table(self.table)
            .select("*")
            .eq("is_preset", True)
            .eq("industry", industry)
            .order("name")
            .execute()
        )
        return [CustomTone.from_row(row) for row in result.data or []]

    @storage_errors
    def get(self, tone_id: int) -> Optional[CustomTone]:
        result = self.supabase.table(self.table).select("*").eq("id", tone_id).execute()
        if not result.data:
            return None
        return CustomTone.from_row(result.data[0])

    @storage_errors
    def create(self, fields: dict[str, Any]) -> CustomTone:
        data = {k: v for k, v in fields.items() if v is not None}
        result = self.supabase.table(self.table).insert(data).execute()
        if not result.data:
            raise RuntimeError("Failed to create custom tone")
        return CustomTone.from_row(result.data[0])

    @storage_errors
    def update(self, tone_id: int, fields: dict[str, Any]) -> Optional[CustomTone]:
        existing = self.supabase.table(self.table).select("id").eq("id", tone_id).execute()
        if not existing.data:
            return None

        data = dict(fields)
        data["updated_at"] = _now()
        result = self.supabase.table(self.table).update(data).eq("id", tone_id).execute()
        if not result.data:
            return None
        return CustomTone.from_row(result.data[0])

    @storage_errors
    def delete(self, tone_id: int) -> bool:
        existing = self.supabase.table(self.table).select("id").eq("id", tone_id).execute()
        if not existing.data:
            return False
        self.supabase.table(self.table).delete().eq("id", tone_id).execute()
        return True

    @storage_errors
    def seed_presets(self, presets: list[dict[str, Any]]) -> int:
        """Insert presets that are not stored yet. Returns the number created."""
        existing = self.supabase.table(self.table).select("name").eq("is_preset", True).execute()
        existing_names = {row["name"] for row in existing.data or []}

        created = 0
        for preset in presets:
            if preset["name"] in existing_names:
                continue
            self.supabase.table(self.table).insert({**preset, "is_preset": True}).execute()
            created += 1

        logger.info(f"Seeded {created} industry presets ({len(existing_names)} already present)")
        return created


class SavedPostRepository:
    table = "saved_trending_posts"

    def __init__(self, supabase: Client):
        self.supabase = supabase

    @storage_errors
    def list(self) -> list[SavedTrendingPost]:
        result = self.supabase.table(self.table).select("*").order("saved_at", desc=True).execute()
        return [SavedTrendingPost.from_row(row) for row in result.data or []]

    @storage_errors
    def save(self, post: dict[str, Any], notes: Optional[str] = None) -> SavedTrendingPost:
        data = {
            "post_id": str(post["id"]),
            "post_data": post,
            "notes": notes,
            "saved_at": _now(),
        }
        result = self.supabase.table(self.table).upsert(data, on_conflict="post_id").execute()
        if not result.data:
            raise RuntimeError("Failed to save post")
        return SavedTrendingPost.from_row(result.data[0])

    @storage_errors
    def delete(self, post_id: str) -> bool:
        existing = self.supabase.table(self.table).select("id").eq("post_id", post_id).execute()
        if not existing.data:
            return False
        self.supabase.table(self.table).delete().eq("post_id", post_id).execute()
        return True


class AdaptedPostRepository:
    table = "adapted_posts"

    def __init__(self, supabase: Client):
        self.supabase = supabase

    @storage_errors
    def list(self) -> list[AdaptedPost]:
        result = self.supabase.table(self.table).select("*").order("created_at", desc=True).execute()
        return [AdaptedPost.from_row(row) for row in result.data or []]

    @storage_errors
    def save(self, fields: dict[str, Any]) -> AdaptedPost:
        result = self.supabase.table(self.table).insert(fields).execute()
        if not result.data:
            raise RuntimeError("Failed to save adapted post")
        return AdaptedPost.from_row(result.data[0])

    @storage_errors
    def delete(self, post_id: int) -> bool:
        existing = self.supabase.table(self.table).select("id").eq("id", post_id).execute()
        if not existing.data:
            return False
        self.supabase.table(self.table).delete().eq("id", post_id).execute()
        return True


# PostgREST filter syntax reserves these characters inside or_() expressions
_FILTER_RESERVED = re.compile(r"[,()%*\\]")


class SwipeFileRepository:
    table = "swipe_file_posts"

    def __init__(self, supabase: Client):
        self.supabase = supabase

    @storage_errors
    def find_existing(self, content: str, post_url: Optional[str]) -> Optional[int]:
        """
        Find an already-saved copy of a post.

        Specific post URLs are matched exactly; feed URLs are shared by many
        posts, so those fall back to matching the first 100 characters.
        """
        query = self.supabase.table(self.table).select("id")
        if post_url and "/feed/" not in post_url and not post_url.endswith("/feed"):
            query = query.eq("post_url", post_url)
        else:
            query = query.like("content", content[:100].replace("%", "\\%") + "%")
        result = query.limit(1).execute()
        if not result.data:
            return None
        return result.data[0]["id"]

    @storage_errors
    def insert(self, fields: dict[str, Any]) -> dict[str, Any]:
        result = self.supabase.table(self.table).insert({**fields, "saved_at": _now()}).execute()
        if not result.data:
            raise RuntimeError("Failed to save post")
        return result.data[0]

    @storage_errors
    def list(self, limit: int = 50, offset: int = 0, search: str = "") -> tuple[list[dict[str, Any]], int]:
        query = self.supabase.table(self.table).select("*", count="exact")
        term = _FILTER_RESERVED.sub(" ", search).strip()
        if term:
            query = query.or_(f"content.ilike.%{term}%,author_name.ilike.%{term}%")
        result = query.order("saved_at", desc=True).range(offset, offset + limit - 1).execute()
        rows = result.data or []
        total = result.count if result.count is not None else len(rows)
        return rows, total

    @storage_errors
    def delete(self, post_id: int) -> bool:
        existing = self.supabase.table(self.table).select("id").eq("id", post_id).execute()
        if not existing.data:
            return False
        self.supabase.table(self.table).delete().eq("id", post_id).execute()
        return True


class AnalyticsRepository:
    followers_table = "follower_history"
    posts_table = "post_analytics"

    def __init__(self, supabase: Client):
        self.supabase = supabase

    @storage_errors
    def upsert_follower_history(self, entries: list[dict[str, Any]]) -> int:
        for entry in entries:
            self.supabase.table(self.followers_table).upsert(
                {"date": entry["date"], "count": entry["count"]}, on_conflict="date"
            ).execute()
        return len(entries)

    @storage_errors
    def upsert_post_analytics(self, fields: dict[str, Any]) -> None:
        self.supabase.table(self.posts_table).upsert(
            {**fields, "recorded_at": _now()}, on_conflict="post_url"
        ).execute()

    @storage_errors
    def follower_history(self, limit: int = 90) -> list[dict[str, Any]]:
        result = (
            self.supabase.table(self.followers_table)
            .select("date, count")
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        return result.data or []

    @storage_errors
    def post_analytics(self, limit: Optional[int] = 50) -> list[dict[str, Any]]:
        query = self.supabase.table(self.posts_table).select("*").order("recorded_at", desc=True)
        if limit is not None:
            query = query.limit(limit)
        return query.execute().data or []
