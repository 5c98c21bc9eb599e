"""
Persisted record models: custom tones, saved trending posts, adapted posts
and drafts.

Rows come back from Supabase in snake_case; ``from_row`` maps them onto the
camelCase API shape.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from .content import BuiltInTone, CamelModel, Language, Platform, PostLength


def _json_value(value: Any) -> Any:
    # JSONB columns sometimes arrive as strings
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return None
    return value


class ToneMix(CamelModel):
    tone: BuiltInTone
    percentage: float


class CustomTone(CamelModel):
    id: int
    name: str
    description_english: str
    description_kurdish: str
    industry: Optional[str] = None
    is_preset: bool = False
    tone_mix: Optional[list[ToneMix]] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "CustomTone":
        return cls(
            id=row["id"],
            name=row["name"],
            description_english=row["description_english"],
            description_kurdish=row["description_kurdish"],
            industry=row.get("industry"),
            is_preset=row.get("is_preset", False),
            tone_mix=_json_value(row.get("tone_mix")),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


class SavedTrendingPost(CamelModel):
    id: int
    post_id: str
    post: dict[str, Any]
    saved_at: datetime
    notes: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "SavedTrendingPost":
        return cls(
            id=row["id"],
            post_id=row["post_id"],
            post=_json_value(row.get("post_data")) or {},
            saved_at=row["saved_at"],
            notes=row.get("notes") or None,
        )


class AdaptedPost(CamelModel):
    id: int
    source_content: str
    platform: Platform
    adapted_content: str
    character_count: int
    changes: list[str] = Field(default_factory=list)
    language: Language
    created_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "AdaptedPost":
        return cls(
            id=row["id"],
            source_content=row["source_content"],
            platform=row["platform"],
            adapted_content=row["adapted_content"],
            character_count=row["character_count"],
            changes=_json_value(row.get("changes")) or [],
            language=row["language"],
            created_at=row["created_at"],
        )


class Draft(CamelModel):
    id: str
    title: str
    content: str
    language: Language
    tone: str
    length: PostLength
    hashtags: list[str] = Field(default_factory=list)
    original_context: Optional[str] = None
    created_at: datetime
    updated_at: datetime
