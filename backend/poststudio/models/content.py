"""
Content models for the generation pipeline.

Everything here is created and consumed within a single request; nothing is
persisted.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo
from pydantic.alias_generators import to_camel


class Language(str, Enum):
    KURDISH = "kurdish"
    ENGLISH = "english"


class Platform(str, Enum):
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    MEDIUM = "medium"
    INSTAGRAM = "instagram"


class BuiltInTone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    FRIENDLY = "friendly"
    INSPIRATIONAL = "inspirational"
    INFORMATIVE = "informative"
    COMEDY = "comedy"


class HookStyle(str, Enum):
    QUESTION = "question"
    STATEMENT = "statement"
    STORY = "story"
    STATISTIC = "statistic"


class PostLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


LENGTH_TARGETS = {
    PostLength.SHORT: 300,
    PostLength.MEDIUM: 800,
    PostLength.LONG: 1500,
}


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, as the web client expects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def reject_null(value, info: ValidationInfo):
    """Partial updates may omit a field but may not set a required one to null."""
    if value is None:
        raise ValueError(f"{to_camel(info.field_name)} cannot be null")
    return value


class GeneratedHook(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    text: str
    style: HookStyle


class PlatformLimits(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    max_characters: int
    max_hashtags: int = 10
    supports_threads: bool = False
    supports_formatting: bool = False


class AdaptationMetadata(CamelModel):
    original_length: int
    adapted_length: int
    truncation_applied: bool


class AdaptedContent(CamelModel):
    content: str
    platform: Platform
    character_count: int
    hashtags: list[str] = Field(default_factory=list)
    changes: list[str] = Field(default_factory=list)
    metadata: AdaptationMetadata


class GeneratedPost(CamelModel):
    content: str
    hashtags: list[str] = Field(default_factory=list)
