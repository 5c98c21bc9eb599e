"""
Generation endpoints: LinkedIn posts, hashtags, hooks and cross-platform adaptation.

Request bodies are validated before any prompt is built, so empty content or
an unknown platform never reaches the LLM.
"""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends
from pydantic import AfterValidator, Field, field_validator

from ...agents.text_generation.generator import (
    adapt_content,
    generate_hooks,
    generate_post,
    suggest_hashtags,
)
from ...agents.text_generation.tone_mixer import CustomToneLookup
from ...db.repositories import CustomToneRepository
from ...db.supabase import get_supabase_client
from ...llm.openrouter import OpenRouterClient, get_llm_client
from ...models.content import (
    AdaptedContent,
    CamelModel,
    GeneratedHook,
    GeneratedPost,
    HookStyle,
    Language,
    Platform,
    PostLength,
)
from ...models.records import CustomTone

router = APIRouter(tags=["generation"])


def _choices(enum_cls) -> str:
    return ", ".join(member.value for member in enum_cls)


def _parse_language(value, field_label: str = "language") -> Language:
    if isinstance(value, Language):
        return value
    try:
        return Language(value)
    except ValueError:
        raise ValueError(f"Invalid {field_label}. Must be one of: {_choices(Language)}")


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("Post content cannot be empty")
    return value


PostText = Annotated[str, AfterValidator(_require_text)]


# Request/Response Models
class GeneratePostRequest(CamelModel):
    context: PostText
    language: Language
    tone: str = Field(..., min_length=1)
    length: PostLength = PostLength.MEDIUM

    @field_validator("language", mode="before")
    @classmethod
    def check_language(cls, value):
        return _parse_language(value)


class HashtagRequest(CamelModel):
    post_content: PostText
    language: Language

    @field_validator("language", mode="before")
    @classmethod
    def check_language(cls, value):
        return _parse_language(value)


class HashtagResponse(CamelModel):
    hashtags: list[str]


class HookRequest(CamelModel):
    post_content: PostText
    language: Language
    tone: str = Field(..., min_length=1)
    hook_style: Optional[HookStyle] = None

    @field_validator("language", mode="before")
    @classmethod
    def check_language(cls, value):
        return _parse_language(value)

    @field_validator("hook_style", mode="before")
    @classmethod
    def check_hook_style(cls, value):
        # "any" asks for a mix of styles
        if value in (None, "", "any"):
            return None
        try:
            return HookStyle(value)
        except ValueError:
            raise ValueError(f"Invalid hook style. Must be one of: {_choices(HookStyle)}, any")


class HookResponse(CamelModel):
    hooks: list[GeneratedHook]


class AdaptRequest(CamelModel):
    post_content: PostText
    source_language: Language
    target_platform: Platform
    preserve_tone: bool = True

    @field_validator("source_language", mode="before")
    @classmethod
    def check_source_language(cls, value):
        return _parse_language(value, "source language")

    @field_validator("target_platform", mode="before")
    @classmethod
    def check_target_platform(cls, value):
        if isinstance(value, Platform):
            return value
        try:
            return Platform(value)
        except ValueError:
            raise ValueError(f"Invalid platform. Must be one of: {_choices(Platform)}")


class AdaptResponse(CamelModel):
    adapted_content: AdaptedContent


class LazyCustomToneLookup:
    """Loads custom tones on demand, so built-in tones never touch the database."""

    def get(self, tone_id: int) -> Optional[CustomTone]:
        return CustomToneRepository(get_supabase_client()).get(tone_id)


def get_custom_tone_lookup() -> CustomToneLookup:
    return LazyCustomToneLookup()


# Endpoints
@router.post("/generate", response_model=GeneratedPost)
async def generate_post_endpoint(
    request: GeneratePostRequest,
    llm: OpenRouterClient = Depends(get_llm_client),
    custom_tones: CustomToneLookup = Depends(get_custom_tone_lookup),
):
    """Generate a complete LinkedIn post from context."""
    return await generate_post(
        context=request.context,
        language=request.language,
        tone=request.tone,
        length=request.length,
        llm=llm,
        custom_tones=custom_tones,
    )


@router.post("/hashtags", response_model=HashtagResponse)
async def suggest_hashtags_endpoint(
    request: HashtagRequest,
    llm: OpenRouterClient = Depends(get_llm_client),
):
    """Suggest hashtags for an existing post."""
    hashtags = await suggest_hashtags(request.post_content, request.language, llm)
    return HashtagResponse(hashtags=hashtags)


@router.post("/hooks", response_model=HookResponse)
async def generate_hooks_endpoint(
    request: HookRequest,
    llm: OpenRouterClient = Depends(get_llm_client),
    custom_tones: CustomToneLookup = Depends(get_custom_tone_lookup),
):
    """Generate up to five opening hooks for a post."""
    hooks = await generate_hooks(
        post_content=request.post_content,
        language=request.language,
        tone=request.tone,
        llm=llm,
        hook_style=request.hook_style,
        custom_tones=custom_tones,
    )
    return HookResponse(hooks=hooks)


@router.post("/adapt", response_model=AdaptResponse)
async def adapt_content_endpoint(
    request: AdaptRequest,
    llm: OpenRouterClient = Depends(get_llm_client),
):
    """Adapt a LinkedIn post for Twitter/X, Facebook, Medium or Instagram."""
    adapted = await adapt_content(
        post_content=request.post_content,
        source_language=request.source_language,
        target_platform=request.target_platform,
        llm=llm,
        preserve_tone=request.preserve_tone,
    )
    return AdaptResponse(adapted_content=adapted)
