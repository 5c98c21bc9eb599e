"""
Generation pipelines: posts, hashtag suggestions, hooks and cross-platform adaptation.

Each pipeline is linear: build prompt -> one LLM call -> clean/parse -> format.
"""
import logging
import re
from typing import Optional

from ...config import settings
from ...errors import ValidationError
from ...llm.openrouter import ChatMessage, OpenRouterClient
from ...models.content import (
    AdaptedContent,
    GeneratedHook,
    GeneratedPost,
    HookStyle,
    Language,
    Platform,
    PostLength,
)
from .content_cleaner import clean_adapted_content, clean_post_content
from .hook_parser import parse_hooks
from .normalizer import html_to_plain_text
from .platform_formatter import extract_hashtags, format_for_platform, remove_hashtags
from .prompts import (
    build_adaptation_prompt,
    build_hashtag_prompt,
    build_hook_prompt,
    build_post_prompt,
)
from .tone_mixer import CustomToneLookup, resolve_tone_description

logger = logging.getLogger(__name__)

MAX_POST_HASHTAGS = 5

# List markers the model sometimes puts in front of suggested hashtags
_LIST_MARKER = re.compile(r"^(?:[-•]|\d+[.)])\s*")


def _require_content(text: str) -> str:
    stripped = (text or "").strip()
    if not stripped:
        raise ValidationError("Post content cannot be empty")
    return stripped


async def generate_post(
    context: str,
    language: Language,
    tone: str,
    length: PostLength,
    llm: OpenRouterClient,
    custom_tones: Optional[CustomToneLookup] = None,
) -> GeneratedPost:
    """Generate a LinkedIn post and split its hashtags out of the body."""
    context = _require_content(context)
    tone_description = resolve_tone_description(tone, language, custom_tones)
    prompt = build_post_prompt(context, language, tone_description, length)

    raw = await llm.complete(
        [ChatMessage(role="user", content=prompt)],
        max_tokens=settings.POST_MAX_TOKENS[length.value],
    )

    cleaned = clean_post_content(raw, language)
    hashtags = extract_hashtags(cleaned)[:MAX_POST_HASHTAGS]
    body = remove_hashtags(cleaned)

    logger.info(f"Generated {length.value} post ({len(body)} chars, {len(hashtags)} hashtags)")
    return GeneratedPost(content=body, hashtags=hashtags)


async def generate_hooks(
    post_content: str,
    language: Language,
    tone: str,
    llm: OpenRouterClient,
    hook_style: Optional[HookStyle] = None,
    custom_tones: Optional[CustomToneLookup] = None,
) -> list[GeneratedHook]:
    """Generate up to five hooks for a post."""
    post_content = _require_content(post_content)
    tone_description = resolve_tone_description(tone, language, custom_tones)
    prompt = build_hook_prompt(post_content, language, tone_description, hook_style)

    raw = await llm.complete(
        [ChatMessage(role="user", content=prompt)],
        max_tokens=settings.HOOK_MAX_TOKENS,
    )

    hooks = parse_hooks(raw, language)
    logger.info(f"Parsed {len(hooks)} hooks")
    return hooks


async def adapt_content(
    post_content: str,
    source_language: Language,
    target_platform: Platform,
    llm: OpenRouterClient,
    preserve_tone: bool = True,
) -> AdaptedContent:
    """Rewrite a LinkedIn post for another platform and fit it to that platform's limits."""
    plain_text = html_to_plain_text(post_content)
    plain_text = _require_content(plain_text)
    original_length = len(plain_text)

    prompt = build_adaptation_prompt(plain_text, source_language, target_platform, preserve_tone)
    raw = await llm.complete(
        [ChatMessage(role="user", content=prompt)],
        max_tokens=settings.ADAPTATION_MAX_TOKENS,
    )

    cleaned = clean_adapted_content(raw, source_language)
    adapted = format_for_platform(cleaned, target_platform, original_length)
    logger.info(
        f"Adapted post for {target_platform.value}: {original_length} -> {adapted.character_count} chars"
    )
    return adapted


async def suggest_hashtags(
    post_content: str,
    language: Language,
    llm: OpenRouterClient,
) -> list[str]:
    """Ask the model for 3-5 hashtags for an existing post. Returned without '#'."""
    plain_text = _require_content(html_to_plain_text(post_content))
    raw = await llm.complete(
        [ChatMessage(role="user", content=build_hashtag_prompt(plain_text, language))],
        max_tokens=settings.HASHTAG_MAX_TOKENS,
    )

    hashtags: list[str] = []
    for line in raw.split("\n"):
        candidate = _LIST_MARKER.sub("", line.strip()).replace(" ", "")
        if not candidate.startswith("#"):
            candidate = f"#{candidate}"
        for tag in extract_hashtags(candidate):
            if tag not in hashtags:
                hashtags.append(tag)
    return hashtags[:MAX_POST_HASHTAGS]
