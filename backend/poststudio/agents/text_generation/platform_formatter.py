"""
Per-platform formatting of adapted content.

Limits are static data; formatting pulls hashtags out of the body, trims them
to the platform maximum and reports what changed.
"""
import re
from typing import Optional

from ...models.content import AdaptationMetadata, AdaptedContent, Platform, PlatformLimits
from .normalizer import html_to_plain_text


PLATFORM_LIMITS = {
    Platform.TWITTER: PlatformLimits(
        max_characters=280, max_hashtags=3, supports_threads=True, supports_formatting=False
    ),
    Platform.FACEBOOK: PlatformLimits(
        max_characters=5000, max_hashtags=10, supports_threads=False, supports_formatting=True
    ),
    Platform.MEDIUM: PlatformLimits(
        max_characters=10000, max_hashtags=5, supports_threads=False, supports_formatting=True
    ),
    Platform.INSTAGRAM: PlatformLimits(
        max_characters=2200, max_hashtags=30, supports_threads=False, supports_formatting=False
    ),
}

# Word characters plus the Arabic block used by Kurdish (Sorani)
HASHTAG_PATTERN = re.compile(r"#([\w\u0600-\u06FF]+)")


def get_platform_limits(platform: Platform) -> PlatformLimits:
    return PLATFORM_LIMITS[platform]


def extract_hashtags(content: str) -> list[str]:
    return [match.group(1) for match in HASHTAG_PATTERN.finditer(content) if match.group(1)]


def remove_hashtags(content: str) -> str:
    return HASHTAG_PATTERN.sub("", content).strip()


def limit_hashtags(hashtags: list[str], max_hashtags: int) -> list[str]:
    return hashtags[:max_hashtags]


def format_for_platform(content: str, platform: Platform, original_length: int) -> AdaptedContent:
    """
    Fit cleaned content to a platform's limits.

    Args:
        content: Cleaned LLM output (HTML or plain text)
        platform: Target platform
        original_length: Plain-text length of the source post

    Returns:
        AdaptedContent with the body followed by at most max_hashtags hashtags
    """
    limits = PLATFORM_LIMITS[platform]
    plain_text = html_to_plain_text(content)
    hashtags = extract_hashtags(plain_text)
    body = remove_hashtags(plain_text)

    limited = limit_hashtags(hashtags, limits.max_hashtags)
    hashtag_text = "\n\n" + " ".join(f"#{tag}" for tag in limited) if limited else ""
    final_content = body + hashtag_text
    character_count = len(final_content)
    capped_count = min(character_count, limits.max_characters)

    truncation_applied = character_count > limits.max_characters

    changes = []
    if original_length > limits.max_characters:
        changes.append(f"Content shortened from {original_length} to {capped_count} characters")
    if len(hashtags) > limits.max_hashtags:
        changes.append(f"Hashtags reduced from {len(hashtags)} to {len(limited)}")
    if limits.supports_threads and truncation_applied:
        changes.append("Content may need to be split into a thread")

    return AdaptedContent(
        content=final_content,
        platform=platform,
        character_count=capped_count,
        hashtags=limited,
        changes=changes,
        metadata=AdaptationMetadata(
            original_length=original_length,
            adapted_length=capped_count,
            truncation_applied=truncation_applied,
        ),
    )


def validate_platform_content(content: str, platform: Platform) -> tuple[bool, Optional[str]]:
    """Check content against a platform's limits. Returns (valid, message)."""
    limits = PLATFORM_LIMITS[platform]
    character_count = len(content)

    if character_count > limits.max_characters:
        overflow = character_count - limits.max_characters
        return False, (
            f"Content exceeds {platform.value} limit of {limits.max_characters} "
            f"characters by {overflow} characters"
        )

    hashtags = extract_hashtags(content)
    if len(hashtags) > limits.max_hashtags:
        return False, f"Too many hashtags. Maximum is {limits.max_hashtags}, found {len(hashtags)}"

    return True, None
