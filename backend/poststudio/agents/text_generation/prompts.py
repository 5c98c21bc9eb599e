"""
Prompt builders for post generation, hashtags, hooks and cross-platform adaptation.

All builders are pure string construction. Callers are responsible for
rejecting empty content before building a prompt.
"""
from typing import Optional

from ...models.content import (
    BuiltInTone,
    HookStyle,
    Language,
    LENGTH_TARGETS,
    Platform,
    PostLength,
)
from .platform_formatter import PLATFORM_LIMITS


TONE_DESCRIPTIONS = {
    BuiltInTone.PROFESSIONAL: {
        Language.ENGLISH: "professional and business-focused",
        Language.KURDISH: "پیشەیی و بزنس-مەركەز",
    },
    BuiltInTone.CASUAL: {
        Language.ENGLISH: "casual and relaxed",
        Language.KURDISH: "ئاسایی و ئارام",
    },
    BuiltInTone.FRIENDLY: {
        Language.ENGLISH: "friendly and approachable",
        Language.KURDISH: "دۆستانە و نزیک",
    },
    BuiltInTone.INSPIRATIONAL: {
        Language.ENGLISH: "inspirational and motivating",
        Language.KURDISH: "ئیلهامبەخش و هاندەر",
    },
    BuiltInTone.INFORMATIVE: {
        Language.ENGLISH: "informative and educational",
        Language.KURDISH: "زانیاری و پەروەردەیی",
    },
    BuiltInTone.COMEDY: {
        Language.ENGLISH: "humorous and entertaining with light-hearted jokes",
        Language.KURDISH: "خۆش و پێکەنیناوی بە شوخی و پێکەنین",
    },
}

HOOK_STYLE_GUIDANCE = {
    HookStyle.QUESTION: "Open with a thought-provoking question the reader wants answered.",
    HookStyle.STATEMENT: "Open with a bold, confident statement or contrarian claim.",
    HookStyle.STORY: "Open with the first line of a short personal story or moment in time.",
    HookStyle.STATISTIC: "Open with a surprising number, percentage or data point.",
}

PLATFORM_GUIDANCE = {
    Platform.TWITTER: "Make it punchy and conversational. One core idea, no filler.",
    Platform.FACEBOOK: "Keep it conversational and community-oriented, with short paragraphs.",
    Platform.MEDIUM: "Expand it into an article-style piece with a clear title line and flowing paragraphs.",
    Platform.INSTAGRAM: "Write it as a caption: strong first line, short lines with breaks, hashtags at the end.",
}


def build_post_prompt(
    context: str,
    language: Language,
    tone_description: str,
    length: PostLength,
) -> str:
    """Build the prompt for generating a complete LinkedIn post from context."""
    target_length = LENGTH_TARGETS[length]
    target_words = round(target_length / 5)

    if language == Language.KURDISH:
        return f"""تۆ بەرهەمهێنەری پۆستی LinkedIn بۆ کوردی. لەبەرگرتنەوەی دەقەکەم، پۆستێکی تەواوی LinkedIn دروست بکە.

زانیاری:
{context}

تێبینیەکان:
- شێواز: {tone_description}
- درێژی: گرنگە - پۆستەکە دەبێت نزیکەی {target_length} پیت بێت (نزیکەی {target_words} وشە).
- زمان: کوردی
- فۆرمات: خاڵەکان، و هێڵەکان بۆ خوێندنەوەی باشتر
- هاشتاگ: پێویستە لە کۆتای پۆستەکەدا 3-5 هاشتاگی گونجاو بنووسیت بە فۆرماتی: #هاشتاگ1 #هاشتاگ2 #هاشتاگ3

پێویستیەکی زۆر گرنگ:
- پێویست نییە هیچ دەربڕینێکی پێشەکی یان ڕوونکردنەوە بنووسیت.
- بە هیچ شێوەیەک نیشانەی "*" (ئەستێرە) بەکار مەهێنە لە ناوەڕۆکی پۆستەکەدا.
- بە راستەوخۆ پۆستەکە بنووسە، بەبێ هیچ پێشەکییەک."""

    return f"""You are a LinkedIn post generator. Based on the following context, create a complete LinkedIn post.

Context:
{context}

Requirements:
- Tone: {tone_description}
- Length: CRITICAL - The post must be approximately {target_length} characters long (around {target_words} words). Count characters carefully and aim for this exact length.
- Language: English
- Format: bullet points, and line breaks for better readability
- Hashtags: MUST include 3-5 relevant hashtags at the end in format: #hashtag1 #hashtag2 #hashtag3

IMPORTANT: The character count ({target_length} characters) includes all text including hashtags.

CRITICAL REQUIREMENTS:
- DO NOT include any introductory text, meta-commentary, or explanatory phrases like "Here's a LinkedIn post", "Based on your requirements", "This is a post about", etc.
- DO NOT use asterisks "*" anywhere in the content. Use bullet points with dashes "-" or other formatting instead.
- Start directly with the post content. No preamble or introduction."""


def build_hashtag_prompt(post_content: str, language: Language) -> str:
    if language == Language.KURDISH:
        return f"""بەپێی پۆستی خوارەوە، 3-5 هاشتاگی گونجاو پێشنیار بکە بۆ LinkedIn. تەنها هاشتاگەکان بنووسە، هەر یەک لەسەر هێڵێکی جیا، بەبێ #.

پۆست:
{post_content}"""

    return f"""Based on the following LinkedIn post, suggest 3-5 relevant hashtags. Write only the hashtags, one per line, without the # symbol.

Post:
{post_content}"""


def build_hook_prompt(
    post_content: str,
    language: Language,
    tone_description: str,
    hook_style: Optional[HookStyle] = None,
) -> str:
    """
    Build the prompt asking for up to five opening lines for a post.

    With no hook_style the model is asked for a mix of question, statement,
    story and statistic hooks, in that order.
    """
    if hook_style is not None:
        style_text = HOOK_STYLE_GUIDANCE[hook_style]
    else:
        style_text = (
            "Write one hook of each style, in this order: a question, a bold statement, "
            "the start of a short story, a surprising statistic. Add one more hook in any style."
        )

    if language == Language.KURDISH:
        return f"""تۆ پسپۆڕی نووسینی دەستپێکی پۆستی LinkedIn یت. بۆ ئەم پۆستەی خوارەوە 5 دەستپێکی سەرنجڕاکێش (هۆک) بنووسە.

پۆست:
{post_content}

تێبینیەکان:
- شێواز: {tone_description}
- زمان: کوردی
- {style_text}
- هەر هۆکێک لەسەر هێڵێکی جیا، بەبێ ژمارە و بەبێ "*".
- هیچ پێشەکی یان ڕوونکردنەوەیەک مەنووسە، تەنها هۆکەکان."""

    return f"""You are an expert at writing LinkedIn post hooks: the opening line that makes people stop scrolling.
Write 5 alternative hooks for the post below.

Post:
{post_content}

Requirements:
- Tone: {tone_description}
- Language: English
- {style_text}
- Each hook is a single line under 150 characters.
- Put each hook on its own line. No numbering, no bullet points, no asterisks, no quotes.
- DO NOT include any introduction, labels or explanation. Output only the hooks."""


def build_adaptation_prompt(
    post_content: str,
    source_language: Language,
    target_platform: Platform,
    preserve_tone: bool = True,
) -> str:
    """Build the prompt that rewrites a LinkedIn post for another platform."""
    limits = PLATFORM_LIMITS[target_platform]
    platform_name = target_platform.value.capitalize()
    guidance = PLATFORM_GUIDANCE[target_platform]
    thread_note = (
        "If the content cannot fit, keep the most important point within the limit."
        if limits.supports_threads
        else ""
    )

    if source_language == Language.KURDISH:
        tone_line = (
            "هەمان شێوازی پۆستە ڕەسەنەکە بپارێزە."
            if preserve_tone
            else f"شێوازەکە بگونجێنە بۆ {platform_name}."
        )
        return f"""ئەم پۆستەی LinkedIn بگونجێنە بۆ {platform_name}.

پۆستی ڕەسەن:
{post_content}

تێبینیەکان:
- زۆرترین درێژی: {limits.max_characters} پیت
- زۆرترین هاشتاگ: {limits.max_hashtags}
- {tone_line}
- زمان: کوردی
- {guidance}
- بە هیچ شێوەیەک نیشانەی "*" بەکار مەهێنە.
- هیچ پێشەکی یان ڕوونکردنەوەیەک مەنووسە، تەنها ناوەڕۆکە گونجێنراوەکە."""

    tone_line = (
        "Preserve the tone and voice of the original post."
        if preserve_tone
        else f"Adjust the tone to what works best on {platform_name}."
    )
    return f"""Adapt the following LinkedIn post for {platform_name}.

Original post:
{post_content}

Requirements:
- Maximum length: {limits.max_characters} characters, including hashtags
- Maximum hashtags: {limits.max_hashtags}
- {tone_line}
- Language: English
- {guidance}
{f"- {thread_note}" if thread_note else ""}
- DO NOT use asterisks "*" or markdown formatting.
- DO NOT include any introductory text or explanation. Output only the adapted content."""
