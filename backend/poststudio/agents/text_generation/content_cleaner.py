"""
Clean LLM output: remove meta-commentary lines and stray formatting markers.

Models often wrap the post in commentary ("Here's a LinkedIn post:") or
decorate it with markdown asterisks. Patterns are matched per language.
"""
import re
from typing import Iterable, Pattern

from ...models.content import Language


POST_META_PATTERNS = {
    Language.ENGLISH: [
        re.compile(r"^here['’]?s a linkedin post", re.IGNORECASE),
        re.compile(r"^based on your requirements", re.IGNORECASE),
        re.compile(r"^this is a linkedin post", re.IGNORECASE),
        re.compile(r"^here is a post", re.IGNORECASE),
        re.compile(r"^based on the context", re.IGNORECASE),
        re.compile(r"^following is a linkedin post", re.IGNORECASE),
        re.compile(r"approximately \d+ characters", re.IGNORECASE),
        re.compile(r"around \d+ words", re.IGNORECASE),
    ],
    Language.KURDISH: [
        re.compile(r"^فەرموو[،,]"),
        re.compile(r"^ئەمەش پۆستێکی"),
        re.compile(r"^بەپێی داواکارییەکانت"),
        re.compile(r"^بەپێی داواکاریەکانت"),
        re.compile(r"^لەبەرگرتنەوەی"),
        re.compile(r"^پۆستێکی LinkedIn", re.IGNORECASE),
        re.compile(r"نزیکەی \d+ پیت"),
        re.compile(r"تێکەڵەیەکە لە"),
    ],
}

ADAPTATION_META_PATTERNS = {
    Language.ENGLISH: [
        re.compile(r"^here['’]?s a|^this is a|^based on|^example", re.IGNORECASE),
    ],
    Language.KURDISH: [
        re.compile(r"^پۆستێکی|^نموونە|^ئەمەش|^بەپێی"),
    ],
}

# A colon plus one of these usually means the model is describing its output.
# Known weakness: legitimate lines such as "Blog post: link below" are dropped too.
EXPLANATORY_KEYWORDS = ("post", "requirements", "پۆست", "داواکاری")

_COLONS = (":", "：")


def _is_meta(line: str, patterns: Iterable[Pattern]) -> bool:
    return any(pattern.search(line) for pattern in patterns)


def _text_after_colon(line: str) -> str:
    positions = [line.find(colon) for colon in _COLONS if colon in line]
    if not positions:
        return ""
    return line[min(positions) + 1:].strip()


def _has_explanatory_colon(line: str) -> bool:
    if not any(colon in line for colon in _COLONS):
        return False
    lowered = line.lower()
    return any(keyword in lowered for keyword in EXPLANATORY_KEYWORDS)


def _strip_meta_lines(content: str, patterns: list[Pattern]) -> str:
    cleaned_lines: list[str] = []

    for line in content.split("\n"):
        trimmed = line.strip()
        # Skip blank lines before the first kept line
        if not cleaned_lines and not trimmed:
            continue

        if trimmed and _is_meta(trimmed, patterns):
            # "Here's a LinkedIn post: <content>" keeps whatever follows the colon
            while trimmed and _is_meta(trimmed, patterns):
                trimmed = _text_after_colon(trimmed)
            if not trimmed:
                continue
            line = trimmed

        if _has_explanatory_colon(trimmed):
            continue

        cleaned_lines.append(line)

    return "\n".join(cleaned_lines).strip()


def clean_post_content(content: str, language: Language) -> str:
    """
    Remove meta-commentary and asterisks from generated post content.

    Running it again on its own output returns the same text.
    """
    cleaned = content.replace("*", "")
    cleaned = _strip_meta_lines(cleaned, POST_META_PATTERNS[language])
    return cleaned.replace("*", "")


def clean_adapted_content(content: str, language: Language) -> str:
    """Clean content adapted for another platform.

    Uses the broader adaptation prefixes on top of the post patterns.
    """
    patterns = ADAPTATION_META_PATTERNS[language] + POST_META_PATTERNS[language]
    cleaned = content.replace("*", "")
    return _strip_meta_lines(cleaned, patterns)
