# Parser to extract structured hooks from raw LLM hook-generation output
import re

from ...models.content import GeneratedHook, HookStyle, Language


MAX_HOOKS = 5

# Styles assigned to the first hooks by position, see parse_hooks
POSITION_STYLES = [
    HookStyle.QUESTION,
    HookStyle.STATEMENT,
    HookStyle.STORY,
    HookStyle.STATISTIC,
]

META_PREFIXES = {
    Language.ENGLISH: re.compile(r"^hook|^option|^suggestion|^example", re.IGNORECASE),
    Language.KURDISH: re.compile(r"^هۆک|^پێشنیار|^نموونە"),
}

QUESTION_START = re.compile(
    r"^(what|how|why|when|where|who|which|do|does|did|can|could|will|would|should|is|are|was|were)",
    re.IGNORECASE,
)
STATISTIC_MARKERS = re.compile(
    r"^\d+[%]|^\d+ out of|\d+ percent|statistics?|data shows|research shows",
    re.IGNORECASE,
)
STORY_START = re.compile(r"^(once|when|years? ago|last|recently|story|tale)", re.IGNORECASE)


def classify_hook_style(line: str) -> HookStyle:
    """Guess a hook's style from its wording."""
    if "?" in line or "؟" in line or QUESTION_START.match(line):
        return HookStyle.QUESTION
    if STATISTIC_MARKERS.search(line):
        return HookStyle.STATISTIC
    if STORY_START.match(line):
        return HookStyle.STORY
    return HookStyle.STATEMENT


def parse_hooks(content: str, language: Language) -> list[GeneratedHook]:
    """
    Split raw hook output into at most five hooks.

    Each line is classified by wording, but the first four accepted hooks are
    then given the question, statement, story, statistic styles in order, so
    the classification only sticks for the fifth hook. When no line survives
    the whole trimmed output becomes a single statement hook.
    """
    lines = [line.strip() for line in content.split("\n")]
    meta_prefix = META_PREFIXES[language]
    hooks: list[GeneratedHook] = []

    for line in lines:
        if len(hooks) >= MAX_HOOKS:
            break
        if not line or meta_prefix.search(line):
            continue

        style = classify_hook_style(line)
        if len(hooks) < len(POSITION_STYLES):
            style = POSITION_STYLES[len(hooks)]

        hooks.append(GeneratedHook(text=line, style=style))

    if not hooks:
        return [GeneratedHook(text=content.strip(), style=HookStyle.STATEMENT)]
    return hooks
