"""
Tone resolution: built-in tones, stored custom tones and weighted tone mixes.
"""
import logging
from typing import Optional, Protocol

from ...models.content import BuiltInTone, Language
from ...models.records import CustomTone, ToneMix
from .prompts import TONE_DESCRIPTIONS

logger = logging.getLogger(__name__)

CUSTOM_TONE_PREFIX = "custom:"


class CustomToneLookup(Protocol):
    def get(self, tone_id: int) -> Optional[CustomTone]: ...


def is_built_in_tone(tone: str) -> bool:
    return tone in {member.value for member in BuiltInTone}


def validate_tone_mix(tone_mix: list[ToneMix]) -> Optional[str]:
    """Return an error message when the mix is invalid, else None."""
    if not tone_mix:
        return "Tone mix must contain at least one tone"

    for mix in tone_mix:
        if mix.percentage < 0 or mix.percentage > 100:
            return f"Percentage for {mix.tone.value} must be between 0 and 100"

    total = sum(mix.percentage for mix in tone_mix)
    if abs(total - 100) > 0.01:
        return f"Tone mix percentages must sum to 100% (currently {total:g}%)"

    return None


def generate_mixed_tone_description(tone_mix: list[ToneMix], language: Language) -> str:
    """Combine tone descriptions, dominant tones first."""
    ordered = sorted(
        (mix for mix in tone_mix if mix.percentage > 0),
        key=lambda mix: mix.percentage,
        reverse=True,
    )
    if not ordered:
        return ""

    if len(ordered) == 1 and ordered[0].percentage == 100:
        return TONE_DESCRIPTIONS[ordered[0].tone][language]

    descriptions = []
    for mix in ordered:
        description = TONE_DESCRIPTIONS[mix.tone][language]
        if mix.percentage >= 50:
            descriptions.append(description)
        elif mix.percentage >= 25:
            descriptions.append(f"with elements of {description}")
        else:
            descriptions.append(f"with a touch of {description}")

    separator = "، " if language == Language.KURDISH else ", "
    return separator.join(descriptions)


def resolve_tone_description(
    tone: str,
    language: Language,
    custom_tones: Optional[CustomToneLookup] = None,
) -> str:
    """
    Get the prompt description for any tone value.

    Built-in names map to the description table; "custom:<id>" loads the
    stored tone. Anything unresolvable gives an empty string.
    """
    if is_built_in_tone(tone):
        return TONE_DESCRIPTIONS[BuiltInTone(tone)][language]

    if tone.startswith(CUSTOM_TONE_PREFIX):
        raw_id = tone[len(CUSTOM_TONE_PREFIX):]
        try:
            tone_id = int(raw_id)
        except ValueError:
            return ""
        if custom_tones is None:
            logger.warning(f"Custom tone {tone_id} requested without a tone repository")
            return ""

        custom_tone = custom_tones.get(tone_id)
        if custom_tone is None:
            return ""
        if custom_tone.tone_mix:
            return generate_mixed_tone_description(custom_tone.tone_mix, language)
        if language == Language.ENGLISH:
            return custom_tone.description_english
        return custom_tone.description_kurdish

    # Mixed tones are stored as custom tones with a tone mix
    return ""
