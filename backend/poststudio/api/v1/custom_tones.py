"""
Custom tone API endpoints, including industry presets.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import Field, ValidationInfo, field_validator, model_validator
from supabase import Client

from ...agents.text_generation.tone_mixer import validate_tone_mix
from ...db.presets import INDUSTRY_PRESETS
from ...db.repositories import CustomToneRepository
from ...db.supabase import get_supabase_client
from ...errors import NotFoundError, ValidationError
from ...models.content import CamelModel, reject_null
from ...models.records import CustomTone, ToneMix

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/custom-tones", tags=["custom-tones"])


# Request/Response Models
class CustomToneCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description_english: str = Field(..., min_length=1)
    description_kurdish: str = Field(..., min_length=1)
    industry: Optional[str] = None
    tone_mix: Optional[List[ToneMix]] = None

    @model_validator(mode="after")
    def check_tone_mix(self):
        if self.tone_mix is not None:
            error = validate_tone_mix(self.tone_mix)
            if error:
                raise ValueError(error)
        return self


class CustomToneUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description_english: Optional[str] = Field(None, min_length=1)
    description_kurdish: Optional[str] = Field(None, min_length=1)
    industry: Optional[str] = None
    tone_mix: Optional[List[ToneMix]] = None

    @field_validator("name", "description_english", "description_kurdish")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)

    @model_validator(mode="after")
    def check_tone_mix(self):
        if self.tone_mix:
            error = validate_tone_mix(self.tone_mix)
            if error:
                raise ValueError(error)
        return self


class MessageResponse(CamelModel):
    message: str


def get_tone_repository(supabase: Client = Depends(get_supabase_client)) -> CustomToneRepository:
    return CustomToneRepository(supabase)


def _tone_mix_rows(tone_mix: Optional[List[ToneMix]]):
    if tone_mix is None:
        return None
    return [mix.model_dump(mode="json") for mix in tone_mix]


# Endpoints
@router.get("", response_model=List[CustomTone])
async def list_custom_tones(
    include_presets: bool = Query(False, alias="includePresets"),
    industry: Optional[str] = None,
    repository: CustomToneRepository = Depends(get_tone_repository),
):
    """List custom tones, optionally with presets, or the presets for one industry."""
    if industry:
        return repository.list_presets(industry)
    return repository.list(include_presets=include_presets)


@router.post("", response_model=CustomTone, status_code=201)
async def create_custom_tone(
    tone: CustomToneCreate,
    repository: CustomToneRepository = Depends(get_tone_repository),
):
    """Create a new custom tone."""
    created = repository.create({
        "name": tone.name,
        "description_english": tone.description_english,
        "description_kurdish": tone.description_kurdish,
        "industry": tone.industry,
        "tone_mix": _tone_mix_rows(tone.tone_mix),
        "is_preset": False,
    })
    logger.info(f"Created custom tone {created.id} ({created.name})")
    return created


@router.put("", response_model=MessageResponse)
async def seed_custom_tone_presets(
    action: Optional[str] = None,
    repository: CustomToneRepository = Depends(get_tone_repository),
):
    """Admin action: PUT /custom-tones?action=seed seeds the industry presets."""
    if action != "seed":
        raise ValidationError("Invalid action")

    created = repository.seed_presets(INDUSTRY_PRESETS)
    return MessageResponse(message=f"Industry presets seeded successfully ({created} created)")


@router.get("/{tone_id}", response_model=CustomTone)
async def get_custom_tone(
    tone_id: str,
    repository: CustomToneRepository = Depends(get_tone_repository),
):
    """Get a single custom tone by ID."""
    tone = repository.get(_parse_tone_id(tone_id))
    if tone is None:
        raise NotFoundError("Custom tone not found")
    return tone


@router.put("/{tone_id}", response_model=CustomTone)
async def update_custom_tone(
    tone_id: str,
    tone: CustomToneUpdate,
    repository: CustomToneRepository = Depends(get_tone_repository),
):
    """Update an existing custom tone."""
    parsed_id = _parse_tone_id(tone_id)
    update_data = tone.model_dump(exclude_unset=True)
    if not update_data:
        raise ValidationError("No fields to update")
    if "tone_mix" in update_data:
        update_data["tone_mix"] = _tone_mix_rows(tone.tone_mix)

    updated = repository.update(parsed_id, update_data)
    if updated is None:
        raise NotFoundError("Custom tone not found or failed to update")
    return updated


@router.delete("/{tone_id}", response_model=MessageResponse)
async def delete_custom_tone(
    tone_id: str,
    repository: CustomToneRepository = Depends(get_tone_repository),
):
    """Delete a custom tone."""
    if not repository.delete(_parse_tone_id(tone_id)):
        raise NotFoundError("Custom tone not found")
    return MessageResponse(message="Custom tone deleted successfully")


def _parse_tone_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("Invalid tone ID")
