"""Request/response bodies for the style API."""
from typing import Optional

from pydantic import BaseModel, Field

from style_engine.models.character import CharacterStyleProfile
from style_engine.models.features import ArtDirection
from style_engine.models.report import CharacterStyleScore
from style_engine.models.style import StyleDefinition, StyleDefinitionOverrides


class CreateDefinitionRequest(BaseModel):
    """Body for POST /api/style/definitions."""

    name: str = Field(..., min_length=1, max_length=200)
    art_direction: ArtDirection
    overrides: Optional[StyleDefinitionOverrides] = None


class UpdateDefinitionRequest(BaseModel):
    """Body for POST /api/style/definitions/update."""

    definition: StyleDefinition
    overrides: StyleDefinitionOverrides


class DeviationRequest(BaseModel):
    profile: CharacterStyleProfile
    definition: StyleDefinition


class DeviationResponse(BaseModel):
    character_id: str
    deviation_score: int = Field(..., ge=0, le=100)


class ReportRequest(BaseModel):
    """Body for POST /api/style/reports."""

    project_id: str
    definition: StyleDefinition
    profiles: list[CharacterStyleProfile] = Field(default_factory=list)


class PromptRequest(BaseModel):
    """Body for POST /api/style/prompts."""

    base_prompt: str
    definition: StyleDefinition
    character_overrides: Optional[StyleDefinitionOverrides] = None


class TransferRequest(BaseModel):
    """Body for POST /api/style/transfers. Strength falls back to the configured default."""

    source_profile: CharacterStyleProfile
    target_profiles: list[CharacterStyleProfile]
    definition: StyleDefinition
    transfer_strength: Optional[int] = Field(default=None, ge=0, le=100)


class SummaryRequest(BaseModel):
    profiles: list[CharacterStyleProfile]
    scores: Optional[list[CharacterStyleScore]] = None
