"""Consistency report and prompt output models."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DeviationType(str, Enum):
    """Axis on which a character departs from the style."""

    color = "color"
    lighting = "lighting"
    art_style = "artStyle"
    composition = "composition"


class Severity(str, Enum):
    """Severity of a deviation, also used as recommendation priority."""

    low = "low"
    medium = "medium"
    high = "high"


class RecommendationType(str, Enum):
    """Suggested corrective action."""

    regenerate = "regenerate"
    adjust = "adjust"
    override = "override"


class CharacterStyleScore(BaseModel):
    """Per-character scores. Higher is closer to the style."""

    model_config = ConfigDict(frozen=True)

    character_id: str
    character_name: str
    overall_score: int = Field(..., ge=0, le=100)
    color_score: int = Field(..., ge=0, le=100)
    lighting_score: int = Field(..., ge=0, le=100)
    art_style_score: int = Field(..., ge=0, le=100)
    needs_regeneration: bool


class StyleDeviation(BaseModel):
    """A specific, human-readable departure from the style."""

    model_config = ConfigDict(frozen=True)

    character_id: str
    character_name: str
    deviation_type: DeviationType
    severity: Severity
    description: str
    suggestion: str


class StyleRecommendation(BaseModel):
    """Action bundling every character that needs it."""

    model_config = ConfigDict(frozen=True)

    type: RecommendationType
    character_ids: list[str]
    description: str
    priority: Severity


class StyleConsistencyReport(BaseModel):
    """Point-in-time analysis of a whole cast against one style definition."""

    model_config = ConfigDict(frozen=True)

    project_id: str
    style_definition_id: str
    analyzed_at: str

    overall_consistency_score: int = Field(..., ge=0, le=100)
    color_consistency_score: int = Field(..., ge=0, le=100)
    lighting_consistency_score: int = Field(..., ge=0, le=100)
    art_style_consistency_score: int = Field(..., ge=0, le=100)

    character_scores: list[CharacterStyleScore] = Field(default_factory=list)
    deviations: list[StyleDeviation] = Field(default_factory=list)
    recommendations: list[StyleRecommendation] = Field(default_factory=list)


class CastSummary(BaseModel):
    """Headline numbers for a cast overview."""

    model_config = ConfigDict(frozen=True)

    total: int
    needs_work: int
    consistent: int
    average_score: int


class StyledPrompt(BaseModel):
    """Positive/negative prompt pair handed to the image-generation client."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    negative_prompt: str
