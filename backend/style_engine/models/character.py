"""Character style profile data models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from style_engine.models.features import ExtractedStyleFeatures
from style_engine.models.style import StyleDefinitionOverrides


class CharacterStyleProfile(BaseModel):
    """Style state of one character's current artwork.

    Owned by the caller. The engine never mutates a profile; analysis returns
    an updated copy.
    """

    model_config = ConfigDict(frozen=True)

    character_id: str
    character_name: str
    avatar_url: Optional[str] = None
    thumbnail_url: Optional[str] = None

    extracted_features: Optional[ExtractedStyleFeatures] = None
    applied_style_id: Optional[str] = None
    # 0 = perfect match
    style_deviation_score: int = Field(default=100, ge=0, le=100)

    style_overrides: Optional[StyleDefinitionOverrides] = None

    last_analyzed_at: Optional[str] = None
    last_generated_at: Optional[str] = None
