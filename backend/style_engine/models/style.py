"""Style definition data models."""
import copy
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from style_engine.models.features import ArtDirection, ColorHarmonyType, ExtractedStyleFeatures

Percent = Annotated[int, Field(ge=0, le=100)]
PercentRange = tuple[Percent, Percent]


class ConsistencyLevel(str, Enum):
    """How strictly characters must follow the project style."""

    strict = "strict"
    moderate = "moderate"
    loose = "loose"


class LightingConsistency(str, Enum):
    """Lighting policy across the cast."""

    same = "same"  # identical lighting for every character
    similar = "similar"  # same type, slight variations
    thematic = "thematic"  # varies by role or faction
    custom = "custom"  # set per character


class ShadowStyle(str, Enum):
    """Shadow rendering style."""

    soft = "soft"
    hard = "hard"
    ambient = "ambient"


def _check_range(value: tuple[int, int]) -> tuple[int, int]:
    low, high = value
    if low > high:
        raise ValueError(f"range minimum {low} exceeds maximum {high}")
    return value


class ColorPaletteConstraint(BaseModel):
    """Allowed and forbidden colors plus saturation/brightness bounds.

    Hex strings are not validated here. A malformed color simply never
    matches anything when scored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    primary_colors: list[str] = Field(default_factory=list)
    secondary_colors: list[str] = Field(default_factory=list)
    accent_colors: list[str] = Field(default_factory=list)
    forbidden_colors: list[str] = Field(default_factory=list)
    harmony_type: ColorHarmonyType = ColorHarmonyType.analogous
    saturation_range: PercentRange = (30, 80)
    brightness_range: PercentRange = (20, 90)

    @field_validator("saturation_range", "brightness_range")
    @classmethod
    def range_is_ordered(cls, value: tuple[int, int]) -> tuple[int, int]:
        return _check_range(value)

    @property
    def allowed_colors(self) -> list[str]:
        """Primary, secondary and accent colors in that order."""
        return [*self.primary_colors, *self.secondary_colors, *self.accent_colors]


class LightingConstraint(BaseModel):
    """Lighting rules applied to every generated portrait."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = "natural"
    direction: str = "three-point"
    intensity_range: PercentRange = (50, 80)
    shadow_style: ShadowStyle = ShadowStyle.soft
    highlight_strength: Percent = 50

    @field_validator("intensity_range")
    @classmethod
    def range_is_ordered(cls, value: tuple[int, int]) -> tuple[int, int]:
        return _check_range(value)


class StyleReferenceImage(BaseModel):
    """An image anchoring the style, optionally tied to a character."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    character_id: Optional[str] = None
    is_reference_character: bool = False
    weight: float = Field(default=1.0, ge=0.0, le=1.0)
    extracted_features: Optional[ExtractedStyleFeatures] = None


class StyleDefinition(BaseModel):
    """Versioned, project-wide visual style.

    Instances are immutable. Every mutation in services.definition returns a
    new definition with version + 1 and a fresh updated_at.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: Optional[str] = None
    art_direction: ArtDirection

    color_palette: ColorPaletteConstraint = Field(default_factory=ColorPaletteConstraint)
    lighting: LightingConstraint = Field(default_factory=LightingConstraint)

    style_prompt_prefix: str = ""
    style_prompt_suffix: str = ""
    negative_prompt: str = ""

    style_keywords: list[str] = Field(default_factory=list)
    avoid_keywords: list[str] = Field(default_factory=list)

    artistic_influences: list[str] = Field(default_factory=list)
    reference_images: list[StyleReferenceImage] = Field(default_factory=list)

    consistency_level: ConsistencyLevel = ConsistencyLevel.moderate
    lighting_consistency: LightingConsistency = LightingConsistency.similar

    created_at: str
    updated_at: str
    version: int = Field(default=1, ge=1)


# StyleDefinition fields that accept None.
NULLABLE_DEFINITION_FIELDS = frozenset({"description"})


class StyleDefinitionOverrides(BaseModel):
    """Partial StyleDefinition. Only fields that are explicitly set are merged.

    Nested color_palette and lighting replace the base objects wholesale, so
    callers must pass complete nested values.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    art_direction: Optional[ArtDirection] = None
    color_palette: Optional[ColorPaletteConstraint] = None
    lighting: Optional[LightingConstraint] = None
    style_prompt_prefix: Optional[str] = None
    style_prompt_suffix: Optional[str] = None
    negative_prompt: Optional[str] = None
    style_keywords: Optional[list[str]] = None
    avoid_keywords: Optional[list[str]] = None
    artistic_influences: Optional[list[str]] = None
    reference_images: Optional[list[StyleReferenceImage]] = None
    consistency_level: Optional[ConsistencyLevel] = None
    lighting_consistency: Optional[LightingConsistency] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    version: Optional[int] = Field(default=None, ge=1)

    def as_update(self) -> dict:
        """Return deep copies of the explicitly set fields keyed by name.

        An explicit None clears a nullable field such as description and is
        ignored for fields the definition requires.
        """
        return {
            name: copy.deepcopy(getattr(self, name))
            for name in self.model_fields_set
            if getattr(self, name) is not None or name in NULLABLE_DEFINITION_FIELDS
        }
