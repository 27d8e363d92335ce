"""Art direction vocabulary and externally extracted visual features."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ArtDirection(str, Enum):
    """Supported high-level visual styles."""

    anime = "anime"
    realistic = "realistic"
    painterly = "painterly"
    comic = "comic"
    pixel = "pixel"
    chibi = "chibi"
    semi_realistic = "semi-realistic"
    watercolor = "watercolor"
    sketch = "sketch"
    custom = "custom"


class ColorHarmonyType(str, Enum):
    """Color harmony schemes."""

    monochromatic = "monochromatic"
    complementary = "complementary"
    analogous = "analogous"
    triadic = "triadic"
    split_complementary = "split-complementary"
    tetradic = "tetradic"


class ExtractedStyleFeatures(BaseModel):
    """Visual features produced by the external image-analysis step.

    Read-only to the engine. dominant_colors is ordered most prominent first.
    """

    model_config = ConfigDict(frozen=True)

    dominant_colors: list[str] = Field(default_factory=list)
    color_harmony: ColorHarmonyType = ColorHarmonyType.analogous
    brightness: float = Field(..., ge=0, le=100)
    contrast: float = Field(..., ge=0, le=100)
    saturation: float = Field(..., ge=0, le=100)
    detected_art_style: list[ArtDirection] = Field(default_factory=list)
    style_vector: Optional[list[float]] = None
