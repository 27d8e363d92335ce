"""Per-character style deviation scoring."""
import logging
from datetime import datetime, timezone
from typing import Optional

from style_engine.models.character import CharacterStyleProfile
from style_engine.models.features import ExtractedStyleFeatures
from style_engine.models.style import StyleDefinition
from style_engine.services.color import palette_similarity, round_score

logger = logging.getLogger(__name__)

MAX_DEVIATION = 100

COLOR_WEIGHT = 0.40
ART_DIRECTION_WEIGHT = 0.35
SATURATION_WEIGHT = 0.15
BRIGHTNESS_WEIGHT = 0.10

# Flat penalties for the pass/fail terms, each equal to weight * 100.
ART_DIRECTION_PENALTY = 35
SATURATION_PENALTY = 15
BRIGHTNESS_PENALTY = 10


def _in_range(value: float, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= value <= high


def calculate_style_deviation(
    profile: CharacterStyleProfile,
    definition: StyleDefinition,
) -> int:
    """Score how far a character's artwork is from the style, 0 (match) to 100.

    A profile without extracted features scores 100. Otherwise four penalties
    are summed: palette distance to the primary colors (only when the style
    defines primaries), art direction mismatch, saturation outside its range
    and brightness outside its range. The total is clamped and rounded but
    never renormalized by the weight of the terms that applied; the report
    thresholds are calibrated to this scale.
    """
    features = profile.extracted_features
    if features is None:
        return MAX_DEVIATION

    palette = definition.color_palette
    deviation = 0.0
    active_weight = 0.0

    if palette.primary_colors:
        similarity = palette_similarity(features.dominant_colors, palette.primary_colors)
        deviation += (100 - similarity) * COLOR_WEIGHT
        active_weight += COLOR_WEIGHT

    if definition.art_direction not in features.detected_art_style:
        deviation += ART_DIRECTION_PENALTY
    active_weight += ART_DIRECTION_WEIGHT

    if not _in_range(features.saturation, palette.saturation_range):
        deviation += SATURATION_PENALTY
    active_weight += SATURATION_WEIGHT

    if not _in_range(features.brightness, palette.brightness_range):
        deviation += BRIGHTNESS_PENALTY
    active_weight += BRIGHTNESS_WEIGHT

    score = min(MAX_DEVIATION, max(0, round_score(deviation)))
    logger.debug(
        "Deviation for %s: %d (active weight %.2f)",
        profile.character_id,
        score,
        active_weight,
    )
    return score


def analyze_profile(
    profile: CharacterStyleProfile,
    definition: StyleDefinition,
    features: Optional[ExtractedStyleFeatures] = None,
) -> CharacterStyleProfile:
    """Return a copy of ``profile`` scored against ``definition``.

    When ``features`` is given it replaces the profile's extracted features
    before scoring.
    """
    if features is not None:
        profile = profile.model_copy(update={"extracted_features": features.model_copy(deep=True)})
    return profile.model_copy(
        deep=True,
        update={
            "style_deviation_score": calculate_style_deviation(profile, definition),
            "applied_style_id": definition.id,
            "last_analyzed_at": datetime.now(timezone.utc).isoformat(),
        }
    )
