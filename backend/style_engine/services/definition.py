"""Style definition construction and versioned updates."""
import logging
import random
import string
import time
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from style_engine.models.features import ArtDirection
from style_engine.models.style import (
    ColorPaletteConstraint,
    ConsistencyLevel,
    LightingConsistency,
    LightingConstraint,
    StyleDefinition,
    StyleDefinitionOverrides,
)
from style_engine.services.presets import DEFAULT_COLOR_PALETTE, DEFAULT_LIGHTING, get_preset

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_style_id() -> str:
    """Return ``style-{epoch_ms}-{7 base36 chars}``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=7))
    return f"style-{int(time.time() * 1000)}-{suffix}"


def _preset_fields(art_direction: ArtDirection) -> dict[str, Any]:
    preset = get_preset(art_direction)
    return {
        "art_direction": art_direction,
        "style_prompt_prefix": preset.style_prompt_prefix,
        "style_prompt_suffix": preset.style_prompt_suffix,
        "negative_prompt": preset.negative_prompt,
        "style_keywords": list(preset.style_keywords),
        "avoid_keywords": list(preset.avoid_keywords),
        "artistic_influences": list(preset.artistic_influences),
    }


def create_style_definition(
    name: str,
    art_direction: ArtDirection,
    overrides: Optional[StyleDefinitionOverrides] = None,
) -> StyleDefinition:
    """Build a version-1 style definition from an art direction preset.

    The preset's prompt fields, the default palette and the default lighting
    are applied first; any field set on ``overrides`` wins.

    Args:
        name: Display name of the style.
        art_direction: Preset to start from.
        overrides: Optional explicit field values layered on top.

    Returns:
        A new StyleDefinition with a fresh id.
    """
    now = _now()
    fields: dict[str, Any] = {
        "id": _new_style_id(),
        "name": name,
        **_preset_fields(art_direction),
        "color_palette": DEFAULT_COLOR_PALETTE.model_copy(deep=True),
        "lighting": DEFAULT_LIGHTING.model_copy(deep=True),
        "reference_images": [],
        "consistency_level": ConsistencyLevel.moderate,
        "lighting_consistency": LightingConsistency.similar,
        "created_at": now,
        "updated_at": now,
        "version": 1,
    }
    if overrides is not None:
        fields.update(overrides.as_update())

    definition = StyleDefinition(**fields)
    logger.debug("Created style definition %s (%s)", definition.id, art_direction.value)
    return definition


def merge_style_definition(
    base: StyleDefinition,
    overrides: Optional[StyleDefinitionOverrides],
) -> StyleDefinition:
    """Apply overrides field by field without bumping the version.

    Nested color_palette and lighting are replaced, not deep-merged.
    """
    if overrides is None:
        return base
    update = overrides.as_update()
    if not update:
        return base
    return base.model_copy(update=update, deep=True)


def update_style_definition(
    definition: StyleDefinition,
    overrides: StyleDefinitionOverrides,
) -> StyleDefinition:
    """Return a new revision of ``definition`` with ``overrides`` applied."""
    update = overrides.as_update()
    update["updated_at"] = _now()
    update["version"] = definition.version + 1
    revised = definition.model_copy(update=update, deep=True)
    logger.debug("Style definition %s updated to version %d", revised.id, revised.version)
    return revised


def update_color_palette(definition: StyleDefinition, **fields: Any) -> StyleDefinition:
    """Merge ``fields`` into the palette and return a new revision.

    Raises:
        pydantic.ValidationError: If the merged palette is invalid, for example
            a range whose minimum exceeds its maximum or an unknown field name.
    """
    palette = ColorPaletteConstraint.model_validate(
        {**definition.color_palette.model_dump(), **fields}
    )
    return update_style_definition(definition, StyleDefinitionOverrides(color_palette=palette))


def update_lighting(definition: StyleDefinition, **fields: Any) -> StyleDefinition:
    """Merge ``fields`` into the lighting constraint and return a new revision."""
    lighting = LightingConstraint.model_validate({**definition.lighting.model_dump(), **fields})
    return update_style_definition(definition, StyleDefinitionOverrides(lighting=lighting))


def apply_art_direction_preset(
    definition: StyleDefinition,
    art_direction: ArtDirection,
) -> StyleDefinition:
    """Switch art direction and replace every preset prompt field."""
    overrides = StyleDefinitionOverrides(**_preset_fields(art_direction))
    return update_style_definition(definition, overrides)


def apply_preset_palette(definition: StyleDefinition, colors: Sequence[str]) -> StyleDefinition:
    """Spread a flat palette over the constraint.

    The first three colors become primaries, the next two secondaries and a
    sixth, if present, the single accent.
    """
    colors = list(colors)
    return update_color_palette(
        definition,
        primary_colors=colors[:3],
        secondary_colors=colors[3:5],
        accent_colors=colors[5:6],
    )
