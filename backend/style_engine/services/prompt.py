"""Style-aware prompt composition and style transfer planning."""
import logging
from typing import Optional, Sequence

from style_engine.models.character import CharacterStyleProfile
from style_engine.models.report import StyledPrompt
from style_engine.models.style import LightingConstraint, StyleDefinition, StyleDefinitionOverrides
from style_engine.services.definition import merge_style_definition

logger = logging.getLogger(__name__)

IDENTITY_CLAUSE = "maintain distinct character features and identity,"
FULL_TRANSFER_STRENGTH = 100


def _lighting_phrase(lighting: LightingConstraint) -> str:
    return (
        f"{lighting.type} lighting, "
        f"{lighting.direction} lighting direction, "
        f"{lighting.shadow_style.value} shadows"
    )


def generate_styled_prompt(
    base_prompt: str,
    definition: StyleDefinition,
    character_overrides: Optional[StyleDefinitionOverrides] = None,
) -> StyledPrompt:
    """Wrap a character description in the style's prompt vocabulary.

    Positive prompt order: prefix, base prompt, keywords, influences,
    lighting phrase, suffix. Negative prompt: the style's negative prompt
    followed by its avoid keywords. Empty segments are dropped.

    Args:
        base_prompt: Character description.
        definition: Active style definition.
        character_overrides: Per-character fields that win over the definition.

    Returns:
        StyledPrompt with comma-joined prompt and negative prompt.
    """
    effective = merge_style_definition(definition, character_overrides)

    parts = [
        effective.style_prompt_prefix,
        base_prompt,
        ", ".join(effective.style_keywords),
    ]
    if effective.artistic_influences:
        parts.append(f"inspired by {', '.join(effective.artistic_influences)}")
    parts.append(_lighting_phrase(effective.lighting))
    parts.append(effective.style_prompt_suffix)

    negative_parts = [effective.negative_prompt, ", ".join(effective.avoid_keywords)]

    return StyledPrompt(
        prompt=", ".join(part for part in parts if part),
        negative_prompt=", ".join(part for part in negative_parts if part),
    )


def prepare_style_transfer(
    source_profile: CharacterStyleProfile,
    target_profiles: Sequence[CharacterStyleProfile],
    definition: StyleDefinition,
    transfer_strength: int,
) -> dict[str, StyledPrompt]:
    """Build one styled portrait prompt per target, keyed by character id.

    Below full strength every prompt starts with an identity-preservation
    clause. At 100 the clause is left out and the style may fully override
    the targets' look.
    """
    logger.debug(
        "Preparing style transfer from %s to %d targets at strength %d",
        source_profile.character_id,
        len(target_profiles),
        transfer_strength,
    )
    prompts: dict[str, StyledPrompt] = {}
    for target in target_profiles:
        styled = generate_styled_prompt(f"character portrait of {target.character_name}", definition)
        if transfer_strength < FULL_TRANSFER_STRENGTH:
            styled = styled.model_copy(update={"prompt": f"{IDENTITY_CLAUSE} {styled.prompt}"})
        prompts[target.character_id] = styled
    return prompts
