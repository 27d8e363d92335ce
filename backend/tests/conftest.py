"""Shared test fixtures and configuration."""
from typing import Optional

import pytest

from style_engine.core.config import get_settings
from style_engine.models.character import CharacterStyleProfile
from style_engine.models.features import ArtDirection, ExtractedStyleFeatures
from style_engine.models.style import ColorPaletteConstraint, StyleDefinition, StyleDefinitionOverrides
from style_engine.services.definition import create_style_definition


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Settings are lru_cached; start every test from a clean environment read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_features(
    dominant_colors: Optional[list[str]] = None,
    detected: Optional[list[ArtDirection]] = None,
    saturation: float = 50,
    brightness: float = 50,
) -> ExtractedStyleFeatures:
    return ExtractedStyleFeatures(
        dominant_colors=dominant_colors if dominant_colors is not None else ["#000000"],
        brightness=brightness,
        contrast=50,
        saturation=saturation,
        detected_art_style=detected if detected is not None else [ArtDirection.anime],
    )


def make_profile(
    character_id: str = "char-1",
    name: str = "Mira",
    features: Optional[ExtractedStyleFeatures] = None,
) -> CharacterStyleProfile:
    return CharacterStyleProfile(
        character_id=character_id,
        character_name=name,
        extracted_features=features,
    )


@pytest.fixture
def anime_style() -> StyleDefinition:
    return create_style_definition("Project Style", ArtDirection.anime)


@pytest.fixture
def black_realistic_style() -> StyleDefinition:
    """Realistic preset constrained to a single black primary color."""
    return create_style_definition(
        "Noir",
        ArtDirection.realistic,
        StyleDefinitionOverrides(
            color_palette=ColorPaletteConstraint(
                primary_colors=["#000000"],
                saturation_range=(30, 80),
                brightness_range=(20, 90),
            )
        ),
    )
