"""Tests for style, feature and profile data models."""
import pytest
from pydantic import ValidationError

from style_engine.models.character import CharacterStyleProfile
from style_engine.models.features import ArtDirection, ExtractedStyleFeatures
from style_engine.models.report import CharacterStyleScore
from style_engine.models.style import (
    ColorPaletteConstraint,
    LightingConstraint,
    StyleDefinition,
    StyleDefinitionOverrides,
    StyleReferenceImage,
)


class TestColorPaletteConstraint:
    def test_defaults(self) -> None:
        palette = ColorPaletteConstraint()
        assert palette.saturation_range == (30, 80)
        assert palette.brightness_range == (20, 90)
        assert palette.allowed_colors == []

    def test_allowed_colors_order(self) -> None:
        palette = ColorPaletteConstraint(
            primary_colors=["#000001"], secondary_colors=["#000002"], accent_colors=["#000003"]
        )
        assert palette.allowed_colors == ["#000001", "#000002", "#000003"]

    def test_malformed_hex_is_accepted(self) -> None:
        assert ColorPaletteConstraint(primary_colors=["not-a-color"]).primary_colors == ["not-a-color"]

    def test_equal_bounds_accepted(self) -> None:
        assert ColorPaletteConstraint(saturation_range=(50, 50)).saturation_range == (50, 50)

    @pytest.mark.parametrize("field", ["saturation_range", "brightness_range"])
    def test_inverted_range_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            ColorPaletteConstraint(**{field: (80, 30)})

    def test_out_of_bounds_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ColorPaletteConstraint(brightness_range=(0, 101))

    def test_is_frozen(self) -> None:
        palette = ColorPaletteConstraint()
        with pytest.raises(ValidationError):
            palette.harmony_type = "triadic"  # type: ignore[assignment]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ColorPaletteConstraint(primary_color=["#000000"])


class TestLightingConstraint:
    def test_inverted_intensity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LightingConstraint(intensity_range=(90, 10))

    def test_invalid_shadow_style_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LightingConstraint(shadow_style="dramatic")

    def test_highlight_strength_bounds(self) -> None:
        with pytest.raises(ValidationError):
            LightingConstraint(highlight_strength=101)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LightingConstraint(typ="studio")


class TestExtractedStyleFeatures:
    def test_accepts_art_direction_values(self) -> None:
        features = ExtractedStyleFeatures(
            brightness=10, contrast=20, saturation=30, detected_art_style=["semi-realistic"]
        )
        assert features.detected_art_style == [ArtDirection.semi_realistic]

    def test_unknown_art_direction_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExtractedStyleFeatures(brightness=10, contrast=20, saturation=30, detected_art_style=["cubist"])

    @pytest.mark.parametrize("field", ["brightness", "contrast", "saturation"])
    def test_levels_bounded(self, field: str) -> None:
        values = {"brightness": 50, "contrast": 50, "saturation": 50, field: 120}
        with pytest.raises(ValidationError):
            ExtractedStyleFeatures(**values)


class TestCharacterStyleProfile:
    def test_defaults_to_maximum_deviation(self) -> None:
        profile = CharacterStyleProfile(character_id="c1", character_name="Mira")
        assert profile.style_deviation_score == 100
        assert profile.extracted_features is None

    def test_overrides_loaded_from_dict(self) -> None:
        profile = CharacterStyleProfile.model_validate(
            {"character_id": "c1", "character_name": "Mira", "style_overrides": {"style_keywords": ["scar"]}}
        )
        assert profile.style_overrides is not None
        assert profile.style_overrides.as_update() == {"style_keywords": ["scar"]}


class TestStyleDefinitionOverrides:
    def test_only_set_fields_are_merged(self) -> None:
        overrides = StyleDefinitionOverrides(name="X")
        assert overrides.as_update() == {"name": "X"}

    def test_explicit_none_description_is_kept(self) -> None:
        overrides = StyleDefinitionOverrides(name="X", description=None)
        assert overrides.as_update() == {"name": "X", "description": None}

    def test_explicit_none_on_required_field_is_dropped(self) -> None:
        assert StyleDefinitionOverrides(name=None).as_update() == {}

    def test_update_values_are_copies(self) -> None:
        overrides = StyleDefinitionOverrides(style_keywords=["ink"])
        update = overrides.as_update()
        update["style_keywords"].append("wash")
        assert overrides.style_keywords == ["ink"]

    def test_empty_overrides(self) -> None:
        assert StyleDefinitionOverrides().as_update() == {}


class TestStyleDefinition:
    def test_version_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            StyleDefinition(
                id="s",
                name="n",
                art_direction=ArtDirection.anime,
                created_at="t",
                updated_at="t",
                version=0,
            )

    def test_reference_image_weight_bounds(self) -> None:
        with pytest.raises(ValidationError):
            StyleReferenceImage(id="r", url="/img.png", weight=1.5)


class TestCharacterStyleScore:
    def test_score_bounds(self) -> None:
        with pytest.raises(ValidationError):
            CharacterStyleScore(
                character_id="c",
                character_name="n",
                overall_score=101,
                color_score=0,
                lighting_score=0,
                art_style_score=0,
                needs_regeneration=False,
            )
