"""Tests for the color metric."""
import pytest

from style_engine.models.style import ColorPaletteConstraint
from style_engine.services.color import (
    color_similarity,
    hex_to_rgb,
    is_color_in_palette,
    palette_similarity,
    rgb_to_hex,
    rgb_to_hsl,
    round_score,
)


class TestHexParsing:
    def test_parses_with_hash(self) -> None:
        assert hex_to_rgb("#FF8000") == (255, 128, 0)

    def test_parses_without_hash_and_lowercase(self) -> None:
        assert hex_to_rgb("ff8000") == (255, 128, 0)

    @pytest.mark.parametrize("value", ["#FFF", "#GG0000", "red", "", "#FF00001", "#FF0000\n"])
    def test_rejects_malformed(self, value: str) -> None:
        assert hex_to_rgb(value) is None

    def test_rgb_to_hex_is_lowercase_and_padded(self) -> None:
        assert rgb_to_hex(255, 0, 8) == "#ff0008"

    def test_rgb_to_hsl(self) -> None:
        assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == (120, 100, 50)
        assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)


class TestRoundScore:
    def test_rounds_half_up(self) -> None:
        assert round_score(2.5) == 3
        assert round_score(68.5) == 69
        assert round_score(68.33) == 68


class TestColorSimilarity:
    @pytest.mark.parametrize("value", ["#000000", "#FFFFFF", "#12AB9F", "c0ffee"])
    def test_identical_colors_score_100(self, value: str) -> None:
        assert color_similarity(value, value) == 100

    def test_opposite_colors_score_0(self) -> None:
        assert color_similarity("#000000", "#FFFFFF") == 0

    def test_mid_gray_against_black(self) -> None:
        # weighted distance 384 of 765
        assert color_similarity("#000000", "#808080") == 50

    def test_green_difference_weighs_more_than_blue(self) -> None:
        assert color_similarity("#000000", "#004000") < color_similarity("#000000", "#000040")

    @pytest.mark.parametrize("a,b", [("nope", "#000000"), ("#000000", "#12345"), ("", "")])
    def test_malformed_scores_0(self, a: str, b: str) -> None:
        assert color_similarity(a, b) == 0

    def test_result_is_bounded(self) -> None:
        for a, b in [("#FF0000", "#00FF00"), ("#123456", "#654321"), ("#00FFFF", "#FF00FF")]:
            assert 0 <= color_similarity(a, b) <= 100


class TestPaletteSimilarity:
    def test_empty_sides_score_0(self) -> None:
        assert palette_similarity([], ["#000000"]) == 0
        assert palette_similarity(["#000000"], []) == 0

    def test_averages_best_matches_over_first_palette(self) -> None:
        assert palette_similarity(["#000000", "#FFFFFF"], ["#000000"]) == 50

    def test_is_asymmetric(self) -> None:
        assert palette_similarity(["#000000"], ["#000000", "#FFFFFF"]) == 100


class TestIsColorInPalette:
    def test_everything_passes_without_allowed_colors(self) -> None:
        palette = ColorPaletteConstraint(forbidden_colors=["#FF0000"])
        assert is_color_in_palette("#FF0000", palette) is True

    def test_allowed_match(self) -> None:
        palette = ColorPaletteConstraint(primary_colors=["#FF0000"])
        assert is_color_in_palette("#FF0000", palette) is True

    def test_secondary_and_accent_colors_count_as_allowed(self) -> None:
        palette = ColorPaletteConstraint(
            primary_colors=["#000000"], secondary_colors=["#00FF00"], accent_colors=["#0000FF"]
        )
        assert is_color_in_palette("#00FF00", palette) is True
        assert is_color_in_palette("#0000FF", palette) is True

    def test_forbidden_rejects_when_no_allowed_match(self) -> None:
        palette = ColorPaletteConstraint(primary_colors=["#FF0000"], forbidden_colors=["#0000FF"])
        assert is_color_in_palette("#0000FF", palette) is False

    def test_unmatched_color_passes_when_not_forbidden(self) -> None:
        palette = ColorPaletteConstraint(primary_colors=["#FF0000"])
        assert is_color_in_palette("#0000FF", palette) is True

    def test_forbidden_is_not_a_universal_veto(self) -> None:
        palette = ColorPaletteConstraint(primary_colors=["#FF0000"], forbidden_colors=["#FF0000"])
        assert is_color_in_palette("#FF0000", palette) is True

    def test_tolerance_widens_the_allowed_match(self) -> None:
        palette = ColorPaletteConstraint(primary_colors=["#000000"], forbidden_colors=["#808080"])
        assert is_color_in_palette("#808080", palette, tolerance=20) is False
        assert is_color_in_palette("#808080", palette, tolerance=50) is True
