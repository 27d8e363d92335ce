"""StyleEngine: the engine operations bundled behind one stateless object."""
from typing import Any, Optional, Sequence

from style_engine.core.config import Settings
from style_engine.models.character import CharacterStyleProfile
from style_engine.models.features import ArtDirection, ExtractedStyleFeatures
from style_engine.models.report import (
    CastSummary,
    CharacterStyleScore,
    Severity,
    StyleConsistencyReport,
    StyleDeviation,
    StyledPrompt,
)
from style_engine.models.style import ColorPaletteConstraint, StyleDefinition, StyleDefinitionOverrides
from style_engine.services import color, definition as definitions, prompt, report, scoring


class StyleEngine:
    """Style consistency operations with defaults taken from Settings.

    Holds no state besides its settings, so one instance can serve any number
    of concurrent callers.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings if settings is not None else Settings()

    def color_similarity(self, color_a: str, color_b: str) -> int:
        return color.color_similarity(color_a, color_b)

    def palette_similarity(self, palette_a: list[str], palette_b: list[str]) -> int:
        return color.palette_similarity(palette_a, palette_b)

    def is_color_in_palette(
        self,
        hex_color: str,
        palette: ColorPaletteConstraint,
        tolerance: Optional[int] = None,
    ) -> bool:
        """Palette membership using the configured tolerance unless one is given."""
        if tolerance is None:
            tolerance = self.settings.color_tolerance
        return color.is_color_in_palette(hex_color, palette, tolerance)

    def create_style_definition(
        self,
        name: str,
        art_direction: ArtDirection,
        overrides: Optional[StyleDefinitionOverrides] = None,
    ) -> StyleDefinition:
        return definitions.create_style_definition(name, art_direction, overrides)

    def update_style_definition(
        self,
        definition: StyleDefinition,
        overrides: StyleDefinitionOverrides,
    ) -> StyleDefinition:
        return definitions.update_style_definition(definition, overrides)

    def merge_style_definition(
        self,
        base: StyleDefinition,
        overrides: Optional[StyleDefinitionOverrides],
    ) -> StyleDefinition:
        return definitions.merge_style_definition(base, overrides)

    def update_color_palette(self, definition: StyleDefinition, **fields: Any) -> StyleDefinition:
        return definitions.update_color_palette(definition, **fields)

    def update_lighting(self, definition: StyleDefinition, **fields: Any) -> StyleDefinition:
        return definitions.update_lighting(definition, **fields)

    def apply_art_direction_preset(
        self,
        definition: StyleDefinition,
        art_direction: ArtDirection,
    ) -> StyleDefinition:
        return definitions.apply_art_direction_preset(definition, art_direction)

    def apply_preset_palette(self, definition: StyleDefinition, colors: Sequence[str]) -> StyleDefinition:
        return definitions.apply_preset_palette(definition, colors)

    def calculate_style_deviation(
        self,
        profile: CharacterStyleProfile,
        definition: StyleDefinition,
    ) -> int:
        return scoring.calculate_style_deviation(profile, definition)

    def analyze_profile(
        self,
        profile: CharacterStyleProfile,
        definition: StyleDefinition,
        features: Optional[ExtractedStyleFeatures] = None,
    ) -> CharacterStyleProfile:
        return scoring.analyze_profile(profile, definition, features)

    def generate_consistency_report(
        self,
        project_id: str,
        definition: StyleDefinition,
        profiles: Sequence[CharacterStyleProfile],
    ) -> StyleConsistencyReport:
        return report.generate_consistency_report(project_id, definition, profiles)

    def filter_deviations(
        self,
        consistency_report: StyleConsistencyReport,
        severity: Optional[Severity] = None,
    ) -> list[StyleDeviation]:
        return report.filter_deviations(consistency_report, severity)

    def count_deviations_by_severity(
        self, consistency_report: StyleConsistencyReport
    ) -> dict[Severity, int]:
        return report.count_deviations_by_severity(consistency_report)

    def sort_scores(self, consistency_report: StyleConsistencyReport) -> list[CharacterStyleScore]:
        return report.sort_scores(consistency_report)

    def summarize_cast(
        self,
        profiles: Sequence[CharacterStyleProfile],
        scores: Optional[Sequence[CharacterStyleScore]] = None,
    ) -> CastSummary:
        return report.summarize_cast(profiles, scores)

    def generate_styled_prompt(
        self,
        base_prompt: str,
        definition: StyleDefinition,
        character_overrides: Optional[StyleDefinitionOverrides] = None,
    ) -> StyledPrompt:
        return prompt.generate_styled_prompt(base_prompt, definition, character_overrides)

    def prepare_style_transfer(
        self,
        source_profile: CharacterStyleProfile,
        target_profiles: Sequence[CharacterStyleProfile],
        definition: StyleDefinition,
        transfer_strength: Optional[int] = None,
    ) -> dict[str, StyledPrompt]:
        """Transfer prompts at the given strength, or the configured default."""
        if transfer_strength is None:
            transfer_strength = self.settings.default_transfer_strength
        return prompt.prepare_style_transfer(
            source_profile, target_profiles, definition, transfer_strength
        )
