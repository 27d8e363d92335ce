"""Cast-wide consistency reports and report views."""
import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from style_engine.models.character import CharacterStyleProfile
from style_engine.models.report import (
    CastSummary,
    CharacterStyleScore,
    DeviationType,
    RecommendationType,
    Severity,
    StyleConsistencyReport,
    StyleDeviation,
    StyleRecommendation,
)
from style_engine.models.style import StyleDefinition
from style_engine.services.color import palette_similarity, round_score
from style_engine.services.scoring import calculate_style_deviation

logger = logging.getLogger(__name__)

REGENERATE_BELOW = 60
ADJUST_BELOW = 80
COLOR_DEVIATION_BELOW = 70
COLOR_HIGH_SEVERITY_BELOW = 50
ART_STYLE_DEVIATION_BELOW = 70
ART_STYLE_MATCH_SCORE = 100
ART_STYLE_MISMATCH_SCORE = 30
# Cast overview: characters above this deviation need attention.
ATTENTION_DEVIATION_ABOVE = 40


def _score_character(
    profile: CharacterStyleProfile,
    definition: StyleDefinition,
) -> CharacterStyleScore:
    overall_score = 100 - calculate_style_deviation(profile, definition)
    features = profile.extracted_features
    primaries = definition.color_palette.primary_colors

    if features is None:
        color_score = 0
        lighting_score = 0
        art_style_matches = False
    else:
        # Without primaries the colors are compared to themselves.
        reference = primaries if primaries else features.dominant_colors
        color_score = palette_similarity(features.dominant_colors, reference)
        lighting_score = round_score(features.brightness)
        art_style_matches = definition.art_direction in features.detected_art_style

    return CharacterStyleScore(
        character_id=profile.character_id,
        character_name=profile.character_name,
        overall_score=overall_score,
        color_score=color_score,
        lighting_score=lighting_score,
        art_style_score=ART_STYLE_MATCH_SCORE if art_style_matches else ART_STYLE_MISMATCH_SCORE,
        needs_regeneration=overall_score < REGENERATE_BELOW,
    )


def _detect_deviations(
    profile: CharacterStyleProfile,
    score: CharacterStyleScore,
    definition: StyleDefinition,
) -> list[StyleDeviation]:
    deviations: list[StyleDeviation] = []
    direction = definition.art_direction.value

    if score.color_score < COLOR_DEVIATION_BELOW and profile.extracted_features is not None:
        deviations.append(
            StyleDeviation(
                character_id=profile.character_id,
                character_name=profile.character_name,
                deviation_type=DeviationType.color,
                severity=(
                    Severity.high
                    if score.color_score < COLOR_HIGH_SEVERITY_BELOW
                    else Severity.medium
                ),
                description=f"Color palette deviates {100 - score.color_score}% from project style",
                suggestion="Regenerate with enforced color palette",
            )
        )

    if score.art_style_score < ART_STYLE_DEVIATION_BELOW:
        deviations.append(
            StyleDeviation(
                character_id=profile.character_id,
                character_name=profile.character_name,
                deviation_type=DeviationType.art_style,
                severity=Severity.high,
                description=f"Art style doesn't match {direction} direction",
                suggestion=f"Regenerate with {direction} style preset",
            )
        )

    return deviations


def _recommend(scores: list[CharacterStyleScore]) -> list[StyleRecommendation]:
    recommendations: list[StyleRecommendation] = []

    low = [s.character_id for s in scores if s.overall_score < REGENERATE_BELOW]
    if low:
        recommendations.append(
            StyleRecommendation(
                type=RecommendationType.regenerate,
                character_ids=low,
                description=f"{len(low)} characters need regeneration to match project style",
                priority=Severity.high,
            )
        )

    medium = [
        s.character_id
        for s in scores
        if REGENERATE_BELOW <= s.overall_score < ADJUST_BELOW
    ]
    if medium:
        recommendations.append(
            StyleRecommendation(
                type=RecommendationType.adjust,
                character_ids=medium,
                description=f"{len(medium)} characters could benefit from style adjustments",
                priority=Severity.medium,
            )
        )

    return recommendations


def generate_consistency_report(
    project_id: str,
    definition: StyleDefinition,
    profiles: Sequence[CharacterStyleProfile],
) -> StyleConsistencyReport:
    """Score every character against the style and aggregate the results.

    Aggregate scores are rounded means over the cast (an empty cast averages
    over 1 and scores 0). Deviations flag weak color matches and art direction
    mismatches. Recommendations bundle characters to regenerate (overall
    below 60) and to adjust (60 to 79).

    Args:
        project_id: Project the cast belongs to.
        definition: Active style definition.
        profiles: Character profiles, in display order.

    Returns:
        A new immutable report.
    """
    character_scores: list[CharacterStyleScore] = []
    deviations: list[StyleDeviation] = []
    total_overall = 0
    total_color = 0
    total_lighting = 0
    total_art_style = 0

    for profile in profiles:
        score = _score_character(profile, definition)
        character_scores.append(score)
        total_overall += score.overall_score
        total_color += score.color_score
        total_lighting += score.lighting_score
        total_art_style += score.art_style_score
        deviations.extend(_detect_deviations(profile, score, definition))

    divisor = max(len(profiles), 1)
    report = StyleConsistencyReport(
        project_id=project_id,
        style_definition_id=definition.id,
        analyzed_at=datetime.now(timezone.utc).isoformat(),
        overall_consistency_score=round_score(total_overall / divisor),
        color_consistency_score=round_score(total_color / divisor),
        lighting_consistency_score=round_score(total_lighting / divisor),
        art_style_consistency_score=round_score(total_art_style / divisor),
        character_scores=character_scores,
        deviations=deviations,
        recommendations=_recommend(character_scores),
    )
    logger.info(
        "Consistency report for project %s: overall=%d characters=%d deviations=%d",
        project_id,
        report.overall_consistency_score,
        len(character_scores),
        len(deviations),
        extra={"project_id": project_id, "style_definition_id": definition.id},
    )
    return report


def filter_deviations(
    report: StyleConsistencyReport,
    severity: Optional[Severity] = None,
) -> list[StyleDeviation]:
    """Deviations of one severity, or all of them when severity is None."""
    if severity is None:
        return list(report.deviations)
    return [d for d in report.deviations if d.severity == severity]


def count_deviations_by_severity(report: StyleConsistencyReport) -> dict[Severity, int]:
    counts = {severity: 0 for severity in Severity}
    for deviation in report.deviations:
        counts[deviation.severity] += 1
    return counts


def sort_scores(report: StyleConsistencyReport) -> list[CharacterStyleScore]:
    """Character scores, worst first."""
    return sorted(report.character_scores, key=lambda s: s.overall_score)


def summarize_cast(
    profiles: Sequence[CharacterStyleProfile],
    scores: Optional[Sequence[CharacterStyleScore]] = None,
) -> CastSummary:
    """Count characters needing attention and average the cast score.

    A character needs work when its score asks for regeneration or its stored
    deviation is above 40. The average uses ``scores`` when any are given and
    falls back to ``100 - style_deviation_score`` per profile.
    """
    by_id = {s.character_id: s for s in scores or ()}

    def needs_work(profile: CharacterStyleProfile) -> bool:
        score = by_id.get(profile.character_id)
        regenerate = score is not None and score.needs_regeneration
        return regenerate or profile.style_deviation_score > ATTENTION_DEVIATION_ABOVE

    total = len(profiles)
    needing_work = sum(1 for p in profiles if needs_work(p))

    if scores:
        average = round_score(sum(s.overall_score for s in scores) / len(scores))
    else:
        average = round_score(
            sum(100 - p.style_deviation_score for p in profiles) / (total or 1)
        )

    return CastSummary(
        total=total,
        needs_work=needing_work,
        consistent=total - needing_work,
        average_score=average,
    )
