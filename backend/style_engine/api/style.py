"""Style consistency API router."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from style_engine.models.character import CharacterStyleProfile
from style_engine.models.features import ArtDirection
from style_engine.models.report import CastSummary, StyleConsistencyReport, StyledPrompt
from style_engine.models.requests import (
    CreateDefinitionRequest,
    DeviationRequest,
    DeviationResponse,
    PromptRequest,
    ReportRequest,
    SummaryRequest,
    TransferRequest,
    UpdateDefinitionRequest,
)
from style_engine.models.style import StyleDefinition
from style_engine.services.engine import StyleEngine
from style_engine.services.presets import ART_DIRECTION_PRESETS, PRESET_PALETTES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/style", tags=["style"])


def get_style_engine(request: Request) -> StyleEngine:
    """FastAPI dependency: retrieve StyleEngine from app.state.

    Returns HTTP 503 if the engine was not initialized at startup.
    """
    engine: StyleEngine | None = getattr(request.app.state, "style_engine", None)
    if engine is None:
        raise HTTPException(
            status_code=503,
            detail="Style engine unavailable. Service not initialized.",
        )
    return engine


def _run(operation: str, func, *args):
    """Call an engine operation, mapping unexpected failures to HTTP 500."""
    try:
        return func(*args)
    except Exception as exc:
        logger.error(
            "%s failed",
            operation,
            exc_info=True,
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=500, detail=f"{operation} failed") from exc


@router.get("/presets")
async def list_presets() -> dict:
    """List every art direction preset and the named palettes."""
    return {
        "art_directions": {
            direction.value: preset._asdict() for direction, preset in ART_DIRECTION_PRESETS.items()
        },
        "palettes": [palette._asdict() for palette in PRESET_PALETTES],
    }


@router.get("/presets/{art_direction}")
async def get_preset(art_direction: ArtDirection) -> dict:
    """Return one art direction preset. Unknown directions are rejected with 422."""
    return {"art_direction": art_direction.value, **ART_DIRECTION_PRESETS[art_direction]._asdict()}


@router.post("/definitions", response_model=StyleDefinition)
async def create_definition(
    body: CreateDefinitionRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> StyleDefinition:
    """Create a version-1 style definition from a preset plus overrides."""
    return _run(
        "create_style_definition",
        engine.create_style_definition,
        body.name,
        body.art_direction,
        body.overrides,
    )


@router.post("/definitions/update", response_model=StyleDefinition)
async def update_definition(
    body: UpdateDefinitionRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> StyleDefinition:
    """Apply overrides and return the next version of the definition."""
    return _run("update_style_definition", engine.update_style_definition, body.definition, body.overrides)


@router.post("/deviation", response_model=DeviationResponse)
async def calculate_deviation(
    body: DeviationRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> DeviationResponse:
    score = _run(
        "calculate_style_deviation", engine.calculate_style_deviation, body.profile, body.definition
    )
    return DeviationResponse(character_id=body.profile.character_id, deviation_score=score)


@router.post("/analyze", response_model=CharacterStyleProfile)
async def analyze_profile(
    body: DeviationRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> CharacterStyleProfile:
    """Return the profile with its deviation score refreshed."""
    return _run("analyze_profile", engine.analyze_profile, body.profile, body.definition)


@router.post("/reports", response_model=StyleConsistencyReport)
async def generate_report(
    body: ReportRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> StyleConsistencyReport:
    """Generate a consistency report for the whole cast.

    Raises:
        HTTPException 422: Validation error (handled by FastAPI automatically).
    """
    return _run(
        "generate_consistency_report",
        engine.generate_consistency_report,
        body.project_id,
        body.definition,
        body.profiles,
    )


@router.post("/prompts", response_model=StyledPrompt)
async def generate_prompt(
    body: PromptRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> StyledPrompt:
    return _run(
        "generate_styled_prompt",
        engine.generate_styled_prompt,
        body.base_prompt,
        body.definition,
        body.character_overrides,
    )


@router.post("/transfers", response_model=dict[str, StyledPrompt])
async def prepare_transfer(
    body: TransferRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> dict[str, StyledPrompt]:
    """Prompts keyed by target character id."""
    return _run(
        "prepare_style_transfer",
        engine.prepare_style_transfer,
        body.source_profile,
        body.target_profiles,
        body.definition,
        body.transfer_strength,
    )


@router.post("/summary", response_model=CastSummary)
async def summarize_cast(
    body: SummaryRequest,
    engine: StyleEngine = Depends(get_style_engine),
) -> CastSummary:
    return _run("summarize_cast", engine.summarize_cast, body.profiles, body.scores)
