"""Art direction presets and default style constraints."""
from types import MappingProxyType
from typing import Mapping, NamedTuple

from style_engine.models.features import ArtDirection, ColorHarmonyType
from style_engine.models.style import ColorPaletteConstraint, LightingConstraint, ShadowStyle


class ArtDirectionPreset(NamedTuple):
    """Prompt vocabulary bundled with one art direction."""

    style_prompt_prefix: str
    style_prompt_suffix: str
    negative_prompt: str
    style_keywords: tuple[str, ...]
    avoid_keywords: tuple[str, ...]
    artistic_influences: tuple[str, ...]


class NamedPalette(NamedTuple):
    name: str
    colors: tuple[str, ...]


ART_DIRECTION_PRESETS: Mapping[ArtDirection, ArtDirectionPreset] = MappingProxyType({
    ArtDirection.anime: ArtDirectionPreset(
        style_prompt_prefix="anime style, high quality anime art, clean lines, vibrant colors,",
        style_prompt_suffix=", anime aesthetic, japanese animation style",
        negative_prompt="realistic, photorealistic, western comic, 3d render, photograph",
        style_keywords=("anime", "cel-shaded", "large eyes", "stylized features", "vibrant"),
        avoid_keywords=("realistic", "photorealistic", "hyper-detailed skin"),
        artistic_influences=("Studio Ghibli", "Makoto Shinkai", "Kyoto Animation"),
    ),
    ArtDirection.realistic: ArtDirectionPreset(
        style_prompt_prefix="photorealistic portrait, highly detailed, lifelike,",
        style_prompt_suffix=", professional photography, sharp focus, realistic lighting",
        negative_prompt="anime, cartoon, stylized, illustration, drawing, sketch",
        style_keywords=("photorealistic", "detailed skin texture", "natural lighting", "lifelike"),
        avoid_keywords=("anime", "cartoon", "cel-shaded", "stylized"),
        artistic_influences=("Portrait photography", "Renaissance portraiture"),
    ),
    ArtDirection.painterly: ArtDirectionPreset(
        style_prompt_prefix="oil painting style, painterly, visible brushstrokes, artistic,",
        style_prompt_suffix=", fine art portrait, classical painting technique",
        negative_prompt="photograph, photorealistic, anime, digital art, sharp edges",
        style_keywords=("painterly", "brushstrokes", "oil painting", "artistic", "textured"),
        avoid_keywords=("photograph", "digital", "anime", "flat colors"),
        artistic_influences=("John Singer Sargent", "Rembrandt", "Classical portraiture"),
    ),
    ArtDirection.comic: ArtDirectionPreset(
        style_prompt_prefix="comic book art style, bold lines, dynamic, western comic,",
        style_prompt_suffix=", comic book aesthetic, graphic novel style",
        negative_prompt="anime, photorealistic, soft lines, watercolor, sketch",
        style_keywords=("comic book", "bold outlines", "dynamic pose", "ink", "graphic"),
        avoid_keywords=("anime", "photorealistic", "watercolor"),
        artistic_influences=("Marvel Comics", "DC Comics", "Jim Lee", "Alex Ross"),
    ),
    ArtDirection.pixel: ArtDirectionPreset(
        style_prompt_prefix="pixel art, 16-bit style, retro gaming aesthetic, pixelated,",
        style_prompt_suffix=", retro game character, pixel perfect",
        negative_prompt="high resolution, smooth, photorealistic, anti-aliased",
        style_keywords=("pixel art", "16-bit", "8-bit", "retro", "gaming"),
        avoid_keywords=("smooth", "photorealistic", "high resolution"),
        artistic_influences=("Classic RPG sprites", "Retro gaming"),
    ),
    ArtDirection.chibi: ArtDirectionPreset(
        style_prompt_prefix="chibi style, super deformed, cute, big head small body,",
        style_prompt_suffix=", kawaii, adorable character design",
        negative_prompt="realistic proportions, serious, photorealistic, dark",
        style_keywords=("chibi", "cute", "kawaii", "big head", "simplified"),
        avoid_keywords=("realistic proportions", "serious", "dark", "gritty"),
        artistic_influences=("Japanese chibi style", "Nendoroid"),
    ),
    ArtDirection.semi_realistic: ArtDirectionPreset(
        style_prompt_prefix="semi-realistic style, stylized realism, detailed but artistic,",
        style_prompt_suffix=", balanced stylization, artistic portrait",
        negative_prompt="fully photorealistic, anime, cartoon, pixel art",
        style_keywords=("semi-realistic", "stylized", "artistic realism", "balanced"),
        avoid_keywords=("full photorealism", "anime", "cartoon"),
        artistic_influences=("Digital art masters", "Concept art"),
    ),
    ArtDirection.watercolor: ArtDirectionPreset(
        style_prompt_prefix="watercolor painting, soft edges, color bleeding, artistic,",
        style_prompt_suffix=", watercolor portrait, delicate brush technique",
        negative_prompt="sharp edges, digital art, photorealistic, hard lines",
        style_keywords=("watercolor", "soft", "flowing", "delicate", "transparent"),
        avoid_keywords=("sharp", "digital", "hard edges", "bold lines"),
        artistic_influences=("Traditional watercolor masters",),
    ),
    ArtDirection.sketch: ArtDirectionPreset(
        style_prompt_prefix="pencil sketch, hand-drawn, artistic lines, sketchy style,",
        style_prompt_suffix=", sketch portrait, artistic drawing",
        negative_prompt="colored, photorealistic, digital, clean lines",
        style_keywords=("sketch", "pencil", "hand-drawn", "line art", "graphite"),
        avoid_keywords=("colored", "digital", "photorealistic"),
        artistic_influences=("Classical drawing techniques",),
    ),
    ArtDirection.custom: ArtDirectionPreset(
        style_prompt_prefix="",
        style_prompt_suffix="",
        negative_prompt="",
        style_keywords=(),
        avoid_keywords=(),
        artistic_influences=(),
    ),
})

_missing = set(ArtDirection) - set(ART_DIRECTION_PRESETS)
if _missing:
    raise RuntimeError(f"Art directions without presets: {sorted(d.value for d in _missing)}")

DEFAULT_COLOR_PALETTE = ColorPaletteConstraint(
    primary_colors=[],
    secondary_colors=[],
    accent_colors=[],
    forbidden_colors=[],
    harmony_type=ColorHarmonyType.analogous,
    saturation_range=(30, 80),
    brightness_range=(20, 90),
)

DEFAULT_LIGHTING = LightingConstraint(
    type="natural",
    direction="three-point",
    intensity_range=(50, 80),
    shadow_style=ShadowStyle.soft,
    highlight_strength=50,
)

PRESET_PALETTES: tuple[NamedPalette, ...] = (
    NamedPalette("Warm Fantasy", ("#8B4513", "#CD853F", "#DEB887", "#F4A460", "#D2691E")),
    NamedPalette("Cool Sci-Fi", ("#1E3A5F", "#2E5E88", "#4A90B8", "#6BB3D9", "#A8D8EA")),
    NamedPalette("Dark Fantasy", ("#1A1A2E", "#16213E", "#0F3460", "#533483", "#7B2869")),
    NamedPalette("Vibrant Anime", ("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FECA57")),
    NamedPalette("Muted Earth", ("#5C4033", "#8B7355", "#A0826D", "#C4A77D", "#E6D5B8")),
    NamedPalette("Pastel Dream", ("#FFB5E8", "#B5DEFF", "#D5B5FF", "#FFDBB5", "#B5FFD5")),
)


def get_preset(art_direction: ArtDirection) -> ArtDirectionPreset:
    """Return the prompt preset for an art direction."""
    return ART_DIRECTION_PRESETS[art_direction]
