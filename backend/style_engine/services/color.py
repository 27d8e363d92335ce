"""Color distance, palette similarity and palette membership."""
import logging
import math
import re
from typing import Optional

from style_engine.models.style import ColorPaletteConstraint

logger = logging.getLogger(__name__)

HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)

# Human vision is most sensitive to green, then red, then blue.
RED_WEIGHT = 2
GREEN_WEIGHT = 4
BLUE_WEIGHT = 3
MAX_WEIGHTED_DISTANCE = math.sqrt((RED_WEIGHT + GREEN_WEIGHT + BLUE_WEIGHT) * 255 * 255)

DEFAULT_TOLERANCE = 20


def round_score(value: float) -> int:
    """Round half up (2.5 -> 3); the builtin round() rounds half to even."""
    return math.floor(value + 0.5)


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """Parse ``#RRGGBB`` (leading ``#`` optional, any case).

    Returns:
        ``(r, g, b)`` or None when the string is not a 6-digit hex color.
    """
    match = HEX_COLOR_PATTERN.fullmatch(hex_color)
    if match is None:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{channel:02x}" for channel in (r, g, b))


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert 0-255 RGB to HSL as (hue 0-360, saturation 0-100, lightness 0-100)."""
    rf, gf, bf = r / 255, g / 255, b / 255
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        if high == rf:
            hue = ((gf - bf) / delta + (6 if gf < bf else 0)) / 6
        elif high == gf:
            hue = ((bf - rf) / delta + 2) / 6
        else:
            hue = ((rf - gf) / delta + 4) / 6

    return round_score(hue * 360), round_score(saturation * 100), round_score(lightness * 100)


def color_similarity(color_a: str, color_b: str) -> int:
    """Perceptually weighted similarity of two hex colors, 0-100.

    Malformed input on either side scores 0. Identical colors score 100.
    """
    rgb_a = hex_to_rgb(color_a)
    rgb_b = hex_to_rgb(color_b)
    if rgb_a is None or rgb_b is None:
        return 0

    r_diff = rgb_a[0] - rgb_b[0]
    g_diff = rgb_a[1] - rgb_b[1]
    b_diff = rgb_a[2] - rgb_b[2]
    distance = math.sqrt(
        RED_WEIGHT * r_diff * r_diff
        + GREEN_WEIGHT * g_diff * g_diff
        + BLUE_WEIGHT * b_diff * b_diff
    )
    return round_score(100 - (distance / MAX_WEIGHTED_DISTANCE) * 100)


def palette_similarity(palette_a: list[str], palette_b: list[str]) -> int:
    """Average best-match similarity of every color in palette_a against palette_b.

    Asymmetric: callers pass the character's colors first and the style's
    colors second. Either palette empty scores 0.
    """
    if not palette_a or not palette_b:
        return 0

    best_matches = [
        max(color_similarity(color, candidate) for candidate in palette_b)
        for color in palette_a
    ]
    return round_score(sum(best_matches) / len(best_matches))


def is_color_in_palette(
    color: str,
    palette: ColorPaletteConstraint,
    tolerance: int = DEFAULT_TOLERANCE,
) -> bool:
    """Check a color against the palette's allowed and forbidden lists.

    Every color passes when no allowed colors are defined. The forbidden list
    is only consulted once no allowed color matched, so a color close to both
    an allowed and a forbidden color is accepted.
    """
    allowed = palette.allowed_colors
    if not allowed:
        return True

    threshold = 100 - tolerance
    if any(color_similarity(color, candidate) >= threshold for candidate in allowed):
        return True

    for forbidden in palette.forbidden_colors:
        if color_similarity(color, forbidden) >= threshold:
            logger.debug("Color %s rejected: matches forbidden color %s", color, forbidden)
            return False

    return True
