"""Suggestions that move both colours of a pair apart in lightness.

The lighter colour of the pair gets lighter and the darker one darker, by the
same number of whole-percent lightness steps, until the pair clears a ratio.
Hue and saturation of both colours are kept.
"""

import logging
from typing import NamedTuple

from .color_utils import hex_to_rgb, hsl_to_rgb, normalize_hex, rgb_to_hex, rgb_to_hsl
from .contrast import AA_NORMAL, AAA_NORMAL, get_contrast_ratio
from .models import HSL, Suggestion

__all__ = ["ColorPair", "symmetric_search", "generate_pair_suggestions"]

logger = logging.getLogger(__name__)

BALANCED_MAX_STEPS = 50
HIGH_CONTRAST_MAX_STEPS = 60

BALANCED_LABEL = "Balanced adjustment (both)"
BALANCED_DESCRIPTION = (
    "Shifts the lightness of both colours a little so each keeps its hue "
    "while the pair reaches 4.5:1."
)
HIGH_CONTRAST_LABEL = "High contrast (both)"
HIGH_CONTRAST_DESCRIPTION = (
    "Moves both colours further apart to meet the AAA ratio of 7.0:1."
)


class ColorPair(NamedTuple):
    bg_color: str
    text_color: str


def _clamp_lightness(value: float) -> float:
    return max(0.0, min(100.0, value))


def symmetric_search(
    bg_hsl: HSL, text_hsl: HSL, threshold_ratio: float, max_steps: int
) -> ColorPair | None:
    """Find the smallest equal and opposite lightness shift reaching a ratio.

    The background moves lighter when it is at least as light as the text,
    otherwise darker; the text always moves the other way. Each lightness is
    clamped to [0, 100] so a colour already at an extreme stays there while
    its partner keeps moving.

    Args:
        bg_hsl: Starting background colour.
        text_hsl: Starting text colour.
        threshold_ratio: Ratio the truncated contrast must reach.
        max_steps: Largest shift tried, inclusive.

    Returns:
        The first qualifying pair (step 0 included), or ``None``.
    """
    direction = 1 if bg_hsl.l >= text_hsl.l else -1

    for step in range(0, max_steps + 1):
        bg_rgb = hsl_to_rgb(
            bg_hsl.h, bg_hsl.s, _clamp_lightness(bg_hsl.l + direction * step)
        )
        text_rgb = hsl_to_rgb(
            text_hsl.h, text_hsl.s, _clamp_lightness(text_hsl.l - direction * step)
        )
        pair = ColorPair(rgb_to_hex(*bg_rgb), rgb_to_hex(*text_rgb))

        if get_contrast_ratio(pair.bg_color, pair.text_color).ratio >= threshold_ratio:
            logger.debug(
                "Pair reached %.1f after %d steps: %s", threshold_ratio, step, pair
            )
            return pair

    return None


def _pair_suggestion(label: str, description: str, pair: ColorPair) -> Suggestion:
    return Suggestion(
        label=label,
        description=description,
        bg_color=pair.bg_color,
        text_color=pair.text_color,
        ratio=get_contrast_ratio(pair.bg_color, pair.text_color).ratio,
    )


def generate_pair_suggestions(bg_hex: str, text_hex: str) -> list[Suggestion]:
    """Suggest up to two pairs that change both colours.

    A balanced pair reaching 4.5:1 within 50 steps, then a high-contrast pair
    reaching 7.0:1 within 60. Pairs equal to the original, or a high-contrast
    pair equal to the balanced one, are left out.
    """
    bg_norm = normalize_hex(bg_hex)
    text_norm = normalize_hex(text_hex)
    if bg_norm is None or text_norm is None:
        return []

    original = ColorPair(bg_norm, text_norm)
    bg_hsl = rgb_to_hsl(*hex_to_rgb(bg_norm))
    text_hsl = rgb_to_hsl(*hex_to_rgb(text_norm))

    suggestions: list[Suggestion] = []

    balanced = symmetric_search(bg_hsl, text_hsl, AA_NORMAL, BALANCED_MAX_STEPS)
    if balanced is not None and balanced != original:
        suggestions.append(
            _pair_suggestion(BALANCED_LABEL, BALANCED_DESCRIPTION, balanced)
        )

    high = symmetric_search(bg_hsl, text_hsl, AAA_NORMAL, HIGH_CONTRAST_MAX_STEPS)
    if high is not None and high != balanced and high != original:
        suggestions.append(
            _pair_suggestion(HIGH_CONTRAST_LABEL, HIGH_CONTRAST_DESCRIPTION, high)
        )

    return suggestions
