"""Suggestions that change one colour of a pair and keep the other fixed.

The adjusted ("target") colour keeps its hue and saturation; only its HSL
lightness moves. Among every whole-percent lightness that clears a ratio,
the one closest to the target's original lightness wins, so the suggestion
stays as close to the user's choice as the threshold allows.
"""

import logging

from .color_utils import hex_to_rgb, hsl_to_rgb, normalize_hex, rgb_to_hex, rgb_to_hsl
from .contrast import (
    AA_NORMAL,
    AAA_NORMAL,
    compute_luminance,
    contrast_ratio,
    get_contrast_ratio,
)
from .models import AdjustMode, Suggestion

__all__ = ["best_lightness_for", "generate_single_suggestions"]

logger = logging.getLogger(__name__)

WHITE = "#FFFFFF"
BLACK = "#000000"

# Lightness used by the clarity suggestion, chosen opposite the reference.
CLARITY_DARK_LIGHTNESS = 5
CLARITY_LIGHT_LIGHTNESS = 95

MAX_SINGLE_SUGGESTIONS = 3

NATURAL_LABEL = "Natural adjustment (AA)"
NATURAL_DESCRIPTION = (
    "Keeps as much of the original colour as possible while meeting the "
    "minimum 4.5:1 ratio."
)
HIGH_CONTRAST_LABEL = "High contrast (AAA)"
HIGH_CONTRAST_DESCRIPTION = "Adjusted towards the stricter AAA ratio of 7.0:1."
MAX_CONTRAST_LABEL = "Maximum contrast (black/white)"
MAX_CONTRAST_DESCRIPTION = "Puts readability ahead of keeping the original hue."
CLARITY_LABEL = "Clarity (lightness first)"
CLARITY_DESCRIPTION = (
    "Pushes lightness to the opposite extreme so the text stands out sharply."
)


def best_lightness_for(
    target_hex: str, reference_hex: str, threshold_ratio: float
) -> str | None:
    """Find the lightness closest to the target's own that clears a ratio.

    Scans whole-percent lightness 0..100 at the target's hue and saturation
    and keeps the qualifying candidate nearest the original lightness. On a
    tie the earlier (darker) candidate is kept.

    Args:
        target_hex: Colour to adjust.
        reference_hex: Colour that stays fixed.
        threshold_ratio: Minimum untruncated contrast ratio.

    Returns:
        Canonical hex of the best candidate, or ``None`` if no lightness
        qualifies or either colour is malformed.
    """
    target_rgb = hex_to_rgb(target_hex)
    reference_rgb = hex_to_rgb(reference_hex)
    if target_rgb is None or reference_rgb is None:
        return None

    reference_luminance = compute_luminance(reference_rgb)
    target_hsl = rgb_to_hsl(*target_rgb)

    best_hex: str | None = None
    best_distance = float("inf")

    for lightness in range(0, 101):
        candidate = hsl_to_rgb(target_hsl.h, target_hsl.s, lightness)
        ratio = contrast_ratio(compute_luminance(candidate), reference_luminance)
        if ratio < threshold_ratio:
            continue

        distance = abs(lightness - target_hsl.l)
        if distance < best_distance:
            best_distance = distance
            best_hex = rgb_to_hex(*candidate)

    logger.debug(
        "Best lightness for %s against %s at %.1f: %s",
        target_hex,
        reference_hex,
        threshold_ratio,
        best_hex,
    )
    return best_hex


def _make_suggestion(
    mode: AdjustMode, label: str, description: str, new_hex: str, reference_hex: str
) -> Suggestion:
    match mode:
        case AdjustMode.TEXT:
            text_color, bg_color = new_hex, reference_hex
        case AdjustMode.BG:
            text_color, bg_color = reference_hex, new_hex
        case _:
            raise ValueError(f"Single-colour suggestions cannot adjust {mode.value!r}")

    return Suggestion(
        label=label,
        description=description,
        bg_color=bg_color,
        text_color=text_color,
        ratio=get_contrast_ratio(text_color, bg_color).ratio,
    )


def _black_or_white(reference_hex: str) -> tuple[str, float]:
    """Pick whichever of white or black contrasts more with the reference."""
    ratio_white = get_contrast_ratio(WHITE, reference_hex).ratio
    ratio_black = get_contrast_ratio(BLACK, reference_hex).ratio
    if ratio_white > ratio_black:
        return WHITE, ratio_white
    return BLACK, ratio_black


def _clarity_color(target_hex: str, reference_hex: str) -> str | None:
    target_rgb = hex_to_rgb(target_hex)
    reference_rgb = hex_to_rgb(reference_hex)
    if target_rgb is None or reference_rgb is None:
        return None

    if compute_luminance(reference_rgb) > 0.5:
        lightness = CLARITY_DARK_LIGHTNESS
    else:
        lightness = CLARITY_LIGHT_LIGHTNESS

    target_hsl = rgb_to_hsl(*target_rgb)
    return rgb_to_hex(*hsl_to_rgb(target_hsl.h, target_hsl.s, lightness))


def generate_single_suggestions(
    mode: AdjustMode, target_hex: str, reference_hex: str
) -> list[Suggestion]:
    """Suggest up to three replacements for one colour of a pair.

    In order:

    1. Natural adjustment: nearest lightness reaching 4.5:1.
    2. High contrast: nearest lightness reaching 7.0:1. Only when no
       lightness at the target's hue gets there does plain black or white
       stand in, and only if it reaches 7.0:1 itself.
    3. Clarity: lightness pushed to 5% against a light reference or 95%
       against a dark one, kept if it still reaches 4.5:1.

    A candidate equal to the original colour, or to a colour already
    suggested, is dropped silently.

    Args:
        mode: ``AdjustMode.TEXT`` or ``AdjustMode.BG``; the side of the pair
            being changed.
        target_hex: The colour being changed.
        reference_hex: The colour that stays fixed.

    Returns:
        Up to three suggestions; empty if either colour is malformed.
    """
    target_norm = normalize_hex(target_hex)
    reference_norm = normalize_hex(reference_hex)
    if target_norm is None or reference_norm is None:
        return []

    suggestions: list[Suggestion] = []
    chosen: list[str] = []

    def add(label: str, description: str, new_hex: str) -> None:
        suggestions.append(
            _make_suggestion(mode, label, description, new_hex, reference_norm)
        )
        chosen.append(new_hex)

    natural_hex = best_lightness_for(target_norm, reference_norm, AA_NORMAL)
    if natural_hex is not None and natural_hex != target_norm:
        add(NATURAL_LABEL, NATURAL_DESCRIPTION, natural_hex)

    high_hex = best_lightness_for(target_norm, reference_norm, AAA_NORMAL)
    if high_hex is not None:
        if high_hex != natural_hex and high_hex != target_norm:
            add(HIGH_CONTRAST_LABEL, HIGH_CONTRAST_DESCRIPTION, high_hex)
    else:
        fallback_hex, fallback_ratio = _black_or_white(reference_norm)
        if (
            fallback_ratio >= AAA_NORMAL
            and fallback_hex != natural_hex
            and fallback_hex != target_norm
        ):
            add(MAX_CONTRAST_LABEL, MAX_CONTRAST_DESCRIPTION, fallback_hex)

    clarity_hex = _clarity_color(target_norm, reference_norm)
    if (
        clarity_hex is not None
        and clarity_hex not in chosen
        and clarity_hex != target_norm
    ):
        candidate = _make_suggestion(
            mode, CLARITY_LABEL, CLARITY_DESCRIPTION, clarity_hex, reference_norm
        )
        if candidate.ratio >= AA_NORMAL:
            suggestions.append(candidate)
            chosen.append(clarity_hex)

    return suggestions[:MAX_SINGLE_SUGGESTIONS]
