"""WCAG 2.0 relative luminance and contrast ratio for hex colour pairs.

The ratio between two colours is ``(L_lighter + 0.05) / (L_darker + 0.05)``
where ``L`` is the relative luminance of each colour. It ranges from 1.0
(identical luminance) to 21.0 (black on white).

Thresholds:
    - AA normal text: 4.5
    - AA large text: 3.0
    - AAA normal text: 7.0
    - AAA large text: 4.5

Large text is at least 18pt regular or 14pt bold.

Example:
    >>> from irocheck.contrast import get_contrast_ratio
    >>> result = get_contrast_ratio("#FFFFFF", "#777777")
    >>> result.ratio
    4.47
    >>> result.aa_normal, result.aa_large
    (False, True)
"""

import math
from collections.abc import Sequence

from .color_utils import hex_to_rgb
from .models import ContrastResult

__all__ = [
    "AA_LARGE",
    "AA_NORMAL",
    "AAA_LARGE",
    "AAA_NORMAL",
    "ZERO_RESULT",
    "compute_luminance",
    "contrast_ratio",
    "get_contrast_ratio",
    "truncate_ratio",
]

AA_LARGE = 3.0
AA_NORMAL = 4.5
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

ZERO_RESULT = ContrastResult(
    ratio=0.0,
    aa_normal=False,
    aa_large=False,
    aaa_normal=False,
    aaa_large=False,
)


def compute_luminance(rgb: Sequence[int]) -> float:
    """Relative luminance of an 8-bit sRGB colour.

    Each channel is linearised before weighting:

    - ``c <= 0.03928``: ``c / 12.92``
    - otherwise: ``((c + 0.055) / 1.055) ** 2.4``

    and the result is ``0.2126 R + 0.7152 G + 0.0722 B``.

    Args:
        rgb: Three channel values in [0, 255].

    Returns:
        Luminance in [0.0, 1.0]; 0.0 for black, 1.0 for white.
    """
    def linearize(value: float) -> float:
        c = value / 255.0
        if c <= 0.03928:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def contrast_ratio(l1: float, l2: float) -> float:
    """Untruncated contrast ratio between two luminance values (order-independent)."""
    light = max(l1, l2)
    dark = min(l1, l2)
    return (light + 0.05) / (dark + 0.05)


def truncate_ratio(ratio: float) -> float:
    """Drop everything after the second decimal (4.039 -> 4.03, never 4.04)."""
    return math.floor(ratio * 100) / 100


def get_contrast_ratio(hex1: str, hex2: str) -> ContrastResult:
    """Classify a colour pair against the four WCAG thresholds.

    Malformed input is not an error: if either colour fails to parse the
    result is ``ZERO_RESULT`` (ratio 0, every flag false).
    """
    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return ZERO_RESULT

    ratio = truncate_ratio(
        contrast_ratio(compute_luminance(rgb1), compute_luminance(rgb2))
    )
    return ContrastResult(
        ratio=ratio,
        aa_normal=ratio >= AA_NORMAL,
        aa_large=ratio >= AA_LARGE,
        aaa_normal=ratio >= AAA_NORMAL,
        aaa_large=ratio >= AAA_LARGE,
    )
