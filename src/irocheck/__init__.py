"""irocheck - WCAG contrast checking and hue-preserving colour suggestions"""

__version__ = "0.1.0"

from .color_utils import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from .contrast import get_contrast_ratio
from .models import AdjustMode, ContrastResult, Suggestion
from .pair_adjuster import generate_pair_suggestions
from .single_adjuster import generate_single_suggestions
from .suggestions import generate_suggestions

__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "get_contrast_ratio",
    "generate_single_suggestions",
    "generate_pair_suggestions",
    "generate_suggestions",
    "AdjustMode",
    "ContrastResult",
    "Suggestion",
]
