"""Route a suggestion request to the adjuster for its mode."""

from .models import AdjustMode, Suggestion
from .pair_adjuster import generate_pair_suggestions
from .single_adjuster import generate_single_suggestions

__all__ = ["generate_suggestions"]


def generate_suggestions(
    mode: AdjustMode, bg_hex: str, text_hex: str
) -> list[Suggestion]:
    """Suggest replacement pairs for ``bg_hex``/``text_hex``.

    ``TEXT`` and ``BG`` change only that colour (at most three suggestions);
    ``BOTH`` moves the two colours apart (at most two).
    """
    match mode:
        case AdjustMode.TEXT:
            return generate_single_suggestions(AdjustMode.TEXT, text_hex, bg_hex)
        case AdjustMode.BG:
            return generate_single_suggestions(AdjustMode.BG, bg_hex, text_hex)
        case AdjustMode.BOTH:
            return generate_pair_suggestions(bg_hex, text_hex)
    raise ValueError(f"Unknown adjust mode: {mode!r}")
