"""Editing session for a colour pair with preview/confirm/cancel of suggestions.

The colour engine is pure; this module keeps the mutable state an editor
needs around it: the current pair, its contrast result, the open suggestion
mode and, while a suggestion is being previewed, the pair to restore on
cancel.

States and transitions::

    IDLE --preview(s)--> PREVIEWING --preview(s')--> PREVIEWING
    PREVIEWING --confirm()--> IDLE       (keeps the previewed pair)
    PREVIEWING --cancel()---> IDLE       (restores the pair from before)
"""

import logging
import re
from enum import Enum

from .contrast import ZERO_RESULT, get_contrast_ratio
from .models import AdjustMode, ContrastResult, Palette, Suggestion
from .suggestions import generate_suggestions

__all__ = ["SessionState", "EditorSession"]

logger = logging.getLogger(__name__)

# Recalculation only happens for complete "#RRGGBB" input; partial input
# while typing keeps the last result.
_COMPLETE_HEX = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)


class SessionState(Enum):
    IDLE = "idle"
    PREVIEWING = "previewing"


class EditorSession:
    """Current background/text pair and the suggestion panel around it."""

    def __init__(self, bg_color: str = "#FFFFFF", text_color: str = "#64748B") -> None:
        self.bg_color = bg_color
        self.text_color = text_color
        self.result: ContrastResult = ZERO_RESULT
        self.mode: AdjustMode | None = None
        self.suggestions: list[Suggestion] = []
        self._original: tuple[str, str] | None = None
        self._recalculate()

    @property
    def state(self) -> SessionState:
        if self._original is None:
            return SessionState.IDLE
        return SessionState.PREVIEWING

    def _recalculate(self) -> None:
        if _COMPLETE_HEX.fullmatch(self.bg_color) and _COMPLETE_HEX.fullmatch(
            self.text_color
        ):
            self.result = get_contrast_ratio(self.bg_color, self.text_color)

    def _refresh_suggestions(self) -> None:
        if self.mode is None:
            self.suggestions = []
            return
        self.suggestions = generate_suggestions(
            self.mode, self.bg_color, self.text_color
        )
        logger.debug(
            "%d suggestions for mode %s", len(self.suggestions), self.mode.value
        )

    def set_bg(self, color: str) -> None:
        self.bg_color = color
        self._recalculate()
        if self.mode is not None and self.state is SessionState.IDLE:
            self._refresh_suggestions()

    def set_text(self, color: str) -> None:
        self.text_color = color
        self._recalculate()
        if self.mode is not None and self.state is SessionState.IDLE:
            self._refresh_suggestions()

    def swap(self) -> None:
        """Exchange background and text; an open panel is refreshed."""
        self.bg_color, self.text_color = self.text_color, self.bg_color
        self._recalculate()
        if self.mode is not None:
            self._refresh_suggestions()

    def toggle_suggestions(self, mode: AdjustMode) -> None:
        """Open the panel for ``mode``, or close it if it is already open."""
        if self.mode is mode:
            self.mode = None
            self.cancel()
            self.suggestions = []
            return

        if self.state is SessionState.PREVIEWING:
            self.cancel()
        self.mode = mode
        self._refresh_suggestions()

    def preview(self, suggestion: Suggestion) -> None:
        """Apply a suggestion tentatively.

        Only the first preview remembers the pair to restore, so previewing
        several suggestions in a row and cancelling goes back to the start.
        """
        if self._original is None:
            self._original = (self.bg_color, self.text_color)
        self.bg_color = suggestion.bg_color
        self.text_color = suggestion.text_color
        self._recalculate()

    def confirm(self) -> None:
        """Keep the previewed pair and close the panel."""
        self._original = None
        self.mode = None
        self.suggestions = []

    def cancel(self) -> None:
        """Restore the pair from before the first preview, if any."""
        if self._original is None:
            return
        self.bg_color, self.text_color = self._original
        self._original = None
        self._recalculate()

    def close_suggestions(self) -> None:
        self.cancel()
        self.mode = None
        self.suggestions = []

    def load(self, palette: Palette) -> None:
        """Switch to a saved pair, dropping any preview and the open panel."""
        self.bg_color = palette.bg_color
        self.text_color = palette.text_color
        self._recalculate()
        self.mode = None
        self.suggestions = []
        self._original = None
