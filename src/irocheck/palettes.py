"""Saved colour pairs, persisted as a JSON array (newest first)."""

import json
import logging
import time
from pathlib import Path

from .color_utils import parse_color
from .models import Palette

__all__ = ["PaletteStore"]

logger = logging.getLogger(__name__)


class PaletteStore:
    """JSON file of saved background/text pairs.

    The file is read on every call, so several processes sharing it see each
    other's changes; writes replace the whole file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Palette]:
        """Return the saved palettes; a missing or corrupt file reads as empty."""
        if not self.path.exists():
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return [Palette.from_dict(entry) for entry in data]
        except (ValueError, KeyError, TypeError) as e:
            logger.error("Failed to parse saved palettes in %s: %s", self.path, e)
            return []

    def _write(self, palettes: list[Palette]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps([p.to_dict() for p in palettes], indent=2), encoding="utf-8"
        )

    def save(self, bg_color: str, text_color: str) -> Palette:
        """Store a pair at the front of the list and return it.

        Raises:
            ValueError: If either colour is not a valid hex colour.
        """
        bg = parse_color(bg_color)
        text = parse_color(text_color)
        palettes = self.load()

        now = int(time.time() * 1000)
        taken = {p.id for p in palettes}
        palette_id = now
        # Ids are creation milliseconds; saves within the same millisecond bump it.
        while str(palette_id) in taken:
            palette_id += 1

        palette = Palette(
            id=str(palette_id), bg_color=bg, text_color=text, created_at=now
        )
        self._write([palette, *palettes])
        logger.info(
            "Saved palette %s (%s on %s)",
            palette.id,
            palette.text_color,
            palette.bg_color,
        )
        return palette

    def delete(self, palette_id: str) -> bool:
        """Remove a palette; returns whether one was removed."""
        palettes = self.load()
        remaining = [p for p in palettes if p.id != palette_id]
        if len(remaining) == len(palettes):
            return False
        self._write(remaining)
        logger.info("Deleted palette %s", palette_id)
        return True

    def get(self, palette_id: str) -> Palette:
        for palette in self.load():
            if palette.id == palette_id:
                return palette
        raise KeyError(f"No saved palette with id '{palette_id}'")
