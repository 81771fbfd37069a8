"""Tests for irocheck.palettes module."""

import json
import logging
from unittest.mock import patch

import pytest

from irocheck.palettes import PaletteStore


class TestPaletteStore:
    """Test the JSON-backed palette store."""

    def test_missing_file_is_empty(self, palette_store):
        assert palette_store.load() == []

    def test_save_and_load(self, palette_store):
        palette = palette_store.save("#ffffff", "1d4ed8")
        assert palette.bg_color == "#FFFFFF"
        assert palette.text_color == "#1D4ED8"
        assert palette_store.load() == [palette]

    def test_newest_first(self, palette_store):
        first = palette_store.save("#FFFFFF", "#000000")
        second = palette_store.save("#000000", "#FFFFFF")
        assert palette_store.load() == [second, first]

    def test_ids_are_creation_milliseconds(self, palette_store):
        with patch("irocheck.palettes.time.time", return_value=1700000000.0):
            first = palette_store.save("#FFFFFF", "#000000")
            second = palette_store.save("#FFFFFF", "#111111")
        assert first.id == "1700000000000"
        assert first.created_at == 1700000000000
        # Same millisecond: the id is bumped to stay unique
        assert second.id == "1700000000001"

    def test_file_format(self, palette_store):
        with patch("irocheck.palettes.time.time", return_value=1700000000.0):
            palette_store.save("#FFFFFF", "#000000")
        data = json.loads(palette_store.path.read_text(encoding="utf-8"))
        assert data == [
            {
                "id": "1700000000000",
                "bgColor": "#FFFFFF",
                "textColor": "#000000",
                "createdAt": 1700000000000,
            }
        ]

    def test_creates_parent_directories(self, tmp_path):
        store = PaletteStore(tmp_path / "nested" / "dir" / "palettes.json")
        store.save("#FFFFFF", "#000000")
        assert store.path.exists()

    def test_invalid_color_raises(self, palette_store):
        with pytest.raises(ValueError, match="Invalid color format"):
            palette_store.save("#FFF", "#000000")
        assert not palette_store.path.exists()

    def test_corrupt_file_reads_as_empty(self, palette_store, caplog):
        palette_store.path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="irocheck.palettes"):
            assert palette_store.load() == []
        assert "Failed to parse saved palettes" in caplog.text

    def test_wrong_shape_reads_as_empty(self, palette_store):
        palette_store.path.write_text(json.dumps([{"id": "1"}]), encoding="utf-8")
        assert palette_store.load() == []

    def test_delete(self, palette_store):
        keep = palette_store.save("#FFFFFF", "#000000")
        with patch("irocheck.palettes.time.time", return_value=1.0):
            drop = palette_store.save("#000000", "#FFFFFF")
        assert palette_store.delete(drop.id) is True
        assert palette_store.load() == [keep]

    def test_delete_unknown(self, palette_store):
        palette_store.save("#FFFFFF", "#000000")
        assert palette_store.delete("nope") is False
        assert len(palette_store.load()) == 1

    def test_get(self, palette_store):
        palette = palette_store.save("#FFFFFF", "#000000")
        assert palette_store.get(palette.id) == palette

    def test_get_unknown_raises(self, palette_store):
        with pytest.raises(KeyError):
            palette_store.get("nope")
