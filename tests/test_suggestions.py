"""Tests for irocheck.suggestions and the value types it returns."""

from unittest.mock import patch

import pytest

from irocheck.models import AdjustMode, Palette, Suggestion
from irocheck.pair_adjuster import generate_pair_suggestions
from irocheck.single_adjuster import generate_single_suggestions
from irocheck.suggestions import generate_suggestions


class TestGenerateSuggestions:
    """Test routing by adjust mode."""

    def test_text_mode_adjusts_text(self):
        with patch("irocheck.suggestions.generate_single_suggestions") as mock_single:
            generate_suggestions(AdjustMode.TEXT, "#FFFFFF", "#777777")
        mock_single.assert_called_once_with(AdjustMode.TEXT, "#777777", "#FFFFFF")

    def test_bg_mode_adjusts_background(self):
        with patch("irocheck.suggestions.generate_single_suggestions") as mock_single:
            generate_suggestions(AdjustMode.BG, "#FFFFFF", "#777777")
        mock_single.assert_called_once_with(AdjustMode.BG, "#FFFFFF", "#777777")

    def test_both_mode_adjusts_pair(self):
        with patch("irocheck.suggestions.generate_pair_suggestions") as mock_pair:
            generate_suggestions(AdjustMode.BOTH, "#FFFFFF", "#777777")
        mock_pair.assert_called_once_with("#FFFFFF", "#777777")

    def test_results_match_adjusters(self):
        assert generate_suggestions(AdjustMode.TEXT, "#FFFFFF", "#777777") == (
            generate_single_suggestions(AdjustMode.TEXT, "#777777", "#FFFFFF")
        )
        assert generate_suggestions(AdjustMode.BOTH, "#FFFFFF", "#777777") == (
            generate_pair_suggestions("#FFFFFF", "#777777")
        )

    def test_malformed_input_for_every_mode(self):
        for mode in AdjustMode:
            assert generate_suggestions(mode, "#FFFFFF", "oops") == []

    def test_caps(self):
        assert len(generate_suggestions(AdjustMode.TEXT, "#FFFFFF", "#777777")) <= 3
        assert len(generate_suggestions(AdjustMode.BG, "#FFFFFF", "#777777")) <= 3
        assert len(generate_suggestions(AdjustMode.BOTH, "#FFFFFF", "#777777")) <= 2


class TestAdjustMode:
    """Test AdjustMode parsing."""

    @pytest.mark.parametrize(
        "name,mode",
        [("text", AdjustMode.TEXT), ("BG", AdjustMode.BG), (" both ", AdjustMode.BOTH)],
    )
    def test_from_name(self, name, mode):
        assert AdjustMode.from_name(name) is mode

    def test_from_name_invalid(self):
        with pytest.raises(ValueError, match="Invalid adjust mode"):
            AdjustMode.from_name("foreground")


class TestValueTypes:
    """Test Suggestion and Palette serialisation."""

    def test_suggestion_to_dict(self):
        suggestion = Suggestion("Label", "Desc", "#FFFFFF", "#000000", 21.0)
        assert suggestion.to_dict() == {
            "label": "Label",
            "description": "Desc",
            "bgColor": "#FFFFFF",
            "textColor": "#000000",
            "ratio": 21.0,
        }

    def test_suggestion_is_immutable(self):
        suggestion = Suggestion("Label", "Desc", "#FFFFFF", "#000000", 21.0)
        with pytest.raises(AttributeError):
            suggestion.ratio = 1.0  # type: ignore[misc]

    def test_palette_round_trip(self):
        palette = Palette("1700000000000", "#FFFFFF", "#1D4ED8", 1700000000000)
        assert Palette.from_dict(palette.to_dict()) == palette

    def test_palette_from_host_json(self):
        data = {
            "id": 1700000000000,
            "bgColor": "#FFFFFF",
            "textColor": "#64748B",
            "createdAt": 1700000000000,
        }
        palette = Palette.from_dict(data)
        assert palette.id == "1700000000000"
        assert palette.text_color == "#64748B"
