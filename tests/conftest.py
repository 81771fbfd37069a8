"""Test configuration and fixtures for irocheck tests."""

import pytest

from irocheck.palettes import PaletteStore


@pytest.fixture
def invalid_hex_colors() -> list[str]:
    """Strings that are not 6-digit hex colours."""
    return [
        "not-a-color",
        "bad",
        "",
        "#FFF",         # shorthand is not expanded
        "FFF",
        "#GG0000",      # invalid hex characters
        "#FF00",        # too short
        "#FF000000",    # too long
        "##FF0000",
        " #FFFFFF",     # surrounding whitespace
        "#FFFFFF\n",
        "rgb(255, 0, 0)",
    ]


@pytest.fixture
def known_pairs() -> list[tuple[str, str, float]]:
    """Background, text and truncated ratio."""
    return [
        ("#FFFFFF", "#000000", 21.0),
        ("#000000", "#FFFFFF", 21.0),
        ("#FFFFFF", "#777777", 4.47),
        ("#FFFFFF", "#FFFFFF", 1.0),
    ]


@pytest.fixture
def palette_store(tmp_path) -> PaletteStore:
    """A palette store backed by a file in a temporary directory."""
    return PaletteStore(tmp_path / "palettes.json")
