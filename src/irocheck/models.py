"""Immutable value types shared by the irocheck modules."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

__all__ = [
    "RGB",
    "HSL",
    "ContrastResult",
    "Suggestion",
    "AdjustMode",
    "Palette",
]


class RGB(NamedTuple):
    """8-bit sRGB channels, each in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class ContrastResult:
    """WCAG classification of a colour pair.

    ``ratio`` is truncated to two decimals; the four flags are derived from
    that truncated value so a ratio reported as 4.50 always passes AA.
    """

    ratio: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool

    @property
    def level(self) -> str:
        """Highest level reached for normal text, or ``"Fail"``."""
        if self.ratio >= 7.0:
            return "AAA"
        if self.ratio >= 4.5:
            return "AA"
        if self.ratio >= 3.0:
            return "AA Large"
        return "Fail"

    def to_dict(self) -> dict[str, Any]:
        return {
            "ratio": self.ratio,
            "aaNormal": self.aa_normal,
            "aaLarge": self.aa_large,
            "aaaNormal": self.aaa_normal,
            "aaaLarge": self.aaa_large,
        }


@dataclass(frozen=True)
class Suggestion:
    """A candidate colour pair proposed by one of the adjusters."""

    label: str
    description: str
    bg_color: str
    text_color: str
    ratio: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "description": self.description,
            "bgColor": self.bg_color,
            "textColor": self.text_color,
            "ratio": self.ratio,
        }


class AdjustMode(Enum):
    """Which colour(s) of the pair a suggestion request may change."""

    TEXT = "text"
    BG = "bg"
    BOTH = "both"

    @classmethod
    def from_name(cls, name: str) -> "AdjustMode":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Invalid adjust mode: '{name}'. Supported modes: {choices}"
            ) from None


@dataclass(frozen=True)
class Palette:
    """A saved background/text pair."""

    id: str
    bg_color: str
    text_color: str
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "bgColor": self.bg_color,
            "textColor": self.text_color,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Palette":
        return cls(
            id=str(data["id"]),
            bg_color=str(data["bgColor"]),
            text_color=str(data["textColor"]),
            created_at=int(data["createdAt"]),
        )
