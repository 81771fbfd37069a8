"""PNG preview of a colour pair and its suggestions."""

from collections.abc import Sequence

import click
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from .color_utils import parse_color
from .contrast import get_contrast_ratio
from .models import Suggestion

HEADING_TEXT = "Readable headline"
BODY_TEXT = "Body copy set in the chosen colours, as a reader would see it."
LARGE_TEXT = "Large text 18pt"


def create_preview_png(
    bg_color: str,
    text_color: str,
    output_file: str,
    suggestions: Sequence[Suggestion] = (),
    width: int = 480,
    card_height: int = 200,
    swatch_size: int = 64,
    margin: int = 8,
) -> None:
    """Render the pair as a text card, with one swatch per suggestion below it."""
    bg = parse_color(bg_color)
    text = parse_color(text_color)
    result = get_contrast_ratio(bg, text)

    # Swatch row sits under the card
    swatch_row = swatch_size + 2 * margin if suggestions else 0
    h = card_height + swatch_row

    fig, ax = plt.subplots(figsize=(width / 100, h / 100), dpi=100)  # type: ignore[misc]
    fig.patch.set_facecolor("#FFFFFF")
    ax.set_xlim(0, width)
    ax.set_ylim(0, h)
    ax.axis("off")

    card = patches.Rectangle(
        (0, swatch_row), width, card_height, linewidth=0, facecolor=bg
    )
    ax.add_patch(card)

    left = margin * 2
    top = swatch_row + card_height
    ax.text(left, top - 40, HEADING_TEXT, color=text, fontsize=18, fontweight="bold")
    ax.text(left, top - 80, BODY_TEXT, color=text, fontsize=9)
    ax.text(left, top - 120, LARGE_TEXT, color=text, fontsize=18)
    ax.text(
        left,
        top - 170,
        f"{result.ratio:.2f}:1  {result.level}",
        color=text,
        fontsize=11,
        fontweight="bold",
    )

    for i, suggestion in enumerate(suggestions):
        x = margin + i * (swatch_size + margin)
        swatch = patches.Rectangle(
            (x, margin),
            swatch_size,
            swatch_size,
            linewidth=0,
            facecolor=suggestion.bg_color,
        )
        ax.add_patch(swatch)
        ax.text(
            x + swatch_size / 2,
            margin + swatch_size / 2,
            f"{suggestion.ratio:.2f}",
            color=suggestion.text_color,
            fontsize=9,
            ha="center",
            va="center",
        )

    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"Preview PNG saved to: {output_file}")
