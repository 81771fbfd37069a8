"""Command-line interface for irocheck."""

import json
import logging
import sys
from pathlib import Path

import click

from . import __version__
from .color_utils import parse_color
from .contrast import get_contrast_ratio
from .image_generation import create_preview_png
from .models import AdjustMode, ContrastResult, Suggestion
from .palettes import PaletteStore
from .suggestions import generate_suggestions

logger = logging.getLogger(__name__)

PALETTE_FILE_ENVVAR = "IROCHECK_PALETTE_FILE"


class HexColor(click.ParamType):
    """``#RRGGBB`` or ``RRGGBB``, converted to canonical ``#RRGGBB``."""

    name = "color"

    def convert(self, value, param, ctx):
        try:
            return parse_color(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


HEX_COLOR = HexColor()

OUTPUT_FORMAT = click.option(
    "-F",
    "--output-format",
    type=click.Choice(["grid", "json"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)

MODE_CHOICE = click.Choice([m.value for m in AdjustMode], case_sensitive=False)


def _default_palette_file() -> str:
    return str(Path(click.get_app_dir("irocheck")) / "palettes.json")


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _echo_result(result: ContrastResult) -> None:
    def mark(passed: bool) -> str:
        return "pass" if passed else "fail"

    click.echo(f"Contrast ratio: {result.ratio:.2f}:1 ({result.level})")
    click.echo(f"  AA normal text:  {mark(result.aa_normal)}")
    click.echo(f"  AA large text:   {mark(result.aa_large)}")
    click.echo(f"  AAA normal text: {mark(result.aaa_normal)}")
    click.echo(f"  AAA large text:  {mark(result.aaa_large)}")


def _echo_suggestions(suggestions: list[Suggestion]) -> None:
    if not suggestions:
        click.echo("No suggestions found.")
        return
    for i, suggestion in enumerate(suggestions, start=1):
        click.echo(f"{i}. {suggestion.label}")
        click.echo(
            f"   background {suggestion.bg_color}  text {suggestion.text_color}  "
            f"ratio {suggestion.ratio:.2f}:1"
        )
        click.echo(f"   {suggestion.description}")


@click.group()
@click.version_option(version=__version__, prog_name="irocheck")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug)")
@click.option(
    "--palette-file",
    type=click.Path(dir_okay=False),
    envvar=PALETTE_FILE_ENVVAR,
    default=_default_palette_file,
    show_default="per-user app directory",
    help="JSON file holding saved palettes",
)
@click.pass_context
def main(ctx: click.Context, verbose: int, palette_file: str) -> None:
    """Check WCAG contrast of a background/text pair and suggest fixes.

    Colours are given as #RRGGBB or RRGGBB.

    Examples:

        irocheck check "#FFFFFF" "#777777"

        irocheck suggest "#FFFFFF" "#3B82F6" -m text

        irocheck suggest "#1E293B" "#475569" -m both -F json

        irocheck preview "#FFFFFF" "#3B82F6" -m text -o preview.png

        irocheck save "#FFFFFF" "#1D4ED8"
    """
    _configure_logging(verbose)
    ctx.obj = PaletteStore(palette_file)
    logger.debug("Using palette file %s", palette_file)


@main.command()
@click.argument("background", type=HEX_COLOR)
@click.argument("text", type=HEX_COLOR)
@OUTPUT_FORMAT
def check(background: str, text: str, output_format: str) -> None:
    """Show the contrast ratio and WCAG results for a pair."""
    result = get_contrast_ratio(background, text)
    if output_format == "json":
        click.echo(json.dumps({**result.to_dict(), "level": result.level}, indent=2))
        return
    click.echo(f"Background {background}, text {text}")
    _echo_result(result)


@main.command()
@click.argument("background", type=HEX_COLOR)
@click.argument("text", type=HEX_COLOR)
@click.option(
    "-m",
    "--mode",
    type=MODE_CHOICE,
    default="text",
    help="Which colour to adjust: text, bg or both (default: text)",
)
@OUTPUT_FORMAT
def suggest(background: str, text: str, mode: str, output_format: str) -> None:
    """Suggest nearby colours that reach the WCAG ratios."""
    suggestions = generate_suggestions(AdjustMode.from_name(mode), background, text)
    if output_format == "json":
        click.echo(json.dumps([s.to_dict() for s in suggestions], indent=2))
        return
    _echo_suggestions(suggestions)


@main.command()
@click.argument("background", type=HEX_COLOR)
@click.argument("text", type=HEX_COLOR)
@click.option("-o", "--output", required=True, type=str, help="Output PNG file path")
@click.option(
    "-m",
    "--mode",
    type=MODE_CHOICE,
    default=None,
    help="Also draw the suggestions for this mode",
)
def preview(background: str, text: str, output: str, mode: str | None) -> None:
    """Render the pair (and optionally its suggestions) to a PNG."""
    suggestions: list[Suggestion] = []
    if mode is not None:
        suggestions = generate_suggestions(AdjustMode.from_name(mode), background, text)

    try:
        create_preview_png(background, text, output, suggestions)
    except (OSError, ValueError) as e:
        click.echo(f"Error creating PNG: {e}", err=True)
        sys.exit(1)


@main.command()
@click.argument("background", type=HEX_COLOR)
@click.argument("text", type=HEX_COLOR)
@click.pass_obj
def save(store: PaletteStore, background: str, text: str) -> None:
    """Save a pair to the palette file."""
    try:
        palette = store.save(background, text)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(
        f"Saved palette {palette.id}: "
        f"background {palette.bg_color}, text {palette.text_color}"
    )


@main.command(name="list")
@OUTPUT_FORMAT
@click.pass_obj
def list_palettes(store: PaletteStore, output_format: str) -> None:
    """List saved palettes, newest first."""
    palettes = store.load()
    if output_format == "json":
        click.echo(json.dumps([p.to_dict() for p in palettes], indent=2))
        return

    if not palettes:
        click.echo("No saved palettes.")
        return

    click.echo(f"{len(palettes)} saved palettes:")
    for palette in palettes:
        ratio = get_contrast_ratio(palette.bg_color, palette.text_color).ratio
        click.echo(
            f"  {palette.id:16}  {palette.bg_color}  "
            f"{palette.text_color}  {ratio:5.2f}:1"
        )


@main.command()
@click.argument("palette_id")
@click.pass_obj
def show(store: PaletteStore, palette_id: str) -> None:
    """Show a saved palette with its contrast check."""
    try:
        palette = store.get(palette_id)
    except KeyError as e:
        click.echo(f"Error: {e.args[0]}", err=True)
        sys.exit(1)

    click.echo(
        f"Palette {palette.id}: "
        f"background {palette.bg_color}, text {palette.text_color}"
    )
    _echo_result(get_contrast_ratio(palette.bg_color, palette.text_color))


@main.command()
@click.argument("palette_id")
@click.pass_obj
def delete(store: PaletteStore, palette_id: str) -> None:
    """Delete a saved palette."""
    try:
        removed = store.delete(palette_id)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not removed:
        click.echo(f"Error: No saved palette with id '{palette_id}'", err=True)
        sys.exit(1)
    click.echo(f"Deleted palette {palette_id}")


if __name__ == "__main__":
    main()
