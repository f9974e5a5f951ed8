"""shakustave CLI entry point."""

import logging
import sys
from pathlib import Path

import click

from shakustave import __version__
from shakustave.render_options import merge_options
from shakustave.score_parser import SUPPORTED_DATA_FORMATS
from shakustave.sheet_renderers import SUPPORTED_OUTPUT_FORMATS
from shakustave.symbols import SYMBOLS, NotationStyle


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="shakustave")
@click.option("--verbose", "-v", is_flag=True, help="Log layout and loading details to stderr.")
def main(verbose: bool) -> None:
    """shakustave: vertical shakuhachi notation renderer."""
    _configure_logging(verbose)


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.argument("source")
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file path. Defaults to the source name with the format's extension.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(SUPPORTED_OUTPUT_FORMATS, case_sensitive=False),
    default="svg",
    show_default=True,
    help="Output document: bare SVG or a self-contained HTML page.",
)
@click.option(
    "--data-format",
    type=click.Choice(SUPPORTED_DATA_FORMATS, case_sensitive=False),
    default=None,
    help="Input format. Guessed from the file extension when omitted.",
)
@click.option("--title", default=None, metavar="TEXT", help="Override the score title.")
@click.option(
    "--notes-per-column",
    type=click.IntRange(min=1),
    default=10,
    show_default=True,
    help="Column capacity.",
)
@click.option(
    "--fit-height",
    is_flag=True,
    help="Break columns by available height instead of --notes-per-column.",
)
@click.option("--width", type=click.FloatRange(min=1), default=None, help="Viewport width in px.")
@click.option("--height", type=click.FloatRange(min=1), default=None, help="Viewport height in px.")
@click.option("--no-octave-marks", is_flag=True, help="Hide kan/daikan register marks.")
@click.option("--debug-labels", is_flag=True, help="Overlay index, romaji, register and bend per note.")
def render(
    source: str,
    output: str | None,
    output_format: str,
    data_format: str | None,
    title: str | None,
    notes_per_column: int,
    fit_height: bool,
    width: float | None,
    height: float | None,
    no_octave_marks: bool,
    debug_labels: bool,
) -> None:
    """
    Render a score as vertical right-to-left columns.

    SOURCE is a path or http(s) URL of a JSON, MusicXML or ABC score.

    \b
    Examples:
      shakustave render honshirabe.json
      shakustave render honshirabe.json --format html -o score.html
      shakustave render tune.musicxml --notes-per-column 12 --debug-labels
      shakustave render https://example.org/score.json --width 900 --height 700
    """
    from shakustave.score_exporter import ScoreExporter

    normalized_format = output_format.lower()
    default_suffix = f".{normalized_format}"
    stem = Path(source.split("?", 1)[0]).stem or "score"
    resolved_output = output if output is not None else str(Path(stem).with_suffix(default_suffix))

    options = merge_options(
        notes_per_column=None if fit_height else notes_per_column,
        width=width,
        height=height,
        show_octave_marks=not no_octave_marks,
        show_debug_labels=debug_labels,
        auto_resize=False,
    )

    click.echo(f"shakustave v{__version__}")
    click.echo(f"  Source : {source}")
    click.echo(f"  Format : {normalized_format}")
    click.echo(f"  Output : {resolved_output}")
    click.echo()

    exporter = ScoreExporter(output_format=normalized_format, options=options, title=title)
    try:
        score_data = exporter.export(source, resolved_output, data_format=data_format)
    except OSError as exc:
        click.echo(f"  ERROR: Could not read or write score: {exc}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"  ERROR: Could not render score: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rendered '{score_data.title}' ({len(score_data.notes)} notes, {score_data.style.value}).")
    click.echo(f"Done!  Open '{resolved_output}' in any browser.")


# ── symbols subcommand ─────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--style",
    type=click.Choice([s.value for s in NotationStyle], case_sensitive=False),
    default=NotationStyle.KINKO.value,
    show_default=True,
    help="Glyph set to display.",
)
def symbols(style: str) -> None:
    """List the fingerings and the glyph each one is drawn with."""
    for symbol in SYMBOLS.values():
        holes = "".join("●" if closed else "○" for closed in symbol.fingering)
        click.echo(f"{symbol.romaji:<4} {symbol.glyph(style):<2} {symbol.pitch:<3} {holes}")
