"""
Command-line interface for WaveformSegments.
"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.logging import RichHandler
from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text

from waveformsegments.exceptions import WaveformSegmentsError
from waveformsegments.host.event_host import EventHost
from waveformsegments.host.events import SEGMENTS_ADD
from waveformsegments.segments.repository import WaveformSegments

# Set up logging
logger = logging.getLogger(__name__)

console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_descriptors(path: str) -> list:
    """Read segment descriptors from a JSON file.

    The file holds either a list of descriptors or an object with a
    ``segments`` list.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("segments", [])

    if not isinstance(data, list):
        raise click.ClickException(f"Expected a list of segments in {path}")

    return data


def _build_segments(path: str, randomize_color: bool) -> WaveformSegments:
    host = EventHost(randomize_segment_color=randomize_color)
    host.on(SEGMENTS_ADD, lambda added: logger.info(f"Loaded {len(added)} segments from {path}"))

    segments = WaveformSegments(host)
    segments.add(_load_descriptors(path))
    return segments


def _color_cell(color: str) -> Text:
    """Show a color name, drawn in that color when rich understands it."""
    try:
        style = Style.parse(color)
    except StyleSyntaxError:
        style = ""
    return Text(color, style=style)


def _print_segments(segments, title: str) -> None:
    if not segments:
        console.print(f"[yellow]{title}: no segments[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Id", style="cyan")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Label")
    table.add_column("Color")
    table.add_column("Editable", justify="center")

    for segment in segments:
        table.add_row(
            escape(str(segment.id)),
            f"{segment.start_time:.3f}",
            f"{segment.end_time:.3f}",
            escape(str(segment.label_text)),
            _color_cell(str(segment.color)),
            "✓" if segment.editable else "",
        )

    console.print(table)


def _run(path: str, randomize_color: bool, query) -> None:
    try:
        segments = _build_segments(path, randomize_color)
        query(segments)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        console.print(f"[bold red]File error: {escape(str(e))}[/bold red]")
        sys.exit(1)
    except WaveformSegmentsError as e:
        console.print(f"[bold red]Segment error: {escape(str(e))}[/bold red]")
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def main(verbose):
    """WaveformSegments - inspect segment annotations for a waveform timeline."""
    _setup_logging(verbose)


randomize_option = click.option(
    "--randomize-color/--fixed-color",
    default=False,
    help="Give segments without a color one from the palette.",
)


@main.command()
@click.argument("segments_file", type=click.Path(exists=True, dir_okay=False))
@randomize_option
def show(segments_file, randomize_color):
    """List every segment in SEGMENTS_FILE."""
    _run(
        segments_file,
        randomize_color,
        lambda segments: _print_segments(segments.get_segments(), "Segments"),
    )


@main.command()
@click.argument("segments_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("time", type=float)
@randomize_option
def at(segments_file, time, randomize_color):
    """List the segments in SEGMENTS_FILE that contain TIME (seconds)."""
    _run(
        segments_file,
        randomize_color,
        lambda segments: _print_segments(segments.get_segments_at_time(time), f"Segments at {time}s"),
    )


@main.command()
@click.argument("segments_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("start", type=float)
@click.argument("end", type=float)
@randomize_option
def find(segments_file, start, end, randomize_color):
    """List the segments in SEGMENTS_FILE overlapping START to END (seconds)."""
    _run(
        segments_file,
        randomize_color,
        lambda segments: _print_segments(segments.find(start, end), f"Segments in {start}s-{end}s"),
    )


if __name__ == "__main__":
    main()
