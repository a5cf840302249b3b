"""
Command line interface.

    contrast-color "#ff00ff" navy --palette material --distances
"""

import dataclasses
import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from .errors import ContrastColorError
from .palettes import PALETTES
from .picker import ContrastColorPicker, ContrastConfig, parse_candidates
from .resolver import rgb_to_hex
from .selector import format_color

logger = logging.getLogger(__name__)


def load_cache_file(path):
    """Read a JSON object of query -> answer, or {} when the file is missing."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"{path} is not valid UTF-8 JSON: {exc}") from exc
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise click.ClickException(f"{path} must hold a JSON object of strings")
    return data


def save_cache_file(path, entries):
    path.write_text(json.dumps(entries, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def swatch(hex_code):
    return Text("  ", style=Style(bgcolor=hex_code))


def distance_table(picker, color, ranked):
    table = Table(title=f"CIEDE2000 distance from {color}")
    table.add_column("", width=2)
    table.add_column("candidate")
    table.add_column("hex", style="dim")
    table.add_column("ΔE 2000", justify="right")
    for rank, (identifier, distance) in enumerate(ranked):
        style = "bold" if rank == 0 else ""
        hex_code = rgb_to_hex(picker.resolver(identifier))
        table.add_row(swatch(hex_code), Text(identifier, style=style), hex_code, f"{distance:.2f}")
    return table


def cached_answer_note(picker, answer, ranked):
    """Describe an answer that came from the result cache rather than the table."""
    winner = format_color(ranked[0][0], picker.config.use_hex_output, picker.resolver)
    if answer == winner:
        return f"(cached) {answer}"
    return f"(cached) {answer} differs from the current winner {winner}"


@click.command()
@click.argument("colors", nargs=-1, required=True)
@click.option("--palette", type=click.Choice(sorted(PALETTES)), default=None,
              help="Candidate preset (default: basic, or CONTRAST_COLOR_CANDIDATES).")
@click.option("--candidates", default=None,
              help="Comma-separated candidate colors, overrides --palette.")
@click.option("--names/--hex", "names", default=None,
              help="Print the candidate identifier instead of its hex form.")
@click.option("--distances", is_flag=True, help="Show every candidate's distance.")
@click.option("--preview", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Save a PNG swatch sheet.")
@click.option("--cache-file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="JSON file of cached answers, loaded before and saved after the run.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
def main(colors, palette, candidates, names, distances, preview, cache_file, verbose):
    """Print the most distinguishable candidate color for each COLOR."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    overrides = {}
    if candidates:
        overrides["candidates"] = parse_candidates(candidates)
    elif palette:
        overrides["candidates"] = palette
    if names is not None:
        overrides["use_hex_output"] = not names
    try:
        config = dataclasses.replace(ContrastConfig.from_env(), **overrides)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    seed = load_cache_file(cache_file) if cache_file else None
    picker = ContrastColorPicker(config, seed=seed)
    console = Console()

    try:
        for color in colors:
            cached = color in picker.results
            answer = picker.contrast_color(color)
            click.echo(f"{color} -> {answer}")
            if distances:
                ranked = picker.rank(color)
                console.print(distance_table(picker, color, ranked))
                if cached:
                    click.echo(cached_answer_note(picker, answer, ranked))
        if preview is not None:
            # Imported lazily so plain queries never load matplotlib
            import matplotlib.pyplot as plt
            from .preview import render_preview
            fig = render_preview(picker, colors, path=preview)
            plt.close(fig)
            click.echo(f"Preview saved to: {preview}")
    except ContrastColorError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        if cache_file:
            save_cache_file(cache_file, picker.results.snapshot())
            logger.debug("Saved %d cached results to %s", len(picker.results), cache_file)


if __name__ == "__main__":
    main()
