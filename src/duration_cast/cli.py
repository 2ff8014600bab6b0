from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from duration_cast.config import resolve_logging, resolve_output
from duration_cast.durations import Duration, decode, to_duration
from duration_cast.errors import DurationError
from duration_cast.formatter import encode
from duration_cast.scanner import scan
from duration_cast.units import NOMINAL_NANOS, Unit


app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def format_in_unit(nanos: int, nanos_per_unit: int) -> str:
    """
    Exact decimal rendering of `nanos` in a coarser unit (no float rounding).
    """
    if nanos_per_unit == 1:
        return str(nanos)
    sign = "-" if nanos < 0 else ""
    whole, frac = divmod(abs(nanos), nanos_per_unit)
    if not frac:
        return f"{sign}{whole}"
    width = len(str(nanos_per_unit)) - 1
    return f"{sign}{whole}." + f"{frac:0{width}d}".rstrip("0")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR). If omitted, uses $DURATION_CAST_LOG_LEVEL or WARNING.",
    ),
) -> None:
    """
    Convert between ISO-8601 durations and nanoseconds.
    """
    try:
        resolved = resolve_logging(cli_level=log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    setup_logging(resolved.level_number)


@app.command("decode")
def decode_cmd(
    texts: List[str] = typer.Argument(..., help="ISO-8601 durations, e.g. P3Y6M4DT12H30M5S."),
    unit: Optional[str] = typer.Option(
        None,
        "--unit",
        "-u",
        help="Output unit: ns|us|ms|s. If omitted, uses $DURATION_CAST_UNIT or ns.",
    ),
    plain: bool = typer.Option(False, "--plain", help="Print one value per line instead of a table."),
) -> None:
    """
    Decode durations into nanoseconds (or the unit given by --unit).

    Exits with code 1 if any input could not be decoded.
    """
    try:
        resolved = resolve_output(cli_unit=unit)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    table = Table(title="duration-cast decode")
    table.add_column("input")
    table.add_column(resolved.unit, justify="right")
    failures = 0
    for text in texts:
        try:
            value = format_in_unit(decode(text), resolved.nanos_per_unit)
        except DurationError as e:
            failures += 1
            logger.info("decode failed for %r", text)
            if plain:
                err_console.print(f"[red]error[/red] {escape(text)}: {escape(str(e))}")
            else:
                table.add_row(escape(text), f"[red]{escape(str(e))}[/red]")
            continue
        if plain:
            console.print(value, markup=False)
        else:
            table.add_row(escape(text), value)

    if not plain:
        console.print(table)
    if failures:
        raise typer.Exit(code=1)


@app.command("encode")
def encode_cmd(
    nanos: List[int] = typer.Argument(..., help="Nanosecond counts (use -- before negative values)."),
    plain: bool = typer.Option(False, "--plain", help="Print one value per line instead of a table."),
) -> None:
    """
    Encode nanosecond counts as ISO-8601 durations (365-day years, 30-day months).
    """
    table = Table(title="duration-cast encode")
    table.add_column("nanoseconds", justify="right")
    table.add_column("iso8601")
    for n in nanos:
        text = encode(Duration(n))
        if plain:
            console.print(text, markup=False)
        else:
            table.add_row(str(n), text)
    if not plain:
        console.print(table)


@app.command()
def explain(
    text: str = typer.Argument(..., help="ISO-8601 duration to break down."),
) -> None:
    """
    Show what each unit of a duration contributes, using nominal unit lengths.
    """
    try:
        magnitudes = scan(text)
    except DurationError as e:
        console.print(f"[red]Invalid duration[/red] {escape(text)}: {escape(str(e))}")
        raise typer.Exit(code=1)

    table = Table(title=f"duration-cast explain {escape(text)}")
    table.add_column("unit")
    table.add_column("magnitude", justify="right")
    table.add_column("ns per unit", justify="right")
    table.add_column("ns", justify="right")
    for u in Unit:
        magnitude = magnitudes[u]
        if not magnitude:
            continue
        per_unit = NOMINAL_NANOS[u]
        table.add_row(u.name.lower(), repr(magnitude), str(int(per_unit)), str(int(magnitude * per_unit)))

    total = to_duration(magnitudes)
    table.add_row("[bold]total[/bold]", "", "", f"[bold]{int(total)}[/bold]")
    console.print(table)
    console.print(f"Re-encoded: [bold]{encode(total)}[/bold] [dim](calendar lengths)[/dim]")


if __name__ == "__main__":
    app()
