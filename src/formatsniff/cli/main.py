"""Command-line interface for formatsniff."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from formatsniff import __version__
from formatsniff.core.engine import SniffEngine
from formatsniff.core.registry import FormatRegistry
from formatsniff.models.config import SniffConfig
from formatsniff.models.formats import DataFormat
from formatsniff.models.result import SniffResult
from formatsniff.utils.logging import set_log_level

console = Console()

STDIN = "-"


def _parse_formats(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[DataFormat]:
    try:
        return [DataFormat.parse(v) for v in value]
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


def _parse_format(
    ctx: click.Context, param: click.Parameter, value: str
) -> DataFormat:
    return _parse_formats(ctx, param, (value,))[0]


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="formatsniff")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """formatsniff - Detect JSON, YAML, XML, HTML or plain text by content."""
    if verbose:
        set_log_level("DEBUG")
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="detect")
@click.argument(
    "files", nargs=-1, type=click.Path(exists=True, dir_okay=False, allow_dash=True)
)
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--all", "show_all", is_flag=True,
    help="Show every predicate's verdict, not just the winning label",
)
@click.option(
    "--disable", multiple=True, callback=_parse_formats,
    help="Format to leave out of classification (repeatable)",
)
@click.option(
    "--max-size", type=click.FloatRange(min=0, min_open=True), default=10,
    help="Max input size in MB",
)
def detect_cmd(
    files: tuple[str, ...],
    output_format: str,
    show_all: bool,
    disable: list[DataFormat],
    max_size: float,
) -> None:
    """Detect the data format of FILES ('-' reads stdin).

    Examples:

        formatsniff detect config.yaml

        cat payload | formatsniff detect - -f json --all
    """
    if not files:
        console.print("[red]Error: No files specified[/red]")
        sys.exit(1)

    config = SniffConfig(
        disabled_formats=disable,
        max_input_size_mb=max_size,
        include_matches=show_all or output_format == "json",
    )
    all_results = _sniff_files(SniffEngine(config), files)

    if output_format == "json":
        click.echo(json.dumps(
            [{"file": f, "result": r.to_dict()} for f, r in all_results],
            indent=2,
        ))
    else:
        for file_path, result in all_results:
            if not result.success:
                console.print(f"[red]FAIL[/red] {escape(file_path)}: {escape(result.error or '')}")
                continue
            click.echo(f"{file_path}: {result.label}")
            if show_all:
                for name, matched in result.matches.items():
                    click.echo(f"  {name}: {'yes' if matched else 'no'}")

    if any(not r.success for _, r in all_results):
        sys.exit(1)


@cli.command()
@click.argument("expected", callback=_parse_format)
@click.argument(
    "files", nargs=-1, required=True,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--loose", is_flag=True,
    help="Pass when EXPECTED's predicate matches, even if a higher-precedence format wins",
)
@click.option("-q", "--quiet", is_flag=True, help="Only report through the exit code")
def check(
    expected: DataFormat,
    files: tuple[str, ...],
    loose: bool,
    quiet: bool,
) -> None:
    """Check that FILES are in the EXPECTED format.

    Exits 0 when every file matches and 1 otherwise.

    Example:

        formatsniff check yaml deploy/*.yml
    """
    engine = SniffEngine(SniffConfig(include_matches=loose))
    failed = False

    for file_path, result in _sniff_files(engine, files):
        if not result.success:
            failed = True
            if not quiet:
                console.print(f"[red]FAIL[/red] {escape(file_path)}: {escape(result.error or '')}")
            continue

        if loose:
            ok = result.matches.get(expected.value, False)
        else:
            ok = result.format == expected

        if ok:
            if not quiet:
                console.print(f"[green]OK[/green] {escape(file_path)}")
        else:
            failed = True
            if not quiet:
                console.print(
                    f"[red]MISMATCH[/red] {escape(file_path)}: "
                    f"expected {expected.value}, got {result.label}"
                )

    if failed:
        sys.exit(1)


@cli.command()
def formats() -> None:
    """List detectable formats in precedence order."""
    table = Table(title="Supported Formats")
    table.add_column("Rank", style="magenta", justify="right")
    table.add_column("Format", style="cyan")
    table.add_column("Predicate", style="green")

    for entry in FormatRegistry.list_formats():
        table.add_row(str(entry["rank"]), entry["value"], entry["predicate"])

    console.print(table)


def _sniff_files(
    engine: SniffEngine, files: tuple[str, ...]
) -> list[tuple[str, SniffResult]]:
    """Sniff each file in order; '-' is read from stdin."""
    results = []
    for file_path in files:
        if file_path == STDIN:
            stdin = click.get_binary_stream("stdin")
            result = engine.sniff(stdin, filename="<stdin>")
        else:
            result = engine.sniff(Path(file_path))
        results.append((file_path, result))
    return results


if __name__ == "__main__":
    cli()
