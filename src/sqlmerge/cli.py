"""
Click-based CLI for sqlmerge.
"""

import json
import logging
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax

from . import __version__
from .application import Services
from .domain.envelopes import EnvelopeMeta, build_result_envelope
from .domain.results import CommandResult
from .payloads import EXAMPLE_PARAMS, EXAMPLE_SQL

console = Console()
err_console = Console(stderr=True)
services = Services()


def _configure_logging(verbose: bool) -> None:
    """Route ``sqlmerge.*`` loggers through rich on stderr."""
    logger = logging.getLogger("sqlmerge")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def _sql_input(func: Callable[..., Any]) -> Callable[..., Any]:
    """Shared SQL source argument and ``--sql`` override."""
    func = click.option(
        "--sql",
        "sql_text",
        help="SQL text (overrides SOURCE)",
    )(func)
    func = click.argument(
        "source",
        type=click.File("r", encoding="utf-8"),
        default="-",
        required=False,
    )(func)
    return func


def _json_flag(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--json",
        "json_output",
        is_flag=True,
        help="Emit a machine-readable JSON envelope",
    )(func)


def _output_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--output",
        "-o",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Output file path (default: stdout)",
    )(func)


def _read_sql(source: IO[str], sql_text: Optional[str]) -> str:
    if sql_text is not None:
        return sql_text
    return source.read()


def _terminal_renderer(sql: str) -> Callable[[str], None]:
    """Render the original SQL with rich instead of printing HTML markup."""

    def render(_markup: str) -> None:
        console.print(Syntax(sql, "sql", theme="monokai", line_numbers=False))

    return render


def _finish(
    command: str,
    result: CommandResult,
    *,
    started: float,
    json_output: bool,
    output: Optional[Path] = None,
    text: Optional[str] = None,
    render: Optional[Callable[[str], None]] = None,
) -> None:
    """Print a service result (plain or JSON envelope) and set the exit code."""
    exit_code = 0 if result.success else 1
    text = result.output if text is None else text

    if json_output:
        meta = EnvelopeMeta.since(started, command=command, exit_code=exit_code)
        envelope = build_result_envelope(command=command, result=result, meta=meta)
        click.echo(json.dumps(envelope, indent=2))
    else:
        if text is not None:
            if output:
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_text(text + "\n", encoding="utf-8")
                err_console.print(f"[green]✓[/green] SQL written to {escape(str(output))}")
            elif render is not None:
                render(text)
            else:
                click.echo(text)
        for warning in result.warnings:
            err_console.print(f"[yellow]⚠[/yellow] {escape(warning)}")
        if not result.success:
            err_console.print(f"[red]✗ Error:[/red] {escape(result.message)}")

    if exit_code:
        sys.exit(exit_code)


@click.group()
@click.version_option(version=__version__, prog_name="sqlmerge")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """sqlmerge: merge ? placeholders with parameter values, format and highlight SQL"""
    _configure_logging(verbose)


@cli.command()
@_sql_input
@_json_flag
def count(source: IO[str], sql_text: Optional[str], json_output: bool) -> None:
    """Count unquoted ? placeholders"""
    started = time.perf_counter()
    result = services.count.run(sql=_read_sql(source, sql_text))
    _finish(
        "count",
        result,
        started=started,
        json_output=json_output,
        text=str(result.data["placeholderCount"]),
    )


@cli.command()
@_sql_input
@click.option("--params", "params_text", help='Parameters as a JSON array, e.g. \'["784", 123]\'')
@click.option(
    "--params-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File containing the JSON parameter array",
)
@click.option(
    "--payload",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='JSON file with "sql" and "values" fields (replaces SOURCE and --params)',
)
@click.option("--example", is_flag=True, help="Merge the built-in example query")
@_output_option
@_json_flag
def merge(
    source: IO[str],
    sql_text: Optional[str],
    params_text: Optional[str],
    params_file: Optional[Path],
    payload: Optional[Path],
    example: bool,
    output: Optional[Path],
    json_output: bool,
) -> None:
    """Substitute ? placeholders with escaped parameter values"""
    started = time.perf_counter()

    if payload is not None:
        result = services.merge.run_with_payload(
            payload_text=payload.read_text(encoding="utf-8")
        )
    else:
        if example:
            sql, params_text = EXAMPLE_SQL, EXAMPLE_PARAMS
        else:
            sql = _read_sql(source, sql_text)
            if params_text is None:
                params_text = (
                    params_file.read_text(encoding="utf-8") if params_file is not None else "[]"
                )
        result = services.merge.run_with_params_text(sql=sql, params_text=params_text)

    _finish("merge", result, started=started, json_output=json_output, output=output)


@cli.command("format")
@_sql_input
@click.option("--local", is_flag=True, help="Skip the external formatter (SQLGlot)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with formatter options",
)
@click.option("--indent", type=int, help="Indentation width")
@click.option("--width", type=int, help="Maximum line width")
@click.option("--dialect", help="SQLGlot dialect, e.g. postgres, mysql")
@click.option("--timeout", type=float, help="External formatter timeout in seconds")
@_output_option
@_json_flag
def format_command(
    source: IO[str],
    sql_text: Optional[str],
    local: bool,
    config_path: Optional[Path],
    indent: Optional[int],
    width: Optional[int],
    dialect: Optional[str],
    timeout: Optional[float],
    output: Optional[Path],
    json_output: bool,
) -> None:
    """Beautify SQL (keyword casing and clause line breaks)"""
    started = time.perf_counter()
    overrides = {
        "engine": "local" if local else None,
        "indent_width": indent,
        "max_line_width": width,
        "dialect": dialect,
        "timeout_seconds": timeout,
    }
    result = services.format.run(
        sql=_read_sql(source, sql_text), config_path=config_path, overrides=overrides
    )
    _finish("format", result, started=started, json_output=json_output, output=output)


@cli.command()
@_sql_input
@_output_option
@_json_flag
def minify(
    source: IO[str], sql_text: Optional[str], output: Optional[Path], json_output: bool
) -> None:
    """Collapse whitespace outside quoted regions"""
    started = time.perf_counter()
    result = services.minify.run(sql=_read_sql(source, sql_text))
    _finish("minify", result, started=started, json_output=json_output, output=output)


@cli.command()
@_sql_input
@click.option(
    "--terminal",
    is_flag=True,
    help="Render with terminal colours instead of HTML markup",
)
@_output_option
@_json_flag
def highlight(
    source: IO[str],
    sql_text: Optional[str],
    terminal: bool,
    output: Optional[Path],
    json_output: bool,
) -> None:
    """Render SQL as syntax-highlighted HTML markup"""
    started = time.perf_counter()
    sql = _read_sql(source, sql_text)
    result = services.highlight.run(sql=sql)
    _finish(
        "highlight",
        result,
        started=started,
        json_output=json_output,
        output=output,
        render=_terminal_renderer(sql) if terminal else None,
    )


if __name__ == "__main__":
    cli()
