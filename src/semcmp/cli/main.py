"""
semcmp CLI

Command-line interface for semantic sorting and comparison of values.

Usage:
    semcmp sort 1.10.0 1.9.0 1.0.0-rc.1 --kind version
    semcmp sort --kind date --desc < dates.txt
    semcmp max 3 1.5 2
    semcmp compare 2020-03-02 2019-06-06 --kind date
    semcmp kinds
"""

import sys
from typing import Any, NoReturn, Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

import semcmp
from semcmp.cli.values import ValueKind, parse_values, render_value
from semcmp.kernel.errors import CmpError
from semcmp.kernel.logging import LogOperation, configure_from_settings, get_logger
from semcmp.kernel.registry import default_registry
from semcmp.kernel.settings import Settings, configure

logger = get_logger(__name__)

app = typer.Typer(
    name="semcmp",
    help="semcmp - Semantic, type-checked comparison and sorting",
    add_completion=False,
)

KindOption = Annotated[
    ValueKind,
    typer.Option("--kind", "-k", help="How to interpret values"),
]
ValuesArgument = Annotated[
    Optional[list[str]],
    typer.Argument(help="Values (read one per line from stdin when omitted)"),
]


@app.callback()
def main(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
    ] = None,
    json_logs: Annotated[
        Optional[bool],
        typer.Option("--json-logs/--console-logs", help="Log format"),
    ] = None,
) -> None:
    """Configure settings and logging before any command runs"""
    overrides: dict[str, Any] = {}
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if json_logs is not None:
        overrides["json_logs"] = json_logs
    try:
        settings = Settings.from_env()
        if overrides:
            settings = Settings.model_validate(settings.model_dump() | overrides)
    except ValidationError as e:
        typer.echo(f"Error: invalid settings\n{e}", err=True)
        raise typer.Exit(2)
    configure(settings)
    configure_from_settings(settings, stream=sys.stderr)


def _read_values(values: Optional[list[str]], kind: ValueKind) -> list[Any]:
    texts = values if values else [line.strip() for line in sys.stdin if line.strip()]
    try:
        return parse_values(texts, kind)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


def _fail(error: CmpError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command()
def sort(
    values: ValuesArgument = None,
    kind: KindOption = ValueKind.AUTO,
    desc: Annotated[bool, typer.Option("--desc", help="Sort in descending order")] = False,
) -> None:
    """Sort values semantically, one per output line"""
    parsed = _read_values(values, kind)
    order = "desc" if desc else "asc"
    try:
        with LogOperation(logger, "sort", kind=kind.value, count=len(parsed), order=order):
            result = semcmp.sort(parsed, order)
    except CmpError as e:
        _fail(e)

    for value in result:
        typer.echo(render_value(value))


@app.command("max")
def max_command(
    values: ValuesArgument = None,
    kind: KindOption = ValueKind.AUTO,
) -> None:
    """Print the largest value"""
    parsed = _read_values(values, kind)
    try:
        with LogOperation(logger, "max", kind=kind.value, count=len(parsed)):
            result = semcmp.max(parsed)
    except CmpError as e:
        _fail(e)

    typer.echo(render_value(result))


@app.command("min")
def min_command(
    values: ValuesArgument = None,
    kind: KindOption = ValueKind.AUTO,
) -> None:
    """Print the smallest value"""
    parsed = _read_values(values, kind)
    try:
        with LogOperation(logger, "min", kind=kind.value, count=len(parsed)):
            result = semcmp.min(parsed)
    except CmpError as e:
        _fail(e)

    typer.echo(render_value(result))


@app.command()
def compare(
    left: Annotated[str, typer.Argument(help="Left value")],
    right: Annotated[str, typer.Argument(help="Right value")],
    kind: KindOption = ValueKind.AUTO,
) -> None:
    """Print lt, eq or gt"""
    left_value, right_value = _read_values([left, right], kind)
    try:
        result = semcmp.compare(left_value, right_value)
    except CmpError as e:
        _fail(e)

    typer.echo(result.value)


@app.command()
def kinds() -> None:
    """List registered comparable kinds"""
    entries = default_registry.kinds()
    typer.echo(f"Comparable kinds ({len(entries)}):")
    for entry in entries:
        types = ", ".join(cls.__qualname__ for cls in entry.types)
        suffix = " (+ subclasses)" if entry.subclasses else ""
        typer.echo(f"  {entry.name}: {types}{suffix} [{entry.origin}]")


if __name__ == "__main__":
    app()
