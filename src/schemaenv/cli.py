"""Command-line interface for checking environments against schemas."""

from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from pydantic import BaseModel

app = typer.Typer(
    name="schemaenv",
    help="Validate environment variables against pydantic schemas.",
    no_args_is_help=True,
)

console = Console()

SchemaRef = Annotated[
    str,
    typer.Argument(help="Schema reference, e.g. 'myapp.settings:AppEnv'."),
]


def _resolve(reference: str) -> "type[BaseModel]":
    """
    Load a schema or exit with code 2.

    Errors raised by the schema module at import time exit the same way.
    """
    from schemaenv.loader import load_schema

    try:
        return load_schema(reference)
    except Exception as exc:
        console.print(f"[red]Error: cannot load schema: {escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


@app.command()
def check(
    schema: SchemaRef,
    reveal: Annotated[
        bool,
        typer.Option("--reveal", help="Print values in clear text, unmasked."),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", help="Log level for diagnostic output."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Render diagnostic logs as JSON."),
    ] = False,
) -> None:
    """Validate the current process environment against a schema."""
    from schemaenv.env import SchemaEnv
    from schemaenv.errors import EnvValidationError, SourceUnavailableError
    from schemaenv.reporter import ConsoleReporter
    from schemaenv.utils.logging import configure_logging

    configure_logging(level=log_level, json_output=json_logs)
    model = _resolve(schema)
    reporter = ConsoleReporter(console)

    console.print(f"[blue]Checking environment against {model.__name__}[/blue]")

    try:
        env = SchemaEnv(model)
    except SourceUnavailableError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=2) from exc
    except EnvValidationError as exc:
        reporter.print_errors(exc, reveal=reveal)
        raise typer.Exit(code=1) from exc

    reporter.print_values(env, reveal=reveal)


@app.command()
def fields(schema: SchemaRef) -> None:
    """List the fields a schema declares."""
    from schemaenv.reporter import ConsoleReporter

    ConsoleReporter(console).print_fields(_resolve(schema))


@app.command()
def version() -> None:
    """Show version information."""
    from schemaenv import __version__

    console.print(f"schemaenv version {__version__}")


if __name__ == "__main__":
    app()
