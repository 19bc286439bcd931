"""
Console reporter for environment checks.

Formats validated values, schema fields and validation errors using Rich.
"""

from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from schemaenv.env import SchemaEnv
from schemaenv.errors import EnvValidationError

MASK = "***"


def _type_name(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


class ConsoleReporter:
    """Formats and displays environment check results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_values(self, env: SchemaEnv[Any], reveal: bool = False) -> None:
        """
        Print validated values as a table.

        Args:
            env: Validated environment.
            reveal: Show values in clear text instead of masking them.
        """
        schema = env.get_schema()
        table = Table(title=f"{schema.__name__} Values", show_header=True)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Type", style="blue")
        table.add_column("Value")

        for name, value in env.get_all().items():
            annotation = schema.model_fields[name].annotation
            table.add_row(
                name,
                escape(_type_name(annotation)),
                self._format_value(value, reveal),
            )

        self.console.print(table)
        self.console.print(f"[green]OK: {len(env.fields)} fields validated[/green]")

    def print_fields(self, schema: type[BaseModel]) -> None:
        """
        Print the declared fields of a schema.

        Args:
            schema: Pydantic model class.
        """
        table = Table(title=f"{schema.__name__} Fields", show_header=True)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Type", style="blue")
        table.add_column("Required", justify="center")
        table.add_column("Default", style="dim")

        for name, info in schema.model_fields.items():
            required = info.is_required()
            default = (
                "-" if required else repr(info.get_default(call_default_factory=True))
            )
            table.add_row(
                name,
                escape(_type_name(info.annotation)),
                "[yellow]yes[/yellow]" if required else "no",
                escape(default),
            )

        self.console.print(table)

    def print_errors(self, error: EnvValidationError, reveal: bool = False) -> None:
        """
        Print validation errors as a table followed by a summary.

        Args:
            error: Validation failure raised by SchemaEnv.
            reveal: Show offending inputs in clear text.
        """
        table = Table(title=f"{error.schema_name} Validation Errors", show_header=True)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Reason", style="red")
        table.add_column("Input", style="dim")

        for issue in error.issues:
            table.add_row(
                issue.field,
                escape(issue.reason),
                self._format_value(issue.input, reveal),
            )

        self.console.print(table)
        self.console.print(
            f"[bold red]Failed: {len(error.issues)} issue(s) "
            f"in {len(error.fields)} field(s)[/bold red]"
        )

    def _format_value(self, value: Any, reveal: bool) -> str:
        if value is None:
            return "[dim]-[/dim]"
        if not reveal:
            return MASK
        return escape(repr(value))
