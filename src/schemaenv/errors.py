"""
Exceptions raised while building a SchemaEnv.

Both construction errors derive from SchemaEnvError and from the matching
builtin, so callers can catch either.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

ROOT_FIELD = "__root__"


class SchemaEnvError(Exception):
    """Base error for schemaenv."""


class SourceUnavailableError(SchemaEnvError, RuntimeError):
    """No key/value table was supplied and no ambient environment is accessible."""

    def __init__(self) -> None:
        super().__init__(
            "no environment source available; caller must supply one explicitly"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), ())


@dataclass(frozen=True)
class FieldIssue:
    """One offending field reported by schema validation."""

    field: str
    reason: str
    input: Any = None

    @classmethod
    def from_error(cls, error: Mapping[str, Any]) -> "FieldIssue":
        """
        Build an issue from a pydantic error dict.

        Args:
            error: One entry of ``ValidationError.errors()``.

        Returns:
            FieldIssue with the location joined by dots.
        """
        loc = error.get("loc") or ()
        field = ".".join(str(part) for part in loc) or ROOT_FIELD
        # pydantic reports the whole parent table as input for missing fields
        value = None if error.get("type") == "missing" else error.get("input")
        return cls(field=field, reason=error.get("msg", ""), input=value)


class EnvValidationError(SchemaEnvError, ValueError):
    """The raw key/value table does not satisfy the schema."""

    def __init__(self, schema_name: str, issues: Iterable[FieldIssue]) -> None:
        self.schema_name = schema_name
        self.issues = tuple(issues)
        lines = [f"{issue.field}: {issue.reason}" for issue in self.issues]
        noun = "error" if len(self.issues) == 1 else "errors"
        header = f"{len(self.issues)} validation {noun} for {schema_name}"
        super().__init__("\n".join([header, *lines]))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.schema_name, self.issues))

    @property
    def fields(self) -> tuple[str, ...]:
        """Offending field names, de-duplicated in report order."""
        return tuple(dict.fromkeys(issue.field for issue in self.issues))
