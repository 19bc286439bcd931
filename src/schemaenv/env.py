"""
Schema-validated environment container.

A SchemaEnv validates a flat string table against a pydantic model once,
keeps only the validated record, and serves typed reads from it.
"""

import copy
import os
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from schemaenv.errors import EnvValidationError, FieldIssue, SourceUnavailableError
from schemaenv.utils.logging import get_logger

log = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

EnvVariables = Mapping[str, str | None]


class EnvironmentSource(Protocol):
    """Supplies the ambient key/value table when none is passed explicitly."""

    def read(self) -> EnvVariables | None:
        """Return the table, or None if no table is accessible."""
        ...


class ProcessEnvironment:
    """Reads a snapshot of the process environment."""

    def read(self) -> EnvVariables | None:
        environ = getattr(os, "environ", None)
        if environ is None:
            return None
        return dict(environ)


class MappingEnvironment:
    """Serves a fixed mapping, e.g. for tests or embedded hosts."""

    def __init__(self, mapping: EnvVariables) -> None:
        self._mapping = dict(mapping)

    def read(self) -> EnvVariables | None:
        return dict(self._mapping)


class SchemaEnv(Generic[SchemaT]):
    """
    Validated view over environment variables.

    The raw table is validated exactly once, at construction. The instance
    never re-validates and never changes afterwards.

    Example:
        class AppEnv(BaseModel):
            PORT: str
            HOST: str | None = None
            DEBUG: BooleanAsString
            LOG_LEVEL: Literal["debug", "info", "warn", "error"] = "info"

        env = SchemaEnv(AppEnv, {"PORT": "3000"})
        env.get("PORT")  # "3000"
        env.get("HOST", "localhost")  # "localhost"
        env.get("DEBUG", True)  # False, stored values win over defaults
    """

    def __init__(
        self,
        schema: type[SchemaT],
        envs: EnvVariables | None = None,
        *,
        source: EnvironmentSource | None = None,
    ) -> None:
        """
        Validate envs (or the ambient environment) against schema.

        Args:
            schema: Pydantic model class describing the expected variables.
            envs: Explicit key/value table. None values count as absent.
                When omitted, the table is read from source.
            source: Ambient table provider, defaults to ProcessEnvironment.

        Raises:
            TypeError: If schema is not a pydantic model class.
            SourceUnavailableError: If envs is omitted and source has no table.
            EnvValidationError: If the table does not satisfy the schema.
        """
        if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
            msg = f"schema must be a pydantic BaseModel subclass, got {schema!r}"
            raise TypeError(msg)

        self._schema = schema

        if envs is not None:
            origin = "explicit"
            raw = envs
        else:
            origin = "ambient"
            reader = source if source is not None else ProcessEnvironment()
            log.debug("reading ambient environment", schema=schema.__name__)
            ambient = reader.read()
            if ambient is None:
                raise SourceUnavailableError()
            raw = ambient

        self._record = MappingProxyType(self._parse(raw))
        log.debug(
            "environment validated",
            schema=schema.__name__,
            source=origin,
            field_count=len(self._record),
        )

    def _parse(self, envs: EnvVariables) -> dict[str, Any]:
        """Validate a copy of envs and return the record keyed by field name."""
        present = {key: value for key, value in envs.items() if value is not None}
        try:
            model = self._schema.model_validate(present)
        except ValidationError as exc:
            issues = [FieldIssue.from_error(error) for error in exc.errors()]
            raise EnvValidationError(self._schema.__name__, issues) from exc
        return model.model_dump()

    @property
    def fields(self) -> tuple[str, ...]:
        """Declared field names, in declaration order."""
        return tuple(self._schema.model_fields)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get one validated value.

        The stored value wins whenever it is not None, even if it is falsy
        (False, 0, ""). Otherwise default is returned, then None. Container
        values are copied, so callers never share state with the record.

        Args:
            key: Declared field name.
            default: Fallback when the stored value is None.

        Returns:
            The stored value, the default, or None.

        Raises:
            KeyError: If key is not a declared field.
        """
        if key not in self._schema.model_fields:
            available = ", ".join(self.fields)
            msg = f"Unknown field '{key}'. Available: {available}"
            raise KeyError(msg)

        value = self._record.get(key)
        if value is not None:
            return copy.deepcopy(value)
        if default is not None:
            return default
        return None

    def get_all(self) -> dict[str, Any]:
        """Return a deep copy of the whole validated record."""
        return copy.deepcopy(dict(self._record))

    def get_schema(self) -> type[SchemaT]:
        """Return the schema class this instance was built with."""
        return self._schema

    def __contains__(self, key: object) -> bool:
        return key in self._schema.model_fields

    def __repr__(self) -> str:
        return f"SchemaEnv({self._schema.__name__}, fields={list(self.fields)})"
