"""
schemaenv: typed, validated access to environment variables.

Validates a flat string table (usually the process environment) against a
pydantic schema once and exposes default-aware accessors for the result.
"""

from importlib.metadata import version

from schemaenv.env import (
    EnvironmentSource,
    MappingEnvironment,
    ProcessEnvironment,
    SchemaEnv,
)
from schemaenv.errors import (
    EnvValidationError,
    FieldIssue,
    SchemaEnvError,
    SourceUnavailableError,
)
from schemaenv.rules import BooleanAsString, parse_boolean_string

__version__ = version("schemaenv")

__all__ = [
    "BooleanAsString",
    "EnvValidationError",
    "EnvironmentSource",
    "FieldIssue",
    "MappingEnvironment",
    "ProcessEnvironment",
    "SchemaEnv",
    "SchemaEnvError",
    "SourceUnavailableError",
    "__version__",
    "parse_boolean_string",
]
