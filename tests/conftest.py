"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from typing import Literal

import pytest
from pydantic import BaseModel

from schemaenv import BooleanAsString, MappingEnvironment
from schemaenv.utils.logging import reset_logging


class AppEnv(BaseModel):
    """Schema with every field required."""

    PORT: str
    HOST: str
    DEBUG: BooleanAsString
    LOG_LEVEL: Literal["debug", "info", "warn", "error"]


class OptionalAppEnv(BaseModel):
    """Schema where every field may be absent."""

    PORT: str | None = None
    HOST: str | None = None
    DEBUG: BooleanAsString = False
    LOG_LEVEL: Literal["debug", "info", "warn", "error"] = "info"


class NullSource:
    """Environment source for hosts without an environment table."""

    def read(self) -> None:
        return None


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo logging configuration done by CLI tests."""
    yield
    reset_logging()


@pytest.fixture
def app_env_vars() -> dict[str, str]:
    """Return a complete raw table for AppEnv."""
    return {
        "PORT": "3000",
        "HOST": "localhost",
        "DEBUG": "false",
        "LOG_LEVEL": "info",
    }


@pytest.fixture
def empty_source() -> MappingEnvironment:
    """Return an ambient source with no variables set."""
    return MappingEnvironment({})


@pytest.fixture
def null_source() -> NullSource:
    """Return an ambient source that has no table at all."""
    return NullSource()
