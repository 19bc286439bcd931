"""Resolve "module:Attribute" references to schema classes."""

import importlib

from pydantic import BaseModel


def load_schema(reference: str) -> type[BaseModel]:
    """
    Import a schema class from a reference string.

    Args:
        reference: "package.module:ClassName"; the attribute part may be
            dotted to reach nested classes.

    Returns:
        The pydantic model class.

    Raises:
        ValueError: If the reference is malformed.
        ImportError: If the module cannot be imported.
        AttributeError: If the attribute does not exist.
        TypeError: If the target is not a BaseModel subclass.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Schema reference must look like 'module:Class', got: {reference!r}"
        raise ValueError(msg)

    target: object = importlib.import_module(module_name)
    for part in attr_path.split("."):
        target = getattr(target, part)

    if not (isinstance(target, type) and issubclass(target, BaseModel)):
        msg = f"{reference!r} is not a pydantic BaseModel subclass"
        raise TypeError(msg)
    return target
