"""Loads schemas and documents for the command line.

A schema reference has the form `module:attribute` or `path/to/file.py:attribute`.
The attribute may hold any schema description; it is compiled on load.
Documents are JSON or TOML files, chosen by extension, or JSON on stdin
when the path is `-`.
"""
import importlib
import importlib.util
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

from ..core.base_validator import Validator
from ..core.config import tomllib
from ..core.errors import PyshapeError
from ..core.schema import compile_schema

logger = logging.getLogger(__name__)


class LoadError(PyshapeError):
    """Raised when a schema or a document cannot be loaded."""


def _import_module(module_ref: str) -> Any:
    if module_ref.endswith(".py"):
        path = Path(module_ref)
        if not path.is_file():
            raise LoadError(f"Schema file not found: {module_ref}")
        spec = importlib.util.spec_from_file_location(path.stem, path)
        if spec is None or spec.loader is None:
            raise LoadError(f"Cannot import schema file: {module_ref}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return importlib.import_module(module_ref)


def load_schema(reference: str) -> Validator:
    """Imports and compiles the schema description named by `reference`.

    Args:
        reference (str): `module:attribute` or `file.py:attribute`.

    Returns:
        Validator: The compiled schema.

    Raises:
        LoadError: If the reference is malformed or cannot be imported.
        SchemaError: If the attribute is not a valid description.
    """
    module_ref, sep, attribute = reference.rpartition(":")
    if not sep or not module_ref or not attribute:
        raise LoadError(f"Invalid schema reference {reference!r}, expected 'module:attribute'")

    try:
        module = _import_module(module_ref)
    except LoadError:
        raise
    except Exception as e:
        raise LoadError(f"Could not import {module_ref}: {e!r}") from e

    target: Any = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise LoadError(f"{module_ref} has no attribute {attribute!r}") from e

    logger.info(f"Loaded schema {reference}")
    return compile_schema(target)


def load_document(path: str, stdin: Optional[TextIO] = None) -> Any:
    """Reads one document to validate.

    Args:
        path (str): A `.json` or `.toml` file, or `-` for JSON on stdin.
        stdin (Optional[TextIO]): Stream used for `-`. Defaults to `sys.stdin`.

    Raises:
        LoadError: If the file cannot be read or parsed.
    """
    if path == "-":
        stream = stdin or sys.stdin
        try:
            return json.load(stream)
        except OSError as e:
            raise LoadError(f"Could not read stdin: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LoadError(f"Invalid JSON on stdin: {e}") from e

    file_path = Path(path)
    try:
        if file_path.suffix.lower() == ".toml":
            with open(file_path, "rb") as f:
                return tomllib.load(f)
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise LoadError(f"Could not read {path}: {e}") from e
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not parse {path}: {e}") from e
