"""Read a sensor schema file into a :class:`SensorSchema`.

JSON parsing and structural validation are delegated to :mod:`json` and
pydantic; their failures are re-raised as sensormaker schema errors carrying
the collaborator's message.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors import NotARecord, SchemaInvalid, SchemaParseError, SchemaUnreadable
from ..utils import load_json
from .models import SensorSchema


def parse_schema(document: Any) -> SensorSchema:
    """Build a :class:`SensorSchema` from an already-decoded JSON value.

    Raises:
        NotARecord: If *document* is not a JSON object.
        SchemaInvalid: If the object cannot be read as a sensor schema
            (e.g. ``valuePaths`` is not a list).
    """
    if not isinstance(document, dict):
        raise NotARecord(f"Found a JSON {type(document).__name__} at the root")
    try:
        return SensorSchema.model_validate(document)
    except ValidationError as exc:
        raise SchemaInvalid(_first_error(exc)) from exc


def load_schema(path: str | Path) -> SensorSchema:
    """Load and validate the schema file at *path*.

    Raises:
        SchemaUnreadable: If the file does not exist or cannot be read.
        SchemaParseError: If the file is not valid UTF-8 JSON.
        NotARecord: If the root value is not an object.
        SchemaInvalid: If the document structure is wrong.
    """
    schema_path = Path(path)
    if not schema_path.is_file() or not os.access(schema_path, os.R_OK):
        raise SchemaUnreadable(str(schema_path))
    try:
        document = load_json(schema_path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaParseError(str(exc)) from exc
    except OSError as exc:
        raise SchemaUnreadable(f"{schema_path}: {exc}") from exc
    return parse_schema(document)


def _first_error(exc: ValidationError) -> str:
    """Condense a pydantic error into a single ``location: message`` line."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    suffix = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{location}: {message}{suffix}" if location else f"{message}{suffix}"
