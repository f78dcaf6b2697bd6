"""sensormaker schema model.

Parses a sensor schema JSON document into immutable pydantic models with
fail-fast accessors for the required properties.

Usage::

    from sensormaker.schema import load_schema

    schema = load_schema("temperature.json")
    print(schema.namespace, schema.name)
    for field in schema.fields:
        print(field.name, field.type)
"""

from sensormaker.schema.loader import load_schema, parse_schema
from sensormaker.schema.models import (
    INTEGER_ARRAY,
    STRING_ARRAY,
    ConfigSpec,
    FieldSpec,
    SensorSchema,
    UnitSpec,
    ValueSpec,
)

__all__ = [
    "load_schema",
    "parse_schema",
    "SensorSchema",
    "FieldSpec",
    "ConfigSpec",
    "UnitSpec",
    "ValueSpec",
    "STRING_ARRAY",
    "INTEGER_ARRAY",
]
