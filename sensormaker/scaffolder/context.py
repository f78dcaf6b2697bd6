"""Template context shared by every artifact generator.

All identifiers that appear in more than one artifact are derived once, in
:func:`build_context`, through :mod:`.identifiers`.  Generators extend this
base context with their artifact-specific keys but never re-derive a shared
name.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from jinja2 import TemplateError

from ..config import GeneratorConfig
from ..errors import MissingRequiredField, RenderError, SchemaIncomplete
from ..schema.models import ConfigSpec, FieldSpec, SensorSchema
from .identifiers import constant_case, resource_case, title_case
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Lineage(str, Enum):
    """Class lineage of the generated sensor.

    ``CUCKOO`` sensors extend the offloading base class, drop the direct
    registration lifecycle and get an extra poller class.
    """

    STANDARD = "standard"
    CUCKOO = "cuckoo"

    @classmethod
    def for_schema(cls, schema: SensorSchema) -> "Lineage":
        return cls.CUCKOO if schema.cuckoo else cls.STANDARD

    @property
    def base_class(self) -> str:
        if self is Lineage.CUCKOO:
            return "AbstractCuckooSensor"
        return "AbstractVdbSensor"

    @property
    def has_poller(self) -> bool:
        return self is Lineage.CUCKOO


class ArtifactKind(str, Enum):
    """The generated files, in generation order."""

    MANIFEST = "manifest"
    ARRAYS = "arrays"
    PREFERENCES = "preferences"
    SENSOR = "sensor"
    POLLER = "poller"


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def build_context(
    schema: SensorSchema,
    lineage: Lineage,
    config: GeneratorConfig | None = None,
) -> dict[str, Any]:
    """Build the base Jinja2 context for *schema*.

    Raises:
        MissingRequiredField: If ``namespace``, ``name`` or a field name is
            absent.
    """
    config = config or GeneratorConfig()
    namespace = schema.namespace
    name = schema.name
    class_prefix = title_case(name)
    return {
        "package": namespace,
        "sensor_name": name,
        "class_prefix": class_prefix,
        "sensor_class": f"{class_prefix}Sensor",
        "poller_class": f"{class_prefix}Poller",
        "resource_name": resource_case(name),
        "valuepaths_array": f"{name}_valuepaths",
        "authority": schema.authority,
        "doc": schema.doc,
        "author": schema.author,
        "lineage": lineage.value,
        "cuckoo": lineage is Lineage.CUCKOO,
        "base_class": lineage.base_class,
        "fields": [_enrich_field(f, schema) for f in schema.fields],
        "configs": [_enrich_config(c) for c in schema.configs],
        "min_sdk_version": config.min_sdk_version,
        "version_code": config.version_code,
        "version_name": config.version_name,
    }


def field_constant(name: str) -> str:
    """``celsius`` -> ``CELSIUS_FIELD``."""
    return f"{constant_case(name)}_FIELD"


def config_constant(name: str) -> str:
    """``sample_rate`` -> ``SAMPLE_RATE_CONFIG``."""
    return f"{constant_case(name)}_CONFIG"


def _enrich_field(field: FieldSpec, schema: SensorSchema) -> dict[str, Any]:
    name = field.name
    return {
        "name": name,
        "constant": field_constant(name),
        "unit": schema.unit_for(name),
    }


def _enrich_config(config: ConfigSpec) -> dict[str, Any]:
    name = config.name
    return {
        "name": name,
        "constant": config_constant(name),
    }


def literal_text(value: Any) -> str:
    """Render a JSON literal the way it appeared in the document.

    Strings are returned unquoted; ``True`` -> ``true``, ``None`` -> ``null``.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, sort_keys=True)


# ---------------------------------------------------------------------------
# Generator base
# ---------------------------------------------------------------------------


class ArtifactGenerator:
    """Renders one artifact kind from a schema.

    Subclasses set :attr:`kind` and :attr:`template` and extend the base
    context in :meth:`build_context`.  Rendering is pure: the same schema and
    lineage always produce the same text.
    """

    kind: ArtifactKind
    template: str

    def __init__(self, renderer: TemplateRenderer, config: GeneratorConfig | None = None) -> None:
        self.renderer = renderer
        self.config = config or GeneratorConfig()

    def build_context(self, schema: SensorSchema, lineage: Lineage) -> dict[str, Any]:
        return build_context(schema, lineage, self.config)

    def render(self, schema: SensorSchema, lineage: Lineage) -> str:
        """Render the artifact text.

        Raises:
            SchemaIncomplete: If a property this artifact needs is missing.
            UnsupportedValueKind: If a value set has an unknown type.
        """
        try:
            context = self.build_context(schema, lineage)
        except MissingRequiredField as exc:
            raise SchemaIncomplete(self.kind, exc.prop, exc) from exc
        try:
            return self.renderer.render(self.template, context)
        except TemplateError as exc:
            raise RenderError(self.kind, f"{self.template}: {exc}") from exc
