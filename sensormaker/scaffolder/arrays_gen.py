"""Array resource generation.

Renders ``res/values/<name>_values.xml``: the ``<name>_valuepaths`` string
array listing every field, followed by each enumerated value set as a
``string-array`` or ``integer-array``.

Value sets are fully validated before any text is produced, so an
unsupported kind never yields a partial file.
"""

from __future__ import annotations

from typing import Any

from ..errors import InvalidValueItem, UnsupportedValueKind
from ..schema.models import STRING_ARRAY, VALUE_KINDS, SensorSchema, ValueSpec
from .context import ArtifactGenerator, ArtifactKind, Lineage, literal_text


class ArraysGenerator(ArtifactGenerator):
    """Generates the array resource descriptor."""

    kind = ArtifactKind.ARRAYS
    template = "arrays.xml.j2"

    def build_context(self, schema: SensorSchema, lineage: Lineage) -> dict[str, Any]:
        context = super().build_context(schema, lineage)
        context["value_sets"] = [_enrich_value(value) for value in schema.values]
        return context


def _enrich_value(value: ValueSpec) -> dict[str, Any]:
    name = value.name
    kind = value.kind
    if kind not in VALUE_KINDS:
        raise UnsupportedValueKind(name, kind)
    if kind == STRING_ARRAY:
        entries = [literal_text(item) for item in value.items]
    else:
        entries = [str(_as_integer(name, item)) for item in value.items]
    return {"name": name, "kind": kind, "entries": entries}


def _as_integer(value_name: str, item: Any) -> int:
    # bool is an int subclass but not an integer literal in the document.
    if isinstance(item, bool):
        raise InvalidValueItem(value_name, item)
    if isinstance(item, int):
        return item
    if isinstance(item, float) and item.is_integer():
        return int(item)
    if isinstance(item, str):
        try:
            return int(item.strip())
        except ValueError:
            raise InvalidValueItem(value_name, item) from None
    raise InvalidValueItem(value_name, item)
