"""Pydantic v2 models for a sensor schema document.

A sensor schema is a JSON record describing one sensor: its namespace and
name, the typed value paths (fields) it produces, its configuration options,
per-field units, and optional enumerated value sets.

The models accept incomplete documents.  REQUIRED properties are stored raw
and exposed through accessors that raise :class:`MissingRequiredField` on
first use, so a renderer only fails on the properties it actually needs.
OPTIONAL properties default to an empty tuple, ``False`` or ``""``.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
    model_validator,
)

from ..errors import MissingRequiredField


# ---------------------------------------------------------------------------
# Value set kinds
# ---------------------------------------------------------------------------

STRING_ARRAY = "string-array"
INTEGER_ARRAY = "integer-array"

VALUE_KINDS: tuple[str, ...] = (STRING_ARRAY, INTEGER_ARRAY)


# ---------------------------------------------------------------------------
# Base node
# ---------------------------------------------------------------------------


class SchemaNode(BaseModel):
    """Common behaviour for every node of a parsed schema.

    Each node remembers where it sits in the document (``valuePaths[2]``) and
    which schema owns it, so a missing property can be reported precisely.
    """

    model_config = ConfigDict(frozen=True)

    _where: str = PrivateAttr(default="")
    _schema_name: Optional[str] = PrivateAttr(default=None)
    _namespace: Optional[str] = PrivateAttr(default=None)

    def _bind(self, where: str, schema_name: Optional[str], namespace: Optional[str]) -> None:
        self._where = where
        self._schema_name = schema_name
        self._namespace = namespace

    def _require(self, prop: str, value: Any) -> Any:
        if value is None or value == "":
            path = f"{self._where}.{prop}" if self._where else prop
            raise MissingRequiredField(path, self._schema_name, self._namespace)
        return value


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


class FieldSpec(SchemaNode):
    """One value path: a named, typed data channel of the sensor."""

    raw_name: Optional[str] = Field(default=None, alias="name")
    raw_type: Optional[str] = Field(default=None, alias="type")

    @property
    def name(self) -> str:
        return self._require("name", self.raw_name)

    @property
    def type(self) -> str:
        """Primitive type token, e.g. ``float`` or ``long``."""
        return self._require("type", self.raw_type)


class ConfigSpec(SchemaNode):
    """One configuration option exposed through the preferences screen.

    Keys other than ``name``, ``class``, ``type`` and ``default`` are kept, in
    declaration order, in :attr:`attributes`.
    """

    raw_name: Optional[str] = Field(default=None, alias="name")
    raw_widget: Optional[str] = Field(default=None, alias="class")
    raw_type: Optional[str] = Field(default=None, alias="type")
    default_value: Any = Field(default=None, alias="default")
    attributes: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_attributes(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # Only document keys count as known, never the Python field names.
        known = {info.alias for info in cls.model_fields.values() if info.alias}
        merged = {k: v for k, v in data.items() if k in known}
        merged["attributes"] = {k: v for k, v in data.items() if k not in known}
        return merged

    @property
    def name(self) -> str:
        return self._require("name", self.raw_name)

    @property
    def widget(self) -> str:
        """Preference widget class used as the XML element name."""
        return self._require("class", self.raw_widget)

    @property
    def type(self) -> str:
        return self._require("type", self.raw_type)

    @property
    def has_default(self) -> bool:
        """Whether the document supplied a ``default`` key (even ``null``)."""
        return "default_value" in self.model_fields_set

    def passthrough(self, prefix: str) -> list[tuple[str, Any]]:
        """Attributes whose key starts with *prefix*, in declaration order."""
        return [(key, value) for key, value in self.attributes.items() if key.startswith(prefix)]


class UnitSpec(SchemaNode):
    """Unit of measurement for one field."""

    raw_name: Optional[str] = Field(default=None, alias="name")
    unit: str = Field(default="")

    @property
    def name(self) -> str:
        return self._require("name", self.raw_name)


class ValueSpec(SchemaNode):
    """A named enumerated constant array (``string-array`` or ``integer-array``)."""

    raw_name: Optional[str] = Field(default=None, alias="name")
    raw_kind: Optional[str] = Field(default=None, alias="type")
    raw_items: Optional[tuple[Any, ...]] = Field(default=None, alias="items")

    @property
    def name(self) -> str:
        return self._require("name", self.raw_name)

    @property
    def kind(self) -> str:
        return self._require("type", self.raw_kind)

    @property
    def items(self) -> tuple[Any, ...]:
        if self.raw_items is None:
            return self._require("items", None)
        return self.raw_items


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class SensorSchema(SchemaNode):
    """The parsed sensor schema document.

    Immutable once constructed.  ``fields`` may also be given under the key
    ``valuePaths``.
    """

    raw_namespace: Optional[str] = Field(default=None, alias="namespace")
    raw_name: Optional[str] = Field(default=None, alias="name")
    doc: str = Field(default="")
    author: str = Field(default="")
    cuckoo: bool = Field(default=False)
    raw_fields: Optional[tuple[FieldSpec, ...]] = Field(
        default=None,
        validation_alias=AliasChoices("valuePaths", "fields"),
    )
    configs: tuple[ConfigSpec, ...] = Field(default=())
    units: tuple[UnitSpec, ...] = Field(default=())
    values: tuple[ValueSpec, ...] = Field(default=())

    @field_validator("doc", "author", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def model_post_init(self, __context: Any) -> None:
        name, namespace = self.raw_name, self.raw_namespace
        self._bind("", name, namespace)
        groups = (
            ("valuePaths", self.raw_fields or ()),
            ("configs", self.configs),
            ("units", self.units),
            ("values", self.values),
        )
        for label, nodes in groups:
            for index, node in enumerate(nodes):
                node._bind(f"{label}[{index}]", name, namespace)

    # -- Required --------------------------------------------------------

    @property
    def namespace(self) -> str:
        """Dotted package namespace, e.g. ``com.example.sensors``."""
        return self._require("namespace", self.raw_namespace)

    @property
    def name(self) -> str:
        return self._require("name", self.raw_name)

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        """The value paths, in declaration order.  May be empty."""
        if self.raw_fields is None:
            return self._require("valuePaths", None)
        return self.raw_fields

    # -- Derived ---------------------------------------------------------

    @property
    def authority(self) -> str:
        """Content authority: ``<namespace>.<name>``."""
        return f"{self.namespace}.{self.name}"

    def unit_for(self, field_name: str) -> str:
        """Unit declared for *field_name*, or ``""`` when none is declared."""
        for entry in self.units:
            if entry.name == field_name:
                return entry.unit
        return ""
