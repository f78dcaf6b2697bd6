"""Identifier derivation shared by every artifact.

All names that appear in more than one generated file (class prefix,
constant names, resource names, source directories) are computed here and
nowhere else.

Note that :func:`title_case` lowercases everything after the first
character: ``"myHumidity"`` becomes ``"Myhumidity"``.  Existing generated
projects and their manifests depend on this exact form.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from ..errors import InvalidIdentifier


def _require_text(value: str, transform: str) -> str:
    if not value:
        raise InvalidIdentifier(f"{transform}() needs a non-empty identifier")
    return value


def title_case(value: str) -> str:
    """First character upper case, the rest lower case.

    Examples::

        title_case("humidity")   -> "Humidity"
        title_case("myHumidity") -> "Myhumidity"
        title_case("long")       -> "Long"
    """
    _require_text(value, "title_case")
    return value[:1].upper() + value[1:].lower()


def constant_case(value: str) -> str:
    """Upper-case the whole identifier; separators are left untouched."""
    return _require_text(value, "constant_case").upper()


def resource_case(value: str) -> str:
    """Lower-case the whole identifier, as used for resource file names."""
    return _require_text(value, "resource_case").lower()


def namespace_path(namespace: str) -> PurePosixPath:
    """Turn a dotted namespace into a relative source directory.

    ``"com.example.sensors"`` -> ``com/example/sensors``
    """
    _require_text(namespace, "namespace_path")
    return PurePosixPath(*namespace.split("."))
