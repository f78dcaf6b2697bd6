"""Jinja2 template rendering for sensor project artifacts.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``sensormaker/scaffolder/templates/`` directory and renders them with the
sensor context.  XML templates (``*.xml.j2``) are autoescaped; Java templates
escape string literals and doc comments explicitly through the ``java_string``
and ``javadoc`` filters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .identifiers import constant_case, resource_case, title_case


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for sensor artifacts.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined template variables raise instead of
    rendering as empty text, so a missing context key can never slip into a
    generated file unnoticed.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(enabled_extensions=("xml.j2",), default_for_string=False),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["title_case"] = title_case
        self.env.filters["constant_case"] = constant_case
        self.env.filters["resource_case"] = resource_case
        self.env.filters["java_string"] = java_string
        self.env.filters["javadoc"] = _javadoc_filter
        self.env.filters["xml_comment"] = _xml_comment_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"manifest.xml.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Inline templates are never autoescaped.
        """
        template = self.env.from_string(template_string)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

_JAVA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def java_string(value: Any) -> str:
    """Escape *value* for use inside a Java double-quoted string literal."""
    return "".join(_JAVA_ESCAPES.get(ch, ch) for ch in str(value))


def _javadoc_filter(value: Any) -> str:
    """Keep free text from closing a Java doc comment early."""
    return str(value).replace("*/", "*&#47;")


def _xml_comment_filter(value: Any) -> str:
    """XML comments may not contain a double hyphen."""
    text = str(value)
    while "--" in text:
        text = text.replace("--", "- -")
    return text
