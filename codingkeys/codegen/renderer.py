"""
CodingKeys Rendering.

This module renders a KeyMapping as a string-keyed enumeration in the host
language, one case per entry. Entries whose wire key differs from the
member name carry an explicit string literal; identity entries do not.
An empty mapping renders nothing.

Rendering goes through Jinja2 templates by default, with a plain
str.format renderer for callers that disable Jinja.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..utils.config import GenerationConfig
from ..utils.constants import CODING_KEYS_TEMPLATE
from ..utils.exceptions import TemplateRenderError
from .types import KeyMapping, KeyMappingEntry

SIMPLE_CODING_KEYS_TEMPLATE = "enum {enum_name}: {raw_type}, {key_protocol} {{\n{body}\n}}"
SIMPLE_CASE_TEMPLATE = "{indent}case {name}"
SIMPLE_OVERRIDE_TEMPLATE = "{indent}case {name} = {literal}"


def string_literal(value: str) -> str:
    """Quote ``value`` as a double-quoted string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class JinjaTemplateRenderer:
    """Jinja2-based template renderer."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize the template renderer."""
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "templates")

        self._template_dir = Path(template_dir)
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
            autoescape=False,
        )
        self._env.filters["string_literal"] = string_literal

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            template_obj = self._env.from_string(template)
            return template_obj.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(f"Template rendering failed: {e}")

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """Render a template file with the given context."""
        try:
            template = self._env.get_template(template_path)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(f"Template file rendering failed: {e}", template_path)

    def list_templates(self) -> List[str]:
        """List available template files."""
        return self._env.list_templates()


class SimpleTemplateRenderer:
    """Simple string-based template renderer for basic use cases."""

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Render a template using simple string formatting."""
        try:
            return template.format(**context)
        except (KeyError, IndexError, ValueError) as e:
            raise TemplateRenderError(f"Template rendering failed: {e}")

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """Render a template file using simple string formatting."""
        try:
            with open(template_path, "r") as f:
                template = f.read()
        except OSError as e:
            raise TemplateRenderError(f"Failed to read template file: {e}", template_path)
        return self.render(template, context)


class CodingKeysRenderer:
    """Renders KeyMapping objects as CodingKeys enumerations."""

    def __init__(self, config: Optional[GenerationConfig] = None):
        self._config = config or GenerationConfig()
        if self._config.use_jinja:
            self._renderer = JinjaTemplateRenderer()
        else:
            self._renderer = SimpleTemplateRenderer()

    @property
    def indent(self) -> str:
        return " " * self._config.indent_size

    def _build_context(self, mapping: KeyMapping) -> Dict[str, Any]:
        return {
            "enum_name": self._config.enum_name,
            "raw_type": self._config.raw_type,
            "key_protocol": self._config.key_protocol,
            "indent": self.indent,
            "entries": list(mapping),
        }

    def _render_case(self, entry: KeyMappingEntry) -> str:
        if entry.is_override:
            return SIMPLE_OVERRIDE_TEMPLATE.format(
                indent=self.indent,
                name=entry.original_name,
                literal=string_literal(entry.wire_key),
            )
        return SIMPLE_CASE_TEMPLATE.format(indent=self.indent, name=entry.original_name)

    def render(self, mapping: KeyMapping) -> Optional[str]:
        """
        Render ``mapping`` as a CodingKeys enumeration.

        Args:
            mapping: Synthesized key mapping

        Returns:
            Rendered source text, or None when the mapping is empty
        """
        if not mapping:
            return None

        context = self._build_context(mapping)
        if isinstance(self._renderer, JinjaTemplateRenderer):
            return self._renderer.render_file(CODING_KEYS_TEMPLATE, context)

        context["body"] = "\n".join(self._render_case(entry) for entry in mapping)
        return self._renderer.render(SIMPLE_CODING_KEYS_TEMPLATE, context)


def create_renderer(config: Optional[GenerationConfig] = None) -> CodingKeysRenderer:
    """Create a CodingKeys renderer for the given generation config."""
    return CodingKeysRenderer(config)
