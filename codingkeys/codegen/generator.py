"""
CodingKeys Generation Driver.

Runs one generation request: resolve the style, select eligible members,
synthesize the mapping, check it for wire key collisions and render it.
Requests share no mutable state and can run concurrently.
"""

from __future__ import annotations

from typing import Optional, Union

from ..naming.styles import NamingStyle, parse_style
from ..utils.config import CodingKeysConfig, get_config
from ..utils.exceptions import KeyCollisionError
from ..utils.logging import CodingKeysLogger
from .renderer import CodingKeysRenderer
from .selector import select_declaration_members
from .synthesizer import find_collisions, synthesize
from .types import Declaration, GenerationResult

StyleLike = Optional[Union[str, NamingStyle]]


class CodingKeysGenerator:
    """
    Generates CodingKeys tables for declarations.

    The generator holds only configuration. Each call to ``generate`` builds
    its mapping from scratch.
    """

    def __init__(self, config: Optional[CodingKeysConfig] = None):
        """
        Initialize the generator.

        Args:
            config: Configuration to use; defaults to the global config
        """
        self._config = config or get_config()
        self._renderer = CodingKeysRenderer(self._config.generation)
        self._log = CodingKeysLogger(__name__)

    @property
    def config(self) -> CodingKeysConfig:
        return self._config

    def resolve_style(self, style: StyleLike = None) -> NamingStyle:
        """Resolve an explicit style, or the configured default when absent."""
        if style is None:
            style = self._config.generation.default_style
        return parse_style(style)

    def generate(self, declaration: Declaration, style: StyleLike = None) -> GenerationResult:
        """
        Generate the CodingKeys table for ``declaration``.

        Args:
            declaration: Structural description of the struct or enum
            style: Naming style; falls back to the configured default

        Returns:
            GenerationResult; ``content`` is None when nothing is eligible

        Raises:
            KeyCollisionError: If distinct members share a wire key and
                ``fail_on_collision`` is enabled
        """
        naming_style = self.resolve_style(style)
        self._log.log_generation_start(declaration.name, len(declaration.members), naming_style.value)

        names = select_declaration_members(declaration)
        mapping = synthesize(names, naming_style)

        if not mapping:
            self._log.log_generation_skipped(declaration.name)
            return GenerationResult(declaration_name=declaration.name, mapping=mapping)

        collisions = find_collisions(mapping)
        for collision in collisions:
            self._log.log_collision(declaration.name, collision.wire_key, collision.original_names)
        if collisions and self._config.generation.fail_on_collision:
            raise KeyCollisionError(collisions, declaration.name)

        content = self._renderer.render(mapping)
        self._log.log_mapping_summary(declaration.name, len(mapping), len(mapping.overrides()))

        return GenerationResult(
            declaration_name=declaration.name,
            mapping=mapping,
            content=content,
            collisions=collisions,
        )


def generate_coding_keys(
    declaration: Declaration,
    style: StyleLike = None,
    config: Optional[CodingKeysConfig] = None,
) -> GenerationResult:
    """Generate the CodingKeys table for a single declaration."""
    return CodingKeysGenerator(config).generate(declaration, style)
