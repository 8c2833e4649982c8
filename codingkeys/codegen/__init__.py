"""
CodingKeys Code Generation.

Pipeline components, in data-flow order:
- types.py: declarations, key mappings and results
- selector.py: eligible member selection
- synthesizer.py: ordered key mapping synthesis
- renderer.py: template rendering of the CodingKeys enumeration
- generator.py: the per-declaration generation driver
"""

from .types import (
    Member,
    MemberKind,
    Declaration,
    DeclarationKind,
    KeyMapping,
    KeyMappingEntry,
    KeyCollision,
    GenerationResult,
)

from .selector import select_members, select_declaration_members
from .synthesizer import synthesize, find_collisions

from .renderer import (
    CodingKeysRenderer,
    JinjaTemplateRenderer,
    SimpleTemplateRenderer,
    create_renderer,
    string_literal,
)

from .generator import CodingKeysGenerator, generate_coding_keys

__all__ = [
    # Types
    "Member",
    "MemberKind",
    "Declaration",
    "DeclarationKind",
    "KeyMapping",
    "KeyMappingEntry",
    "KeyCollision",
    "GenerationResult",
    # Pipeline
    "select_members",
    "select_declaration_members",
    "synthesize",
    "find_collisions",
    # Rendering
    "CodingKeysRenderer",
    "JinjaTemplateRenderer",
    "SimpleTemplateRenderer",
    "create_renderer",
    "string_literal",
    # Driver
    "CodingKeysGenerator",
    "generate_coding_keys",
]
