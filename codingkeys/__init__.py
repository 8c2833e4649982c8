"""
codingkeys: CodingKeys Table Generation

Derives the serialization key table of a struct or enum from its member
names and a naming style, keeping declaration order and stating a wire key
explicitly only where it differs from the member name.

Usage:
    from codingkeys import Declaration, Member, generate_coding_keys

    user = Declaration.struct("User", [
        Member.stored("firstName"),
        Member.stored("age"),
        Member.computed("displayName"),
    ])
    result = generate_coding_keys(user, style="snake_case")
    print(result.content)
"""

__version__ = "0.1.0"
__author__ = "codingkeys Team"
__email__ = "codingkeys@example.com"

from .naming import NamingStyle, transform, parse_style

from .codegen import (
    Member,
    MemberKind,
    Declaration,
    DeclarationKind,
    KeyMapping,
    KeyMappingEntry,
    KeyCollision,
    GenerationResult,
    select_members,
    synthesize,
    CodingKeysGenerator,
    generate_coding_keys,
)

from .utils import (
    CodingKeysConfig,
    get_config,
    CodingKeysError,
    KeyCollisionError,
)

__all__ = [
    "NamingStyle",
    "transform",
    "parse_style",
    "Member",
    "MemberKind",
    "Declaration",
    "DeclarationKind",
    "KeyMapping",
    "KeyMappingEntry",
    "KeyCollision",
    "GenerationResult",
    "select_members",
    "synthesize",
    "CodingKeysGenerator",
    "generate_coding_keys",
    "CodingKeysConfig",
    "get_config",
    "CodingKeysError",
    "KeyCollisionError",
]
