"""
Core Data Structures for CodingKeys Generation.

This module defines the types flowing through the generation pipeline:
the structural description of a declaration, the synthesized key mapping
and the final generation result. All data structures are immutable and
ordered; declaration order is preserved end to end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..naming.styles import NamingStyle
from ..utils.exceptions import EmptyIdentifierError


class MemberKind(Enum):
    """Kind of a declared member."""
    STORED_PROPERTY = "stored_property"
    COMPUTED_PROPERTY = "computed_property"
    ENUM_CASE = "enum_case"


class DeclarationKind(Enum):
    """Kind of declaration a CodingKeys table is generated for."""
    STRUCT = "struct"
    ENUM = "enum"


@dataclass(frozen=True)
class Member:
    """A declared member and whether it has a storage representation."""
    name: str
    is_stored: bool = True
    kind: Optional[MemberKind] = None

    def __post_init__(self):
        """Validate the member and reconcile its kind with ``is_stored``."""
        if not isinstance(self.name, str):
            raise TypeError("Member name must be a string")
        if not self.name:
            raise EmptyIdentifierError("member name")

        if self.kind is None:
            kind = MemberKind.STORED_PROPERTY if self.is_stored else MemberKind.COMPUTED_PROPERTY
            object.__setattr__(self, "kind", kind)
        elif self.is_stored != (self.kind is not MemberKind.COMPUTED_PROPERTY):
            raise ValueError(
                f"Member '{self.name}' of kind {self.kind.value} cannot have is_stored={self.is_stored}"
            )

    @classmethod
    def stored(cls, name: str) -> "Member":
        return cls(name=name, is_stored=True, kind=MemberKind.STORED_PROPERTY)

    @classmethod
    def computed(cls, name: str) -> "Member":
        return cls(name=name, is_stored=False, kind=MemberKind.COMPUTED_PROPERTY)

    @classmethod
    def enum_case(cls, name: str) -> "Member":
        return cls(name=name, is_stored=True, kind=MemberKind.ENUM_CASE)


@dataclass(frozen=True)
class Declaration:
    """Structural description of a struct or enum, members in source order."""
    name: str
    kind: DeclarationKind
    members: Tuple[Member, ...] = ()

    def __post_init__(self):
        """Normalize members to a tuple."""
        if not isinstance(self.members, tuple):
            object.__setattr__(self, "members", tuple(self.members))

    @classmethod
    def struct(cls, name: str, members: Iterable[Member]) -> "Declaration":
        """Create a struct declaration from its members."""
        return cls(name=name, kind=DeclarationKind.STRUCT, members=tuple(members))

    @classmethod
    def enum(cls, name: str, case_names: Iterable[str]) -> "Declaration":
        """Create an enum declaration; every case is eligible."""
        return cls(
            name=name,
            kind=DeclarationKind.ENUM,
            members=tuple(Member.enum_case(case) for case in case_names),
        )


@dataclass(frozen=True)
class KeyMappingEntry:
    """One member name and the wire key it encodes to."""
    original_name: str
    wire_key: str

    @property
    def is_override(self) -> bool:
        """True when the wire key has to be stated explicitly."""
        return self.wire_key != self.original_name


@dataclass(frozen=True)
class KeyCollision:
    """A wire key produced by more than one distinct member name."""
    wire_key: str
    original_names: Tuple[str, ...]


@dataclass(frozen=True)
class KeyMapping:
    """Ordered mapping from member names to wire keys."""
    entries: Tuple[KeyMappingEntry, ...] = ()
    style: NamingStyle = NamingStyle.ORIGINAL

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[KeyMappingEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def overrides(self) -> Tuple[KeyMappingEntry, ...]:
        """Entries whose wire key differs from the member name."""
        return tuple(entry for entry in self.entries if entry.is_override)

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Return ``(original_name, wire_key)`` pairs in declaration order."""
        return [(entry.original_name, entry.wire_key) for entry in self.entries]

    def as_dict(self) -> Dict[str, str]:
        """Return the mapping as an insertion-ordered dict."""
        return dict(self.as_pairs())

    def find_collisions(self) -> Tuple[KeyCollision, ...]:
        """Group distinct member names that share a wire key."""
        by_key: Dict[str, List[str]] = {}
        for entry in self.entries:
            names = by_key.setdefault(entry.wire_key, [])
            if entry.original_name not in names:
                names.append(entry.original_name)

        return tuple(
            KeyCollision(wire_key=key, original_names=tuple(names))
            for key, names in by_key.items()
            if len(names) > 1
        )


@dataclass(frozen=True)
class GenerationResult:
    """Complete result of generating CodingKeys for one declaration."""
    declaration_name: str
    mapping: KeyMapping
    content: Optional[str] = None
    collisions: Tuple[KeyCollision, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """True when no construct should be emitted."""
        return not self.mapping
