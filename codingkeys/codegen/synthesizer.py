"""
Key mapping synthesis.

Builds the ordered KeyMapping for a list of eligible member names. Entries
whose wire key equals the member name are kept so the mapping stays
positionally complete; renderers decide how to present them.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from ..naming.styles import NamingStyle, transform
from .types import KeyCollision, KeyMapping, KeyMappingEntry


def synthesize(names: Iterable[str], style: NamingStyle) -> KeyMapping:
    """
    Build the key mapping for ``names`` under ``style``.

    Args:
        names: Eligible member names in declaration order
        style: Naming style to apply to every name

    Returns:
        KeyMapping with one entry per name, in the same order
    """
    entries = tuple(
        KeyMappingEntry(original_name=name, wire_key=transform(name, style))
        for name in names
    )
    return KeyMapping(entries=entries, style=style)


def find_collisions(mapping: KeyMapping) -> Tuple[KeyCollision, ...]:
    """Return every wire key shared by distinct member names."""
    return mapping.find_collisions()
