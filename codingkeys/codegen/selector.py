"""
Member selection.

Only members with a storage representation take part in encoding, so only
those get a wire key. Computed members are dropped without complaint.
"""

from __future__ import annotations

from typing import Iterable, List

from .types import Declaration, Member


def select_members(members: Iterable[Member]) -> List[str]:
    """
    Return the names of stored members, in declaration order.

    Args:
        members: Members of a single declaration, in source order

    Returns:
        Eligible member names; empty when nothing is stored
    """
    return [member.name for member in members if member.is_stored]


def select_declaration_members(declaration: Declaration) -> List[str]:
    """Return the eligible member names of ``declaration``."""
    return select_members(declaration.members)
