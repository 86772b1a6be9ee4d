"""
Roster Kernel — Duplicate Name Resolution

Pure function: (typed name, existing members) → DedupResult

When a name is added that already exists, every holder of that name gets a
numeric suffix:

  []                 + "Kim" → "Kim"
  ["Kim"]            + "Kim" → "Kim-1", "Kim-2"   (existing entry promoted)
  ["Kim-1", "Kim-2"] + "Kim" → ..., "Kim-3"
  ["Kim-backend"]    + "Kim" → ..., "Kim-2"       (text suffixes still collide)
  ["Kim-2"]          + "Kim" → ..., "Kim-3"

Every Name produced here is canonical: it equals parse_name(name.display),
so a roster survives a round trip through its display strings.

One pass over the existing members, O(n).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from roster_engine.kernel.types import Name, parse_name


@dataclass(frozen=True)
class DedupResult:
    """
    The name to insert, plus the index of the member that must be renamed
    to suffix 1 alongside the insert (None when no rename is needed).
    """

    name: Name
    promote_index: int | None = None


def resolve_name(base: str, existing: Sequence[Name]) -> DedupResult:
    """
    Resolve the typed name `base` against `existing`.

    A member collides when it is the typed name itself, or when it is
    `base` plus a suffix. The returned name never equals any entry of
    `existing`, nor the promoted form of the entry at `promote_index`.
    """
    base = base.strip()
    typed = parse_name(base)

    collided = False
    exact_index: int | None = None
    max_numeric = 0
    suffix_one_taken = False

    for i, member in enumerate(existing):
        if member == typed:
            collided = True
            if exact_index is None:
                exact_index = i
        if member.base != base:
            continue
        collided = True
        n = member.numeric_suffix
        if n is not None:
            max_numeric = max(max_numeric, n)
            if n == 1:
                suffix_one_taken = True

    if not collided:
        return DedupResult(name=typed)

    # A lone "Kim" becomes "Kim-1"; skip when "Kim-1" is already held (edited in)
    promote_index = exact_index if not suffix_one_taken else None

    return DedupResult(
        name=Name(base=base, suffix=max(max_numeric, 1) + 1),
        promote_index=promote_index,
    )


def apply_dedup(base: str, existing: Sequence[Name]) -> tuple[Name, ...]:
    """
    Return `existing` with a deduplicated `base` appended and any promotion
    rename applied.
    """
    result = resolve_name(base, existing)
    members = list(existing)
    if result.promote_index is not None:
        members[result.promote_index] = result.name.with_suffix(1)
    members.append(result.name)
    return tuple(members)


def collapse_singleton(members: Sequence[Name], base: str) -> tuple[Name, ...]:
    """
    Strip a "-1" suffix from the last remaining holder of `base`.

    Applied after a delete: once only one member shares the base name it no
    longer needs disambiguation. Any other suffix is left alone, and so is
    a survivor whose bare name is already taken.
    """
    holders = [i for i, m in enumerate(members) if m.base == base]
    result = list(members)
    if len(holders) == 1:
        survivor = result[holders[0]]
        bare = parse_name(survivor.base)
        if survivor.numeric_suffix == 1 and bare not in result:
            result[holders[0]] = bare
    return tuple(result)
