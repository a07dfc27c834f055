# -*- coding: ascii -*-
"""Structural equivalence of ligand assignments.

Two assignments describe the same isomer when they share the same trans
pairs. Each assignment reduces to a key: its three (first, second) trans
pair tuples sorted lexicographically. Pairs are compared as ordered tuples;
the labels inside a pair are not normalized.
"""

from typing import Iterable, List, Optional, Set, Tuple, Dict

from .assignment import LigandAssignment
from .qa_utils import qa_mark

TransPairKey = Tuple[Tuple[str, str], ...]


def trans_pair_key(assignment: LigandAssignment) -> TransPairKey:
    """Sorted trans pair tuples used as the deduplication key."""
    return tuple(sorted(assignment.trans_pairs()))


def structurally_equal(a: LigandAssignment, b: LigandAssignment) -> bool:
    """True if both assignments have the same sorted trans pairs."""
    return trans_pair_key(a) == trans_pair_key(b)


def contains_equivalent(assignments: Iterable[LigandAssignment], candidate: LigandAssignment) -> bool:
    """Check whether any assignment is structurally equal to candidate."""
    key = trans_pair_key(candidate)
    return any(trans_pair_key(a) == key for a in assignments)


def early_check(
    candidate: LigandAssignment,
    seen: Set[TransPairKey],
    qa_bus: Optional[Dict[str, int]] = None,
) -> Tuple[TransPairKey, bool]:
    """
    Compute the key of a candidate and check it against the seen set.

    The key is NOT added to seen; call commit() once the candidate is kept.

    Returns:
        (key, is_duplicate) tuple
    """
    key = trans_pair_key(candidate)
    if key in seen:
        qa_mark(qa_bus, "dedup_hits")
        return key, True
    return key, False


def commit(key: Optional[TransPairKey], seen: Set[TransPairKey]) -> None:
    """Add a key to the seen set (None keys are ignored)."""
    if key:
        seen.add(key)


def dedupe_assignments(assignments: Iterable[LigandAssignment]) -> List[LigandAssignment]:
    """Drop structural duplicates, keeping the first occurrence."""
    seen: Set[TransPairKey] = set()
    unique = []
    for assignment in assignments:
        key, is_dup = early_check(assignment, seen)
        if not is_dup:
            commit(key, seen)
            unique.append(assignment)
    return unique
