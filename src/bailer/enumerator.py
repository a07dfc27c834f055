# -*- coding: ascii -*-
"""
Bailer enumeration of octahedral stereoisomers.

Procedure for six ligand labels:
1. Sort the labels and place them into A..F (the initial assignment).
2. Add the two equatorial permutations of the initial assignment.
3. Give every other distinct label a turn as "king": promote it into B
   (trans to A) and add the result plus its two permutations.
4. Insert the enantiomer of each chiral assignment right after it.

Candidates from steps 2-3 are kept only if no structurally equal assignment
(same sorted trans pairs) is already in the result. Enantiomers are inserted
unconditionally; adjacency to the source is what marks the pair.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .assignment import LigandAssignment
from .equivalence import TransPairKey, commit, early_check
from .errors import InvalidArityError
from .permutations import permute_assignment
from .qa_utils import empty_qa_stats, qa_mark
from .schema import LIGAND_COUNT

LOG = logging.getLogger(__name__)


class EnumConfig:
    """
    Configuration for isomer enumeration.

    Args:
        dedup: Drop structurally equal candidates (default: True). False is a
               raw mode that keeps every generated candidate.
        enantiomers: Insert the mirror image after each chiral assignment
                     (default: True)
    """

    def __init__(self, dedup: bool = True, enantiomers: bool = True):
        self.dedup = dedup
        self.enantiomers = enantiomers

    @classmethod
    def from_dict(cls, engine_cfg: Optional[Dict]) -> 'EnumConfig':
        engine_cfg = engine_cfg or {}
        return cls(
            dedup=bool(engine_cfg.get('dedup', True)),
            enantiomers=bool(engine_cfg.get('enantiomers', True)),
        )

    def to_dict(self) -> Dict[str, bool]:
        return {'dedup': self.dedup, 'enantiomers': self.enantiomers}

    def __repr__(self) -> str:
        return f"EnumConfig(dedup={self.dedup}, enantiomers={self.enantiomers})"


def king_ligand_candidates(sorted_ligands: Sequence[str], initial: LigandAssignment) -> List[str]:
    """
    Labels that still need a turn in the B position.

    One occurrence of the initial A label is removed, the rest is reduced to
    distinct labels in first-seen order, and the initial B label is dropped.
    """
    remaining = list(sorted_ligands)
    remaining.remove(initial.A)
    unique = list(dict.fromkeys(remaining))
    if initial.B in unique:
        unique.remove(initial.B)
    return unique


class _ResultBuilder:
    """Ordered result list with structural deduplication."""

    def __init__(self, cfg: EnumConfig, stats: Dict[str, int]):
        self.cfg = cfg
        self.stats = stats
        self.results: List[LigandAssignment] = []
        self._seen: Set[TransPairKey] = set()

    def add(self, candidate: LigandAssignment, force: bool = False) -> bool:
        qa_mark(self.stats, 'candidates')
        if force or not self.cfg.dedup:
            key, is_dup = early_check(candidate, self._seen)
            commit(key, self._seen)
            self.results.append(candidate)
            return True

        key, is_dup = early_check(candidate, self._seen, self.stats)
        if is_dup:
            LOG.debug("Duplicate dropped: %s", candidate)
            return False
        commit(key, self._seen)
        self.results.append(candidate)
        return True

    def add_with_permutations(self, assignment: LigandAssignment, include_self: bool = True) -> None:
        if include_self:
            self.add(assignment)
        for perm in permute_assignment(assignment):
            self.add(perm)


def insert_enantiomers(results: List[LigandAssignment], stats: Optional[Dict[str, int]] = None) -> List[LigandAssignment]:
    """
    Insert the enantiomer of every chiral assignment directly after it.

    The chiral sources are fixed before any insertion; each source's position
    is looked up again before inserting, since earlier insertions shift it.
    The list is modified in place and returned.
    """
    chiral_sources = [a for a in results if a.chiral]
    for source in chiral_sources:
        position = next(i for i, a in enumerate(results) if a is source)
        results.insert(position + 1, source.enantiomer())
        qa_mark(stats, 'enantiomers_inserted')
    return results


def generate_with_stats(ligands: Sequence[str], cfg: Optional[EnumConfig] = None) -> Tuple[List[LigandAssignment], Dict[str, int]]:
    """
    Enumerate all stereoisomers of an octahedral complex.

    Args:
        ligands: Exactly six ligand labels (duplicates allowed, any order)
        cfg: Enumeration configuration (default: EnumConfig())

    Returns:
        (results, stats) where results is the ordered list of unique
        assignments with enantiomers following their chiral source, and stats
        holds the counters described in qa_utils.

    Raises:
        InvalidArityError: if ligands does not hold exactly six labels
    """
    if cfg is None:
        cfg = EnumConfig()
    ligands = list(ligands)
    if len(ligands) != LIGAND_COUNT:
        raise InvalidArityError(len(ligands))

    stats = empty_qa_stats()
    builder = _ResultBuilder(cfg, stats)

    # Canonical order: labels sorted before placement into A..F
    sorted_ligands = sorted(ligands)
    initial = LigandAssignment(sorted_ligands)
    builder.add(initial, force=True)
    builder.add_with_permutations(initial, include_self=False)

    kings = king_ligand_candidates(sorted_ligands, initial)
    LOG.debug("King ligand candidates for %s: %s", sorted_ligands, kings)
    for king in kings:
        qa_mark(stats, 'king_ligands')
        builder.add_with_permutations(initial.promote(king))

    results = builder.results
    stats['base_isomers'] = len(results)
    stats['chiral'] = sum(1 for a in results if a.chiral)

    if cfg.enantiomers:
        insert_enantiomers(results, stats)

    total, pairs = summarize(results)
    stats['total'] = total
    stats['enantiomer_pairs'] = pairs
    LOG.info("Ligands %s: %d complexes (%d enantiomer pairs)", ",".join(sorted_ligands), total, pairs)
    return results, stats


def generate_complexes(ligands: Sequence[str], cfg: Optional[EnumConfig] = None) -> List[LigandAssignment]:
    """Enumerate all stereoisomers; see generate_with_stats()."""
    results, _ = generate_with_stats(ligands, cfg)
    return results


def summarize(results: Sequence[LigandAssignment]) -> Tuple[int, int]:
    """Return (total count, chiral count // 2)."""
    chiral_count = sum(1 for a in results if a.chiral)
    return len(results), chiral_count // 2


def enantiomer_partners(results: Sequence[LigandAssignment]) -> Dict[int, int]:
    """
    Map the index of each inserted enantiomer to the index of its source.

    Relies on the adjacency guarantee: a chiral entry whose successor is
    positionally identical to its mirror image is a source.
    """
    partners = {}
    idx = 0
    while idx < len(results) - 1:
        current, following = results[idx], results[idx + 1]
        if current.chiral and following.ligands == current.enantiomer().ligands:
            partners[idx + 1] = idx
            idx += 2
        else:
            idx += 1
    return partners
