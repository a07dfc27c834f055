# -*- coding: ascii -*-
"""
Counting utilities for enumeration statistics.

Counters:
- candidates: assignments generated (initial, king variants, permutations)
- dedup_hits: candidates dropped as structural duplicates
- king_ligands: labels promoted to the B position
- base_isomers: unique assignments before enantiomer insertion
- chiral: chiral assignments among the base isomers
- enantiomers_inserted: mirror images added after their source
- total: final result count
- enantiomer_pairs: chiral entries in the final result divided by two
"""

from typing import Dict, Optional

STAT_KEYS = (
    'candidates',
    'dedup_hits',
    'king_ligands',
    'base_isomers',
    'chiral',
    'enantiomers_inserted',
    'total',
    'enantiomer_pairs',
)


def empty_qa_stats() -> Dict[str, int]:
    return {key: 0 for key in STAT_KEYS}


def qa_mark(qa_bus: Optional[Dict[str, int]], key: str, inc: int = 1) -> None:
    """Increment a counter on qa_bus; a None bus is ignored."""
    if qa_bus is not None:
        qa_bus[key] = qa_bus.get(key, 0) + inc
