# -*- coding: ascii -*-
"""Equatorial rearrangements with a fixed A-B axis."""

from typing import Tuple

from .assignment import LigandAssignment


def permute_assignment(assignment: LigandAssignment) -> Tuple[LigandAssignment, LigandAssignment]:
    """
    Produce the two sibling pairings of the equatorial positions.

    With A and B fixed, the labels at C, D, E, F can be paired into two trans
    pairs in three ways: {C,D}&{E,F} (the input), {C,E}&{D,F} and {C,F}&{D,E}.
    The second permutation is derived from the first, not from the input.

    Returns:
        (perm1, perm2) where perm1 swaps D<->E and perm2 then swaps C<->E
    """
    perm1 = assignment.swap('D', 'E')
    perm2 = perm1.swap('C', 'E')
    return perm1, perm2
