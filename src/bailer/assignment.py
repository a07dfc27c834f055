# -*- coding: ascii -*-
"""Ligand assignment of an octahedral complex.

A LigandAssignment binds six ligand labels to positions A..F (see
schema.FORMAT_DIAGRAM). Instances are immutable: every transformation
(clone, swap, promote, enantiomer) returns a new assignment.
"""

from typing import Dict, Iterable, List, Sequence, Tuple, Any

from .errors import InvalidArityError
from .schema import (
    DIHEDRAL_PLANES,
    KING_INDEX,
    LIGAND_COUNT,
    MIRROR_SWAPS,
    POSITIONS,
    POSITION_INDEX,
    TRANS_PAIRS,
    plane_name,
)


def _index_of(position) -> int:
    if isinstance(position, int):
        if not 0 <= position < LIGAND_COUNT:
            raise IndexError(f"Position index out of range: {position}")
        return position
    try:
        return POSITION_INDEX[position]
    except KeyError:
        raise KeyError(f"Unknown position: {position!r}") from None


class LigandAssignment:
    """Six ligand labels bound to positions A..F."""

    __slots__ = ('_ligands',)

    def __init__(self, ligands: Iterable[str]):
        ligands = tuple(ligands)
        if len(ligands) != LIGAND_COUNT:
            raise InvalidArityError(len(ligands))
        self._ligands = ligands

    @property
    def ligands(self) -> Tuple[str, ...]:
        return self._ligands

    @property
    def A(self) -> str:
        return self._ligands[0]

    @property
    def B(self) -> str:
        return self._ligands[1]

    @property
    def C(self) -> str:
        return self._ligands[2]

    @property
    def D(self) -> str:
        return self._ligands[3]

    @property
    def E(self) -> str:
        return self._ligands[4]

    @property
    def F(self) -> str:
        return self._ligands[5]

    def __getitem__(self, position) -> str:
        return self._ligands[_index_of(position)]

    def __iter__(self):
        return iter(self._ligands)

    def __len__(self) -> int:
        return LIGAND_COUNT

    def clone(self) -> 'LigandAssignment':
        """Create an independent copy of this assignment."""
        return LigandAssignment(self._ligands)

    def swap(self, first, second) -> 'LigandAssignment':
        """Return a copy with the ligands at two positions exchanged."""
        i, j = _index_of(first), _index_of(second)
        ligands = list(self._ligands)
        ligands[i], ligands[j] = ligands[j], ligands[i]
        return LigandAssignment(ligands)

    def promote(self, label: str) -> 'LigandAssignment':
        """
        Move the first occurrence of label into position B.

        The label is removed from its current position and inserted at B;
        the ligands that followed B shift one position towards F.

        Raises:
            ValueError: if the label does not occur in this assignment
        """
        ligands = list(self._ligands)
        ligands.remove(label)
        ligands.insert(KING_INDEX, label)
        return LigandAssignment(ligands)

    def trans_pairs(self) -> List[Tuple[str, str]]:
        """Trans pairs (A,B), (C,D), (E,F), keeping position order inside each pair."""
        return [(self._ligands[i], self._ligands[j]) for i, j in TRANS_PAIRS]

    def mirror_planes(self) -> List[str]:
        """
        Names of the mirror planes present in this assignment.

        A trans pair carrying the same ligand twice implies an axial plane;
        the six dihedral planes each need two label equalities.
        """
        lig = self._ligands
        planes = []
        for i, j in TRANS_PAIRS:
            if lig[i] == lig[j]:
                planes.append(plane_name(((i, j),)))
        for plane in DIHEDRAL_PLANES:
            if all(lig[i] == lig[j] for i, j in plane):
                planes.append(plane_name(plane))
        return planes

    @property
    def chiral(self) -> bool:
        """True when no mirror plane exists."""
        return not self.mirror_planes()

    def enantiomer(self) -> 'LigandAssignment':
        """Mirror image: swap C<->F and D<->E, leaving the A-B axis in place."""
        mirrored = self
        for i, j in MIRROR_SWAPS:
            mirrored = mirrored.swap(i, j)
        return mirrored

    def to_record(self) -> Dict[str, Any]:
        record = dict(zip(POSITIONS, self._ligands))
        record['chiral'] = self.chiral
        record['trans_pairs'] = ";".join(f"{a}-{b}" for a, b in self.trans_pairs())
        return record

    def __str__(self) -> str:
        text = ", ".join(f"{name}:{label}" for name, label in zip(POSITIONS, self._ligands))
        return f"{text} {'CHIRAL' if self.chiral else ''}"

    def __repr__(self) -> str:
        return f"LigandAssignment({list(self._ligands)!r})"

    @classmethod
    def from_sorted(cls, ligands: Sequence[str]) -> 'LigandAssignment':
        """Build the canonical assignment: labels sorted, then placed into A..F."""
        return cls(sorted(ligands))
