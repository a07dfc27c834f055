# -*- coding: ascii -*-
"""Fixed position model for octahedral complexes.

Positions are named A..F. The canonical diagram places F, A, C on one
triangular face and D, B, E on the opposite face, so the three trans pairs
are A-B, C-D and E-F. Every swap and equality rule in this package is
expressed against this mapping; it must not change.
"""

from typing import Final, Tuple

LIGAND_COUNT: Final[int] = 6

POSITIONS: Final[Tuple[str, ...]] = ('A', 'B', 'C', 'D', 'E', 'F')

POSITION_INDEX = {name: idx for idx, name in enumerate(POSITIONS)}

# Index of the trans partner position (B of A) used when a ligand is promoted
KING_INDEX: Final[int] = 1

# Trans pairs as index tuples, in position order
TRANS_PAIRS: Final[Tuple[Tuple[int, int], ...]] = ((0, 1), (2, 3), (4, 5))

# Dihedral mirror planes: both equalities must hold for the plane to exist
DIHEDRAL_PLANES: Final[Tuple[Tuple[Tuple[int, int], Tuple[int, int]], ...]] = (
    ((0, 2), (1, 3)),  # A=C, B=D
    ((2, 4), (3, 5)),  # C=E, D=F
    ((0, 4), (1, 5)),  # A=E, B=F
    ((0, 3), (1, 2)),  # A=D, B=C
    ((2, 5), (3, 4)),  # C=F, D=E
    ((0, 5), (1, 4)),  # A=F, B=E
)

# Position swaps that produce the mirror image (A and B stay on the axis)
MIRROR_SWAPS: Final[Tuple[Tuple[int, int], ...]] = ((2, 5), (3, 4))

FORMAT_DIAGRAM: Final[Tuple[str, ...]] = (
    "  F  A  C",
    "   \\ | / ",
    "     M   ",
    "   / | \\ ",
    "  D  B  E",
)

# Columns of the exported results table
TABLE_COLUMNS: Final[Tuple[str, ...]] = (
    'input', 'index', 'A', 'B', 'C', 'D', 'E', 'F',
    'chiral', 'trans_pairs', 'enantiomer_of',
)


def plane_name(plane: Tuple[Tuple[int, int], ...]) -> str:
    """Render a plane condition as e.g. 'A=C,B=D'."""
    return ",".join(f"{POSITIONS[i]}={POSITIONS[j]}" for i, j in plane)
