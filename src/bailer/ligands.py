# -*- coding: ascii -*-
"""Parsing of comma separated ligand lists."""

from typing import List, Optional, Sequence

from .errors import InvalidArityError
from .schema import LIGAND_COUNT

ARITY_MESSAGE = "6 comma separated ligands must be provided"


def validate_ligands(ligands: Sequence[str]) -> List[str]:
    """Return ligands as a list, raising InvalidArityError unless six non-empty labels."""
    ligands = list(ligands)
    if len(ligands) != LIGAND_COUNT:
        raise InvalidArityError(len(ligands), ARITY_MESSAGE)
    if any(not label for label in ligands):
        raise InvalidArityError(sum(1 for label in ligands if label), ARITY_MESSAGE)
    return ligands


def parse_ligand_list(text: Optional[str]) -> List[str]:
    """
    Split free text such as "Cl, Cl, NH3, NH3, H2O, H2O" into six labels.

    Surrounding whitespace is stripped from the text and from every label.

    Raises:
        InvalidArityError: blank text, empty labels or a count other than six
    """
    if text is None or not text.strip():
        raise InvalidArityError(0, ARITY_MESSAGE)
    return validate_ligands(label.strip() for label in text.strip().split(','))
