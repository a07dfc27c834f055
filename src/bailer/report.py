# -*- coding: ascii -*-
"""Text rendering of enumeration results."""

from typing import List, Sequence

from .assignment import LigandAssignment
from .enumerator import summarize
from .schema import FORMAT_DIAGRAM


def format_header() -> str:
    """Position diagram written at the top of every session file."""
    lines = ["Ligand Assignment Format:"]
    lines.extend(FORMAT_DIAGRAM)
    return "\n".join(lines) + "\n"


def format_summary(results: Sequence[LigandAssignment]) -> str:
    total, pairs = summarize(results)
    return f"{total} Resulting Complexes ({pairs} Enantiomer Pairs):"


def format_complex(assignment: LigandAssignment) -> str:
    return str(assignment)


def format_results(results: Sequence[LigandAssignment]) -> List[str]:
    """Summary line followed by one line per complex, in result order."""
    return [format_summary(results)] + [format_complex(a) for a in results]


def format_block(ligands_text: str, results: Sequence[LigandAssignment]) -> str:
    """Session file block for one processed ligand list."""
    lines = ["", "", f"Ligands Given: {ligands_text}"]
    lines.extend(format_results(results))
    return "\n".join(lines) + "\n"
