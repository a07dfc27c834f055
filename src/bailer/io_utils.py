# -*- coding: ascii -*-
"""Input/output utilities."""

import os
from datetime import datetime
from typing import List, Dict, Any, Optional, Sequence

import pandas as pd

from .assignment import LigandAssignment
from .enumerator import enantiomer_partners
from .report import format_header
from .schema import TABLE_COLUMNS

SESSION_SUFFIX = "_Compounds.txt"


def session_file_name(now: Optional[datetime] = None) -> str:
    """Timestamped session file name, e.g. 20261019-142501_Compounds.txt."""
    if now is None:
        now = datetime.now()
    return now.strftime("%Y%m%d-%H%M%S") + SESSION_SUFFIX


def create_session_file(outdir: str, now: Optional[datetime] = None) -> str:
    """
    Create the session file in outdir and write the position diagram header.

    Returns:
        Path of the created file

    Raises:
        OSError: if the directory or file cannot be created
    """
    if outdir:
        os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir or ".", session_file_name(now))
    with open(path, 'w', encoding='utf-8') as f:
        f.write(format_header())
    return path


def append_text(path: str, text: str) -> None:
    with open(path, 'a', encoding='utf-8') as f:
        f.write(text)


def results_to_records(ligands_text: str, results: Sequence[LigandAssignment]) -> List[Dict[str, Any]]:
    """One table record per complex; enantiomers reference their source index."""
    partners = enantiomer_partners(results)
    records = []
    for idx, assignment in enumerate(results):
        record = {'input': ligands_text, 'index': idx}
        record.update(assignment.to_record())
        record['enantiomer_of'] = partners.get(idx)
        records.append(record)
    return records


def write_table(records: List[Dict[str, Any]], path: str) -> None:
    """Write table file (parquet/csv)."""
    if not records:
        return

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    df = pd.DataFrame(records, columns=list(TABLE_COLUMNS))
    df['enantiomer_of'] = pd.array([r.get('enantiomer_of') for r in records], dtype='Int64')

    if path.endswith('.parquet'):
        df.to_parquet(path, index=False)
    elif path.endswith('.csv'):
        df.to_csv(path, index=False)
    else:
        raise ValueError(f"Unsupported file format: {path}")


def read_table(path: str) -> List[Dict[str, Any]]:
    """Read table file (parquet/csv) back into records."""
    if not os.path.exists(path):
        return []

    if path.endswith('.parquet'):
        df = pd.read_parquet(path)
    elif path.endswith('.csv'):
        df = pd.read_csv(path, dtype={name: str for name in ('input', 'A', 'B', 'C', 'D', 'E', 'F', 'trans_pairs')},
                         keep_default_na=False, na_values={'enantiomer_of': ['']})
        df['enantiomer_of'] = df['enantiomer_of'].astype('Int64')
    else:
        raise ValueError(f"Unsupported file format: {path}")

    records = df.to_dict('records')
    for record in records:
        if pd.isna(record['enantiomer_of']):
            record['enantiomer_of'] = None
        else:
            record['enantiomer_of'] = int(record['enantiomer_of'])
        record['index'] = int(record['index'])
        record['chiral'] = bool(record['chiral'])
    return records
