# -*- coding: ascii -*-
"""Command line interface."""

import argparse
import logging
import sys
from typing import Dict, Any, List, Optional

from .config import LOG_LEVELS, load_config
from .enumerator import EnumConfig, generate_with_stats
from .errors import BailerError, ConfigError
from .io_utils import append_text, create_session_file, results_to_records, write_table
from .ligands import parse_ligand_list
from .report import format_block, format_results

LOG = logging.getLogger(__name__)

PROMPT = "6 Ligands, comma separated: "


def configure_logging(level: str) -> None:
    """Configure Python logging for the CLI run."""
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(levelname)s - %(name)s - %(message)s'
    )
    logging.getLogger().setLevel(getattr(logging, level))


def apply_cli_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """CLI flags take precedence over config file values."""
    if args.outdir is not None:
        config['output']['outdir'] = args.outdir
    if args.table is not None:
        if not args.table.endswith(('.csv', '.parquet')):
            raise ConfigError(f"Unsupported table format: {args.table}")
        config['output']['table'] = args.table
    if args.no_session_file:
        config['output']['session_file'] = False
    if args.no_dedup:
        config['engine']['dedup'] = False
    if args.no_enantiomers:
        config['engine']['enantiomers'] = False
    if args.quiet:
        config['logging']['level'] = 'ERROR'
    elif args.log_level is not None:
        config['logging']['level'] = args.log_level
    return config


class Session:
    """One run of the tool: a session file plus any number of ligand lists."""

    def __init__(self, config: Dict[str, Any], out=None):
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.enum_cfg = EnumConfig.from_dict(config.get('engine'))
        self.session_path: Optional[str] = None
        self.records: List[Dict[str, Any]] = []

    def echo(self, text: str = "") -> None:
        print(text, file=self.out)

    def open(self) -> None:
        """Create the session file, if enabled."""
        output_cfg = self.config['output']
        if not output_cfg.get('session_file', True):
            return
        self.session_path = create_session_file(output_cfg.get('outdir') or '.')
        self.echo(f"Compounds generated during this session will be stored in: {self.session_path}")

    def process(self, text: Optional[str]) -> bool:
        """
        Enumerate one comma separated ligand list and emit the results.

        Returns:
            False if the input was rejected, True otherwise
        """
        try:
            ligands = parse_ligand_list(text)
        except BailerError as e:
            LOG.debug(f"Rejected input {text!r}: {e}")
            self.echo(f"*** {e}")
            return False

        ligands_text = text.strip()
        results, stats = generate_with_stats(ligands, self.enum_cfg)
        LOG.debug(f"Enumeration stats: {stats}")

        self.echo()
        for line in format_results(results):
            self.echo(line)

        if self.session_path:
            append_text(self.session_path, format_block(ligands_text, results))
        if self.config['output'].get('table'):
            self.records.extend(results_to_records(ligands_text, results))
        return True

    def close(self) -> None:
        table = self.config['output'].get('table')
        if table and self.records:
            write_table(self.records, table)
            LOG.info(f"Wrote {len(self.records)} rows to {table}")


def run_interactive(session: Session) -> int:
    """Read ligand lists until an empty line or end of input."""
    while True:
        session.echo(PROMPT)
        try:
            line = input()
        except EOFError:
            break
        if not line.strip():
            break
        session.process(line)
    return 0


def run_batch(session: Session, ligand_lists: List[str]) -> int:
    failures = 0
    for text in ligand_lists:
        if not session.process(text):
            failures += 1
    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bailer',
        description='Bailer: enumerate stereoisomers of octahedral complexes',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('-c', '--config', help='Configuration file path (YAML)')
    parser.add_argument('-l', '--ligands', action='append', metavar='LIST',
                        help='Comma separated list of six ligands; repeatable. Without it, ligands are read interactively')
    parser.add_argument('--outdir', help='Directory for the session file (default: current directory)')
    parser.add_argument('--table', help='Also export results to a .csv or .parquet table')
    parser.add_argument('--no-session-file', dest='no_session_file', action='store_true', default=False,
                        help='Do not write the timestamped session file')
    parser.add_argument('--no-dedup', dest='no_dedup', action='store_true', default=False,
                        help='Disable trans-pair deduplication (raw mode - keep every generated candidate)')
    parser.add_argument('--no-enantiomers', dest='no_enantiomers', action='store_true', default=False,
                        help='Do not insert enantiomers after chiral complexes')
    parser.add_argument('--log-level', choices=list(LOG_LEVELS), default=None,
                        help='Set logging level (default: INFO, or the config value)')
    parser.add_argument('--quiet', action='store_true', help='Suppress all but error messages (equivalent to --log-level ERROR)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_cli_overrides(load_config(args.config), args)
    except ConfigError as e:
        print(f"*** {e}", file=sys.stderr)
        return 1

    configure_logging(config['logging']['level'])

    session = Session(config)
    try:
        session.open()
    except OSError as e:
        print(f"*** Failed to create output file: {e}")
        return 1

    if args.ligands:
        status = run_batch(session, args.ligands)
    else:
        status = run_interactive(session)

    session.close()
    return status


if __name__ == "__main__":
    sys.exit(main())
