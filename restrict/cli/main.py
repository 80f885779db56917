# restrict/cli/main.py
import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

import pandas as pd
from Bio.Seq import Seq

from restrict.config import ConfigManager
from restrict.core.logging_config import LoggingManager
from restrict.core.sequence_range import SequenceRange
from restrict.analysis.enzyme_action import EnzymeAction
from restrict.analysis.digest import Digest
from restrict.error_handlers import handle_exceptions
from restrict.exceptions import ValidationError
from restrict.models.fragment import DisplayFragments


def _optional_int(text: str, what: str) -> Optional[int]:
    text = text.strip()
    if text == '':
        return None
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"Invalid {what}: {text!r} is not an integer") from None


def parse_cut(text: str) -> Tuple[Optional[int], ...]:
    """Parse 'PL,PR,CL,CR'; empty fields are unset"""
    parts = text.split(',')
    if len(parts) != 4:
        raise ValidationError(f"Cut must have four comma separated fields, got {text!r}")
    return tuple(_optional_int(part, "cut index") for part in parts)


def parse_hcut(text: str) -> Tuple[int, Optional[int]]:
    """Parse 'L' or 'L:R'"""
    left, _, right = text.partition(':')
    left_value = _optional_int(left, "horizontal cut")
    if left_value is None:
        raise ValidationError(f"Horizontal cut needs a left index, got {text!r}")
    return left_value, _optional_int(right, "horizontal cut") if right else None


def parse_tag(text: str) -> Tuple[int, str]:
    """Parse 'INDEX=INFO'"""
    index, sep, info = text.partition('=')
    index_value = _optional_int(index, "tag index")
    if index_value is None or not sep:
        raise ValidationError(f"Tag must look like INDEX=INFO, got {text!r}")
    return index_value, info


def parse_action(text: str) -> EnzymeAction:
    """Parse 'OFFSET:LENGTH:P/C[,P/C...]' into an EnzymeAction"""
    fields = text.split(':')
    if len(fields) != 3:
        raise ValidationError(f"Action must look like OFFSET:LENGTH:P/C[,P/C], got {text!r}")
    offset = _optional_int(fields[0], "action offset")
    length = _optional_int(fields[1], "site length")
    if offset is None or length is None:
        raise ValidationError(f"Action needs an offset and a site length, got {text!r}")

    pairs = []
    for pair in fields[2].split(','):
        p, sep, c = pair.partition('/')
        if not sep:
            raise ValidationError(f"Cut location must look like P/C, got {pair!r}")
        pairs.append((_optional_int(p, "primary cut location"), _optional_int(c, "complement cut location")))
    return EnzymeAction.at_offset(offset, length, pairs)


def _emit(records: List[dict], output_format: str, extra: Optional[dict] = None) -> None:
    if output_format == 'json':
        payload = dict(extra or {})
        payload['fragments'] = records
        print(json.dumps(payload, indent=2))
    elif output_format == 'tsv':
        pd.DataFrame(records).to_csv(sys.stdout, sep='\t', index=False)
    else:
        for record in records:
            print(f"Fragment {record['fragment']}")
            print(f"  5' {record['primary']}")
            print(f"  3' {record['complement']}")


def _display_records(display_fragments: DisplayFragments) -> List[dict]:
    return [{'fragment': number, 'primary': df.primary, 'complement': df.complement}
            for number, df in enumerate(display_fragments, start=1)]


def run_fragments(args, config_manager: ConfigManager, logger: logging.Logger) -> int:
    """Cut a range of --length bases and print its fragments"""
    if args.length < 1:
        raise ValidationError(f"Length must be positive, got {args.length}")

    right = args.start + args.length - 1
    sequence_range = SequenceRange(args.start, right, args.start, right, circular=args.circular)
    display = config_manager.get_display_config()
    sequence_range.placeholder = display.get('placeholder', sequence_range.placeholder)
    sequence_range.blank = display.get('blank', sequence_range.blank)

    for cut in args.cut or []:
        sequence_range.add_cut_range(*parse_cut(cut))
    for hcut in args.hcut or []:
        sequence_range.add_horizontal_cut_range(*parse_hcut(hcut))
    for tag in args.tag or []:
        sequence_range.add_tag(*parse_tag(tag))

    fragments = sequence_range.fragments
    if args.primary is not None:
        if len(args.primary) != args.length:
            raise ValidationError(f"Primary strand has {len(args.primary)} bases, expected {args.length}")
        fragments.primary_strand = args.primary
        if args.complement is None:
            fragments.complement_strand = str(Seq(args.primary).complement())
    if args.complement is not None:
        if len(args.complement) != args.length:
            raise ValidationError(f"Complement strand has {len(args.complement)} bases, expected {args.length}")
        fragments.complement_strand = args.complement

    logger.info(f"{len(fragments)} fragment(s) from {len(sequence_range.cut_ranges)} cut range(s)")

    cuts = sequence_range.calculate_cuts()
    _emit(fragments.to_records(), args.format, extra={
        'vc_primary': cuts.vc_primary,
        'vc_complement': cuts.vc_complement,
        'hc_between_strands': cuts.hc_between_strands,
    })
    return 0


def run_digest(args, config_manager: ConfigManager, logger: logging.Logger) -> int:
    """Digest --sequence with the given enzyme actions"""
    actions = [parse_action(action) for action in args.action or []]
    runner = Digest(args.sequence, actions, config=config_manager)

    if args.no_permutations:
        display_fragments = runner.cut_without_permutations()
    else:
        display_fragments = runner.cut()

    logger.info(f"Digest produced {len(display_fragments)} distinct fragment(s)")
    _emit(_display_records(display_fragments), args.format, extra={
        'primary': display_fragments.primary,
        'complement': display_fragments.complement,
    })
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='restrict',
                                     description='Restriction enzyme cut reduction and fragment assembly')

    # Global options
    parser.add_argument('--config', type=str, help='Path to configuration file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity (can be used multiple times)')
    parser.add_argument('--log-file', type=str,
                        help='Log to file in addition to stderr')
    parser.add_argument('--log-dir', type=str,
                        help='Directory for log files')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    fragments_parser = subparsers.add_parser('fragments', help='Assemble fragments from declared cuts')
    fragments_parser.add_argument('--length', type=int, required=True,
                                  help='Number of bases in the range')
    fragments_parser.add_argument('--start', type=int, default=0,
                                  help='Index of the first base')
    fragments_parser.add_argument('--circular', action='store_true',
                                  help='Treat the molecule as circular')
    fragments_parser.add_argument('--cut', action='append', metavar='PL,PR,CL,CR',
                                  help='Vertical cut range; leave a field empty to unset it')
    fragments_parser.add_argument('--hcut', action='append', metavar='L[:R]',
                                  help='Horizontal cut range between the strands')
    fragments_parser.add_argument('--tag', action='append', metavar='INDEX=INFO',
                                  help='Annotate a cut index')
    fragments_parser.add_argument('--primary', type=str, help='Primary strand text')
    fragments_parser.add_argument('--complement', type=str,
                                  help='Complementary strand text (default: complement of --primary)')
    fragments_parser.add_argument('--format', choices=['text', 'json', 'tsv'], default='text')

    digest_parser = subparsers.add_parser('digest', help='Digest a sequence with enzyme actions')
    digest_parser.add_argument('--sequence', type=str, required=True, help='Primary strand')
    digest_parser.add_argument('--action', action='append', metavar='OFFSET:LENGTH:P/C[,P/C]',
                               help='Enzyme acting on a site at OFFSET with the given cut locations')
    digest_parser.add_argument('--no-permutations', action='store_true',
                               help='Let every action cut, ignoring conflicts between them')
    digest_parser.add_argument('--format', choices=['text', 'json', 'tsv'], default='text')

    return parser


@handle_exceptions(exit_on_error=False)
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config_manager = ConfigManager(args.config)

    logger = LoggingManager.configure(
        verbose=args.verbose > 0,
        log_file=args.log_file,
        log_dir=args.log_dir,
        component="restrict",
        config=config_manager.config
    )

    if args.command == 'fragments':
        return run_fragments(args, config_manager, logger)
    elif args.command == 'digest':
        return run_digest(args, config_manager, logger)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
