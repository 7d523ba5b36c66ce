"""
Command line entry point.

    python -m crunch_str "how are your metrics?" 15
    echo "a very long string" | python -m crunch_str - 9 --stats
"""

import argparse
import logging
import sys

from .crunch import crunch_with_stats
from .substitution_pack import load_substitution_pack


def _non_negative(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"target must be non-negative, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="crunch-str",
        description="Shorten a string to a target length, least meaningful letters first",
    )
    parser.add_argument('text', help="Text to crunch, or - to read from stdin")
    parser.add_argument('target', type=_non_negative, help="Maximum length in UTF-8 bytes")
    parser.add_argument('--pack', action='append', default=[],
                        help="Substitution pack name or JSON path (repeatable)")
    parser.add_argument('--stats', action='store_true', help="Print lengths and savings too")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    text = sys.stdin.read().rstrip("\n") if args.text == "-" else args.text

    extra = {}
    for pack in args.pack:
        try:
            extra.update(load_substitution_pack(pack))
        except (FileNotFoundError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    try:
        result = crunch_with_stats(text, args.target, extra_substitutions=extra)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result.text)
    if args.stats:
        print(f"  length:       {result.original_length} -> {result.crunched_length} (target {result.target})")
        print(f"  saved:        {result.bytes_saved} bytes ({result.savings_pct}%)")
        print(f"  fits:         {result.fits}")
        print(f"  acronym:      {result.used_acronym}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
