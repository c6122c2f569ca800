#!/usr/bin/env python3
"""fifthtune - Circle-of-fifths tuning offsets from the command line."""

import argparse
import json
import logging
import re
import sys
from fractions import Fraction

from .config import get_tuning_config, get_config
from .paths import config_file
from .spelling import extract_note_names, name_to_tpc, split_note_tokens, tpc_to_name
from .tuning import (
    DEFAULT_FIFTH,
    JUST_FIFTH,
    LARGEST_DIATONIC_FIFTH,
    NOTE_LETTERS,
    SMALLEST_DIATONIC_FIFTH,
    SYNTONIC_COMMA,
    circle_of_fifths_distance,
    circle_of_fifths_tuning_offset,
    comma_fraction_fifth,
    deviation_from_fifth,
    edo_fifth,
    is_diatonic_fifth,
)

log = logging.getLogger(__name__)

TPC_PATTERN = re.compile(r"^-?\d+$")


def parse_note(token: str) -> int:
    """Parse a note given as a name ('Eb') or a raw tpc ('11')."""
    if TPC_PATTERN.match(token):
        return int(token)
    return name_to_tpc(token)


def resolve_fifth_size(args: argparse.Namespace, default: float) -> float:
    """Pick the fifth size from whichever option was given."""
    if args.deviation is not None:
        return DEFAULT_FIFTH + args.deviation
    if args.comma is not None:
        return comma_fraction_fifth(float(Fraction(args.comma)))
    if args.edo is not None:
        return edo_fifth(args.edo)
    if args.fifth is not None:
        return args.fifth
    return default


def format_cents(cents: float, precision: int) -> str:
    # + 0.0 turns -0.0 into 0.0
    return f"{round(cents, precision) + 0.0:+.{precision}f}"


def cmd_offset(args: argparse.Namespace) -> int:
    """Print the tuning offset of each note."""
    tuning = get_tuning_config()
    reference = (args.reference or tuning["reference_note"]).upper()
    precision = tuning["precision"]

    fifth_size = resolve_fifth_size(args, tuning["fifth_size"])
    deviation = deviation_from_fifth(fifth_size)
    log.debug("fifth %.3f cents, deviation %.3f, reference %s", fifth_size, deviation, reference)

    if not is_diatonic_fifth(fifth_size):
        print(
            f"Warning: fifth of {fifth_size:.3f} cents is outside the diatonic range",
            file=sys.stderr,
        )

    tokens = [t for arg in args.notes for t in split_note_tokens(arg)]
    if args.text:
        tokens.extend(extract_note_names(args.text))
    if not tokens:
        raise ValueError("No notes given")

    for token in tokens:
        tpc = parse_note(token)
        offset = circle_of_fifths_tuning_offset(tpc, deviation, reference)
        print(f"{tpc_to_name(tpc):<6} {tpc:>4}  {format_cents(offset, precision)}")
    return 0


def cmd_distance(args: argparse.Namespace) -> int:
    """Print the circle-of-fifths distance between two letters."""
    print(circle_of_fifths_distance(args.note1.upper(), args.note2.upper()))
    return 0


def cmd_constants(args: argparse.Namespace) -> int:
    """Print the reference interval sizes."""
    constants = [
        ("Just fifth", JUST_FIFTH),
        ("12EDO fifth", DEFAULT_FIFTH),
        ("Smallest diatonic fifth", SMALLEST_DIATONIC_FIFTH),
        ("Largest diatonic fifth", LARGEST_DIATONIC_FIFTH),
        ("Syntonic comma", SYNTONIC_COMMA),
    ]
    for label, cents in constants:
        print(f"  {label:<25} {cents:.3f}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Show config file location and contents."""
    config = get_config()
    print(f"Config file: {config_file()}")
    print(json.dumps(config, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="fifthtune",
        description="Circle-of-fifths tuning offsets for fifth-based temperaments",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # offset command
    offset_parser = subparsers.add_parser("offset", help="Tuning offset of notes in cents")
    offset_parser.add_argument(
        "notes", nargs="*",
        help="Note names (Eb, F#) or tonal pitch classes (11, 20); commas also separate",
    )
    offset_parser.add_argument(
        "-t", "--text", help="Free text to pick note names out of (other words are skipped)"
    )
    fifth_group = offset_parser.add_mutually_exclusive_group()
    fifth_group.add_argument("-f", "--fifth", type=float, help="Fifth size in cents")
    fifth_group.add_argument(
        "-d", "--deviation", type=float, help="Fifth deviation from 700 cents"
    )
    fifth_group.add_argument(
        "-c", "--comma", help="Fraction of a syntonic comma to narrow the fifth by (e.g. 1/4)"
    )
    fifth_group.add_argument("-e", "--edo", type=int, help="Use the fifth of N-EDO")
    offset_parser.add_argument(
        "-r", "--reference", choices=NOTE_LETTERS, type=str.upper,
        help="Reference note letter (default from config, usually A)",
    )
    offset_parser.set_defaults(func=cmd_offset)

    # distance command
    distance_parser = subparsers.add_parser(
        "distance", help="Circle-of-fifths distance between two note letters"
    )
    distance_parser.add_argument("note1", help="First note letter")
    distance_parser.add_argument("note2", help="Second note letter")
    distance_parser.set_defaults(func=cmd_distance)

    # constants command
    constants_parser = subparsers.add_parser("constants", help="Show reference sizes in cents")
    constants_parser.set_defaults(func=cmd_constants)

    # config command
    config_parser = subparsers.add_parser("config", help="Show configuration")
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (ValueError, ZeroDivisionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
