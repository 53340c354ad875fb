"""
Command-line interface for belt center-to-center calculations.
"""

import argparse
import logging
import sys

from .. import __version__
from ..enums import BeltRouting, RoundingPolicy
from ..calculator.constants import DEFAULT_PITCH_NAME
from ..calculator.core import (
    STANDARD_PITCHES,
    design_from_spacing,
    mm_to_inches,
    pitch_from_name,
)
from ..calculator.errors import BeltCalcError, NoPhysicalSolutionError
from ..calculator.output import to_json, to_markdown, to_summary
from ..calculator.validation import Severity, validate_design, validate_inputs
from ..io.loaders import save_design_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contracalc",
        description="Find pulley center-to-center distance for a timing belt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input your desired pulley tooth counts, and desired spacing in inches.
Belts are assumed to be 5mm unless --pitch is given.

Examples:
  # Normal (untwisted) belt, 20T and 40T pulleys, about 5in apart
  contracalc 20 40 5

  # Contra (twisted) belt
  contracalc 20 30 4 --contra

  # Spacing given in millimeters, 3mm belt
  contracalc 20 40 127 --mm --pitch 3mm

  # Only the stock (multiple of 5) belt, as JSON
  contracalc 20 40 5 --policy rounded --format json

  # Keep the result
  contracalc 20 40 5 --save-json design.json
        """
    )

    parser.add_argument('pulley1_teeth', type=int, help='Pulley #1 tooth count')
    parser.add_argument('pulley2_teeth', type=int, help='Pulley #2 tooth count')
    parser.add_argument('spacing', type=float, help='Desired pulley spacing (inches, or mm with --mm)')

    parser.add_argument(
        '--contra',
        action='store_true',
        help='Twisted (contra) belt instead of a normal belt'
    )
    parser.add_argument(
        '--pitch',
        choices=sorted(STANDARD_PITCHES),
        default=DEFAULT_PITCH_NAME,
        help=f'Belt pitch (default: {DEFAULT_PITCH_NAME})'
    )
    parser.add_argument(
        '--mm',
        action='store_true',
        help='Desired spacing is in millimeters'
    )
    parser.add_argument(
        '--policy',
        action='append',
        choices=[p.value for p in RoundingPolicy],
        help='Belt option to report; repeat for several (default: all three)'
    )
    parser.add_argument(
        '--format',
        choices=['summary', 'markdown', 'json'],
        default='summary',
        help='Output format (default: summary)'
    )
    parser.add_argument(
        '--save-json',
        metavar='PATH',
        help='Also save the design as JSON'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug logging'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    routing = BeltRouting.CONTRA if args.contra else BeltRouting.NORMAL
    pitch = pitch_from_name(args.pitch)
    spacing = mm_to_inches(args.spacing) if args.mm else args.spacing
    policies = args.policy or [p.value for p in RoundingPolicy]

    checked = validate_inputs(args.pulley1_teeth, args.pulley2_teeth, spacing, routing, pitch)
    if not checked.valid:
        for msg in checked.errors:
            print(f"Error: {msg.message}", file=sys.stderr)
        return 1

    try:
        design = design_from_spacing(
            args.pulley1_teeth,
            args.pulley2_teeth,
            spacing,
            routing=routing,
            pitch=pitch,
            policies=policies
        )
    except NoPhysicalSolutionError as e:
        print(f"Error: No physical solution - {e}", file=sys.stderr)
        return 1
    except BeltCalcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    validation = validate_design(design)
    if not validation.valid:
        for msg in validation.errors:
            print(f"Error: {msg.message}", file=sys.stderr)
        print("Error: No physical solution - the selected belt cannot span these pulleys", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(to_json(design, validation))
    elif args.format == 'markdown':
        print(to_markdown(design, validation))
    else:
        print(to_summary(design))
        for msg in validation.messages:
            if msg.severity == Severity.WARNING:
                print(f"  ⚠️  {msg.message}")

    if args.save_json:
        try:
            save_design_json(design, args.save_json)
        except OSError as e:
            print(f"Error saving design: {e}", file=sys.stderr)
            return 1
        print(f"Saved design to {args.save_json}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
