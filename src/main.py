#!/usr/bin/env python3
"""Main entry point: run one or more of the demos."""

import argparse
import logging

import arithmetic
import fibonacci
import loops

__version__ = "0.1.0"

DEMOS = {
    "fibonacci": fibonacci.main,
    "loops": loops.main,
    "arithmetic": arithmetic.main,
}


def main(argv=None):
    """Parse arguments and run the selected demos in order."""
    parser = argparse.ArgumentParser(
        description="Run the basic language demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  basic-demos                   # Run every demo
  basic-demos loops arithmetic  # Run only these two, in this order
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'basic-demos v{__version__}'
    )

    parser.add_argument(
        'demos',
        nargs='*',
        help=f"Demos to run (default: all). Choices: {', '.join(DEMOS)}"
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging on stderr'
    )

    args = parser.parse_args(argv)

    unknown = [name for name in args.demos if name not in DEMOS]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )

    for name in args.demos or list(DEMOS):
        DEMOS[name]()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
