#!/usr/bin/env python3
"""Command-line tool for evaluating ICalc expressions."""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from icalc import ICalc, ICalcError


def main() -> int:
    """Main entry point for the ICalc evaluator CLI."""
    parser = argparse.ArgumentParser(
        description='Evaluate an ICalc integer arithmetic expression',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evaluate an expression
  icalc_eval "2 + 3 * 4"

  # Evaluate from stdin
  echo "(2 + 3) * 4" | icalc_eval -

  # Show the parsed expression tree instead of the result
  icalc_eval --tree "10 - 2 - 3"

  # Accept malformed input the permissive way
  icalc_eval --lenient "1 + x"
"""
    )
    parser.add_argument(
        'expression',
        help='Expression to evaluate (use "-" for stdin)'
    )
    parser.add_argument(
        '--lenient',
        action='store_true',
        help='Treat invalid characters as end of input and missing operands as 0'
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=100,
        help='Maximum nesting depth (default: 100)'
    )
    parser.add_argument(
        '--tree',
        action='store_true',
        help='Print the fully parenthesized expression tree instead of evaluating'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    expression = sys.stdin.read().strip() if args.expression == '-' else args.expression

    calculator = ICalc(max_depth=args.max_depth, strict=not args.lenient)

    try:
        if args.tree:
            print(calculator.parse(expression).describe())

        else:
            print(calculator.evaluate_and_format(expression))

    except ICalcError as e:
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
