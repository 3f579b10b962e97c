# src/corp_finance/cli.py
"""
cli.py

Command-line entry point for the three-statement model.

Usage:
    corp-finance three-statement --input model.yaml
    corp-finance --output table three-statement --input model.json
    cat model.json | corp-finance three-statement
    corp-finance sample-input > model.json
    corp-finance version
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import SAMPLE_INPUT, configure_logging, load_model_input, parse_model_input
from .exceptions import CorpFinanceError
from .models.financial_model import build_three_statement_model
from .reporting.statement_printer import OUTPUT_FORMATS, format_output

logger = logging.getLogger(__name__)


def _global_options(suppress_defaults: bool) -> argparse.ArgumentParser:
    # Shared so the options work before or after the subcommand
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        '--output', '-o', choices=OUTPUT_FORMATS,
        default=argparse.SUPPRESS if suppress_defaults else 'json',
        help='Output format (default: json)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        default=argparse.SUPPRESS if suppress_defaults else False,
        help='Enable debug logging'
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='corp-finance',
        description='Linked three-statement financial model',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=[_global_options(suppress_defaults=False)],
        epilog="""
Examples:
  corp-finance three-statement --input model.yaml          # YAML input
  corp-finance -o table three-statement --input model.json # Console tables
  corp-finance sample-input | corp-finance three-statement # Stdin JSON
        """
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True
    sub_options = _global_options(suppress_defaults=True)

    model_parser = subparsers.add_parser(
        'three-statement', parents=[sub_options],
        help='Project income statement, balance sheet and cash flow statement'
    )
    model_parser.add_argument(
        '--input', '-i', dest='input_file', default=None,
        help='YAML or JSON input file (reads JSON from stdin if omitted)'
    )

    subparsers.add_parser(
        'sample-input', parents=[sub_options],
        help='Print the reference scenario as JSON'
    )
    subparsers.add_parser(
        'version', parents=[sub_options],
        help='Print the package version'
    )
    return parser


def run_three_statement(args: argparse.Namespace) -> str:
    if args.input_file:
        model_input = load_model_input(args.input_file)
    else:
        logger.debug("Reading model input from stdin")
        model_input = parse_model_input(sys.stdin.read(), fmt='json')

    output = build_three_statement_model(model_input)
    return format_output(output, args.output)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == 'three-statement':
            print(run_three_statement(args))
        elif args.command == 'sample-input':
            print(json.dumps(SAMPLE_INPUT, indent=2))
        elif args.command == 'version':
            print(f"corp-finance {__version__}")
        return 0

    except (CorpFinanceError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
