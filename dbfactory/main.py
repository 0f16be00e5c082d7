"""
Main entry point for checking configured database connections.

Provides CLI interface for resolving and testing connections.
"""

import argparse
import sys

from dbfactory.checker import ROLE_CHOICES, ConnectionChecker
from dbfactory.config_loader import ConfigError, load_config
from dbfactory.factory import ConnectionFactory
from dbfactory.log import setup_logging
from dbfactory.reporters import print_report, save_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='dbfactory - Resolve and test configured database connections',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Check the default connection
  python -m dbfactory.main --config config/database.yaml

  # Check a random read replica of a named connection
  python -m dbfactory.main --config config/database.yaml --connection main --role read

  # Save the result for monitoring
  python -m dbfactory.main --config config/database.yaml --output reports/
'''
    )

    parser.add_argument(
        '--config', '-c',
        required=True,
        help='Path to connections YAML file'
    )

    parser.add_argument(
        '--connection', '-n',
        help='Name of database connection to check (default: configured default)'
    )

    parser.add_argument(
        '--role', '-r',
        choices=ROLE_CHOICES,
        default='default',
        help='Endpoint to check: the base config, a read replica, or the write host'
    )

    parser.add_argument(
        '--output', '-o',
        help='Directory to save JSON result'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log replica selection and driver dispatch'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress console output (only save to file)'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(['dbfactory'], debug=args.verbose)

    try:
        config = load_config(args.config)
        checker = ConnectionChecker(config, ConnectionFactory())

        result = checker.check(args.connection, args.role)

        if not args.quiet:
            print_report(result, use_rich=not args.no_color)

        if args.output:
            report_path, history_path = save_report(result, args.output)
            if not args.quiet:
                print(f"Result saved to: {report_path}")
                print(f"History updated: {history_path}")

        return 0 if result.passed else 1

    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
