"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from pattern_catalog import __version__
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.domain.base.exceptions import DomainException
from pattern_catalog.infrastructure.logging.logger import get_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description="Pattern Catalog - runnable design-pattern examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                        # List all examples
  %(prog)s list --format json          # List as JSON
  %(prog)s run "Simple Factory"        # Run one example
  %(prog)s run Bridge Prototype        # Run several examples
  %(prog)s run --all                   # Run the whole catalogue
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List registered examples')
    list_parser.add_argument('--format', choices=['text', 'json'], default='text',
                             help='Output format')

    run_parser = subparsers.add_parser('run', help='Run examples')
    run_parser.add_argument('examples', nargs='*', metavar='LABEL',
                            help='Example labels to run (default: all)')
    run_parser.add_argument('--all', action='store_true', help='Run every example')

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, app) -> Optional[Dict[str, Any]]:
    """Route a parsed command to the application; returns data to print, if any."""
    registry = app.registry

    if args.command == 'list':
        return {
            "examples": [
                {"description": r.description, "pattern": r.pattern}
                for r in registry.get_registrations()
            ]
        }

    if args.command == 'run':
        if args.all or not args.examples:
            registry.run_all()
            return None
        # Validate every label before running any of them
        for label in args.examples:
            registry.get_registration(label)
        for label in args.examples:
            registry.run(label)
        return None

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.",
                  file=sys.stderr)
            sys.exit(1)

        # Initialize application
        try:
            from pattern_catalog.bootstrap import create_application
            app = create_application(args.config, args.log_level)
        except DomainException as e:
            logger.error("Failed to initialize application", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        # Execute command
        try:
            result = execute_command(args, app)
            if result is not None:
                print(format_output(result, args.format))
        except DomainException as e:
            logger.error("Domain error", error=str(e), error_code=e.error_code)
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
