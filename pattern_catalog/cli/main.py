"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and exit codes
"""
import argparse
import os
import sys
import traceback
from typing import List, Optional

from pattern_catalog._package import __version__
from pattern_catalog.cli.formatters import FORMATS, format_output
from pattern_catalog.config.schemas import LoggingConfig
from pattern_catalog.domain.base.exceptions import DomainException
from pattern_catalog.domain.pattern import PatternCategory, PatternStatus
from pattern_catalog.infrastructure.error import HandledError, get_exception_handler
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.markdown import RULES


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description="Design pattern catalogue - browse, render and lint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list --format table        # List all patterns
  %(prog)s patterns show singleton             # Show an entry with its sample
  %(prog)s patterns demo observer              # Run a sample
  %(prog)s catalog render --output README.md   # Render the markdown catalogue
  %(prog)s catalog lint README.md --strict     # Check a markdown catalogue
  %(prog)s catalog consolidate README.md       # Merge concatenated drafts
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level (overrides configuration)')
    parser.add_argument('--format', choices=FORMATS, default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Patterns resource
    patterns_parser = subparsers.add_parser('patterns', help='Browse catalogue entries')
    patterns_subparsers = patterns_parser.add_subparsers(dest='action', help='Pattern actions')

    patterns_list = patterns_subparsers.add_parser('list', help='List patterns')
    patterns_list.add_argument('--category', choices=[c.value for c in PatternCategory],
                               help='Filter by category')
    patterns_list.add_argument('--status', choices=[s.value for s in PatternStatus],
                               help='Filter by status')

    patterns_show = patterns_subparsers.add_parser('show', help='Show a pattern with its sample')
    patterns_show.add_argument('slug', help='Pattern slug, e.g. abstract-factory')

    patterns_demo = patterns_subparsers.add_parser('demo', help='Run the sample of a pattern')
    patterns_demo.add_argument('slug', help='Pattern slug')

    patterns_subparsers.add_parser('validate', help='Check catalogue data and samples')

    # Catalog resource
    catalog_parser = subparsers.add_parser('catalog', help='Render and check markdown catalogues')
    catalog_subparsers = catalog_parser.add_subparsers(dest='action', help='Catalog actions')

    catalog_render = catalog_subparsers.add_parser('render', help='Render the markdown catalogue')
    catalog_render.add_argument('--no-stubs', action='store_true', help='Leave out stub entries')
    catalog_render.add_argument('--no-output', action='store_true',
                                help='Leave out the output of the samples')
    catalog_render.add_argument('--title', help='Catalogue title')

    catalog_lint = catalog_subparsers.add_parser('lint', help='Lint a markdown catalogue')
    catalog_lint.add_argument('file', help="Markdown file ('-' for stdin)")
    catalog_lint.add_argument('--strict', action='store_true', help='Fail on warnings too')
    catalog_lint.add_argument('--disable', action='append', metavar='RULE',
                              choices=sorted(RULES), help='Disable a rule (repeatable)')

    catalog_consolidate = catalog_subparsers.add_parser(
        'consolidate', help='Merge concatenated drafts into one document')
    catalog_consolidate.add_argument('file', help="Markdown file ('-' for stdin)")
    catalog_consolidate.add_argument('--regenerate-toc', action='store_true',
                                     help='Rebuild the table of contents from the merged headings')
    catalog_consolidate.add_argument('--stats', action='store_true',
                                     help='Print merge statistics instead of the document')

    catalog_toc = catalog_subparsers.add_parser('toc', help='Generate a table of contents')
    catalog_toc.add_argument('file', help="Markdown file ('-' for stdin)")

    # Config resource
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Config actions')

    config_subparsers.add_parser('show', help='Show effective configuration')

    config_validate = config_subparsers.add_parser('validate', help='Validate configuration')
    config_validate.add_argument('--file', help='Configuration file to validate')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args, app):
    """Execute the appropriate command handler."""
    # Import command handlers here to avoid circular imports
    from pattern_catalog.interface.command_handlers import COMMAND_HANDLERS

    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    handler = COMMAND_HANDLERS[handler_key](app, logger=get_logger(__name__))
    return handler.handle(args)


def _configure_logging(args, app) -> None:
    logging_config = app.config_manager.get_logging_config()
    if args.verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    elif args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)


def _write_output(text: str, args) -> None:
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text if text.endswith("\n") else text + "\n")
        if not args.quiet:
            print(f"Output written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
                  file=sys.stderr)
            sys.exit(1)

        # Startup logging stays silent until the configuration is loaded
        if args.verbose:
            setup_logging(LoggingConfig(level="DEBUG"))
        else:
            setup_logging(LoggingConfig(destination="none"))

        # Initialize application
        try:
            from pattern_catalog.bootstrap import create_application
            app = create_application(args.config, configure_logging=False)
            _configure_logging(args, app)
        except DomainException as e:
            response = get_exception_handler().handle(e)
            if not args.quiet:
                print(f"Error: {response.message}", file=sys.stderr)
            sys.exit(response.exit_code)

        # Execute command
        try:
            result = execute_command(args, app)
            _write_output(format_output(result.data, args.format), args)
            if result.exit_code:
                sys.exit(result.exit_code)

        except HandledError as e:
            if args.verbose and e.__cause__ is not None:
                traceback.print_exception(type(e.__cause__), e.__cause__, e.__cause__.__traceback__)
            if not args.quiet:
                print(f"Error: {e.response.message}", file=sys.stderr)
            sys.exit(e.response.exit_code)
        except OSError as e:
            logger.error("Failed to write output", error=str(e))
            if not args.quiet:
                print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
