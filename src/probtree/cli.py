"""
probtree.cli - Command-line interface.

Main entry point for the probtree CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from probtree import __version__
from probtree.commands import config_cmd, init_cmd, parse_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="probtree",
        description="Turn indented outlines into probability-tree graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Outline syntax (one node per line, nesting by indentation):
  [id] edge-label: node label
  [id] edge-label: (linked id or label)

Examples:
  probtree parse tree.txt              # Print renderer JSON
  probtree parse tree.txt -f text      # Print a readable listing
  probtree parse - --offset 40         # Read stdin, shift line numbers
  probtree parse tree.txt --warnings   # Report unparsed weights, orphans

Configuration:
  probtree init                        # Create .probtree.toml here
  probtree config path                 # Show config file location
  probtree config show                 # Show effective settings
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"probtree {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (debug logging, full tracebacks)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse an outline into graph elements",
    )
    parse_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Outline file (default: stdin)",
    )
    parse_parser.add_argument(
        "--offset",
        type=int,
        help="Add N to every line number (text is a slice of a larger document)",
        metavar="N",
    )
    parse_parser.add_argument(
        "-f",
        "--format",
        choices=["json", "text"],
        help="Output format (default from config: json)",
    )
    parse_parser.add_argument(
        "--sizer",
        choices=["none", "estimate"],
        help="Attach estimated box sizes to nodes",
    )
    parse_parser.add_argument(
        "-w",
        "--warnings",
        action="store_true",
        help="Print parse warnings to stderr",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_parser.add_argument(
        "config_action",
        nargs="?",
        choices=["show", "path"],
        default="show",
        help="show: effective settings, path: config file location",
    )

    # init command
    init_parser = subparsers.add_parser(
        "init",
        help="Create .probtree.toml configuration",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing configuration",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install probtree[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "parse":
            return parse_cmd.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "init":
            return init_cmd.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
