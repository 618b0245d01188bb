"""
probtree.commands.parse_cmd - Parse an outline into graph elements.

Reads an outline from a file or stdin and prints the renderer's element
list as JSON, or a plain listing with --format text.
"""

import argparse
import sys
from pathlib import Path

from probtree.config import get_config
from probtree.graph.diagnostics import Diagnostics
from probtree.graph.factory import parse_text
from probtree.graph.serialize import to_json, to_text
from probtree.layout import sizer_from_config


def read_input(source: str) -> str:
    """Read outline text from a path, or stdin for "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def run(args: argparse.Namespace) -> int:
    """Run the parse command.

    Command-line options take precedence over the [parse], [layout] and
    [output] config sections.
    """
    config = get_config(args.config)

    if args.sizer:
        config["layout"]["sizer"] = args.sizer
    offset = args.offset if args.offset is not None else config["parse"]["starting_line_number"]
    output_format = args.format or config["output"]["format"]
    show_warnings = args.warnings or config["parse"]["warnings"]

    text = read_input(args.file)
    diagnostics = Diagnostics()
    elements = parse_text(
        text,
        starting_line_number=int(offset),
        sizer=sizer_from_config(config),
        diagnostics=diagnostics,
    )

    if output_format == "json":
        print(to_json(elements, indent=config["output"]["indent"]))
    elif output_format == "text":
        print(to_text(elements))
    else:
        print(f"Error: unknown output format: {output_format}", file=sys.stderr)
        return 1

    if show_warnings:
        for warning in diagnostics:
            print(f"Warning: {warning}", file=sys.stderr)

    return 0
