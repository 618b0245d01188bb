"""
probtree.commands.init_cmd - Create a .probtree.toml with default settings.
"""

import argparse
from pathlib import Path

from probtree.config import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE, parse_toml_document


def run(args: argparse.Namespace) -> int:
    """Write the default configuration file into the current directory."""
    target = Path.cwd() / CONFIG_FILENAME
    if target.exists() and not args.force:
        print(f"{CONFIG_FILENAME} already exists (use --force to overwrite)")
        return 1

    doc = parse_toml_document(DEFAULT_CONFIG_TEMPLATE)
    target.write_text(doc.as_string(), encoding="utf-8")
    print(f"Created {target}")
    return 0
