"""
probtree.commands.config_cmd - Inspect configuration.
"""

import argparse
from pathlib import Path

import tomlkit

from probtree.config import find_config_file, get_config


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    if args.config_action == "path":
        return cmd_path(args)
    return cmd_show(args)


def cmd_path(args: argparse.Namespace) -> int:
    """Print the config file that would be used."""
    config_path = args.config or find_config_file(Path.cwd())
    if config_path is None:
        print("No .probtree.toml found (using defaults)")
        return 1
    print(config_path)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the effective configuration as TOML."""
    config = get_config(args.config)
    print(tomlkit.dumps(config), end="")
    return 0
