"""
probtree.commands - CLI command implementations
"""

__all__ = [
    "config_cmd",
    "init_cmd",
    "parse_cmd",
]
