"""Outline module - Line-level parsing of indented outlines.

Exports:
- ParsedLine: Fields extracted from a single outline line
- tokenize_line: Split a raw line into a ParsedLine
- is_blank: Whether a line is skipped by the parser
- find_parent_line: Backward scan for a line's structural parent
- IndentStack: Forward single-pass equivalent of find_parent_line
"""

from probtree.outline.hierarchy import IndentStack, find_parent_line, indent_of
from probtree.outline.tokenizer import ParsedLine, is_blank, tokenize_line

__all__ = [
    "ParsedLine",
    "tokenize_line",
    "is_blank",
    "indent_of",
    "find_parent_line",
    "IndentStack",
]
