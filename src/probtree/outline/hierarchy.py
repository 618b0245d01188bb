"""HierarchyResolver - Structural parents from indentation.

A line's parent is the nearest preceding non-blank line whose leading
whitespace is strictly shorter. Depth is the raw character length of the
whitespace run, so tabs and spaces count the same and mixed widths work as
long as depths shrink toward the root.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from probtree.outline.tokenizer import is_blank

INDENT_PATTERN = re.compile(r"\s*")


def indent_of(text: str) -> str:
    """Return the leading whitespace run of a line."""
    return INDENT_PATTERN.match(text.removesuffix("\r")).group()


def find_parent_line(lines: Sequence[str], index: int) -> int | None:
    """Find the structural parent of a line by scanning backward.

    Args:
        lines: All raw lines of the document.
        index: 0-based index of the line whose parent is wanted.

    Returns:
        0-based index of the parent line, or None if the line is not
        indented or nothing above it is shallower.
    """
    depth = len(indent_of(lines[index]))
    if depth == 0:
        return None

    for candidate in range(index - 1, -1, -1):
        text = lines[candidate]
        if is_blank(text):
            continue
        if len(indent_of(text)) < depth:
            return candidate
    return None


@dataclass
class IndentStack:
    """Forward single-pass ancestor tracking.

    Holds the chain of currently open lines as (depth, index) pairs with
    strictly increasing depth. Feeding every non-blank line through
    ``push`` yields the same parents as ``find_parent_line``.
    """

    _stack: list[tuple[int, int]] = field(default_factory=list)

    def push(self, depth: int, index: int) -> int | None:
        """Record a line and return the index of its parent line."""
        while self._stack and self._stack[-1][0] >= depth:
            self._stack.pop()
        parent = self._stack[-1][1] if self._stack else None
        self._stack.append((depth, index))
        return parent

    def __len__(self) -> int:
        return len(self._stack)
