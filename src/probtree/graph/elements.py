"""Graph elements - Node and edge records emitted by the parser.

Elements are plain records in document order. Edges refer to nodes by id
string, never by object, so an edge may point at an id that does not
exist (an unresolved reference).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from probtree.layout.sizer import Size


@dataclass
class NodeElement:
    """An outcome or state declared by an outline line.

    Attributes:
        id: Explicit id from the line, else its 1-based line number.
        indent: Raw leading whitespace of the declaring line.
        count: Cumulative probability, None for a node with no incoming edge.
        label: Node label text.
        prob: ``count`` as a percentage string, "" when there is nothing to show.
        line_number: Line number including the caller's offset.
        size: Box size from the LayoutSizer, if one was available.
    """

    id: str
    indent: str
    count: float | None
    label: str
    prob: str
    line_number: int
    size: Size | None = None


@dataclass
class EdgeElement:
    """A probability-weighted transition between two nodes.

    ``target`` starts as an id or linked id and may be rewritten once by
    label resolution; nothing else about an edge changes after the build.
    """

    id: str
    source: str
    target: str
    label: str
    line_number: int


Element = Union[NodeElement, EdgeElement]


def format_prob(count: float | None) -> str:
    """Format a cumulative probability as a percentage.

    Zero, NaN and missing counts show as an empty string; infinite counts
    show as "Infinity%" or "-Infinity%".
    """
    if count is None or math.isnan(count) or count == 0:
        return ""
    if math.isinf(count):
        return "-Infinity%" if count < 0 else "Infinity%"
    return f"{count * 100:.2f}%"
