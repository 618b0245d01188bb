"""LineTokenizer - Split one outline line into its fields.

Line grammar, applied left to right:

    line      := indent? ("[" id "]")? (edgeLabel (":" | "："))? nodeLabel
    nodeLabel := "(" linkedId ")" | "（" linkedId "）" | freeText

The bracketed id extends to the last ``]`` that still leaves a node label,
and the edge label extends to the last colon that does the same.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote

LINE_PATTERN = re.compile(
    r"(?P<indent>\s*)"
    r"(?:\[(?P<id>.*)\])?"
    r"(?:(?P<edge_label>.+)[:：] *)?"
    r"(?P<node_label>.+?)"
)
LINK_PATTERN = re.compile(r"[(（](?P<linked_id>.+)[)）]")


@dataclass(frozen=True)
class ParsedLine:
    """Fields extracted from a single outline line.

    Attributes:
        indent: Raw leading whitespace (depth is its length).
        id: Explicit bracketed id, else the line's 1-based number.
        edge_label: Text before the terminating colon ("" if none).
        node_label: Remaining text.
        linked_id: Inner text of a parenthesized node label, which makes
            the line a back-reference instead of a new node.
    """

    indent: str
    id: str
    edge_label: str = ""
    node_label: str = ""
    linked_id: str | None = None

    @property
    def depth(self) -> int:
        """Indentation depth in characters."""
        return len(self.indent)

    @property
    def is_link(self) -> bool:
        """True if this line references another node."""
        return self.linked_id is not None


def is_blank(text: str) -> bool:
    """Blank and whitespace-only lines produce no elements."""
    return text.strip() == ""


def decode(text: str) -> str:
    """Percent-decode user text, keeping malformed escapes as typed."""
    return unquote(text)


def tokenize_line(text: str, line_number: int) -> ParsedLine:
    """Tokenize a raw outline line.

    Args:
        text: The raw line, without its newline.
        line_number: 1-based position of the line, used as the default id.

    Returns:
        ParsedLine with decoded labels and ids.
    """
    text = text.removesuffix("\r")
    match = LINE_PATTERN.fullmatch(text)
    if match is None:
        # Only an empty or whitespace-only line gets here.
        return ParsedLine(indent=text, id=str(line_number))

    raw_id = match.group("id")
    raw_node = (match.group("node_label") or "").strip()
    raw_edge = (match.group("edge_label") or "").strip()

    linked_id = None
    link = LINK_PATTERN.fullmatch(raw_node)
    if link:
        linked_id = decode(link.group("linked_id"))

    return ParsedLine(
        indent=match.group("indent"),
        id=decode(raw_id) if raw_id is not None else str(line_number),
        edge_label=decode(raw_edge),
        node_label=decode(raw_node),
        linked_id=linked_id,
    )
