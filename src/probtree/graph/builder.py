"""Graph Builder - One forward pass from outline text to elements.

Each non-blank line is tokenized, linked to its structural parent with an
edge, and (unless it is a back-reference) declared as a node carrying the
cumulative probability of the path that reaches it.
"""

from __future__ import annotations

import logging
import math
import re

from probtree.graph.diagnostics import Diagnostics, WarningKind
from probtree.graph.elements import EdgeElement, Element, NodeElement, format_prob
from probtree.graph.references import resolve_label_references
from probtree.layout import LayoutSizer, NullSizer
from probtree.outline import IndentStack, ParsedLine, is_blank, tokenize_line

logger = logging.getLogger(__name__)

# Leading ASCII numeric prefix, the way a lenient float reader sees it:
# "0.5" -> 0.5, ".5" -> 0.5, "1e-1" -> 0.1, "50%" -> 50.0
DECIMAL_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def parse_decimal(text: str) -> float:
    """Parse the leading decimal number of an edge label.

    Returns NaN when the text does not start with a number.
    """
    match = DECIMAL_PREFIX.match(text.strip())
    if not match:
        return math.nan
    return float(match.group())


class EdgeIdAllocator:
    """Hands out unique ``<source>_<target>:<n>`` edge ids.

    Keeps the next free suffix per prefix so repeated pairs never rescan
    earlier elements. Ids reserved for nodes are skipped as well.
    """

    def __init__(self) -> None:
        self._next_suffix: dict[str, int] = {}
        self._taken: set[str] = set()

    def reserve(self, element_id: str) -> None:
        """Mark an id as used by another element."""
        self._taken.add(element_id)

    def allocate(self, source: str, target: str) -> str:
        """Return the first unused id for a source/target pair."""
        prefix = f"{source}_{target}"
        suffix = self._next_suffix.get(prefix, 0)
        while f"{prefix}:{suffix}" in self._taken:
            suffix += 1
        self._next_suffix[prefix] = suffix + 1
        edge_id = f"{prefix}:{suffix}"
        self._taken.add(edge_id)
        return edge_id


class GraphBuilder:
    """Builds the element list for one outline.

    Args:
        starting_line_number: Offset added to every line number, for text
            that is a slice of a larger document.
        sizer: Measures node labels. Defaults to NullSizer (no sizes).
        diagnostics: Optional collector for warnings.
    """

    def __init__(
        self,
        starting_line_number: int = 0,
        sizer: LayoutSizer | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.starting_line_number = starting_line_number
        self.sizer = sizer if sizer is not None else NullSizer()
        self.diagnostics = diagnostics

    def build(self, text: str) -> list[Element]:
        """Parse outline text into nodes and edges.

        Args:
            text: Newline-separated outline.

        Returns:
            Elements in document order, with label references resolved.
        """
        lines = text.split("\n")
        elements: list[Element] = []
        parsed: dict[int, ParsedLine] = {}
        nodes_by_id: dict[str, NodeElement] = {}
        edge_ids = EdgeIdAllocator()
        stack = IndentStack()

        for index, raw in enumerate(lines):
            if is_blank(raw):
                continue
            line = tokenize_line(raw, index + 1)
            parsed[index] = line
            line_number = index + 1 + self.starting_line_number
            parent_index = stack.push(line.depth, index)

            count: float | None = None
            if parent_index is not None:
                parent = parsed[parent_index]
                source = parent.id
                target = line.linked_id if line.is_link else line.id

                parent_node = nodes_by_id.get(source)
                parent_count = 1.0
                if parent_node is not None and parent_node.count is not None:
                    parent_count = parent_node.count

                weight = parse_decimal(line.edge_label)
                if math.isnan(weight):
                    self._warn(
                        line_number,
                        WarningKind.NON_NUMERIC_EDGE_LABEL,
                        f"edge label {line.edge_label!r} is not a number",
                    )
                count = weight * parent_count

                elements.append(
                    EdgeElement(
                        id=edge_ids.allocate(source, target),
                        source=source,
                        target=target,
                        label=line.edge_label,
                        line_number=line_number,
                    )
                )
            elif line.depth:
                self._warn(
                    line_number,
                    WarningKind.ORPHAN_INDENT,
                    "indented line has no shallower line above it",
                )

            if line.is_link:
                if parent_index is None:
                    self._warn(
                        line_number,
                        WarningKind.DROPPED_LINK,
                        f"link to {line.linked_id!r} has no parent line to start from",
                    )
                continue

            node = NodeElement(
                id=line.id,
                indent=line.indent,
                count=count,
                label=line.node_label,
                prob=format_prob(count),
                line_number=line_number,
                size=self.sizer.size(line.node_label),
            )
            nodes_by_id.setdefault(node.id, node)
            edge_ids.reserve(node.id)
            elements.append(node)

        rewritten = resolve_label_references(elements, self.diagnostics)
        logger.debug("built %d elements, %d label references resolved", len(elements), rewritten)
        return elements

    def _warn(self, line_number: int, kind: WarningKind, message: str) -> None:
        logger.debug("line %d: %s", line_number, message)
        if self.diagnostics is not None:
            self.diagnostics.add(line_number, kind, message)
