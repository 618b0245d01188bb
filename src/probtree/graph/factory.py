"""Graph Factory - Single entry point for parsing an outline.

Callers should use parse_text() rather than driving GraphBuilder directly.
"""

from __future__ import annotations

from probtree.graph.builder import GraphBuilder
from probtree.graph.diagnostics import Diagnostics
from probtree.graph.elements import Element
from probtree.layout import LayoutSizer


def parse_text(
    text: str,
    starting_line_number: int = 0,
    sizer: LayoutSizer | None = None,
    diagnostics: Diagnostics | None = None,
) -> list[Element]:
    """Parse an indented outline into graph elements.

    Args:
        text: Newline-separated outline.
        starting_line_number: Added to every line number, for text taken
            from the middle of a larger document.
        sizer: Label sizer; no sizes are attached when omitted.
        diagnostics: Optional collector for warnings. Never changes the output.

    Returns:
        Node and edge elements in document order.
    """
    builder = GraphBuilder(
        starting_line_number=starting_line_number,
        sizer=sizer,
        diagnostics=diagnostics,
    )
    return builder.build(text)
