"""Graph module - Elements produced from an outline.

Exports:
- NodeElement: An outcome with cumulative probability
- EdgeElement: A weighted transition between node ids
- Element: Either of the above
- GraphBuilder: Forward pass from text to elements
- resolve_label_references: Second pass rewriting label targets to ids
- Diagnostics, ParseWarning, WarningKind: Optional warning channel

Note: most callers want probtree.graph.factory.parse_text()
"""

from probtree.graph.builder import EdgeIdAllocator, GraphBuilder, parse_decimal
from probtree.graph.diagnostics import Diagnostics, ParseWarning, WarningKind
from probtree.graph.elements import EdgeElement, Element, NodeElement, format_prob
from probtree.graph.references import label_index, resolve_label_references

__all__ = [
    "NodeElement",
    "EdgeElement",
    "Element",
    "format_prob",
    "GraphBuilder",
    "EdgeIdAllocator",
    "parse_decimal",
    "label_index",
    "resolve_label_references",
    "Diagnostics",
    "ParseWarning",
    "WarningKind",
]
