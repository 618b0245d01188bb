"""LabelReferenceResolver - Second pass turning label targets into ids.

A back-reference such as ``0.3: (Rain)`` names its target by label. Once
the whole outline has been read, every edge target that is not a node id
but matches a node label is rewritten to that node's id. This makes
forward and backward references behave the same.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from probtree.graph.diagnostics import Diagnostics, WarningKind
from probtree.graph.elements import EdgeElement, Element, NodeElement

logger = logging.getLogger(__name__)


def label_index(
    elements: Sequence[Element],
    diagnostics: Diagnostics | None = None,
) -> dict[str, str]:
    """Map node labels to node ids.

    When labels repeat, the node declared last wins.
    """
    index: dict[str, str] = {}
    for element in elements:
        if not isinstance(element, NodeElement):
            continue
        previous = index.get(element.label)
        if previous is not None and previous != element.id and diagnostics is not None:
            diagnostics.add(
                element.line_number,
                WarningKind.DUPLICATE_LABEL,
                f"label {element.label!r} also used by node {previous!r}; "
                f"references now resolve to {element.id!r}",
            )
        index[element.label] = element.id
    return index


def resolve_label_references(
    elements: Sequence[Element],
    diagnostics: Diagnostics | None = None,
) -> int:
    """Rewrite edge targets that name a node label.

    Args:
        elements: Parsed elements; edges are updated in place.
        diagnostics: Optional collector; unresolved targets are reported.

    Returns:
        Number of edges whose target was rewritten.
    """
    node_ids = {e.id for e in elements if isinstance(e, NodeElement)}
    labels = label_index(elements, diagnostics)

    rewritten = 0
    for element in elements:
        if not isinstance(element, EdgeElement) or element.target in node_ids:
            continue
        if element.target in labels:
            logger.debug("edge %s: %r -> %r", element.id, element.target, labels[element.target])
            element.target = labels[element.target]
            rewritten += 1
        elif diagnostics is not None:
            diagnostics.add(
                element.line_number,
                WarningKind.UNRESOLVED_TARGET,
                f"edge {element.id!r} points at {element.target!r}, "
                "which is neither a node id nor a node label",
            )
    return rewritten
