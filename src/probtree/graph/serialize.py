"""Graph Serialization - Export elements for the renderer and for people.

The renderer consumes a list of ``{"data": {...}}`` records with camelCase
keys. Node sizes are flattened into ``width``/``height`` and left out when
the sizer had nothing to say.
"""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from typing import Any

from probtree.graph.elements import EdgeElement, Element, NodeElement


def _json_number(value: float | None) -> float | None:
    """NaN and infinities have no JSON spelling; emit null like a browser would."""
    if value is None or math.isnan(value) or math.isinf(value):
        return None
    return value


def element_data(element: Element) -> dict[str, Any]:
    """Serialize one element to the renderer's data dict.

    Args:
        element: Node or edge element.

    Returns:
        Dict with camelCase keys.
    """
    if isinstance(element, EdgeElement):
        return {
            "id": element.id,
            "source": element.source,
            "target": element.target,
            "label": element.label,
            "lineNumber": element.line_number,
        }

    data: dict[str, Any] = {
        "id": element.id,
        "indent": element.indent,
        "count": element.count,
        "label": element.label,
        "prob": element.prob,
        "lineNumber": element.line_number,
    }
    if element.size is not None:
        data["width"] = element.size.width
        data["height"] = element.size.height
    return data


def to_cytoscape(elements: Sequence[Element]) -> list[dict[str, Any]]:
    """Serialize elements to JSON-compatible renderer records.

    Counts that are not finite numbers become None.
    """
    records = []
    for element in elements:
        data = element_data(element)
        if "count" in data:
            data["count"] = _json_number(data["count"])
        records.append({"data": data})
    return records


def to_json(elements: Sequence[Element], indent: int | None = 2) -> str:
    """Serialize elements to strict JSON text."""
    return json.dumps(to_cytoscape(elements), indent=indent, ensure_ascii=False, allow_nan=False)


def to_text(elements: Sequence[Element]) -> str:
    """Render elements as a plain listing, one per line."""
    width = max((len(e.id) for e in elements), default=0)
    lines = []
    for element in elements:
        if isinstance(element, NodeElement):
            prob = f"  {element.prob}" if element.prob else ""
            lines.append(
                f"node  {element.id:<{width}}  {element.indent}{element.label}{prob}"
                f"  (line {element.line_number})"
            )
        else:
            lines.append(
                f"edge  {element.id:<{width}}  {element.source} -> {element.target}"
                f"  [{element.label}]  (line {element.line_number})"
            )
    return "\n".join(lines)
