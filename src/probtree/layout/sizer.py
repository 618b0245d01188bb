"""LayoutSizer - Box sizes for node labels.

The renderer draws each node as a box sized to its label. A sizer answers
"how big is this label?" for the current display context, or None when
there is no display to measure against, in which case the renderer falls
back to its own default size.
"""

from __future__ import annotations

import math
import textwrap
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

BASE = 12.5
MIN_WIDTH_UNITS = 8
MIN_HEIGHT_UNITS = 6

# Renderers break lines at hyphens and fullwidth commas; measure and draw
# them as non-breaking hyphens instead.
NON_BREAKING_HYPHEN = "\u2011"
_UNBREAKABLE = str.maketrans({"-": NON_BREAKING_HYPHEN, "，": NON_BREAKING_HYPHEN})


@dataclass(frozen=True)
class Size:
    """Rendered box size for a node label."""

    width: float
    height: float


@runtime_checkable
class LayoutSizer(Protocol):
    """Protocol for label sizers."""

    def size(self, label: str) -> Size | None:
        """Return the box size for a label, or None if it cannot be measured."""
        ...


class NullSizer:
    """Sizer for contexts without a display surface. Never returns a size."""

    def size(self, label: str) -> Size | None:
        return None


def prepare_label(label: str) -> str:
    """Replace break opportunities the renderer gets wrong."""
    return label.translate(_UNBREAKABLE)


def snap(value: float, base: float = BASE) -> float:
    """Round up to the next multiple of ``base``."""
    return math.ceil(value / base) * base


def text_to_box(text_width: float, text_height: float, base: float = BASE) -> Size:
    """Map a measured text extent to a node box size.

    Linear fit of rendered box size against raw text extent, snapped to the
    grid and clamped to the minimum box.
    """
    width = math.floor(0.63567 * text_width + 6)
    height = math.floor(0.63567 * text_height + 20)
    return Size(
        width=max(MIN_WIDTH_UNITS * base, snap(width, base)),
        height=max(MIN_HEIGHT_UNITS * base, snap(height, base)),
    )


@dataclass(frozen=True)
class MonospaceMeasure:
    """Display-free text measurement.

    Wraps the label at word boundaries into lines no wider than
    ``wrap_width`` and treats every character as ``char_width`` wide.

    Attributes:
        char_width: Advance width of one character.
        line_height: Height of one wrapped line.
        wrap_width: Width of the measuring box.
    """

    char_width: float = 7.0
    line_height: float = 18.0
    wrap_width: float = 300.0

    def __call__(self, text: str) -> tuple[float, float] | None:
        if not text:
            return None
        columns = max(1, int(self.wrap_width // self.char_width))
        wrapped = textwrap.wrap(text, width=columns, break_on_hyphens=False) or [text]
        width = max(len(line) for line in wrapped) * self.char_width
        return width, len(wrapped) * self.line_height


class EstimatingSizer:
    """Sizer that estimates label extent without a display.

    Args:
        measure: Returns (width, height) of the label's text, or None.
            Defaults to MonospaceMeasure().
        base: Grid unit that box sizes snap to.
    """

    def __init__(
        self,
        measure: Callable[[str], tuple[float, float] | None] | None = None,
        base: float = BASE,
    ) -> None:
        self.measure = measure or MonospaceMeasure()
        self.base = base

    def size(self, label: str) -> Size | None:
        extent = self.measure(prepare_label(label))
        if extent is None:
            return None
        return text_to_box(*extent, base=self.base)


def sizer_from_config(config: dict[str, Any]) -> LayoutSizer:
    """Create the sizer named by the [layout] config section.

    Args:
        config: Full configuration dictionary.

    Returns:
        A LayoutSizer instance.

    Raises:
        ValueError: If the sizer name is unknown.
    """
    layout = config.get("layout", {})
    name = layout.get("sizer", "none")
    if name == "none":
        return NullSizer()
    if name == "estimate":
        measure = MonospaceMeasure(
            char_width=float(layout.get("char_width", 7.0)),
            line_height=float(layout.get("line_height", 18.0)),
            wrap_width=float(layout.get("wrap_width", 300.0)),
        )
        return EstimatingSizer(measure, base=float(layout.get("base", BASE)))
    raise ValueError(f"Unknown sizer: {name!r} (expected 'none' or 'estimate')")
