"""
probtree - Outline-to-graph parser for probability trees

Write a probability tree as an indented outline, one outcome per line:

    Weather
      0.3: Rain
        0.9: Umbrella
      0.7: Sun

and probtree turns it into node and edge records, with cumulative
probabilities, ready for a graph renderer.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("probtree")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from probtree.graph.diagnostics import Diagnostics, ParseWarning, WarningKind
from probtree.graph.elements import EdgeElement, Element, NodeElement
from probtree.graph.factory import parse_text
from probtree.layout import EstimatingSizer, LayoutSizer, NullSizer, Size

__all__ = [
    "__version__",
    "parse_text",
    "Element",
    "NodeElement",
    "EdgeElement",
    "Size",
    "Diagnostics",
    "ParseWarning",
    "WarningKind",
    "LayoutSizer",
    "NullSizer",
    "EstimatingSizer",
]
