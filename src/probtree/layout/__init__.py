"""Layout module - Label sizing for rendered node boxes.

Exports:
- Size: Width and height of a node box
- LayoutSizer: Protocol for sizers
- NullSizer: Sizer that never measures
- EstimatingSizer: Display-free sizer using MonospaceMeasure
- sizer_from_config: Build the sizer named in configuration
"""

from probtree.layout.sizer import (
    EstimatingSizer,
    LayoutSizer,
    MonospaceMeasure,
    NullSizer,
    Size,
    prepare_label,
    sizer_from_config,
    text_to_box,
)

__all__ = [
    "Size",
    "LayoutSizer",
    "NullSizer",
    "EstimatingSizer",
    "MonospaceMeasure",
    "prepare_label",
    "sizer_from_config",
    "text_to_box",
]
