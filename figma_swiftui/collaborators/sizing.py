"""Width and height expressions for a text node's ``.frame``.

WHY: The frame directive needs ready-to-emit SwiftUI size arguments.
Auto-layout children set to FILL stretch to their parent, which SwiftUI
spells ``maxWidth: .infinity``; everything else gets its fixed size.

RULES:
- FILL → "maxWidth: .infinity" / "maxHeight: .infinity"
- Known size → "width: N" / "height: N" (N formatted)
- Unknown size → "" (the builder decides whether to emit)
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from figma_swiftui.collaborators.numbers import format_number
from figma_swiftui.core.ir import LayoutSizing, StyledTextNode


def _axis_expression(
    name: str,
    size: Optional[float],
    sizing: LayoutSizing,
    fmt: Callable[[float], str],
) -> str:
    if sizing is LayoutSizing.FILL:
        return "max{}: .infinity".format(name.capitalize())
    if size is None:
        return ""
    return "{}: {}".format(name, fmt(size))


def resolve_size(
    node: StyledTextNode,
    fmt: Callable[[float], str] = format_number,
) -> Tuple[str, str]:
    """Return ``(width_expr, height_expr)`` for the node's frame."""
    return (
        _axis_expression("width", node.width, node.layout_sizing_horizontal, fmt),
        _axis_expression("height", node.height, node.layout_sizing_vertical, fmt),
    )
