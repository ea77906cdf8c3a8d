"""Match a node's font family and size to a SwiftUI ``Font``.

WHY: Apple's Human Interface Guidelines prefer Dynamic Type text styles
(``.body``, ``.headline``) over hardcoded sizes, so text scales with the
user's accessibility settings. When the design uses the system font at
exactly a Dynamic Type size, the named style is the better output.

HOW: System families (config.SYSTEM_FONT_FAMILIES) are checked against
config.DYNAMIC_TYPE_SIZES in order; an exact size match yields the named
style, otherwise ``.system(size: N)``. Any other family becomes
``.custom("Family", size: N)``.

RULES:
- MIXED font size → None (no font directive)
- MIXED family (several fonts, one size) → ``.system(size: N)``
- Weight is never encoded here; ``.fontWeight`` carries it
"""

from __future__ import annotations

from typing import Callable, Optional

from figma_swiftui.collaborators.numbers import format_number
from figma_swiftui.config import DYNAMIC_TYPE_SIZES, SYSTEM_FONT_FAMILIES
from figma_swiftui.core.ir import MIXED, StyledTextNode


def _dynamic_type_style(size: float) -> Optional[str]:
    for style, points in DYNAMIC_TYPE_SIZES.items():
        if points == size:
            return style
    return None


def _escape(family: str) -> str:
    return family.replace("\\", "\\\\").replace('"', '\\"')


def match_font(
    node: StyledTextNode,
    fmt: Callable[[float], str] = format_number,
) -> Optional[str]:
    """Return a SwiftUI Font expression for the node, or None."""
    if node.font_size is MIXED:
        return None

    size = float(node.font_size)
    if node.font_name is MIXED:
        return ".system(size: {})".format(fmt(size))

    family = node.font_name.family
    if family in SYSTEM_FONT_FAMILIES:
        style = _dynamic_type_style(size)
        if style:
            return ".{}".format(style)
        return ".system(size: {})".format(fmt(size))

    return '.custom("{}", size: {})'.format(_escape(family), fmt(size))
