"""Single-line frame alignment for SwiftUI text.

WHY: SwiftUI has two alignments for Text — the frame alignment that
positions a single line inside an explicit frame, and
``multilineTextAlignment`` for wrapped lines. This module handles the
first: it turns Figma's horizontal/vertical alignment pair into the
``alignment:`` argument of ``.frame(...)``.

HOW: Each axis maps to an optional token (leading/trailing, top/bottom).
Center on either axis is SwiftUI's default and maps to no token. The two
tokens are then combined into one of SwiftUI's Alignment constants.

RULES:
- Both axes centered → empty suffix (nothing appended to the frame)
- One axis named → ", alignment: .<token>"
- Both named → vertical first, horizontal capitalised: ".topLeading",
  ".topTrailing", ".bottomLeading", ".bottomTrailing"
- JUSTIFIED has no single-line meaning and is treated as centered
"""

from __future__ import annotations

from typing import Optional

from figma_swiftui.core.ir import StyledTextNode, TextAlignHorizontal, TextAlignVertical

_HORIZONTAL_TOKENS = {
    TextAlignHorizontal.LEFT: "leading",
    TextAlignHorizontal.RIGHT: "trailing",
}

_VERTICAL_TOKENS = {
    TextAlignVertical.TOP: "top",
    TextAlignVertical.BOTTOM: "bottom",
}


def horizontal_token(align: TextAlignHorizontal) -> Optional[str]:
    return _HORIZONTAL_TOKENS.get(align)


def vertical_token(align: TextAlignVertical) -> Optional[str]:
    return _VERTICAL_TOKENS.get(align)


def combine_alignment(horizontal: Optional[str], vertical: Optional[str]) -> str:
    """Combine per-axis tokens into a ``.frame`` alignment suffix.

    Args:
        horizontal: "leading", "trailing", or None for centered.
        vertical: "top", "bottom", or None for centered.

    Returns:
        ``""``, ``", alignment: .leading"``, ``", alignment: .topTrailing"``, etc.
    """
    if horizontal and vertical:
        return ", alignment: .{}{}".format(vertical, horizontal[0].upper() + horizontal[1:])
    if horizontal:
        return ", alignment: .{}".format(horizontal)
    if vertical:
        return ", alignment: .{}".format(vertical)
    return ""


def alignment_suffix(node: StyledTextNode) -> str:
    """Frame alignment suffix for a node's horizontal/vertical alignment."""
    return combine_alignment(
        horizontal_token(node.align_horizontal),
        vertical_token(node.align_vertical),
    )
