"""Modifier chain builder for SwiftUI Text.

WHY: A Figma text node's styling maps onto many small SwiftUI modifiers
whose order changes the rendering: SwiftUI applies later modifiers on
top of earlier ones. The rules about which modifier to emit are
interdependent (multiline alignment depends on resize mode, italics on
the font, the frame on both resize mode and alignment), so they live
together here.

HOW: Each attribute family is a pure step function
``(node, chain, collaborators) -> chain`` over an immutable tuple of
directives; it returns the input chain plus zero or more new directives.
TextModifierBuilder is the chaining shell around the steps: it owns one
ModifierChain, runs a step per method call, appends the new directives,
and returns itself.

RULES:
- auto_size_frame: nothing for WIDTH_AND_HEIGHT; width only for WIDTH
  and HEIGHT; "width, height" for NONE; alignment suffix appended
- decoration: underline, then strikethrough, then italic
- text_style: fontWeight before font before multilineTextAlignment
- letter_spacing / line_height: strictly positive values only
- build() is idempotent; reset() empties the chain for the next node
"""

from __future__ import annotations

from typing import Optional, Tuple

from figma_swiftui.collaborators import Collaborators, default_collaborators
from figma_swiftui.config import DEFAULT_WEIGHT_CLASS
from figma_swiftui.core.alignment import alignment_suffix
from figma_swiftui.core.directives import Directive, DirectiveKind, ModifierChain
from figma_swiftui.core.ir import (
    MIXED,
    StyledTextNode,
    TextAlignHorizontal,
    TextAutoResize,
    TextDecoration,
    concrete_font,
)

Chain = Tuple[Directive, ...]

_MULTILINE_ALIGNMENTS = {
    TextAlignHorizontal.CENTER: ".center",
    TextAlignHorizontal.RIGHT: ".trailing",
}


# ---------------------------------------------------------------------------
# Pure steps
# ---------------------------------------------------------------------------


def frame_content(node: StyledTextNode, collaborators: Collaborators) -> str:
    """Assemble the ``.frame(...)`` argument, or "" when the text sizes itself.

    RULES:
    - WIDTH_AND_HEIGHT → ""
    - WIDTH / HEIGHT → width expression + alignment suffix
    - NONE → width + ", " + height + alignment suffix
    """
    width_expr, height_expr = collaborators.resolve_size(node)

    content = ""
    if node.resize_mode is not TextAutoResize.WIDTH_AND_HEIGHT:
        content += width_expr

    if node.resize_mode is TextAutoResize.NONE:
        # NONE is never WIDTH_AND_HEIGHT, so the width is already in place.
        content += ", " + height_expr

    if not content:
        return ""
    return content + alignment_suffix(node)


def auto_size_frame_step(node: StyledTextNode, chain: Chain, collaborators: Collaborators) -> Chain:
    content = frame_content(node, collaborators)
    if not content:
        return chain
    return chain + (Directive(DirectiveKind.FRAME, content),)


def decoration_step(node: StyledTextNode, chain: Chain, collaborators: Collaborators) -> Chain:
    added = []
    if node.decoration is TextDecoration.UNDERLINE:
        added.append(Directive(DirectiveKind.UNDERLINE))

    if node.decoration is TextDecoration.STRIKETHROUGH:
        added.append(Directive(DirectiveKind.STRIKETHROUGH))

    if node.font_name is not MIXED and "italic" in concrete_font(node.font_name).style.lower():
        added.append(Directive(DirectiveKind.ITALIC))

    return chain + tuple(added)


def _weight_directive(node: StyledTextNode, collaborators: Collaborators) -> Optional[Directive]:
    if node.font_name is MIXED:
        return None
    weight_class = collaborators.normalize_weight(concrete_font(node.font_name).style)
    if not weight_class or weight_class == DEFAULT_WEIGHT_CLASS:
        return None
    token = collaborators.match_weight(weight_class)
    if not token:
        return None
    return Directive(DirectiveKind.FONT_WEIGHT, token)


def text_style_step(node: StyledTextNode, chain: Chain, collaborators: Collaborators) -> Chain:
    added = []

    # fontWeight must come before font and multilineTextAlignment.
    weight = _weight_directive(node, collaborators)
    if weight is not None:
        added.append(weight)

    font = collaborators.match_font(node)
    if font:
        added.append(Directive(DirectiveKind.FONT, font))

    # Text that hugs both dimensions is a single line; LEFT is SwiftUI's default.
    if not node.is_fully_auto_sized:
        alignment = _MULTILINE_ALIGNMENTS.get(node.align_horizontal)
        if alignment:
            added.append(Directive(DirectiveKind.MULTILINE_TEXT_ALIGNMENT, alignment))

    return chain + tuple(added)


def letter_spacing_step(node: StyledTextNode, chain: Chain, collaborators: Collaborators) -> Chain:
    # tracking, not kerning: Figma spaces every glyph, ligatures included.
    spacing = collaborators.resolve_letter_spacing(node)
    if spacing > 0:
        return chain + (Directive(DirectiveKind.TRACKING, collaborators.format_number(spacing)),)
    return chain


def line_height_step(node: StyledTextNode, chain: Chain, collaborators: Collaborators) -> Chain:
    height = collaborators.resolve_line_height(node)
    if height > 0:
        return chain + (Directive(DirectiveKind.LINE_SPACING, collaborators.format_number(height)),)
    return chain


# ---------------------------------------------------------------------------
# Chaining builder
# ---------------------------------------------------------------------------


class TextModifierBuilder:
    """Accumulates SwiftUI modifiers for one text node at a time.

    WHY: Exporters walk many nodes. One builder, reset between nodes, keeps
    allocation flat and matches how the rest of the export pipeline
    drives it (``builder.reset(); builder.auto_size_frame(n).decoration(n)...``).

    HOW: Every public inspection delegates to its pure step with an empty
    chain and appends whatever the step produced to the owned
    ModifierChain.

    RULES:
    - Not thread-safe: one caller, one node at a time
    - Call reset() before reusing the builder for another node
    - Methods may be called in any order; render_text() in the pipeline
      module fixes the canonical order
    """

    def __init__(self, collaborators: Optional[Collaborators] = None) -> None:
        self.collaborators = collaborators or default_collaborators()
        self._chain = ModifierChain()

    def _run(self, step, node: StyledTextNode) -> "TextModifierBuilder":
        self._chain.extend(step(node, (), self.collaborators))
        return self

    def auto_size_frame(self, node: StyledTextNode) -> "TextModifierBuilder":
        return self._run(auto_size_frame_step, node)

    def decoration(self, node: StyledTextNode) -> "TextModifierBuilder":
        return self._run(decoration_step, node)

    def text_style(self, node: StyledTextNode) -> "TextModifierBuilder":
        return self._run(text_style_step, node)

    def letter_spacing(self, node: StyledTextNode) -> "TextModifierBuilder":
        return self._run(letter_spacing_step, node)

    def line_height(self, node: StyledTextNode) -> "TextModifierBuilder":
        return self._run(line_height_step, node)

    @property
    def directives(self) -> Chain:
        return self._chain.directives

    def build(self) -> str:
        return self._chain.render()

    def reset(self) -> None:
        self._chain.clear()
