"""Fixed inspection order and document-level rendering.

WHY: The builder's methods can be called in any order, but only one
order produces correct SwiftUI: frame first, then decoration, text
style, letter spacing, and line height. Encoding that order once, as
data, means no caller has to remember it.

HOW: TEXT_PIPELINE is the ordered tuple of pure steps. apply_pipeline()
folds a node through it. render_text() drives a shared builder through
the same order; render_document() reuses one builder for every node.

RULES:
- TEXT_PIPELINE order is load-bearing — do not sort or reorder
- render_document() resets the builder before each node
- Output order follows input order
"""

from __future__ import annotations

import logging
from typing import Optional

from figma_swiftui.collaborators import Collaborators
from figma_swiftui.core.builder import (
    Chain,
    TextModifierBuilder,
    auto_size_frame_step,
    decoration_step,
    letter_spacing_step,
    line_height_step,
    text_style_step,
)
from figma_swiftui.core.ir import RenderedDocument, RenderedText, StyledTextNode, TextDocument

logger = logging.getLogger(__name__)

TEXT_PIPELINE = (
    auto_size_frame_step,
    decoration_step,
    text_style_step,
    letter_spacing_step,
    line_height_step,
)


def apply_pipeline(node: StyledTextNode, collaborators: Collaborators) -> Chain:
    """Run every step of TEXT_PIPELINE over ``node`` and return the directives."""
    chain: Chain = ()
    for step in TEXT_PIPELINE:
        chain = step(node, chain, collaborators)
    return chain


def render_text(node: StyledTextNode, builder: TextModifierBuilder) -> RenderedText:
    """Reset ``builder`` and run the full inspection sequence for one node."""
    builder.reset()
    (
        builder.auto_size_frame(node)
        .decoration(node)
        .text_style(node)
        .letter_spacing(node)
        .line_height(node)
    )
    return RenderedText(node=node, directives=builder.directives, chain=builder.build())


def render_document(
    document: TextDocument,
    collaborators: Optional[Collaborators] = None,
) -> RenderedDocument:
    """Build modifier chains for every node in ``document``.

    Args:
        document: Loaded text nodes, in document order.
        collaborators: Lookup helpers; defaults to default_collaborators().

    Returns:
        RenderedDocument with one RenderedText per node.
    """
    builder = TextModifierBuilder(collaborators)
    rendered = RenderedDocument(source_filename=document.source_filename)

    for node in document.nodes:
        text = render_text(node, builder)
        logger.debug(
            "Node %s (%s): %d directive(s) %s",
            node.id or "-", node.name or "unnamed", len(text.directives), text.chain,
        )
        rendered.texts.append(text)

    logger.info(
        "Rendered %d text node(s) from %s",
        len(rendered.texts), document.source_filename,
    )
    return rendered
