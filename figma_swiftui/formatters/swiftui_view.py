"""SwiftUI ``Text`` view formatter.

WHY: The end product of the converter is Swift source a developer can
paste into a view body. Each text node becomes a ``Text`` literal
followed by its modifier chain.

HOW: For every rendered node, emit a comment naming the Figma layer, the
``Text("...")`` initializer with the node's characters escaped as a
Swift string literal, then one indented line per directive. Directives
render exactly as in the built chain; only the line breaks differ.

RULES:
- One blank line between nodes
- Modifiers are indented by config.load_indent() spaces
- Joining the modifier lines without whitespace gives TextModifierBuilder.build()
- Output suffix: "-text.swift"
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from figma_swiftui import __version__
from figma_swiftui.config import load_indent
from figma_swiftui.core.ir import RenderedDocument, RenderedText
from figma_swiftui.formatters.base import BaseFormatter, FormatterOutput

_SWIFT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def swift_string_literal(text: str) -> str:
    """Quote ``text`` as a single-line Swift string literal."""
    return '"{}"'.format("".join(_SWIFT_ESCAPES.get(ch, ch) for ch in text))


def _layer_comment(text: RenderedText) -> Optional[str]:
    node = text.node
    if node.name and node.id:
        return "// {} ({})".format(node.name, node.id)
    if node.name or node.id:
        return "// {}".format(node.name or node.id)
    return None


class SwiftUIViewFormatter(BaseFormatter):
    """Formatter that produces a .swift snippet of styled ``Text`` views."""

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = load_indent() if indent is None else indent

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "SwiftUIViewFormatter":
        return cls(indent=options.get("indent"))

    @property
    def name(self) -> str:
        return "SwiftUI View"

    def render_text(self, text: RenderedText) -> str:
        lines: List[str] = []
        comment = _layer_comment(text)
        if comment:
            lines.append(comment)
        lines.append("Text({})".format(swift_string_literal(text.node.characters)))
        pad = " " * self.indent
        for directive in text.directives:
            lines.append(pad + directive.render())
        return "\n".join(lines)

    def format(self, document: RenderedDocument) -> List[FormatterOutput]:
        header = "// Generated by figma_swiftui {} from {}".format(
            __version__, document.source_filename,
        )
        blocks = [header] + [self.render_text(text) for text in document.texts]
        return [
            FormatterOutput(
                suffix="-text.swift",
                content="\n\n".join(blocks) + "\n",
            )
        ]
