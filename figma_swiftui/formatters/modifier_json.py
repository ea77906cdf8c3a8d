"""Modifier chain JSON formatter.

WHY: Tooling downstream of the converter (code review bots, snapshot
tests, other generators) wants the chains as data, not as Swift source.
Emitting both the concatenated chain and the structured directives lets
consumers pick whichever they need.

HOW: One JSON object per source file: the source name, the generator
version, and one entry per text node with its identity, text, chain
string, and a list of ``{"kind", "argument"}`` directives.

RULES:
- Output validates against modifier_chain_schema.json at the repo root
- Node order follows the source document
- ``chain`` equals the concatenation of the rendered directives
- Output suffix: "-modifiers.json"
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from figma_swiftui import __version__
from figma_swiftui.core.ir import RenderedDocument, RenderedText
from figma_swiftui.formatters.base import BaseFormatter, FormatterOutput


def _text_entry(text: RenderedText) -> Dict[str, Any]:
    node = text.node
    return {
        "id": node.id,
        "name": node.name,
        "characters": node.characters,
        "chain": text.chain,
        "directives": [d.to_dict() for d in text.directives],
    }


class ModifierJSONFormatter(BaseFormatter):
    """Formatter that produces the modifier chains as a JSON document."""

    @property
    def name(self) -> str:
        return "Modifier JSON"

    def format(self, document: RenderedDocument) -> List[FormatterOutput]:
        data = {
            "source": document.source_filename,
            "generator": "figma_swiftui {}".format(__version__),
            "texts": [_text_entry(text) for text in document.texts],
        }
        return [
            FormatterOutput(
                suffix="-modifiers.json",
                content=json.dumps(data, indent=2, ensure_ascii=False) + "\n",
            )
        ]
