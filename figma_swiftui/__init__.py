"""Figma to SwiftUI text converter — design-tool text nodes to modifier chains.

WHY: A Figma text node carries its typography as loose attributes (resize
behaviour, decoration, font name, alignment, spacing). SwiftUI expresses the
same styling as an ordered chain of view modifiers where order matters. This
package turns one into the other deterministically.

HOW: Three-stage pipeline — ingest (JSON loader with schema validation),
build (core IR + modifier chain builder), format (pluggable formatters for
.swift snippets and JSON). Each stage is independently testable.

RULES:
- All formatters consume the same RenderedDocument IR
- The builder never reorders or removes a directive once appended
- Numeric and lookup helpers are injected collaborators, never hardcoded
  in the builder
"""

__version__ = "0.1.0"
