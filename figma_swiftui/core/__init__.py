"""Core IR, directive, and modifier-building modules.

WHY: The core package contains the stable heart of the converter —
the IR dataclasses, the directive chain, and the rules that decide
which SwiftUI modifiers a text node gets. Formatters and the CLI
consume it; it depends on nothing but its injected collaborators.

HOW: ir.py defines the node and document data structures, directives.py
the tagged modifiers and the append-only chain, alignment.py the frame
alignment combinator, builder.py the per-attribute steps and the
chaining builder, pipeline.py the fixed step order, loader.py the JSON
ingest with schema validation.

RULES:
- IR dataclasses are the contract — change with care
- Builder logic is format-agnostic — no formatter-specific logic here
"""
