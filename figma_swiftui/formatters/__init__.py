"""Output formatter registry — pluggable format hub.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["swiftui_view"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags, config, etc.)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from figma_swiftui.formatters.modifier_json import ModifierJSONFormatter
from figma_swiftui.formatters.swiftui_view import SwiftUIViewFormatter

if TYPE_CHECKING:
    from figma_swiftui.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "swiftui_view": SwiftUIViewFormatter,
    "modifier_json": ModifierJSONFormatter,
}
