"""Structured SwiftUI modifier directives and the append-only chain.

WHY: Building the chain directly as strings makes every test a substring
hunt. Keeping each modifier as a small tagged value (kind + argument)
until the very end lets tests assert on structure while the final output
is still the exact concatenated SwiftUI text.

HOW: DirectiveKind enumerates the modifiers the builder can emit, each
with a render template. Directive pairs a kind with its (already
formatted) argument. ModifierChain is an append-only list of directives
that renders by plain concatenation.

RULES:
- Rendered directives are self-delimited (".name(...)"), so the chain
  joins them with no separator
- A chain never removes or reorders directives; reset() is the only way
  to empty it, and it reuses the same list
- Arguments are stored pre-formatted — rendering never formats numbers
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple


class DirectiveKind(str, enum.Enum):
    """SwiftUI view modifiers emitted for text nodes.

    Values are the SwiftUI method names, which also serve as the ``kind``
    field in JSON output.
    """

    FRAME = "frame"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    ITALIC = "italic"
    FONT_WEIGHT = "fontWeight"
    FONT = "font"
    MULTILINE_TEXT_ALIGNMENT = "multilineTextAlignment"
    TRACKING = "tracking"
    LINE_SPACING = "lineSpacing"


# Modifiers that take no argument render as ".name()".
_NULLARY = frozenset({
    DirectiveKind.UNDERLINE,
    DirectiveKind.STRIKETHROUGH,
    DirectiveKind.ITALIC,
})


@dataclass(frozen=True)
class Directive:
    """One SwiftUI modifier call, e.g. ``Directive(DirectiveKind.TRACKING, "2.5")``."""

    kind: DirectiveKind
    argument: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in _NULLARY and self.argument is not None:
            raise ValueError("{} takes no argument".format(self.kind.value))
        if self.kind not in _NULLARY and not self.argument:
            raise ValueError("{} requires an argument".format(self.kind.value))

    def render(self) -> str:
        return ".{}({})".format(self.kind.value, self.argument or "")

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"kind": self.kind.value, "argument": self.argument}


class ModifierChain:
    """Ordered, append-only sequence of directives for one text node."""

    def __init__(self) -> None:
        self._directives: List[Directive] = []

    def append(self, directive: Directive) -> "ModifierChain":
        self._directives.append(directive)
        return self

    def extend(self, directives) -> "ModifierChain":
        for directive in directives:
            self.append(directive)
        return self

    def clear(self) -> None:
        # Slice deletion keeps the same list object for reuse across nodes.
        del self._directives[:]

    @property
    def directives(self) -> Tuple[Directive, ...]:
        return tuple(self._directives)

    def render(self) -> str:
        return "".join(d.render() for d in self._directives)

    def __iter__(self) -> Iterator[Directive]:
        return iter(tuple(self._directives))

    def __len__(self) -> int:
        return len(self._directives)

    def __repr__(self) -> str:
        return "ModifierChain({!r})".format(self.render())
