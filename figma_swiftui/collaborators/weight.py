"""Font weight normalization and SwiftUI weight matching.

WHY: Figma exposes weight only through the free-text style label of a
font ("Semi Bold Italic", "ExtraLight", "Black"). SwiftUI wants a
``Font.Weight`` constant. Going through the numeric CSS weight class in
between lets the same normalization serve every target.

HOW: normalize_weight() strips the italic marker and separators, then
looks the remainder up in config.WEIGHT_CLASSES. match_weight() maps the
numeric class to a SwiftUI token via config.SWIFTUI_WEIGHTS.

RULES:
- "Italic" alone normalizes to the regular class "400"
- Unrecognized labels return None (caller emits nothing)
- Unknown numeric classes match to ".regular"
"""

from __future__ import annotations

import re
from typing import Optional

from figma_swiftui.config import FALLBACK_SWIFTUI_WEIGHT, SWIFTUI_WEIGHTS, WEIGHT_CLASSES

_SEPARATORS = re.compile(r"[\s\-_]+")


def normalize_weight(style: str) -> Optional[str]:
    """Map a font style label to a numeric weight class ("100"–"900").

    Examples:
        "Bold" → "700", "Semi Bold Italic" → "600", "Italic" → "400",
        "Condensed Wide" → None.
    """
    key = _SEPARATORS.sub("", style.lower().replace("italic", ""))
    return WEIGHT_CLASSES.get(key)


def match_weight(weight_class: str) -> str:
    """Map a numeric weight class to a SwiftUI ``Font.Weight`` token."""
    return SWIFTUI_WEIGHTS.get(weight_class, FALLBACK_SWIFTUI_WEIGHT)
