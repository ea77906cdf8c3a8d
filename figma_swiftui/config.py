"""Configuration constants, SwiftUI lookup tables, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Weight tables, Dynamic Type sizes, and system font
families are plain data structures — not buried in logic — so both
humans and coding agents can modify them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level dicts, sets, and strings. The load_*() functions read
environment overrides and raise a clear error when a value is malformed.

RULES:
- WEIGHT_CLASSES maps normalized style labels → CSS numeric weight classes
- SWIFTUI_WEIGHTS maps numeric weight classes → SwiftUI Font.Weight tokens
- DYNAMIC_TYPE_SIZES maps SwiftUI text styles → point sizes (iOS defaults)
- Unknown weight classes fall back to ".regular"
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Font weight mapping: style label → numeric class → SwiftUI token
# ---------------------------------------------------------------------------

DEFAULT_WEIGHT_CLASS = "400"
"""The normal/regular weight class; never emitted as a directive."""

WEIGHT_CLASSES: dict[str, str] = {
    "thin": "100",
    "hairline": "100",
    "extralight": "200",
    "ultralight": "200",
    "light": "300",
    "": "400",
    "regular": "400",
    "normal": "400",
    "book": "400",
    "medium": "500",
    "semibold": "600",
    "demibold": "600",
    "bold": "700",
    "extrabold": "800",
    "ultrabold": "800",
    "heavy": "800",
    "black": "900",
}

SWIFTUI_WEIGHTS: dict[str, str] = {
    "100": ".ultraLight",
    "200": ".thin",
    "300": ".light",
    "400": ".regular",
    "500": ".medium",
    "600": ".semibold",
    "700": ".bold",
    "800": ".heavy",
    "900": ".black",
}

FALLBACK_SWIFTUI_WEIGHT = ".regular"

# ---------------------------------------------------------------------------
# Fonts: iOS Dynamic Type defaults and Apple system families
# ---------------------------------------------------------------------------

# Ordered largest first; the first exact size match wins (body beats headline).
DYNAMIC_TYPE_SIZES: dict[str, float] = {
    "largeTitle": 34,
    "title": 28,
    "title2": 22,
    "title3": 20,
    "body": 17,
    "callout": 16,
    "subheadline": 15,
    "footnote": 13,
    "caption": 12,
    "caption2": 11,
}

SYSTEM_FONT_FAMILIES: set[str] = {
    "SF Pro",
    "SF Pro Text",
    "SF Pro Display",
    "SF Pro Rounded",
    "SF Compact",
    "SF Compact Text",
    "SF Compact Display",
}
"""Families rendered with ``.system`` / Dynamic Type instead of ``.custom``."""

# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

DEFAULT_NUMBER_PRECISION = 2
DEFAULT_INDENT = 4
DEFAULT_LOG_LEVEL = os.getenv("FIGMA_SWIFTUI_LOG_LEVEL", "WARNING").upper()
DEFAULT_FORMATS = os.getenv("FIGMA_SWIFTUI_FORMATS", "")


def _load_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got {!r}. "
            "Fix the value in the .env file or the environment.".format(name, raw)
        ) from None
    if value < minimum:
        raise ValueError("{} must be >= {}, got {}.".format(name, minimum, value))
    return value


def load_number_precision() -> int:
    """Load the number of decimals kept by the number formatter.

    WHY: Figma stores geometry as floats with long tails (119.99999). The
    emitted Swift should carry a short, stable literal instead.

    HOW: Reads FIGMA_SWIFTUI_NUMBER_PRECISION, defaulting to 2.

    RULES:
    - Raises ValueError if the value is not a non-negative integer
    """
    return _load_int("FIGMA_SWIFTUI_NUMBER_PRECISION", DEFAULT_NUMBER_PRECISION)


def load_indent() -> int:
    """Spaces used to indent modifier lines in generated Swift snippets."""
    return _load_int("FIGMA_SWIFTUI_INDENT", DEFAULT_INDENT)
