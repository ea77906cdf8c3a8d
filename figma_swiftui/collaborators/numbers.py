"""Canonical number formatting for emitted Swift literals.

WHY: Figma geometry and metrics are floats with long binary tails
(119.99999237). Emitting them verbatim makes diffs noisy and code
unreadable, so every number goes through one formatter.

HOW: Round to a fixed number of decimals, render in fixed-point, then
trim trailing zeros and a dangling decimal point.

RULES:
- 2.0 → "2", 2.5 → "2.5", 1.23456 → "1.23" (precision 2)
- Negative zero renders as "0"
- Never uses scientific notation
"""

from __future__ import annotations

from figma_swiftui.config import DEFAULT_NUMBER_PRECISION


def format_number(value: float, precision: int = DEFAULT_NUMBER_PRECISION) -> str:
    """Format ``value`` with at most ``precision`` decimals, trailing zeros trimmed."""
    text = "{:.{p}f}".format(round(float(value), precision), p=precision)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
