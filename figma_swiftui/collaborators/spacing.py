"""Effective letter spacing and line height in points.

WHY: Figma stores both metrics either in pixels or as a percentage of
the font size (and line height may be AUTO). SwiftUI's ``tracking`` and
``lineSpacing`` take points, so the builder needs a resolved magnitude.

HOW: PIXELS values pass through; PERCENT values are scaled by the font
size. Anything that cannot be resolved to one number resolves to 0,
which the builder treats as "emit nothing".

RULES:
- MIXED metric or MIXED font size → 0
- Line height AUTO → 0
"""

from __future__ import annotations

from figma_swiftui.core.ir import MIXED, MetricRef, MetricUnit, SizeRef, StyledTextNode


def _resolve(metric: MetricRef, font_size: SizeRef) -> float:
    if metric is MIXED:
        return 0.0
    if metric.unit is MetricUnit.PIXELS:
        return float(metric.value)
    if metric.unit is MetricUnit.PERCENT:
        if font_size is MIXED:
            return 0.0
        return float(font_size) * float(metric.value) / 100.0
    return 0.0


def resolve_letter_spacing(node: StyledTextNode) -> float:
    return _resolve(node.letter_spacing, node.font_size)


def resolve_line_height(node: StyledTextNode) -> float:
    return _resolve(node.line_height, node.font_size)
