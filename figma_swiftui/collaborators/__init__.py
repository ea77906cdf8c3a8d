"""Lookup and numeric helpers the modifier builder depends on.

WHY: The builder's rules are about *when* to emit a directive. How a
weight label becomes a SwiftUI token, how a percentage becomes points, or
how many decimals a literal keeps are separate concerns that change for
different reasons. Injecting them keeps the builder testable with fakes.

HOW: Collaborators bundles one callable per concern. default_collaborators()
wires the implementations in this package, all sharing one number
formatter configured from config.load_number_precision().

RULES:
- Every callable is pure; "not found" is None or 0, never an exception
- Tests may replace any field with dataclasses.replace()
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from figma_swiftui.collaborators.fonts import match_font
from figma_swiftui.collaborators.numbers import format_number
from figma_swiftui.collaborators.sizing import resolve_size
from figma_swiftui.collaborators.spacing import resolve_letter_spacing, resolve_line_height
from figma_swiftui.collaborators.weight import match_weight, normalize_weight
from figma_swiftui.config import load_number_precision
from figma_swiftui.core.ir import StyledTextNode


@dataclass(frozen=True)
class Collaborators:
    resolve_size: Callable[[StyledTextNode], Tuple[str, str]]
    normalize_weight: Callable[[str], Optional[str]]
    match_weight: Callable[[str], str]
    match_font: Callable[[StyledTextNode], Optional[str]]
    resolve_letter_spacing: Callable[[StyledTextNode], float]
    resolve_line_height: Callable[[StyledTextNode], float]
    format_number: Callable[[float], str]


def default_collaborators(precision: Optional[int] = None) -> Collaborators:
    """Build the standard collaborator bundle.

    Args:
        precision: Decimals kept in emitted numbers. None reads
                   FIGMA_SWIFTUI_NUMBER_PRECISION (default 2).
    """
    if precision is None:
        precision = load_number_precision()
    elif precision < 0:
        raise ValueError("Number precision must be >= 0, got {}.".format(precision))
    fmt = functools.partial(format_number, precision=precision)
    return Collaborators(
        resolve_size=functools.partial(resolve_size, fmt=fmt),
        normalize_weight=normalize_weight,
        match_weight=match_weight,
        match_font=functools.partial(match_font, fmt=fmt),
        resolve_letter_spacing=resolve_letter_spacing,
        resolve_line_height=resolve_line_height,
        format_number=fmt,
    )
