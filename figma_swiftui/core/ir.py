"""Intermediate representation dataclasses for Figma text nodes.

WHY: Figma's plugin API hands out text nodes as loosely typed objects
where almost any property can be the ``figma.mixed`` symbol. The builder
needs a single, well-typed view of a node so every inspection can decide
"emit or not" without re-parsing raw JSON.

HOW: Enums cover the closed Figma vocabularies (resize mode, decoration,
alignment, units, layout sizing). FontName and Metric are small value
types. The Mixed sentinel is a one-instance class, so font references are
a ``FontName | Mixed`` sum type that callers must check before reading
style fields. StyledTextNode groups everything for one node; TextDocument,
RenderedText and RenderedDocument carry nodes through the pipeline.

RULES:
- StyledTextNode is read-only — the builder never mutates its input
- MIXED is the only Mixed instance; compare with ``is``
- Reading a style from MIXED is a contract violation: concrete_font()
  raises MixedValueError instead of returning a placeholder
- Enum values match Figma's plugin API strings exactly
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from figma_swiftui.core.directives import Directive


class MixedValueError(TypeError):
    """Raised when a single value is requested from a mixed text run.

    WHY: A run with several fonts has no single style label. Silently
    picking one would emit the wrong weight or italics.

    RULES:
    - Always a programming error: callers must check ``is MIXED`` first
    """


class Mixed:
    """Marker for a property that varies across the characters of a node."""

    _instance: Optional["Mixed"] = None

    def __new__(cls) -> "Mixed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MIXED"

    def __reduce__(self):
        return (Mixed, ())


MIXED = Mixed()


class TextAutoResize(str, enum.Enum):
    """Which dimensions of a text box grow to fit the content."""

    NONE = "NONE"
    WIDTH = "WIDTH"
    HEIGHT = "HEIGHT"
    WIDTH_AND_HEIGHT = "WIDTH_AND_HEIGHT"


class TextDecoration(str, enum.Enum):
    NONE = "NONE"
    UNDERLINE = "UNDERLINE"
    STRIKETHROUGH = "STRIKETHROUGH"


class TextAlignHorizontal(str, enum.Enum):
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"
    JUSTIFIED = "JUSTIFIED"


class TextAlignVertical(str, enum.Enum):
    TOP = "TOP"
    CENTER = "CENTER"
    BOTTOM = "BOTTOM"


class MetricUnit(str, enum.Enum):
    PIXELS = "PIXELS"
    PERCENT = "PERCENT"
    AUTO = "AUTO"


class LayoutSizing(str, enum.Enum):
    """Auto-layout sizing of a node along one axis."""

    FIXED = "FIXED"
    HUG = "HUG"
    FILL = "FILL"


@dataclass(frozen=True)
class FontName:
    """A concrete Figma font reference, e.g. ``FontName("Inter", "Bold Italic")``."""

    family: str
    style: str


@dataclass(frozen=True)
class Metric:
    """A letter-spacing or line-height value with its Figma unit.

    RULES:
    - value is ignored when unit is AUTO (line height only)
    - PERCENT values are relative to the node's font size
    """

    value: float
    unit: MetricUnit = MetricUnit.PIXELS


FontRef = Union[FontName, Mixed]
MetricRef = Union[Metric, Mixed]
SizeRef = Union[float, Mixed]


def concrete_font(font: FontRef) -> FontName:
    """Return the concrete font, failing fast on the mixed sentinel.

    Raises:
        MixedValueError: If ``font`` is MIXED.
    """
    if font is MIXED:
        raise MixedValueError(
            "Font is mixed across the text run; check for MIXED before "
            "reading family or style."
        )
    return font


@dataclass(frozen=True)
class StyledTextNode:
    """Everything the modifier builder reads from one Figma text node.

    WHY: The builder's inspections each look at a narrow slice of the node
    (resize mode, decoration, font, alignment, metrics). Grouping them in
    one frozen record keeps inspections pure and trivially testable.

    HOW: Built by the loader from Figma JSON, or directly in tests. Every
    field has a default that produces no directive, so tests only spell
    out the attributes they care about.

    RULES:
    - resize_mode / decoration / alignments use Figma's enum strings
    - font_name, font_size, letter_spacing, line_height may be MIXED
    - width / height are None when the export omitted geometry
    - layout sizing defaults to FIXED (absolute positioning)
    """

    resize_mode: TextAutoResize = TextAutoResize.WIDTH_AND_HEIGHT
    decoration: TextDecoration = TextDecoration.NONE
    font_name: FontRef = FontName("Inter", "Regular")
    align_horizontal: TextAlignHorizontal = TextAlignHorizontal.LEFT
    align_vertical: TextAlignVertical = TextAlignVertical.TOP
    font_size: SizeRef = 14.0
    letter_spacing: MetricRef = Metric(0.0)
    line_height: MetricRef = Metric(0.0, MetricUnit.AUTO)
    width: Optional[float] = None
    height: Optional[float] = None
    layout_sizing_horizontal: LayoutSizing = LayoutSizing.FIXED
    layout_sizing_vertical: LayoutSizing = LayoutSizing.FIXED
    id: str = ""
    name: str = ""
    characters: str = ""

    @property
    def is_fully_auto_sized(self) -> bool:
        """True when both dimensions hug the content (the text cannot wrap)."""
        return self.resize_mode is TextAutoResize.WIDTH_AND_HEIGHT


@dataclass
class TextDocument:
    """All text nodes loaded from one export file, in document order."""

    source_filename: str
    nodes: List[StyledTextNode] = field(default_factory=list)


@dataclass
class RenderedText:
    """One node together with the directives built for it.

    RULES:
    - directives are in accumulation order
    - chain is exactly the concatenation of the rendered directives
    """

    node: StyledTextNode
    directives: Tuple[Directive, ...]
    chain: str


@dataclass
class RenderedDocument:
    """The IR every formatter consumes.

    RULES:
    - texts preserve the order of TextDocument.nodes
    - source_filename is kept for output naming
    """

    source_filename: str
    texts: List[RenderedText] = field(default_factory=list)
