"""Shared test fixtures for the figma_swiftui test suite.

WHY: Builder, pipeline, formatter and CLI tests all need the same small
set of nodes and a deterministic collaborator bundle. Centralizing them
here avoids duplication and keeps expected chains consistent across
modules.

HOW: fake_collaborators returns fixed size expressions and a font
matcher that only knows 17pt (".body"), so tests control exactly which
directives appear. SAMPLE_EXPORT is a small Figma document tree with
three text nodes inside a frame.

RULES:
- Fakes are pure and deterministic
- SAMPLE_EXPORT matches the loader's plugin-API node shape
"""

import copy
from typing import Any, Dict

import pytest

from figma_swiftui.collaborators import Collaborators
from figma_swiftui.collaborators.numbers import format_number
from figma_swiftui.collaborators.spacing import resolve_letter_spacing, resolve_line_height
from figma_swiftui.collaborators.weight import match_weight, normalize_weight
from figma_swiftui.core.ir import FontName, StyledTextNode


def _fake_font(node):
    if node.font_size == 17:
        return ".body"
    return None


FAKE_COLLABORATORS = Collaborators(
    resolve_size=lambda node: ("width: 100", "height: 50"),
    normalize_weight=normalize_weight,
    match_weight=match_weight,
    match_font=_fake_font,
    resolve_letter_spacing=resolve_letter_spacing,
    resolve_line_height=resolve_line_height,
    format_number=format_number,
)


SAMPLE_EXPORT: Dict[str, Any] = {
    "document": {
        "id": "0:0",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "1:1",
                "name": "Card",
                "type": "FRAME",
                "children": [
                    {
                        "id": "1:2",
                        "name": "Title",
                        "type": "TEXT",
                        "characters": "Hello \"World\"",
                        "textAutoResize": "WIDTH_AND_HEIGHT",
                        "textDecoration": "NONE",
                        "fontName": {"family": "SF Pro", "style": "Bold"},
                        "fontSize": 34,
                        "textAlignHorizontal": "LEFT",
                        "textAlignVertical": "TOP",
                        "letterSpacing": {"value": 0, "unit": "PIXELS"},
                        "lineHeight": {"unit": "AUTO"},
                        "width": 180.5,
                        "height": 41,
                    },
                    {
                        "id": "1:3",
                        "name": "Body",
                        "type": "TEXT",
                        "characters": "Lorem ipsum",
                        "textAutoResize": "HEIGHT",
                        "textDecoration": "UNDERLINE",
                        "fontName": {"family": "Inter", "style": "Medium Italic"},
                        "fontSize": 16,
                        "textAlignHorizontal": "CENTER",
                        "textAlignVertical": "TOP",
                        "letterSpacing": {"value": 5, "unit": "PERCENT"},
                        "lineHeight": {"value": 150, "unit": "PERCENT"},
                        "width": 320,
                        "height": 48,
                    },
                    {
                        "id": "1:4",
                        "name": "Divider",
                        "type": "RECTANGLE",
                    },
                ],
            },
            {
                "id": "2:1",
                "name": "Footer",
                "type": "TEXT",
                "characters": "mixed run",
                "textAutoResize": "NONE",
                "fontName": "mixed",
                "fontSize": "mixed",
                "textAlignHorizontal": "RIGHT",
                "textAlignVertical": "BOTTOM",
                "width": 200,
                "height": 20,
                "layoutSizingHorizontal": "FILL",
            },
        ],
    }
}


@pytest.fixture
def fake_collaborators():
    """Deterministic collaborators: fixed sizes, only 17pt matches a font."""
    return FAKE_COLLABORATORS


@pytest.fixture
def plain_node():
    """A node that produces no directives with fake_collaborators."""
    return StyledTextNode(
        font_name=FontName("Inter", "Regular"),
        font_size=14,
    )


@pytest.fixture
def sample_export():
    """Figma document tree with three TEXT nodes (one nested in a frame)."""
    return copy.deepcopy(SAMPLE_EXPORT)
