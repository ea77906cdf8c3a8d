"""Unit tests for the frame alignment combinator.

WHY: SwiftUI only has nine Alignment constants and the combined ones are
camel-cased with the vertical token first. A swapped order (".leadingTop")
does not compile.

HOW: Exhaustive over the token domain (3 x 3) and over the node enums
(4 x 3), since both are tiny.
"""

import pytest

from figma_swiftui.core.alignment import alignment_suffix, combine_alignment
from figma_swiftui.core.ir import StyledTextNode, TextAlignHorizontal, TextAlignVertical


class TestCombineAlignment:

    @pytest.mark.parametrize("horizontal, vertical, expected", [
        (None, None, ""),
        ("leading", None, ", alignment: .leading"),
        ("trailing", None, ", alignment: .trailing"),
        (None, "top", ", alignment: .top"),
        (None, "bottom", ", alignment: .bottom"),
        ("leading", "top", ", alignment: .topLeading"),
        ("trailing", "top", ", alignment: .topTrailing"),
        ("leading", "bottom", ", alignment: .bottomLeading"),
        ("trailing", "bottom", ", alignment: .bottomTrailing"),
    ])
    def test_outcomes(self, horizontal, vertical, expected):
        assert combine_alignment(horizontal, vertical) == expected

    def test_empty_only_when_both_centered(self):
        tokens_h = [None, "leading", "trailing"]
        tokens_v = [None, "top", "bottom"]
        for h in tokens_h:
            for v in tokens_v:
                result = combine_alignment(h, v)
                assert (result == "") == (h is None and v is None)

    def test_combined_tokens(self):
        combined = {
            combine_alignment(h, v)
            for h in ("leading", "trailing")
            for v in ("top", "bottom")
        }
        assert combined == {
            ", alignment: .topLeading",
            ", alignment: .topTrailing",
            ", alignment: .bottomLeading",
            ", alignment: .bottomTrailing",
        }


class TestAlignmentSuffix:

    @pytest.mark.parametrize("horizontal, vertical, expected", [
        (TextAlignHorizontal.CENTER, TextAlignVertical.CENTER, ""),
        (TextAlignHorizontal.JUSTIFIED, TextAlignVertical.CENTER, ""),
        (TextAlignHorizontal.LEFT, TextAlignVertical.CENTER, ", alignment: .leading"),
        (TextAlignHorizontal.RIGHT, TextAlignVertical.CENTER, ", alignment: .trailing"),
        (TextAlignHorizontal.CENTER, TextAlignVertical.TOP, ", alignment: .top"),
        (TextAlignHorizontal.JUSTIFIED, TextAlignVertical.BOTTOM, ", alignment: .bottom"),
        (TextAlignHorizontal.LEFT, TextAlignVertical.TOP, ", alignment: .topLeading"),
        (TextAlignHorizontal.RIGHT, TextAlignVertical.BOTTOM, ", alignment: .bottomTrailing"),
    ])
    def test_node_alignment(self, horizontal, vertical, expected):
        node = StyledTextNode(align_horizontal=horizontal, align_vertical=vertical)
        assert alignment_suffix(node) == expected

    def test_every_alignment_constant_reachable(self):
        outcomes = {
            alignment_suffix(StyledTextNode(align_horizontal=h, align_vertical=v))
            for h in TextAlignHorizontal
            for v in TextAlignVertical
        }
        # empty, leading/trailing, top/bottom, and the four corners
        assert len(outcomes) == 9
        assert "" in outcomes
