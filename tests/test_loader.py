"""Unit tests for JSON ingest and schema validation.

WHY: Exports are hand-edited and produced by different plugin versions.
A node that slips past validation fails later with an unhelpful error,
or worse, renders with defaults that hide the mistake.

HOW: Tests cover node parsing (enums, mixed markers, metrics, defaults),
tree walking across the supported export shapes, schema violations, and
file loading via tmp_path.
"""

import json

import pytest

from figma_swiftui.core.ir import (
    MIXED,
    FontName,
    LayoutSizing,
    Metric,
    MetricUnit,
    TextAlignHorizontal,
    TextAlignVertical,
    TextAutoResize,
    TextDecoration,
)
from figma_swiftui.core.loader import (
    NodeFormatError,
    load_document,
    parse_document,
    parse_text_node,
    walk_text_nodes,
)


def _text(**overrides):
    data = {
        "type": "TEXT",
        "fontName": {"family": "Inter", "style": "Regular"},
        "fontSize": 14,
    }
    data.update(overrides)
    return data


class TestParseTextNode:

    def test_full_node(self):
        node = parse_text_node(_text(
            id="1:2",
            name="Title",
            characters="Hi",
            textAutoResize="NONE",
            textDecoration="STRIKETHROUGH",
            textAlignHorizontal="RIGHT",
            textAlignVertical="BOTTOM",
            letterSpacing={"value": 3, "unit": "PERCENT"},
            lineHeight={"value": 20, "unit": "PIXELS"},
            width=100,
            height=24.5,
            layoutSizingHorizontal="FILL",
            layoutSizingVertical="HUG",
        ))
        assert node.id == "1:2"
        assert node.name == "Title"
        assert node.characters == "Hi"
        assert node.resize_mode is TextAutoResize.NONE
        assert node.decoration is TextDecoration.STRIKETHROUGH
        assert node.align_horizontal is TextAlignHorizontal.RIGHT
        assert node.align_vertical is TextAlignVertical.BOTTOM
        assert node.letter_spacing == Metric(3.0, MetricUnit.PERCENT)
        assert node.line_height == Metric(20.0, MetricUnit.PIXELS)
        assert node.width == 100.0
        assert node.height == 24.5
        assert node.layout_sizing_horizontal is LayoutSizing.FILL
        assert node.layout_sizing_vertical is LayoutSizing.HUG

    def test_defaults(self):
        node = parse_text_node(_text())
        assert node.font_name == FontName("Inter", "Regular")
        assert node.font_size == 14.0
        assert node.resize_mode is TextAutoResize.WIDTH_AND_HEIGHT
        assert node.decoration is TextDecoration.NONE
        assert node.width is None

    def test_mixed_markers(self):
        node = parse_text_node(_text(
            fontName="mixed",
            fontSize="mixed",
            letterSpacing="mixed",
            lineHeight="mixed",
        ))
        assert node.font_name is MIXED
        assert node.font_size is MIXED
        assert node.letter_spacing is MIXED
        assert node.line_height is MIXED

    def test_auto_line_height_without_value(self):
        node = parse_text_node(_text(lineHeight={"unit": "AUTO"}))
        assert node.line_height.unit is MetricUnit.AUTO


class TestSchemaValidation:

    def test_unknown_enum(self):
        with pytest.raises(NodeFormatError) as excinfo:
            parse_text_node(_text(textAutoResize="SOMETIMES"), "$.nodes[3]")
        assert excinfo.value.path == "$.nodes[3]"
        assert "textAutoResize" in str(excinfo.value)

    def test_missing_font_size(self):
        data = _text()
        del data["fontSize"]
        with pytest.raises(NodeFormatError, match="fontSize"):
            parse_text_node(data)

    def test_string_font_size(self):
        with pytest.raises(NodeFormatError):
            parse_text_node(_text(fontSize="14"))

    def test_font_without_style(self):
        with pytest.raises(NodeFormatError):
            parse_text_node(_text(fontName={"family": "Inter"}))

    def test_pixel_line_height_requires_value(self):
        with pytest.raises(NodeFormatError):
            parse_text_node(_text(lineHeight={"unit": "PIXELS"}))

    @pytest.mark.parametrize("overrides", [
        {"fontSize": float("nan")},
        {"width": float("inf")},
        {"height": float("inf")},
        {"letterSpacing": {"value": float("nan"), "unit": "PERCENT"}},
        {"lineHeight": {"value": float("inf"), "unit": "PIXELS"}},
    ])
    def test_non_finite_numbers_rejected(self, overrides):
        with pytest.raises(NodeFormatError, match="non-finite"):
            parse_text_node(_text(**overrides), "$.nodes[0]")

    def test_is_a_value_error(self):
        assert issubclass(NodeFormatError, ValueError)


class TestWalkTextNodes:

    def test_single_node(self):
        assert [p for p, _ in walk_text_nodes(_text())] == ["$"]

    def test_list_of_nodes(self):
        paths = [p for p, _ in walk_text_nodes([_text(), _text()])]
        assert paths == ["$[0]", "$[1]"]

    def test_nodes_wrapper(self):
        paths = [p for p, _ in walk_text_nodes({"nodes": [_text()]})]
        assert paths == ["$.nodes[0]"]

    def test_rest_nodes_response(self):
        data = {"nodes": {"1:2": {"document": _text(id="1:2")}}}
        found = list(walk_text_nodes(data))
        assert len(found) == 1
        assert found[0][1]["id"] == "1:2"

    def test_rest_nodes_response_skips_missing_ids(self, caplog):
        data = {"nodes": {"1:2": None, "1:3": {"document": _text(id="1:3")}}}
        with caplog.at_level("WARNING", logger="figma_swiftui.core.loader"):
            document = parse_document(data, "x.json")
        assert [node.id for node in document.nodes] == ["1:3"]
        assert "1:2" in caplog.text

    def test_document_tree_order(self, sample_export):
        ids = [node["id"] for _, node in walk_text_nodes(sample_export)]
        assert ids == ["1:2", "1:3", "2:1"]

    def test_scalar_rejected(self):
        with pytest.raises(NodeFormatError):
            list(walk_text_nodes(42))


class TestLoadDocument:

    def test_load_file(self, tmp_path, sample_export):
        path = tmp_path / "screen.json"
        path.write_text(json.dumps(sample_export), encoding="utf-8")

        document = load_document(path)
        assert document.source_filename == "screen.json"
        assert [n.name for n in document.nodes] == ["Title", "Body", "Footer"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(NodeFormatError, match="not valid JSON"):
            load_document(path)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_json_constant_rejected(self, tmp_path, constant):
        path = tmp_path / "bad.json"
        path.write_text(
            '{"type": "TEXT", "fontName": {"family": "Inter", "style": "Bold"}, '
            '"fontSize": ' + constant + "}",
            encoding="utf-8",
        )
        with pytest.raises(NodeFormatError, match="non-finite"):
            load_document(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "nope.json")

    def test_invalid_nested_node_reports_path(self, sample_export):
        sample_export["document"]["children"][1]["textDecoration"] = "OVERLINE"
        with pytest.raises(NodeFormatError) as excinfo:
            parse_document(sample_export, "sample.json")
        assert excinfo.value.path == "$.document.children[1]"
