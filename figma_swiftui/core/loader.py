"""Load Figma text nodes from a JSON export.

WHY: Exports arrive in several shapes — a single node, a list of nodes,
a ``{"nodes": [...]}`` wrapper, or a whole document tree with
``children``. Malformed nodes (a misspelt enum, a string font size)
would otherwise surface deep inside the builder as confusing errors.

HOW: walk_text_nodes() yields every ``"type": "TEXT"`` dict with its path
in the document. Each one is validated against TEXT_NODE_SCHEMA with
jsonschema, then parse_text_node() converts it into a StyledTextNode.
The string ``"mixed"`` stands for Figma's mixed symbol wherever the
plugin API can return it (fontName, fontSize, letterSpacing, lineHeight).

RULES:
- Only nodes with "type": "TEXT" are converted; others are traversed
- Schema violations raise NodeFormatError naming the node path
- Missing optional fields take the StyledTextNode defaults
- Document order is preserved (depth-first, children in order)
- NaN and Infinity are rejected, wherever they appear
- REST ids that resolve to null are skipped with a warning
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple, Union

import jsonschema
from jsonschema.exceptions import best_match

from figma_swiftui.core.ir import (
    MIXED,
    FontName,
    LayoutSizing,
    Metric,
    MetricUnit,
    StyledTextNode,
    TextAlignHorizontal,
    TextAlignVertical,
    TextAutoResize,
    TextDecoration,
    TextDocument,
)

logger = logging.getLogger(__name__)

MIXED_MARKER = "mixed"


class NodeFormatError(ValueError):
    """Raised when an export file or one of its text nodes is malformed.

    RULES:
    - path locates the offending node, e.g. "nodes[0].children[2]"
    - The message includes the jsonschema error when there is one
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__("Invalid text node at {}: {}".format(path, message))


def _enum(enum_cls) -> Dict[str, Any]:
    return {"enum": [member.value for member in enum_cls]}


_MIXED = {"const": MIXED_MARKER}

TEXT_NODE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["type", "fontName", "fontSize"],
    "properties": {
        "type": {"const": "TEXT"},
        "id": {"type": "string"},
        "name": {"type": "string"},
        "characters": {"type": "string"},
        "textAutoResize": _enum(TextAutoResize),
        "textDecoration": _enum(TextDecoration),
        "textAlignHorizontal": _enum(TextAlignHorizontal),
        "textAlignVertical": _enum(TextAlignVertical),
        "fontName": {
            "oneOf": [
                _MIXED,
                {
                    "type": "object",
                    "required": ["family", "style"],
                    "properties": {
                        "family": {"type": "string"},
                        "style": {"type": "string"},
                    },
                },
            ],
        },
        "fontSize": {"oneOf": [_MIXED, {"type": "number", "exclusiveMinimum": 0}]},
        "letterSpacing": {
            "oneOf": [
                _MIXED,
                {
                    "type": "object",
                    "required": ["value", "unit"],
                    "properties": {
                        "value": {"type": "number"},
                        "unit": {"enum": ["PIXELS", "PERCENT"]},
                    },
                },
            ],
        },
        "lineHeight": {
            "oneOf": [
                _MIXED,
                {
                    "type": "object",
                    "required": ["unit"],
                    "properties": {
                        "value": {"type": "number"},
                        "unit": _enum(MetricUnit),
                    },
                    "if": {"properties": {"unit": {"enum": ["PIXELS", "PERCENT"]}}},
                    "then": {"required": ["value"]},
                },
            ],
        },
        "width": {"type": "number", "minimum": 0},
        "height": {"type": "number", "minimum": 0},
        "layoutSizingHorizontal": _enum(LayoutSizing),
        "layoutSizingVertical": _enum(LayoutSizing),
    },
}

_VALIDATOR = jsonschema.Draft7Validator(TEXT_NODE_SCHEMA)


def validate_text_node(data: Dict[str, Any], path: str = "$") -> None:
    """Validate one raw text node dict.

    Raises:
        NodeFormatError: With the most relevant jsonschema error.
    """
    error = best_match(_VALIDATOR.iter_errors(data))
    if error is not None:
        location = "".join("[{!r}]".format(p) for p in error.absolute_path)
        raise NodeFormatError(path, "{}{}".format(location + ": " if location else "", error.message))


def _finite(raw: Any, field: str, path: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise NodeFormatError(path, "{}: non-finite number {!r}".format(field, raw))
    return value


def _metric(raw: Any, field: str, path: str) -> Union[Metric, Any]:
    if raw == MIXED_MARKER:
        return MIXED
    value = _finite(raw.get("value", 0.0), field, path)
    return Metric(value=value, unit=MetricUnit(raw["unit"]))


def parse_text_node(data: Dict[str, Any], path: str = "$") -> StyledTextNode:
    """Validate and convert one Figma text node dict into a StyledTextNode."""
    validate_text_node(data, path)

    raw_font = data["fontName"]
    font_name = MIXED if raw_font == MIXED_MARKER else FontName(raw_font["family"], raw_font["style"])
    raw_size = data["fontSize"]
    font_size = MIXED if raw_size == MIXED_MARKER else _finite(raw_size, "fontSize", path)

    kwargs: Dict[str, Any] = {
        "font_name": font_name,
        "font_size": font_size,
        "id": data.get("id", ""),
        "name": data.get("name", ""),
        "characters": data.get("characters", ""),
    }
    if "textAutoResize" in data:
        kwargs["resize_mode"] = TextAutoResize(data["textAutoResize"])
    if "textDecoration" in data:
        kwargs["decoration"] = TextDecoration(data["textDecoration"])
    if "textAlignHorizontal" in data:
        kwargs["align_horizontal"] = TextAlignHorizontal(data["textAlignHorizontal"])
    if "textAlignVertical" in data:
        kwargs["align_vertical"] = TextAlignVertical(data["textAlignVertical"])
    if "letterSpacing" in data:
        kwargs["letter_spacing"] = _metric(data["letterSpacing"], "letterSpacing", path)
    if "lineHeight" in data:
        kwargs["line_height"] = _metric(data["lineHeight"], "lineHeight", path)
    if "width" in data:
        kwargs["width"] = _finite(data["width"], "width", path)
    if "height" in data:
        kwargs["height"] = _finite(data["height"], "height", path)
    if "layoutSizingHorizontal" in data:
        kwargs["layout_sizing_horizontal"] = LayoutSizing(data["layoutSizingHorizontal"])
    if "layoutSizingVertical" in data:
        kwargs["layout_sizing_vertical"] = LayoutSizing(data["layoutSizingVertical"])

    return StyledTextNode(**kwargs)


def walk_text_nodes(data: Any, path: str = "$") -> Iterator[Tuple[str, Dict[str, Any]]]:
    """Yield ``(path, node_dict)`` for every TEXT node, depth-first."""
    if isinstance(data, list):
        for index, item in enumerate(data):
            yield from walk_text_nodes(item, "{}[{}]".format(path, index))
        return

    if not isinstance(data, dict):
        raise NodeFormatError(path, "expected an object or a list, got {}".format(type(data).__name__))

    if data.get("type") == "TEXT":
        yield path, data
        return

    for key in ("nodes", "document", "children"):
        if key not in data:
            continue
        child = data[key]
        if isinstance(child, dict) and "type" not in child:
            # REST /nodes responses key each subtree by node id.
            for node_id, entry in child.items():
                if entry is None:
                    logger.warning("Skipping node %s: not found in export", node_id)
                    continue
                yield from walk_text_nodes(entry, "{}.{}[{!r}]".format(path, key, node_id))
        else:
            yield from walk_text_nodes(child, "{}.{}".format(path, key))


def parse_document(data: Any, source_filename: str) -> TextDocument:
    """Convert already-decoded JSON into a TextDocument."""
    nodes = [parse_text_node(node, path) for path, node in walk_text_nodes(data)]
    logger.info("Loaded %d text node(s) from %s", len(nodes), source_filename)
    return TextDocument(source_filename=source_filename, nodes=nodes)


def _reject_constant(name: str) -> Any:
    raise NodeFormatError("$", "non-finite number {} is not allowed".format(name))


def load_document(path: Union[str, Path]) -> TextDocument:
    """Read a JSON export file and load its text nodes.

    Raises:
        FileNotFoundError: If the file does not exist.
        NodeFormatError: If the file is not valid JSON or a node is invalid.
    """
    source = Path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise NodeFormatError("$", "not valid JSON ({})".format(exc)) from exc
    return parse_document(data, source.name)
