"""Command-line interface for the Figma to SwiftUI text converter.

WHY: Designers export text layers as JSON; developers need Swift. The
CLI wires together the full pipeline — JSON loading with schema
validation, modifier chain building, pluggable formatter output, and
file saving — behind a single command.

HOW: Uses argparse to accept an input JSON file, output format
selection, output directory, number precision, and indentation. Status
messages go to stderr; output files are saved next to the source (or to
--output-dir). ``--print-chains`` additionally writes one chain per line
to stdout for piping.

RULES:
- Positional argument: input JSON file path
- --formats: comma-separated formatter keys (default: FIGMA_SWIFTUI_FORMATS
  or all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-text-2.swift)
- Status output goes to stderr (not stdout)
- Malformed input and bad configuration exit with status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from figma_swiftui.collaborators import default_collaborators
from figma_swiftui.config import DEFAULT_FORMATS, DEFAULT_LOG_LEVEL
from figma_swiftui.core.loader import load_document
from figma_swiftui.core.pipeline import render_document
from figma_swiftui.formatters import FORMATTERS
from figma_swiftui.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users re-run the converter after tweaking a design. Overwriting
    the previous output would lose hand edits. Numeric suffixes
    (-text-2.swift) prevent data loss.

    RULES:
    - First attempt: {stem}{suffix} (e.g. screen-text.swift)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. screen-text-2.swift)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _non_negative_int(raw: str) -> int:
    """argparse type for counts that must be >= 0, like the .env values."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError("expected an integer, got {!r}".format(raw)) from None
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0, got {}".format(value))
    return value


def _select_formats(raw: Optional[str]) -> List[str]:
    """Parse a comma-separated format list, failing on unknown keys."""
    if not raw:
        return list(FORMATTERS.keys())

    format_keys = [f.strip() for f in raw.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def run(args: argparse.Namespace) -> List[Path]:
    """Execute the full conversion pipeline and return the saved paths.

    RULES:
    - Validate input file, output directory and formats before loading
    - Status messages to stderr at each step
    - ValueError (malformed nodes, bad config) → "Error: ..." and exit 1
    """
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    format_keys = _select_formats(args.formats)

    try:
        collaborators = default_collaborators(precision=args.precision)

        _status("Loading {}...".format(input_path.name))
        document = load_document(input_path)
        _status("  Found {} text node(s)".format(len(document.nodes)))

        _status("Building modifier chains...")
        rendered = render_document(document, collaborators)
    except ValueError as e:
        _fail(str(e))

    if args.print_chains:
        for text in rendered.texts:
            print(text.chain)

    _status("Formatting output...")
    stem = input_path.stem
    saved_files: List[Path] = []
    options = {"indent": args.indent}
    for key in format_keys:
        try:
            formatter = FORMATTERS[key].from_options(options)
        except ValueError as e:
            _fail(str(e))
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(rendered):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    logger.info("Saved %s", ", ".join(str(p) for p in saved_files))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="figma_swiftui",
        description="Convert Figma text nodes (JSON export) into SwiftUI Text "
                    "views with their modifier chains.",
    )

    parser.add_argument(
        "input_file",
        help="Path to a JSON file with Figma text nodes or a document tree.",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS or None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--precision",
        type=_non_negative_int,
        default=None,
        help="Decimals kept in emitted numbers "
             "(default: FIGMA_SWIFTUI_NUMBER_PRECISION or 2).",
    )

    parser.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help="Spaces before each modifier line in Swift output "
             "(default: FIGMA_SWIFTUI_INDENT or 4).",
    )

    parser.add_argument(
        "--print-chains",
        action="store_true",
        help="Also print each node's modifier chain to stdout, one per line.",
    )

    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    run(args)


if __name__ == "__main__":
    main()
