"""Abstract base formatter and output container.

WHY: Every output format consumes the same RenderedDocument IR but
produces different file content. This base class enforces a consistent
interface so the CLI can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content. from_options() builds a
formatter from CLI options; each subclass picks the ones it uses.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list — one item for current formatters, but
  multi-file formats stay possible
- ``suffix`` starts with a hyphen or dot, e.g. ``"-text.swift"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

from figma_swiftui.core.ir import RenderedDocument


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-modifiers.json"`` → ``"screen-modifiers.json"``.
        content: The file content.
    """

    suffix: str
    content: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "BaseFormatter":
        """Build the formatter from CLI options; unused options are ignored."""
        return cls()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SwiftUI View'."""

    @abstractmethod
    def format(self, document: RenderedDocument) -> List[FormatterOutput]:
        """Convert the RenderedDocument IR into one or more output files.

        Args:
            document: Every text node of the source file with its built
                      directives and modifier chain.

        Returns:
            List of FormatterOutput objects, each containing a file suffix
            and content string.
        """
