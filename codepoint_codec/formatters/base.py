"""Abstract base formatter and output container.

WHY: Every report format consumes the same InspectionReport IR but
produces different content. This base class enforces a consistent
interface so the CLI and the API can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; current formatters return one item
- ``suffix`` starts with a hyphen, e.g. ``"-codepoints.json"``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from codepoint_codec.core.ir import InspectionReport


@dataclass
class FormatterOutput:
    """One rendered report.

    Attributes:
        suffix: File suffix used when the CLI writes to a directory,
                e.g. ``"-codepoints.txt"``.
        content: The rendered report.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all report formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @abstractmethod
    def format(self, report: InspectionReport) -> list[FormatterOutput]:
        """Render an InspectionReport.

        Args:
            report: Decoded scalars of one buffer.

        Returns:
            List of FormatterOutput objects.
        """
