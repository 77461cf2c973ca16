"""Report formatter registry.

WHY: The CLI and the API need a single lookup to find a formatter by
name. Adding a format means creating the class, importing it here, and
adding one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and config)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codepoint_codec.formatters.json_report import JsonReportFormatter
from codepoint_codec.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from codepoint_codec.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "json": JsonReportFormatter,
}
