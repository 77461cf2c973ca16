"""Plain text table formatter.

WHY: At a terminal, the quickest way to understand a buffer is a table:
one row per scalar showing where it starts and which units encode it.

HOW: A header row followed by one tab-separated row per scalar, then a
summary line with scalar and unit counts.

RULES:
- Columns: index, scalar (U+XXXX), units (space-separated 0xXXXX), plane
- Tab-separated, no trailing whitespace
- Summary line: "N scalar(s), M code unit(s), K supplementary"
- Output suffix: "-codepoints.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from codepoint_codec.core.inspector import format_scalar, format_unit
from codepoint_codec.core.ir import InspectionReport, ScalarInfo
from codepoint_codec.formatters.base import BaseFormatter, FormatterOutput

_HEADER = "index\tscalar\tunits\tplane"


def _format_row(info: ScalarInfo) -> str:
    units = " ".join(format_unit(u) for u in info.units)
    return "{}\t{}\t{}\t{}".format(info.index, format_scalar(info.scalar), units, info.plane)


class PlainTextFormatter(BaseFormatter):
    """Formatter that renders a tab-separated scalar table."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, report: InspectionReport) -> List[FormatterOutput]:
        lines = [_HEADER]
        lines.extend(_format_row(info) for info in report.scalars)
        lines.append("{} scalar(s), {} code unit(s), {} supplementary".format(
            report.scalar_count,
            report.unit_count,
            report.supplementary_count,
        ))

        return [
            FormatterOutput(
                suffix="-codepoints.txt",
                content="\n".join(lines) + "\n",
                media_type="text/plain",
            )
        ]
