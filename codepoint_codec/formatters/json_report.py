"""JSON inspection report formatter.

WHY: Scripts and the HTTP API need a machine-readable report. A JSON
Schema shipped with the package pins the shape so consumers can rely on
it, and validating before returning catches formatter regressions.

HOW: report_to_dict() converts the IR into plain dicts and lists. The
formatter validates that dict with jsonschema against
report_schema.json and serializes it with ensure_ascii=False so
characters appear as themselves.

RULES:
- Schema version is "1.0.0"
- "codepoint" is the U+XXXX rendering of "scalar"
- Validate output against the schema before returning; raise on failure
- Output suffix: "-codepoints.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from codepoint_codec.core.inspector import format_scalar
from codepoint_codec.core.ir import InspectionReport
from codepoint_codec.formatters.base import BaseFormatter, FormatterOutput

REPORT_VERSION = "1.0.0"

_SCHEMA_PATH = Path(__file__).resolve().parent / "report_schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the report JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def report_to_dict(report: InspectionReport) -> dict[str, Any]:
    """Convert an InspectionReport into the schema-shaped dict."""
    return {
        "version": REPORT_VERSION,
        "source": report.source,
        "unit_count": report.unit_count,
        "scalar_count": report.scalar_count,
        "supplementary_count": report.supplementary_count,
        "scalars": [
            {
                "index": info.index,
                "scalar": info.scalar,
                "codepoint": format_scalar(info.scalar),
                "units": list(info.units),
                "plane": info.plane,
                "supplementary": info.is_supplementary,
                "character": info.character,
            }
            for info in report.scalars
        ],
    }


class JsonReportFormatter(BaseFormatter):
    """Formatter that produces a schema-validated JSON report."""

    @property
    def name(self) -> str:
        return "JSON Report"

    def format(self, report: InspectionReport) -> list[FormatterOutput]:
        """Render the report as JSON.

        Raises:
            jsonschema.ValidationError: If the generated document does not
                conform to report_schema.json.
        """
        output = report_to_dict(report)
        jsonschema.validate(instance=output, schema=get_schema())

        content = json.dumps(output, indent=2, ensure_ascii=False)

        return [
            FormatterOutput(
                suffix="-codepoints.json",
                content=content + "\n",
                media_type="application/json",
            )
        ]
