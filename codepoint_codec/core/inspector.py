"""Build inspection reports from code units or text.

WHY: Debugging mojibake or a broken emoji means looking at a buffer unit
by unit and seeing where each scalar begins. The inspector turns a
buffer into the InspectionReport IR that formatters render.

HOW: inspect_units() walks the buffer with iter_scalars() and records a
ScalarInfo per scalar, slicing the original units for each one.
inspect_text() encodes a Python string first, then inspects the units.

RULES:
- Malformed buffers raise the codec error; there are no partial reports
- format_scalar() renders U+XXXX with at least four hex digits
- format_unit() renders 0xXXXX with exactly four hex digits
"""

from __future__ import annotations

from typing import List, Sequence

from codepoint_codec.core.codec import plane_of
from codepoint_codec.core.ir import InspectionReport, ScalarInfo
from codepoint_codec.core.units import iter_scalars, text_to_units


def format_scalar(scalar: int) -> str:
    """``0x1F600`` -> ``"U+1F600"``, ``0x41`` -> ``"U+0041"``."""
    return "U+{:04X}".format(scalar)


def format_unit(unit: int) -> str:
    """``0xD83D`` -> ``"0xD83D"``, ``0x41`` -> ``"0x0041"``."""
    return "0x{:04X}".format(unit)


def inspect_units(seq: Sequence[int], source: str = "units") -> InspectionReport:
    """Decode every scalar in ``seq`` into an InspectionReport."""
    units = list(seq)
    scalars: List[ScalarInfo] = []
    for index, scalar, consumed in iter_scalars(units):
        scalars.append(ScalarInfo(
            index=index,
            scalar=scalar,
            units=units[index:index + consumed],
            plane=plane_of(scalar),
        ))
    return InspectionReport(source=source, unit_count=len(units), scalars=scalars)


def inspect_text(text: str) -> InspectionReport:
    """Encode ``text`` to code units and inspect the result."""
    return inspect_units(text_to_units(text), source="text")
