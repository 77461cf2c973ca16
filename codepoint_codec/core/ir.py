"""Intermediate representation for code-unit inspection reports.

WHY: The CLI, the HTTP API and every formatter describe the same thing:
which scalars a buffer holds, where each one starts, and how it is
encoded. A shared pair of dataclasses keeps the formatters decoupled
from the codec.

HOW: Two dataclasses form a hierarchy:
  ScalarInfo        : one decoded scalar with its position and units
  InspectionReport  : all scalars of one buffer plus its unit count

RULES:
- index is the position of the scalar's first code unit
- units always has length 1 (BMP) or 2 (supplementary)
- plane is 0 for the BMP, 1-16 for supplementary planes
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ScalarInfo:
    """A single scalar decoded from a code-unit buffer."""

    index: int
    scalar: int
    units: list[int]
    plane: int

    @property
    def is_supplementary(self) -> bool:
        return self.plane > 0

    @property
    def character(self) -> str:
        return chr(self.scalar)


@dataclass
class InspectionReport:
    """All scalars of one inspected buffer.

    RULES:
    - source: "units" when built from raw code units, "text" from a str
    - unit_count: total number of code units in the buffer
    - scalars: ordered by index
    """

    source: str
    unit_count: int
    scalars: list[ScalarInfo] = field(default_factory=list)

    @property
    def scalar_count(self) -> int:
        return len(self.scalars)

    @property
    def supplementary_count(self) -> int:
        return sum(1 for info in self.scalars if info.is_supplementary)
