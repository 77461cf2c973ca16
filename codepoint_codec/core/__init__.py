"""Core codec, sequence helpers and inspection IR.

WHY: The core package holds everything with real domain logic: the
surrogate-pair codec, its error taxonomy, whole-buffer helpers, and the
report dataclasses consumed by formatters, the CLI and the API.

HOW: codec.py converts single scalars and units, errors.py defines the
exceptions, units.py walks buffers, ir.py and inspector.py produce
InspectionReport objects.

RULES:
- Nothing in core performs I/O or logging
- Outer layers depend on core, never the other way round
"""
