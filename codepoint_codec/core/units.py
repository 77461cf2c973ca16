"""Walking and converting whole code-unit sequences.

WHY: The codec works one scalar at a time. Callers that hold an entire
buffer (a Python string, a list of units read from a file or a request)
need to iterate it scalar by scalar, and to move between Python's
scalar-based ``str`` and the 16-bit unit representation.

HOW: iter_scalars() repeatedly calls decode_at() and advances by the
number of units consumed. text_to_units() and units_to_text() are built
on top of encode_scalar() and iter_scalars(), so they share the codec's
strictness. parse_unit() and parse_scalar() read the notations users type
on the command line.

RULES:
- Python's own "utf-16" codec is never used
- Malformed sequences raise the codec error at the offending index
- A lone surrogate inside a Python str is rejected by text_to_units()
"""

from __future__ import annotations

import re
from typing import Iterator, List, Sequence, Tuple

from codepoint_codec.core.codec import PLANE00_END, decode_at, encode_scalar
from codepoint_codec.core.errors import NullSequenceError

_PREFIXED_HEX_RE = re.compile(r"^(?:U\+|0x|\\u)([0-9A-F]+)$", re.IGNORECASE)


def iter_scalars(seq: Sequence[int], start: int = 0) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(index, scalar, consumed)`` for each scalar in ``seq``.

    Decoding begins at ``start``; a start equal to ``len(seq)`` yields
    nothing. Errors are raised lazily when the walk reaches them.
    """
    if seq is None:
        raise NullSequenceError("seq")
    index = start
    length = len(seq)
    while index < length:
        scalar, consumed = decode_at(seq, index)
        yield index, scalar, consumed
        index += consumed


def count_scalars(seq: Sequence[int]) -> int:
    """Number of scalars in a well-formed code-unit sequence."""
    return sum(1 for _ in iter_scalars(seq))


def text_to_units(text: str) -> List[int]:
    """Encode a Python string into its UTF-16 code units."""
    units: List[int] = []
    for ch in text:
        units.extend(encode_scalar(ord(ch)))
    return units


def units_to_text(seq: Sequence[int]) -> str:
    """Decode a complete code-unit sequence into a Python string."""
    return "".join(chr(scalar) for _, scalar, _ in iter_scalars(seq))


def _parse_int(token: str, bare_base: int) -> int:
    token = token.strip()
    match = _PREFIXED_HEX_RE.match(token)
    if match:
        return int(match.group(1), 16)
    try:
        return int(token, bare_base)
    except ValueError:
        raise ValueError("Cannot parse '{}' as a number".format(token)) from None


def parse_scalar(token: str) -> int:
    """Parse ``U+1F600``, ``0x1F600``, ``\\U0001F600`` or a decimal number.

    Range checking is left to the codec so that out-of-range input
    surfaces as InvalidCodePointError.
    """
    return _parse_int(token, 10)


def parse_unit(token: str) -> int:
    """Parse a code unit token; bare tokens are hex (``D83D``).

    The value must fit in 16 bits.
    """
    value = _parse_int(token, 16)
    if value < 0 or value > PLANE00_END:
        raise ValueError("Code unit '{}' does not fit in 16 bits".format(token))
    return value
