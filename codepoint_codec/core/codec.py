"""UTF-16 surrogate-pair codec for Unicode scalar values.

WHY: The host text layer stores strings as 16-bit code units. Characters
outside the Basic Multilingual Plane (emoji, historic scripts, CJK
extension B and up) need two units, a high and a low surrogate. Getting
the boundary arithmetic wrong corrupts text silently, so this module is
the single place where scalars and code units are converted.

HOW: Plain functions over ints. Classification checks a unit against the
surrogate sub-ranges; encode_scalar() splits a supplementary scalar into
its top and bottom ten bits; decode_pair() is the exact inverse;
decode_at() reads one scalar from a position in a sequence and reports
how many units it consumed.

RULES:
- Scalars are ints in [0, 0x10FFFF] excluding [0xD800, 0xDFFF]
- BMP scalars encode to exactly one unit equal to the scalar
- Supplementary scalars encode to exactly one (high, low) pair
- Malformed input raises a CodecError subclass, never U+FFFD
- Negative indices are rejected, not wrapped Python-style
- No platform UTF-16 codec is used; all arithmetic is explicit
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from codepoint_codec.core.errors import (
    IndexOutOfRangeError,
    InvalidCodePointError,
    InvalidHighSurrogateError,
    InvalidLowSurrogateError,
    NullSequenceError,
    UnpairedHighSurrogateError,
    UnpairedLowSurrogateError,
)

# ---------------------------------------------------------------------------
# Surrogate ranges
# ---------------------------------------------------------------------------

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

# ---------------------------------------------------------------------------
# Planes
# ---------------------------------------------------------------------------

PLANE00_END = 0xFFFF
PLANE01_START = 0x10000
"""First supplementary scalar (plane 1)."""
PLANE16_END = 0x10FFFF
"""Largest Unicode scalar value."""

_SURROGATE_OFFSET_BITS = 10
_SURROGATE_OFFSET_MASK = 0x3FF


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def is_high_surrogate(unit: int) -> bool:
    """True if ``unit`` is in the high (leading) surrogate range U+D800-U+DBFF."""
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    """True if ``unit`` is in the low (trailing) surrogate range U+DC00-U+DFFF."""
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def is_surrogate(unit: int) -> bool:
    """True if ``unit`` is any surrogate, high or low."""
    return HIGH_SURROGATE_START <= unit <= LOW_SURROGATE_END


def _unit_at(seq: Optional[Sequence[int]], index: int) -> int:
    """Fetch ``seq[index]`` after null and bounds checks.

    RULES:
    - None sequence -> NullSequenceError
    - index < 0 or index >= len(seq) -> IndexOutOfRangeError
    """
    if seq is None:
        raise NullSequenceError("seq")
    length = len(seq)
    if index < 0 or index >= length:
        raise IndexOutOfRangeError(index, length)
    return seq[index]


def is_high_surrogate_at(seq: Optional[Sequence[int]], index: int) -> bool:
    """True if the unit at ``index`` in ``seq`` is a high surrogate.

    Raises:
        NullSequenceError: ``seq`` is None.
        IndexOutOfRangeError: ``index`` is not a position within ``seq``.
    """
    return is_high_surrogate(_unit_at(seq, index))


def is_low_surrogate_at(seq: Optional[Sequence[int]], index: int) -> bool:
    """True if the unit at ``index`` in ``seq`` is a low surrogate.

    Raises:
        NullSequenceError: ``seq`` is None.
        IndexOutOfRangeError: ``index`` is not a position within ``seq``.
    """
    return is_low_surrogate(_unit_at(seq, index))


# ---------------------------------------------------------------------------
# Scalar validation
# ---------------------------------------------------------------------------


def _check_scalar(scalar: int) -> None:
    if scalar < 0 or scalar > PLANE16_END or is_surrogate(scalar):
        raise InvalidCodePointError(scalar)


def plane_of(scalar: int) -> int:
    """Return the Unicode plane (0-16) a scalar belongs to.

    Surrogate-range values are accepted here (they sit in plane 0) since
    the plane is a property of the number, not of its encodability.

    Raises:
        InvalidCodePointError: ``scalar`` is outside [0, 0x10FFFF].
    """
    if scalar < 0 or scalar > PLANE16_END:
        raise InvalidCodePointError(scalar)
    return scalar >> 16


def unit_length(scalar: int) -> int:
    """Number of code units encode_scalar() would produce: 1 or 2.

    Raises:
        InvalidCodePointError: same conditions as encode_scalar().
    """
    _check_scalar(scalar)
    return 1 if scalar <= PLANE00_END else 2


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_scalar(scalar: int) -> list[int]:
    """Convert a Unicode scalar value into one or two UTF-16 code units.

    WHY: Appending a character to a code-unit buffer requires knowing its
    exact unit representation, including the surrogate pair for
    supplementary characters.

    HOW: BMP scalars pass through unchanged. For supplementary scalars the
    plane-1 offset is subtracted, leaving a 20-bit value whose top ten
    bits go into the high surrogate and bottom ten into the low one.

    Args:
        scalar: A 21-bit Unicode scalar value.

    Returns:
        ``[scalar]`` for BMP characters, ``[high, low]`` otherwise.

    Raises:
        InvalidCodePointError: ``scalar`` is negative, above 0x10FFFF, or
            inside the surrogate gap 0xD800-0xDFFF.
    """
    _check_scalar(scalar)

    if scalar <= PLANE00_END:
        return [scalar]

    offset = scalar - PLANE01_START
    return [
        HIGH_SURROGATE_START + (offset >> _SURROGATE_OFFSET_BITS),
        LOW_SURROGATE_START + (offset & _SURROGATE_OFFSET_MASK),
    ]


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_pair(high: int, low: int) -> int:
    """Combine a high and a low surrogate into a supplementary scalar.

    This is the exact inverse of the supplementary branch of
    encode_scalar(): ``decode_pair(*encode_scalar(s)) == s`` for every
    s >= 0x10000.

    Raises:
        InvalidHighSurrogateError: ``high`` is not in 0xD800-0xDBFF.
        InvalidLowSurrogateError: ``low`` is not in 0xDC00-0xDFFF.
    """
    if not is_high_surrogate(high):
        raise InvalidHighSurrogateError(high)
    if not is_low_surrogate(low):
        raise InvalidLowSurrogateError(low)
    return (
        ((high - HIGH_SURROGATE_START) << _SURROGATE_OFFSET_BITS)
        + (low - LOW_SURROGATE_START)
        + PLANE01_START
    )


def decode_at(seq: Optional[Sequence[int]], index: int) -> Tuple[int, int]:
    """Decode the scalar that starts at ``index`` in a code-unit sequence.

    WHY: Text walkers (width measurement, case folding, rendering) need
    scalar-level semantics while storage is unit-level. This reads one
    scalar and tells the caller how far to advance.

    HOW: A non-surrogate unit is its own scalar. A high surrogate must be
    followed by a low surrogate, and the pair is combined. A low
    surrogate can only ever be the second half of a pair, so finding one
    at a decode position is an error.

    Args:
        seq: Sequence of 16-bit code units.
        index: Position of the first unit of the scalar.

    Returns:
        ``(scalar, consumed)`` where consumed is 1 or 2.

    Raises:
        NullSequenceError: ``seq`` is None.
        IndexOutOfRangeError: ``index`` is not a position within ``seq``.
        UnpairedHighSurrogateError: high surrogate at the end of ``seq`` or
            followed by something other than a low surrogate.
        UnpairedLowSurrogateError: low surrogate at ``index``.
    """
    unit = _unit_at(seq, index)

    if not is_surrogate(unit):
        return unit, 1

    if is_low_surrogate(unit):
        raise UnpairedLowSurrogateError(index, unit)

    if index == len(seq) - 1:
        raise UnpairedHighSurrogateError(index, unit)

    following = seq[index + 1]
    if not is_low_surrogate(following):
        raise UnpairedHighSurrogateError(index, unit, following)

    return decode_pair(unit, following), 2
