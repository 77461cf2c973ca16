"""Exception hierarchy for code point encoding and decoding.

WHY: Malformed input must never be silently repaired. Callers need to
tell "this scalar can't be encoded" apart from "this sequence has a
dangling surrogate at index 7" without parsing message strings.

HOW: One base class, CodecError, derived from ValueError so generic
``except ValueError`` handlers (the CLI, the API) catch everything.
Each failure kind is a subclass carrying the offending value and/or
index as attributes. Index and null-sequence errors additionally derive
from IndexError / TypeError so they behave like their builtin cousins.

RULES:
- Every error carries enough context (value, index) to diagnose
- ``kind`` is a stable identifier used by the API error responses
- The codec raises these; it never logs or catches them
"""

from __future__ import annotations

from typing import Optional


def _hex(value: int) -> str:
    """Render an integer as 0xXXXX for messages (negative values kept signed)."""
    if value < 0:
        return "-0x{:04X}".format(-value)
    return "0x{:04X}".format(value)


class CodecError(ValueError):
    """Base class for all code point codec failures."""

    kind = "CodecError"


class NullSequenceError(CodecError, TypeError):
    """A code-unit sequence was required but None was given."""

    kind = "NullSequence"

    def __init__(self, argument: str = "seq") -> None:
        self.argument = argument
        super().__init__("Code unit sequence '{}' is None".format(argument))


class IndexOutOfRangeError(CodecError, IndexError):
    """The requested position does not exist in the sequence."""

    kind = "IndexOutOfRange"

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            "Index {} is out of range for a sequence of {} code unit(s)".format(index, length)
        )


class InvalidCodePointError(CodecError):
    """A scalar outside [0, 0x10FFFF] or inside the surrogate gap was offered."""

    kind = "InvalidCodePoint"

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            "{} is not a valid Unicode scalar value "
            "(expected 0x0000-0x10FFFF excluding 0xD800-0xDFFF)".format(_hex(value))
        )


class InvalidHighSurrogateError(CodecError):
    """decode_pair() was given a first unit outside [0xD800, 0xDBFF]."""

    kind = "InvalidHighSurrogate"

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            "{} is not a high surrogate (expected 0xD800-0xDBFF)".format(_hex(value))
        )


class InvalidLowSurrogateError(CodecError):
    """decode_pair() was given a second unit outside [0xDC00, 0xDFFF]."""

    kind = "InvalidLowSurrogate"

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            "{} is not a low surrogate (expected 0xDC00-0xDFFF)".format(_hex(value))
        )


class UnpairedHighSurrogateError(CodecError):
    """A high surrogate has no valid low surrogate after it.

    ``following`` is the unit after the high surrogate, or None when the
    high surrogate is the last unit of the sequence.
    """

    kind = "UnpairedHighSurrogate"

    def __init__(self, index: int, unit: int, following: Optional[int] = None) -> None:
        self.index = index
        self.unit = unit
        self.following = following
        if following is None:
            detail = "at end of sequence"
        else:
            detail = "followed by {}".format(_hex(following))
        super().__init__(
            "Unpaired high surrogate {} at index {} ({})".format(_hex(unit), index, detail)
        )

    @property
    def at_end(self) -> bool:
        return self.following is None


class UnpairedLowSurrogateError(CodecError):
    """A low surrogate appears where a scalar should start."""

    kind = "UnpairedLowSurrogate"

    def __init__(self, index: int, unit: int) -> None:
        self.index = index
        self.unit = unit
        super().__init__(
            "Unpaired low surrogate {} at index {}".format(_hex(unit), index)
        )
