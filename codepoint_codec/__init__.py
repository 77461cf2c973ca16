"""codepoint-codec: UTF-16 surrogate-pair encoding for Unicode scalars.

WHY: Text layers that store strings as 16-bit code units must handle
characters outside the Basic Multilingual Plane exactly right. This
package converts between 21-bit scalar values and their one- or
two-unit UTF-16 form, and rejects malformed input instead of repairing it.

HOW: A pure codec (core.codec) with a strict exception taxonomy
(core.errors), buffer helpers and an inspection IR on top, pluggable
report formatters, and two thin front ends: a CLI and a FastAPI service.

RULES:
- The codec functions are the stable contract; everything else adapts them
- Malformed input always raises a CodecError subclass
- No platform UTF-16 codec is used anywhere in the package
"""

from codepoint_codec.core.codec import (
    decode_at,
    decode_pair,
    encode_scalar,
    is_high_surrogate,
    is_high_surrogate_at,
    is_low_surrogate,
    is_low_surrogate_at,
    is_surrogate,
    plane_of,
    unit_length,
)
from codepoint_codec.core.errors import (
    CodecError,
    IndexOutOfRangeError,
    InvalidCodePointError,
    InvalidHighSurrogateError,
    InvalidLowSurrogateError,
    NullSequenceError,
    UnpairedHighSurrogateError,
    UnpairedLowSurrogateError,
)

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "IndexOutOfRangeError",
    "InvalidCodePointError",
    "InvalidHighSurrogateError",
    "InvalidLowSurrogateError",
    "NullSequenceError",
    "UnpairedHighSurrogateError",
    "UnpairedLowSurrogateError",
    "decode_at",
    "decode_pair",
    "encode_scalar",
    "is_high_surrogate",
    "is_high_surrogate_at",
    "is_low_surrogate",
    "is_low_surrogate_at",
    "is_surrogate",
    "plane_of",
    "unit_length",
]
