"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request and response model. Code units
are constrained to 16 bits at the schema level; scalar range checks are
left to the codec so the error taxonomy stays in one place.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Unit fields are 0-65535; scalar fields are plain ints
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

CodeUnit = Annotated[int, Field(ge=0, le=0xFFFF)]


class OutputFormat(str, Enum):
    """Report format identifiers; values match FORMATTERS keys exactly."""

    plain_text = "plain_text"
    json = "json"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class EncodeRequest(BaseModel):
    scalar: int = Field(description="Unicode scalar value to encode (0 to 0x10FFFF).")

    model_config = {"json_schema_extra": {"examples": [{"scalar": 128512}]}}


class DecodeRequest(BaseModel):
    units: List[CodeUnit] = Field(description="Sequence of 16-bit code units.")
    index: int = Field(default=0, description="Position of the first unit to decode.")

    model_config = {"json_schema_extra": {"examples": [{"units": [55357, 56832], "index": 0}]}}


class DecodePairRequest(BaseModel):
    high: CodeUnit = Field(description="High surrogate (0xD800-0xDBFF).")
    low: CodeUnit = Field(description="Low surrogate (0xDC00-0xDFFF).")


class InspectRequest(BaseModel):
    """Text or raw code units to inspect.

    RULES:
    - Exactly one of ``text`` and ``units`` must be given
    """

    text: Optional[str] = Field(default=None, description="Text to inspect.")
    units: Optional[List[CodeUnit]] = Field(
        default=None,
        description="Raw code units to inspect instead of text.",
    )

    @model_validator(mode="after")
    def exactly_one_source(self) -> "InspectRequest":
        if (self.text is None) == (self.units is None):
            raise ValueError("Provide exactly one of 'text' or 'units'")
        return self


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class EncodeResponse(BaseModel):
    scalar: int = Field(description="The encoded scalar value.")
    codepoint: str = Field(description="U+XXXX rendering of the scalar.")
    units: List[int] = Field(description="One or two UTF-16 code units.")


class DecodeResponse(BaseModel):
    scalar: int = Field(description="Decoded scalar value.")
    codepoint: str = Field(description="U+XXXX rendering of the scalar.")
    consumed: int = Field(description="Number of code units consumed (1 or 2).")


class DecodePairResponse(BaseModel):
    scalar: int = Field(description="Supplementary scalar encoded by the pair.")
    codepoint: str = Field(description="U+XXXX rendering of the scalar.")


class FormatInfo(BaseModel):
    key: str = Field(description="Format identifier used in requests.")
    name: str = Field(description="Human-readable format name.")
    media_type: str = Field(description="MIME type of the rendered report.")


class ErrorResponse(BaseModel):
    """Standard error body for rejected input.

    RULES:
    - detail is a human-readable message
    - error is the codec error kind, e.g. "UnpairedHighSurrogate"
    """

    detail: str = Field(description="Human-readable error description.")
    error: Optional[str] = Field(default=None, description="Codec error kind.")
    context: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Offending value and/or index, when available.",
    )


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
