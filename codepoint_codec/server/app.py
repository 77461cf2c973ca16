"""FastAPI application exposing the codec over HTTP.

WHY: Services written in other languages (or a browser) sometimes need
to check how a string is encoded in UTF-16, or whether a unit sequence
is well formed, without linking this package. A small HTTP API with
OpenAPI docs serves them.

HOW: One FastAPI app with endpoints grouped by tags. Each endpoint is a
thin adapter: validate the request with pydantic, call the codec, wrap
the result in a response model. CodecError is translated to a 422
response by a single exception handler so every endpoint reports
malformed input the same way.

RULES:
- All endpoints have OpenAPI summaries and descriptions
- Codec errors -> 422 with ErrorResponse {detail, error, context}
- No per-request state; the app is safe to run with many workers
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from codepoint_codec import __version__
from codepoint_codec.config import API_HOST, API_PORT, LOG_FORMAT, load_log_level
from codepoint_codec.core.codec import decode_at, decode_pair, encode_scalar
from codepoint_codec.core.errors import CodecError
from codepoint_codec.core.inspector import format_scalar, inspect_text, inspect_units
from codepoint_codec.formatters import FORMATTERS
from codepoint_codec.formatters.json_report import report_to_dict
from codepoint_codec.server.models import (
    DecodePairRequest,
    DecodePairResponse,
    DecodeRequest,
    DecodeResponse,
    EncodeRequest,
    EncodeResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    InspectRequest,
    OutputFormat,
)

logger = logging.getLogger(__name__)

_CONTEXT_ATTRIBUTES = ("value", "index", "unit", "following", "length", "argument")

_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    422: {"model": ErrorResponse, "description": "Input rejected by the codec."},
}

app = FastAPI(
    title="Code Point Codec API",
    description=(
        "Encode Unicode scalar values into UTF-16 code units, decode code "
        "unit sequences back into scalars, and inspect text. Malformed "
        "input is rejected, never repaired."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


def _error_context(exc: CodecError) -> Dict[str, Any]:
    """Collect the diagnostic attributes a codec error carries."""
    return {
        name: getattr(exc, name)
        for name in _CONTEXT_ATTRIBUTES
        if getattr(exc, name, None) is not None
    }


@app.exception_handler(CodecError)
async def codec_error_handler(request: Request, exc: CodecError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(detail=str(exc), error=exc.kind, context=_error_context(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


# ---------------------------------------------------------------------------
# Endpoints: Codec
# ---------------------------------------------------------------------------


@app.post(
    "/encode",
    response_model=EncodeResponse,
    responses=_ERROR_RESPONSES,
    tags=["codec"],
    summary="Encode a scalar into code units",
    description="Returns one code unit for BMP scalars and a surrogate pair otherwise.",
)
async def encode(body: EncodeRequest) -> EncodeResponse:
    units = encode_scalar(body.scalar)
    return EncodeResponse(scalar=body.scalar, codepoint=format_scalar(body.scalar), units=units)


@app.post(
    "/decode",
    response_model=DecodeResponse,
    responses=_ERROR_RESPONSES,
    tags=["codec"],
    summary="Decode the scalar at a position",
    description=(
        "Decodes the scalar starting at ``index`` and reports how many code "
        "units it occupies. Unpaired surrogates are rejected."
    ),
)
async def decode(body: DecodeRequest) -> DecodeResponse:
    scalar, consumed = decode_at(body.units, body.index)
    return DecodeResponse(scalar=scalar, codepoint=format_scalar(scalar), consumed=consumed)


@app.post(
    "/decode-pair",
    response_model=DecodePairResponse,
    responses=_ERROR_RESPONSES,
    tags=["codec"],
    summary="Combine a surrogate pair",
    description="Combines a high and a low surrogate into a supplementary scalar.",
)
async def decode_surrogate_pair(body: DecodePairRequest) -> DecodePairResponse:
    scalar = decode_pair(body.high, body.low)
    return DecodePairResponse(scalar=scalar, codepoint=format_scalar(scalar))


@app.post(
    "/inspect",
    responses=_ERROR_RESPONSES,
    tags=["inspect"],
    summary="Inspect text or code units",
    description=(
        "Decodes every scalar in the input. ``format=json`` (default) returns "
        "the schema-validated JSON report; ``format=plain_text`` returns the "
        "tab-separated table."
    ),
)
async def inspect(body: InspectRequest, format: OutputFormat = OutputFormat.json) -> Response:
    if body.units is not None:
        report = inspect_units(body.units)
    else:
        report = inspect_text(body.text)

    if format is OutputFormat.json:
        return JSONResponse(content=report_to_dict(report))

    output = FORMATTERS[format.value]().format(report)[0]
    return Response(content=output.content, media_type=output.media_type)


# ---------------------------------------------------------------------------
# Endpoints: Formats and health
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["inspect"],
    summary="List report formats",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        media_type = formatter.format(inspect_units([]))[0].media_type
        result.append(FormatInfo(key=key, name=formatter.name, media_type=media_type))
    return result


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the codepoint-api console script."""
    import uvicorn

    logging.basicConfig(level=load_log_level(), format=LOG_FORMAT)
    logger.info("Starting codec API on %s:%d", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
