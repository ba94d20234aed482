"""Request Decoding: read lookup bodies the way the connector's own decoder does.

Invariants:
    - Content-Type is never consulted; the body is always read as JSON
    - Only the first JSON value is decoded; anything after it is left unread
    - A top-level null decodes to an envelope of empty fields
    - Empty body, malformed JSON, non-object value or wrong field type → RequestDecodeError (400)

Design Decisions:
    - Raw body over a typed FastAPI body parameter: FastAPI only parses JSON for
      JSON media types, and the connector (or a proxy in front of it) may not send one
"""

import json
from typing import Any, TypeVar

from fastapi import Request
from pydantic import ValidationError

from datadip_mock.api.error_handlers import describe_validation_errors
from datadip_mock.core.errors import ErrorContext, RequestDecodeError
from datadip_mock.schemas.requests import DataDipRequest

RequestT = TypeVar("RequestT", bound=DataDipRequest)

_decoder = json.JSONDecoder()


def decode_first_value(raw: bytes) -> Any:
    """Decode the first JSON value in raw, ignoring trailing bytes.

    Raises ValueError (JSONDecodeError / UnicodeDecodeError) on bad input.
    """
    text = raw.decode("utf-8").lstrip()
    if not text:
        raise ValueError("EOF")
    value, _ = _decoder.raw_decode(text)
    return value


async def decode_request(request: Request, model: type[RequestT]) -> RequestT:
    """Read the request body into model or raise RequestDecodeError."""
    context = ErrorContext(route=request.url.path)
    raw = await request.body()
    try:
        value = decode_first_value(raw)
    except ValueError as e:
        raise RequestDecodeError(str(e), context) from e

    if value is None:
        value = {}
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise RequestDecodeError(
            describe_validation_errors(e.errors()), context,
        ) from e
