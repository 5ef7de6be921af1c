from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from ukpostcodes.core.errors import DecodeError, UpstreamError
from ukpostcodes.core.models import Envelope

log = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def parse_envelope(raw: bytes | str) -> Envelope:
    try:
        return Envelope.model_validate_json(raw)
    except PydanticValidationError as e:
        raise DecodeError(f"Failed to parse response body: {e}") from e


def decode(raw: bytes | str, shape: type[T] | Any) -> T:
    """
    Unwrap the {status, result, error} envelope and validate `result`
    against `shape`.

    Args:
        raw: response body
        shape: anything a pydantic TypeAdapter accepts, e.g. Postcode,
               list[Postcode], bool, list[str] | None

    Raises:
        UpstreamError: envelope status >= 400
        DecodeError: malformed JSON or `result` does not fit `shape`
    """
    envelope = parse_envelope(raw)

    if envelope.status is not None and envelope.status >= 400:
        raise UpstreamError(envelope.error or "", status=envelope.status)

    try:
        return _adapter(shape).validate_python(envelope.result)
    except PydanticValidationError as e:
        log.debug("Result does not match %r: %s", shape, e)
        raise DecodeError(f"Failed to parse response body: {e}") from e
