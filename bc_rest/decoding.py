"""Response decoding and error normalization.

The API reports failures in two shapes:

- 422 Unprocessable Entity: ``{"errors": {"field": "message", ...}}``
- everything else: ``{"status": 404, "title": "Not Found"}``

Both are turned into exceptions from :mod:`bc_rest.exceptions`; successful
bodies are returned as parsed JSON and validated into models with
:func:`decode_as`.
"""

import json
import logging
from typing import Any, Dict, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from bc_rest.exceptions import ApiError, ApiValidationError, DecodeError, NoContentError
from bc_rest.models.common import ErrorEnvelope, ValidationErrorResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN_ERROR = "unknown error"


def _parse_json(body: bytes, status_code: int) -> Any:
    try:
        return json.loads(body)
    except ValueError as e:
        text = body.decode("utf-8", errors="replace")
        logger.error(f"Error decoding response: {e} {text}")
        raise DecodeError(
            f"invalid JSON in response: {e}; body: {text}",
            body=text,
            status_code=status_code,
        ) from e


def validation_error_from_body(body: bytes) -> ApiValidationError:
    """Build the exception for a 422 body.

    Entries are joined with ``", "``. A body that parses but lists no
    errors yields ``"unknown error"``.
    """
    payload = _parse_json(body, 422)
    try:
        result = ValidationErrorResult.model_validate(payload)
    except ValidationError as e:
        text = body.decode("utf-8", errors="replace")
        raise DecodeError(
            f"unexpected validation error body: {e}; body: {text}",
            body=text,
            status_code=422,
        ) from e

    if isinstance(result.errors, dict):
        fields: Dict[str, str] = dict(result.errors)
        messages = list(fields.values())
    else:
        fields = {}
        messages = list(result.errors)

    if not messages:
        return ApiValidationError(UNKNOWN_ERROR, fields=fields)
    return ApiValidationError(", ".join(messages), fields=fields)


def api_error_from_body(body: bytes, status_code: int) -> ApiError:
    """Build the exception for a non-success, non-422 response."""
    text = body.decode("utf-8", errors="replace")
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError:
        return ApiError(f"HTTP {status_code}: {text}", status_code=status_code)
    return ApiError(
        envelope.title or f"HTTP {status_code}",
        status_code=envelope.status or status_code,
        title=envelope.title,
    )


def read_payload(response: httpx.Response) -> Any:
    """Read the whole body, classify failures and return the parsed JSON.

    Raises:
        NoContentError: on 204
        ApiValidationError: on 422 with a well-formed errors body
        ApiError: on any other non-success status, or a success body that
            carries a non-zero ``status`` without a ``data`` wrapper
        DecodeError: when the body is not valid JSON
    """
    body = response.read()
    status_code = response.status_code

    if status_code == httpx.codes.NO_CONTENT:
        raise NoContentError()

    if status_code == httpx.codes.UNPROCESSABLE_ENTITY:
        raise validation_error_from_body(body)

    if not response.is_success:
        logger.error(f"Error: HTTP {status_code}\nResult: {body!r}")
        raise api_error_from_body(body, status_code)

    payload = _parse_json(body, status_code)

    if is_error_envelope(payload):
        title = payload.get("title")
        title = title if isinstance(title, str) else ""
        raise ApiError(title or UNKNOWN_ERROR, status_code=payload["status"], title=title)

    return payload


def is_error_envelope(payload: Any) -> bool:
    """True for a ``{status, title}`` body with a non-2xx integer status and no ``data``.

    Resource bodies can carry their own ``status`` field (``"live"`` on the
    store, ``"draft"`` on posts); those are not errors.
    """
    if not isinstance(payload, dict) or "data" in payload:
        return False
    status = payload.get("status")
    if isinstance(status, bool) or not isinstance(status, int):
        return False
    return status != 0 and not 200 <= status < 300


def decode_as(payload: Any, type_: Type[T]) -> T:
    """Validate parsed JSON into ``type_``; mismatches become :class:`DecodeError`."""
    try:
        return TypeAdapter(type_).validate_python(payload)
    except ValidationError as e:
        logger.error(f"Error decoding {type_}: {e}")
        raise DecodeError(f"cannot decode {type_}: {e}", body=json.dumps(payload)) from e


def unwrap_single(payload: Any) -> Any:
    """Unwrap a create response: ``{"data": obj}``, ``[obj]`` or ``obj``."""
    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]
    if isinstance(payload, list):
        if len(payload) != 1:
            raise DecodeError(
                f"expected a single created object, got {len(payload)}",
                body=json.dumps(payload),
            )
        payload = payload[0]
    return payload
