"""Response handling shared by :class:`WorkOs` and :class:`AsyncWorkOs`.

Both clients funnel every :class:`httpx.Response` through the helpers here:

- :func:`raise_for_status` maps HTTP status codes of 400 and above onto the
  small error taxonomy of :mod:`workos.exceptions` (unauthorised versus
  everything else) instead of exposing raw status codes.
- :func:`decode_json` parses the body, turning malformed JSON into
  :class:`~workos.exceptions.DeserializationError`.
- :func:`parse_model` validates decoded JSON against a Pydantic model,
  again raising :class:`~workos.exceptions.DeserializationError` on a shape
  mismatch.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from workos.exceptions import ApiError, DeserializationError, UnauthorizedError

M = TypeVar("M", bound=BaseModel)


def raise_for_status(response: httpx.Response) -> None:
    """Raise a typed exception for error HTTP status codes.

    Args:
        response: The response to inspect.

    Raises:
        UnauthorizedError: On 401.
        ApiError: On any other status of 400 or above.
    """
    status = response.status_code
    if status < 400:
        return

    code = None
    # Try to extract an error message from the response body.
    try:
        detail = response.json()
        if isinstance(detail, dict):
            msg = (
                detail.get("message")
                or detail.get("error_description")
                or detail.get("error")
                or ""
            )
            code = detail.get("code") or detail.get("error")
        else:
            msg = str(detail)
    except (json.JSONDecodeError, UnicodeDecodeError):
        msg = response.text[:200] if response.text else ""

    prefix = f"HTTP {status}"
    full_msg = f"{prefix}: {msg}" if msg else prefix
    request_id = response.headers.get("x-request-id")

    if status == 401:
        raise UnauthorizedError(full_msg, status, code=code, request_id=request_id)
    raise ApiError(full_msg, status, code=code, request_id=request_id)


def decode_json(response: httpx.Response) -> Any:
    """Decode the JSON body of *response*.

    Raises:
        DeserializationError: If the body is empty or not valid JSON.
    """
    if not response.content:
        raise DeserializationError(
            f"Empty response body from {response.request.method} {response.request.url}"
        )
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DeserializationError(
            f"Malformed JSON from {response.request.method} {response.request.url}: {exc}"
        ) from exc


def parse_model(model: type[M], data: Any) -> M:
    """Validate decoded JSON *data* against *model*.

    Raises:
        DeserializationError: If *data* does not match the model.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise DeserializationError(
            f"Unexpected response shape for {model.__name__}: {exc}"
        ) from exc
