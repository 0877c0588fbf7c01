"""Tests for response status mapping and decoding."""

from __future__ import annotations

import httpx
import pytest

from workos.client.response import decode_json, parse_model, raise_for_status
from workos.exceptions import ApiError, DeserializationError, UnauthorizedError
from workos.models import ListMetadata


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_response(
    status_code: int = 200,
    content: bytes | None = None,
    json_data: object | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    request = httpx.Request("GET", "https://api.workos.test/events")
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, headers=headers, request=request)
    return httpx.Response(status_code, content=content or b"", headers=headers, request=request)


# ---------------------------------------------------------------------------
# raise_for_status
# ---------------------------------------------------------------------------


class TestRaiseForStatus:
    @pytest.mark.parametrize("status", [200, 201, 204, 301])
    def test_success_passes(self, status: int) -> None:
        raise_for_status(_make_response(status))

    def test_message_preference(self) -> None:
        response = _make_response(
            400, json_data={"error": "invalid_request", "error_description": "Bad cursor"}
        )
        with pytest.raises(ApiError) as exc_info:
            raise_for_status(response)
        assert str(exc_info.value) == "HTTP 400: Bad cursor"
        assert exc_info.value.code == "invalid_request"

    def test_empty_body(self) -> None:
        with pytest.raises(ApiError, match=r"^HTTP 500$"):
            raise_for_status(_make_response(500))

    def test_non_object_body(self) -> None:
        with pytest.raises(ApiError, match="HTTP 400: \\['a'\\]"):
            raise_for_status(_make_response(400, json_data=["a"]))

    def test_401(self) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            raise_for_status(_make_response(401, headers={"x-request-id": "req_1"}))
        assert exc_info.value.request_id == "req_1"
        assert exc_info.value.exit_code == 3


# ---------------------------------------------------------------------------
# decode_json / parse_model
# ---------------------------------------------------------------------------


class TestDecode:
    def test_decode(self) -> None:
        assert decode_json(_make_response(json_data={"a": 1})) == {"a": 1}

    def test_decode_invalid(self) -> None:
        with pytest.raises(DeserializationError, match="GET https://api.workos.test/events"):
            decode_json(_make_response(content=b"nope"))

    def test_parse_model(self) -> None:
        assert parse_model(ListMetadata, {"after": "x"}).after == "x"

    def test_parse_model_shape_mismatch(self) -> None:
        with pytest.raises(DeserializationError, match="ListMetadata"):
            parse_model(ListMetadata, {"after": 5})
