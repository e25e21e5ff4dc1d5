"""Testes para Response (classificação de status e decodificação)."""

from __future__ import annotations

import json

import pytest

from whatsapp_cloud_api.errors import MalformedResponseBodyError, ResponseError
from whatsapp_cloud_api.http.raw_response import RawResponse
from whatsapp_cloud_api.response import OutboundRequest, Response

META_ERROR_BODY = json.dumps(
    {
        "error": {
            "message": "(#131030) Recipient phone number not in allowed list",
            "type": "OAuthException",
            "code": 131030,
            "fbtrace_id": "Az8or2yhqkZfEZ-_4Qn_Bam",
        }
    }
)


def _response(status_code: int, body: str = "{}") -> Response:
    return Response(RawResponse(headers={"x": "y"}, body=body, status_code=status_code))


class TestStatusClassification:
    @pytest.mark.parametrize("status_code", [200, 201, 204, 302, 399])
    def test_success_statuses(self, status_code: int) -> None:
        response = _response(status_code)
        assert response.is_error is False
        assert response.http_status_code == status_code

    @pytest.mark.parametrize("status_code", [400, 401, 404, 429, 499, 500, 503])
    def test_error_statuses(self, status_code: int) -> None:
        response = _response(status_code)
        assert response.is_error is True
        assert response.http_status_code == status_code


class TestBody:
    def test_body_is_raw_string(self) -> None:
        raw_body = '{"a":1}'
        assert _response(200, raw_body).body == raw_body

    def test_headers_are_exposed(self) -> None:
        assert _response(200).headers == {"x": "y"}

    def test_decoded_body_is_idempotent(self) -> None:
        response = _response(200, '{"a":1}')
        first = response.decoded_body()
        second = response.decoded_body()
        assert first == {"a": 1}
        assert first == second

    @pytest.mark.parametrize("body", ["", "not json", '{"a":'])
    def test_malformed_body_raises(self, body: str) -> None:
        response = _response(502, body)
        with pytest.raises(MalformedResponseBodyError) as exc_info:
            response.decoded_body()
        assert exc_info.value.status_code == 502

    def test_from_raw(self) -> None:
        response = Response.from_raw({}, '{"ok": true}', 201)
        assert response.http_status_code == 201
        assert response.decoded_body() == {"ok": True}


class TestApiError:
    def test_api_error_parsed(self) -> None:
        error = _response(400, META_ERROR_BODY).api_error()
        assert error is not None
        assert error.error_code == 131030

    def test_api_error_none_for_malformed_body(self) -> None:
        assert _response(500, "<html>").api_error() is None

    def test_raise_for_error_success_returns_self(self) -> None:
        response = _response(200)
        assert response.raise_for_error() is response

    def test_raise_for_error_with_meta_error(self) -> None:
        response = _response(400, META_ERROR_BODY)
        with pytest.raises(ResponseError, match="131030") as exc_info:
            response.raise_for_error()
        assert exc_info.value.response is response
        assert exc_info.value.status_code == 400
        assert exc_info.value.api_error is not None

    def test_raise_for_error_without_meta_error(self) -> None:
        with pytest.raises(ResponseError, match="HTTP 503") as exc_info:
            _response(503, "Service Unavailable").raise_for_error()
        assert exc_info.value.api_error is None


class TestOutboundRequest:
    def test_request_is_kept(self) -> None:
        request = OutboundRequest(url="https://x", body='{"a": 1}', timeout=10)
        response = Response(RawResponse(), request)
        assert response.request is request
        assert response.request.decoded_body() == {"a": 1}

    def test_request_repr_masks_token_and_body(self) -> None:
        request = OutboundRequest(
            url="https://x",
            body='{"text": {"body": "segredo"}}',
            headers={"Authorization": "Bearer EAAsecret", "Content-Type": "application/json"},
            timeout=10,
        )
        text = repr(request)
        assert "EAAsecret" not in text
        assert "segredo" not in text
        assert "<redacted>" in text
        assert "application/json" in text
