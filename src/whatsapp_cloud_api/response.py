"""Wrapper da resposta da Graph API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from whatsapp_cloud_api.config.logging.redaction import mask_token
from whatsapp_cloud_api.errors import MalformedResponseBodyError, ResponseError
from whatsapp_cloud_api.http.meta_errors import WhatsAppApiError, parse_meta_error
from whatsapp_cloud_api.http.raw_response import RawResponse

ERROR_STATUS_THRESHOLD = 400


@dataclass(frozen=True, repr=False)
class OutboundRequest:
    """Requisição exatamente como entregue ao transporte."""

    url: str
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: int = 0

    def decoded_body(self) -> Any:
        return json.loads(self.body)

    def __repr__(self) -> str:
        headers = {
            name: mask_token(value) if name.lower() == "authorization" else value
            for name, value in self.headers.items()
        }
        return f"OutboundRequest(url={self.url!r}, headers={headers!r}, timeout={self.timeout!r})"


class Response:
    """Resposta de um envio.

    Status >= 400 não levanta exceção: use `is_error`, `decoded_body()` ou
    `raise_for_error()`.
    """

    def __init__(self, raw: RawResponse, request: OutboundRequest | None = None) -> None:
        self._raw = raw
        self._request = request

    @classmethod
    def from_raw(
        cls,
        headers: Mapping[str, str],
        body: str,
        status_code: int,
        request: OutboundRequest | None = None,
    ) -> Response:
        return cls(RawResponse(headers=headers, body=body, status_code=status_code), request)

    @property
    def request(self) -> OutboundRequest | None:
        return self._request

    @property
    def http_status_code(self) -> int:
        return self._raw.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self._raw.headers

    @property
    def body(self) -> str:
        """Corpo cru, sem modificação."""
        return self._raw.body

    @property
    def is_error(self) -> bool:
        return self._raw.status_code >= ERROR_STATUS_THRESHOLD

    def decoded_body(self) -> Any:
        """Decodifica o corpo JSON a cada chamada.

        Raises:
            MalformedResponseBodyError: Se o corpo não é JSON válido
        """
        try:
            return json.loads(self._raw.body)
        except (json.JSONDecodeError, TypeError) as exc:
            raise MalformedResponseBodyError(
                "Corpo da resposta não é JSON válido",
                status_code=self._raw.status_code,
            ) from exc

    def api_error(self) -> WhatsAppApiError | None:
        """Erro estruturado da Meta, se o corpo trouxer um objeto `error`.

        Corpo ilegível resulta em None (não levanta).
        """
        try:
            return parse_meta_error(self.decoded_body(), self._raw.status_code)
        except MalformedResponseBodyError:
            return None

    def raise_for_error(self) -> Response:
        """Levanta `ResponseError` se `is_error`; senão devolve a própria resposta."""
        if not self.is_error:
            return self

        api_error = self.api_error()
        if api_error is not None:
            message = (
                f"Meta API error: {api_error.error_type} ({api_error.error_code}): "
                f"{api_error.error_message}"
            )
        else:
            message = f"HTTP {self.http_status_code}"
        raise ResponseError(message, response=self, api_error=api_error)

    def __repr__(self) -> str:
        return f"<Response status={self.http_status_code} is_error={self.is_error}>"
