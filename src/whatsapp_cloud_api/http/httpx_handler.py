"""Transporte HTTP padrão sobre httpx (síncrono)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType

import httpx

from whatsapp_cloud_api.errors import TransportError
from whatsapp_cloud_api.http.raw_response import RawResponse

logger = logging.getLogger(__name__)


class HttpxClientHandler:
    """Envia POST via `httpx.Client`, sem retries.

    O `httpx.Client` é reaproveitado entre chamadas e é thread-safe. Se um
    client for injetado, o handler não o fecha.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def send(
        self,
        url: str,
        body: str,
        headers: Mapping[str, str],
        timeout: int,
    ) -> RawResponse:
        """Executa POST e devolve a resposta crua.

        Raises:
            TransportError: Timeout ou falha de conexão/DNS
        """
        try:
            response = self._client.post(
                url,
                content=body.encode("utf-8"),
                headers=dict(headers),
                timeout=timeout,
            )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"timeout_seconds": timeout})
            raise TransportError("http_timeout", is_timeout=True) from exc
        except httpx.RequestError as exc:
            logger.warning(
                "http_connection_error",
                extra={"error_type": type(exc).__name__},
            )
            raise TransportError("http_connection_error") from exc

        return RawResponse(
            headers=dict(response.headers),
            body=response.text,
            status_code=response.status_code,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxClientHandler:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
