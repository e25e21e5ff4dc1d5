"""Exceções do SDK WhatsApp Cloud API.

Erros remotos (HTTP >= 400) NÃO são exceções no fluxo normal: o
`Response` os expõe via `is_error`. Exceções cobrem apenas argumentos
inválidos (pré-envio), falhas de rede e corpo de resposta ilegível.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whatsapp_cloud_api.http.meta_errors import WhatsAppApiError
    from whatsapp_cloud_api.response import Response


class WhatsAppCloudApiError(Exception):
    """Base para todos os erros do SDK."""


class InvalidArgumentError(WhatsAppCloudApiError, ValueError):
    """Campo obrigatório ausente ou vazio; nenhuma chamada de rede feita."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class TransportError(WhatsAppCloudApiError):
    """Falha de rede (timeout, conexão recusada, DNS) sem dados sensíveis."""

    def __init__(self, message: str, is_timeout: bool = False) -> None:
        super().__init__(message)
        self.is_timeout = is_timeout


class MalformedResponseBodyError(WhatsAppCloudApiError, ValueError):
    """Corpo da resposta não é JSON válido."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseError(WhatsAppCloudApiError):
    """Resposta com status de erro, levantada apenas via `raise_for_error()`."""

    def __init__(
        self,
        message: str,
        response: Response,
        api_error: WhatsAppApiError | None = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.api_error = api_error

    @property
    def status_code(self) -> int:
        return self.response.http_status_code
