"""Protocolo do transporte HTTP usado pelo cliente.

Evita dependência direta de uma biblioteca HTTP específica: qualquer objeto
com `send` compatível pode ser injetado (ex: fakes em testes).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from whatsapp_cloud_api.http.raw_response import RawResponse


@runtime_checkable
class ClientHandler(Protocol):
    """Contrato mínimo do transporte.

    Deve levantar `TransportError` em falha de rede. Status HTTP de erro
    NÃO é falha: retorna `RawResponse` normalmente.
    """

    def send(
        self,
        url: str,
        body: str,
        headers: Mapping[str, str],
        timeout: int,
    ) -> RawResponse: ...
