"""Parsing do objeto `error` devolvido pela Graph API.

Formato:
    {"error": {"message": ..., "type": ..., "code": ..., "error_subcode": ...,
               "fbtrace_id": ...}}

`code` é um código Graph/WhatsApp (ex: 190, 131056), não um status HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Rate limit, throttling e indisponibilidade temporária do serviço
TRANSIENT_ERROR_CODES = frozenset({
    1,  # API Unknown
    2,  # API Service
    4,  # Application request limit reached
    17,  # User request limit reached
    341,  # Application limit reached
    80007,  # WhatsApp Business Account rate limit
    130429,  # Cloud API throughput reached
    131000,  # Something went wrong
    131016,  # Service unavailable
    131048,  # Spam rate limit hit
    131056,  # Pair rate limit hit
})

HTTP_TOO_MANY_REQUESTS = 429
HTTP_SERVER_ERROR = 500


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro estruturado extraído do corpo da resposta."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # reenviar a mesma requisição não resolve
    error_subcode: int | None = None
    fbtrace_id: str | None = None


def is_permanent_error(error_code: int, status_code: int | None = None) -> bool:
    """Classifica o erro como permanente ou transitório.

    Transitório: código Graph de rate limit/indisponibilidade, HTTP 429 ou 5xx.
    Qualquer outro erro (token inválido, destinatário fora da janela,
    parâmetro inválido) é permanente.
    """
    if error_code in TRANSIENT_ERROR_CODES:
        return False
    if status_code is not None and (
        status_code == HTTP_TOO_MANY_REQUESTS or status_code >= HTTP_SERVER_ERROR
    ):
        return False
    return True


def parse_meta_error(
    response_data: Any,
    status_code: int | None = None,
) -> WhatsAppApiError | None:
    """Extrai o erro do corpo decodificado.

    Args:
        response_data: Corpo JSON decodificado (qualquer estrutura)
        status_code: Status HTTP da resposta, usado na classificação

    Returns:
        WhatsAppApiError, ou None se o corpo não traz objeto `error`
    """
    if not isinstance(response_data, dict):
        return None

    error_obj = response_data.get("error")
    if not isinstance(error_obj, dict) or not error_obj:
        return None

    error_code = error_obj.get("code", 0)
    return WhatsAppApiError(
        error_type=error_obj.get("type", "unknown"),
        error_code=error_code,
        error_message=error_obj.get("message", "Erro desconhecido"),
        is_permanent=is_permanent_error(error_code, status_code),
        error_subcode=error_obj.get("error_subcode"),
        fbtrace_id=error_obj.get("fbtrace_id"),
    )
