"""Settings do cliente WhatsApp Cloud API.

Configuração imutável criada uma vez por instância do cliente. As
constantes do Graph API são defaults, nunca estado global mutável.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from whatsapp_cloud_api.config.logging.redaction import mask_token

# Constantes do Graph API
GRAPH_API_VERSION: str = "v24.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"
DEFAULT_TIMEOUT_SECONDS: int = 60


@dataclass(frozen=True, repr=False)
class WhatsAppSettings:
    """Configurações do cliente.

    Attributes:
        from_phone_number_id: ID do número remetente no Meta Business
        access_token: Token de acesso à Graph API
        graph_version: Versão da Graph API (ex: v24.0)
        base_url: URL base da Graph API
        timeout_seconds: Timeout repassado ao transporte em cada envio
    """

    from_phone_number_id: str = ""
    access_token: str = ""
    graph_version: str = GRAPH_API_VERSION
    base_url: str = GRAPH_API_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.base_url.rstrip('/')}/{self.graph_version}"

    @property
    def messages_endpoint(self) -> str:
        """URL de envio de mensagens.

        Returns:
            URL no formato: https://graph.facebook.com/v24.0/{id}/messages

        Raises:
            ValueError: Se from_phone_number_id não configurado.
        """
        if not self.from_phone_number_id.strip():
            raise ValueError("from_phone_number_id é obrigatório")
        return f"{self.api_endpoint}/{self.from_phone_number_id}/messages"

    def __repr__(self) -> str:
        return (
            f"WhatsAppSettings(from_phone_number_id={self.from_phone_number_id!r}, "
            f"access_token={mask_token(self.access_token)!r}, "
            f"graph_version={self.graph_version!r}, base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.from_phone_number_id or not self.from_phone_number_id.strip():
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")

        if not self.access_token or not self.access_token.strip():
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if not self.graph_version:
            errors.append("WHATSAPP_API_VERSION não pode ser vazio")

        if not self.base_url:
            errors.append("WHATSAPP_API_BASE_URL não pode ser vazio")

        if self.timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def load_settings_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        from_phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        graph_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        timeout_seconds=int(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings lida do ambiente."""
    return load_settings_from_env()
