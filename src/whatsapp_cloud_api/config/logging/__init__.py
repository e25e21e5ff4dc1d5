"""Configuração de logging estruturado do SDK.

Uso:
    from whatsapp_cloud_api.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação que usa o SDK
    configure_logging(level="INFO")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("whatsapp_message_sent", extra={"status_code": 200})

Logs estruturados, sem PII: tokens e números de telefone nunca aparecem
em claro (ver `redaction`).
"""

from whatsapp_cloud_api.config.logging.config import configure_logging, get_logger
from whatsapp_cloud_api.config.logging.filters import SdkContextFilter
from whatsapp_cloud_api.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)
from whatsapp_cloud_api.config.logging.redaction import mask_phone_number, mask_token

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SdkContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "mask_phone_number",
    "mask_token",
]
