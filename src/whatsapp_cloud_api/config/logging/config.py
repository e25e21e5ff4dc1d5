"""Configuração centralizada de logging JSON para o SDK."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from whatsapp_cloud_api.config.logging.filters import SdkContextFilter
from whatsapp_cloud_api.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "whatsapp_cloud_api"

# Logger raiz do pacote; a aplicação hospedeira decide sobre o root logger.
SDK_LOGGER_NAME = "whatsapp_cloud_api"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    logger_name: str = SDK_LOGGER_NAME,
) -> logging.Logger:
    """Configura logging JSON estruturado para os loggers do SDK.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço injetado em cada record.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual da aplicação hospedeira.
        logger_name: Logger a configurar. Use "" para o root logger.

    Returns:
        O logger configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(SdkContextFilter(service_name, correlation_id_getter))

    logger = logging.getLogger(logger_name)
    logger.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    logger.handlers = [handler]
    return logger


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
