"""Configuração do SDK: settings da Graph API e logging estruturado."""

from whatsapp_cloud_api.config.settings import (
    DEFAULT_TIMEOUT_SECONDS,
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
    load_settings_from_env,
)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "WhatsAppSettings",
    "get_whatsapp_settings",
    "load_settings_from_env",
]
