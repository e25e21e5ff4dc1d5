"""Camada HTTP: transporte, resposta crua e erros da Graph API."""

from whatsapp_cloud_api.http.client_handler import ClientHandler
from whatsapp_cloud_api.http.httpx_handler import HttpxClientHandler
from whatsapp_cloud_api.http.meta_errors import (
    WhatsAppApiError,
    is_permanent_error,
    parse_meta_error,
)
from whatsapp_cloud_api.http.raw_response import RawResponse

__all__ = [
    "ClientHandler",
    "HttpxClientHandler",
    "RawResponse",
    "WhatsAppApiError",
    "is_permanent_error",
    "parse_meta_error",
]
