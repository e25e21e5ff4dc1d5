"""Constantes e enums da API WhatsApp Cloud."""

from whatsapp_cloud_api.constants.whatsapp import (
    MESSAGING_PRODUCT,
    RECIPIENT_TYPE_INDIVIDUAL,
    InteractiveType,
    MediaReferenceKind,
    MessageType,
)

__all__ = [
    "MESSAGING_PRODUCT",
    "RECIPIENT_TYPE_INDIVIDUAL",
    "InteractiveType",
    "MediaReferenceKind",
    "MessageType",
]
