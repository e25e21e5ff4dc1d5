"""Builders de payload para a API Meta/WhatsApp.

Um builder por tipo de mensagem; `build_full_payload` junta o payload base
(messaging_product, recipient_type, to, type) ao objeto específico.
"""

from whatsapp_cloud_api.payload_builders.base import PayloadBuilder, build_base_payload
from whatsapp_cloud_api.payload_builders.factory import (
    build_full_payload,
    get_payload_builder,
)

__all__ = [
    "PayloadBuilder",
    "build_base_payload",
    "build_full_payload",
    "get_payload_builder",
]
