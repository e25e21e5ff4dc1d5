"""Validador para mensagens de mídia."""

from __future__ import annotations

from whatsapp_cloud_api.constants.whatsapp import MessageType
from whatsapp_cloud_api.errors import InvalidArgumentError
from whatsapp_cloud_api.messages.media import MediaReference
from whatsapp_cloud_api.messages.models import MediaMessage


def validate_media_message(message: MediaMessage) -> None:
    """Valida mensagem de mídia.

    Raises:
        InvalidArgumentError: Se tipo não é de mídia ou referência ausente
    """
    try:
        message_type = MessageType(message.message_type)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Tipo de mídia não suportado: {message.message_type}",
            field="message_type",
        ) from exc

    if not message_type.is_media:
        raise InvalidArgumentError(
            f"Tipo de mídia não suportado: {message_type}", field="message_type"
        )

    if not isinstance(message.media, MediaReference):
        raise InvalidArgumentError(
            "media deve ser um MediaReference (by_id ou by_link)", field="media"
        )
