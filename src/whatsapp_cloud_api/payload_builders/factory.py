"""Factory para obter o builder correto por tipo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud_api.constants.whatsapp import MessageType
from whatsapp_cloud_api.messages.models import ReadReceipt
from whatsapp_cloud_api.payload_builders.base import PayloadBuilder, build_base_payload
from whatsapp_cloud_api.payload_builders.contacts import ContactsPayloadBuilder
from whatsapp_cloud_api.payload_builders.interactive import InteractivePayloadBuilder
from whatsapp_cloud_api.payload_builders.location import LocationPayloadBuilder
from whatsapp_cloud_api.payload_builders.media import (
    AudioPayloadBuilder,
    DocumentPayloadBuilder,
    ImagePayloadBuilder,
    StickerPayloadBuilder,
    VideoPayloadBuilder,
)
from whatsapp_cloud_api.payload_builders.reaction import (
    ReactionPayloadBuilder,
    build_read_receipt_payload,
)
from whatsapp_cloud_api.payload_builders.template import TemplatePayloadBuilder
from whatsapp_cloud_api.payload_builders.text import TextPayloadBuilder

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.models import Message

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageType, PayloadBuilder] = {
    MessageType.TEXT: TextPayloadBuilder(),
    MessageType.DOCUMENT: DocumentPayloadBuilder(),
    MessageType.IMAGE: ImagePayloadBuilder(),
    MessageType.AUDIO: AudioPayloadBuilder(),
    MessageType.VIDEO: VideoPayloadBuilder(),
    MessageType.STICKER: StickerPayloadBuilder(),
    MessageType.LOCATION: LocationPayloadBuilder(),
    MessageType.CONTACTS: ContactsPayloadBuilder(),
    MessageType.TEMPLATE: TemplatePayloadBuilder(),
    MessageType.INTERACTIVE: InteractivePayloadBuilder(),
    MessageType.REACTION: ReactionPayloadBuilder(),
}


def get_payload_builder(message_type: MessageType) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem, ou None se não suportado."""
    return _BUILDERS.get(message_type)


def build_full_payload(message: Message) -> dict[str, Any]:
    """Constrói payload completo para a API Meta.

    Args:
        message: Mensagem já validada

    Returns:
        Payload completo pronto para serializar

    Raises:
        ValueError: Se tipo de mensagem não suportado
    """
    if isinstance(message, ReadReceipt):
        return build_read_receipt_payload(message)

    msg_type = MessageType(message.message_type)
    builder = get_payload_builder(msg_type)

    if builder is None:
        raise ValueError(f"Tipo de mensagem não suportado: {msg_type}")

    payload = build_base_payload(message)
    payload.update(builder.build(message))
    return payload
