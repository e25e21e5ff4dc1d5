"""Enums e literais de wire da API Meta/WhatsApp."""

from __future__ import annotations

from enum import StrEnum

MESSAGING_PRODUCT: str = "whatsapp"
RECIPIENT_TYPE_INDIVIDUAL: str = "individual"


class MessageType(StrEnum):
    """Tipos de mensagem enviados para o endpoint /messages."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    TEMPLATE = "template"
    REACTION = "reaction"
    READ_RECEIPT = "read_receipt"

    @property
    def is_media(self) -> bool:
        return self in _MEDIA_TYPES


_MEDIA_TYPES = frozenset(
    {
        MessageType.IMAGE,
        MessageType.VIDEO,
        MessageType.AUDIO,
        MessageType.DOCUMENT,
        MessageType.STICKER,
    }
)


class MediaReferenceKind(StrEnum):
    """Forma de referenciar mídia: objeto já enviado ou URL remota.

    O valor é a chave emitida no objeto de mídia.
    """

    ID = "id"
    LINK = "link"


class InteractiveType(StrEnum):
    """Tipos de mensagens interativas suportadas."""

    BUTTON = "button"
    LIST = "list"
    CTA_URL = "cta_url"
