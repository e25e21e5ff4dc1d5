"""Despacho de validação por tipo de mensagem."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from whatsapp_cloud_api.constants.whatsapp import MessageType
from whatsapp_cloud_api.errors import InvalidArgumentError
from whatsapp_cloud_api.messages.models import (
    MediaMessage,
    Message,
    OutboundMessage,
    ReadReceipt,
)
from whatsapp_cloud_api.validators.common import (
    require_text,
    validate_recipient,
    validate_reply_to,
)
from whatsapp_cloud_api.validators.interactive import validate_interactive_message
from whatsapp_cloud_api.validators.media import validate_media_message
from whatsapp_cloud_api.validators.structured import (
    validate_contacts_message,
    validate_location_message,
    validate_reaction_message,
    validate_template_message,
)
from whatsapp_cloud_api.validators.text import validate_text_message


def _validate_read_receipt(message: ReadReceipt) -> None:
    require_text(message.message_id, "message_id")


_VALIDATORS: dict[MessageType, Callable[[Any], None]] = {
    MessageType.TEXT: validate_text_message,
    MessageType.LOCATION: validate_location_message,
    MessageType.CONTACTS: validate_contacts_message,
    MessageType.TEMPLATE: validate_template_message,
    MessageType.INTERACTIVE: validate_interactive_message,
    MessageType.REACTION: validate_reaction_message,
    MessageType.READ_RECEIPT: _validate_read_receipt,
}


class MessageValidator:
    """Valida mensagens antes de qualquer chamada de rede."""

    def validate(self, message: Message) -> None:
        """Valida campos comuns e específicos do tipo.

        Raises:
            InvalidArgumentError: Na primeira violação encontrada
        """
        if isinstance(message, OutboundMessage):
            validate_recipient(message.to)
            validate_reply_to(message.reply_to)

        # MediaMessage carrega o tipo por instância; qualquer outro tipo cai aqui
        if isinstance(message, MediaMessage):
            validate_media_message(message)
            return

        validator = _VALIDATORS.get(getattr(message, "message_type", None))
        if validator is None:
            raise InvalidArgumentError(
                f"Tipo de mensagem não suportado: {type(message).__name__}",
                field="message_type",
            )
        validator(message)


def validate_message(message: Message) -> None:
    """Atalho funcional para `MessageValidator().validate`."""
    MessageValidator().validate(message)
