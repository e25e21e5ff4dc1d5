"""Payload base e protocolo dos builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from whatsapp_cloud_api.constants.whatsapp import (
    MESSAGING_PRODUCT,
    RECIPIENT_TYPE_INDIVIDUAL,
)

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.models import OutboundMessage


class PayloadBuilder(Protocol):
    """Builder do objeto específico de um tipo de mensagem."""

    def build(self, message: Any) -> dict[str, Any]: ...


def build_base_payload(message: OutboundMessage) -> dict[str, Any]:
    """Campos comuns a toda mensagem endereçada.

    Inclui `context` apenas quando a mensagem responde a outra.
    """
    payload: dict[str, Any] = {
        "messaging_product": MESSAGING_PRODUCT,
        "recipient_type": RECIPIENT_TYPE_INDIVIDUAL,
        "to": message.to,
        "type": str(message.message_type),
    }
    if message.reply_to:
        payload["context"] = {"message_id": message.reply_to}
    return payload
