"""Builders para reação e confirmação de leitura."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud_api.constants.whatsapp import MESSAGING_PRODUCT

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.models import ReactionMessage, ReadReceipt


class ReactionPayloadBuilder:
    def build(self, message: ReactionMessage) -> dict[str, Any]:
        return {
            "reaction": {
                "message_id": message.message_id,
                "emoji": message.emoji,
            }
        }


def build_read_receipt_payload(receipt: ReadReceipt) -> dict[str, Any]:
    """Payload completo de leitura; não usa o payload base (sem destinatário)."""
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "status": "read",
        "message_id": receipt.message_id,
    }
