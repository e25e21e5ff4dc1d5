"""Validador para mensagens de texto."""

from __future__ import annotations

from whatsapp_cloud_api.errors import InvalidArgumentError
from whatsapp_cloud_api.messages.models import TextMessage
from whatsapp_cloud_api.validators.common import require_text


def validate_text_message(message: TextMessage) -> None:
    """Valida mensagem de texto.

    Raises:
        InvalidArgumentError: Se texto ausente ou preview_url não-booleano
    """
    require_text(message.text, "text")

    if not isinstance(message.preview_url, bool):
        raise InvalidArgumentError("preview_url deve ser booleano", field="preview_url")
