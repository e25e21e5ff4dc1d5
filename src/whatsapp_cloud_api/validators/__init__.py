"""Validação pré-envio das mensagens WhatsApp.

Uso:
    from whatsapp_cloud_api.validators import MessageValidator

    MessageValidator().validate(message)  # InvalidArgumentError se inválida
"""

from whatsapp_cloud_api.validators.dispatcher import MessageValidator, validate_message

__all__ = [
    "MessageValidator",
    "validate_message",
]
