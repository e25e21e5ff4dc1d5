"""Validadores para location, contacts, template e reaction."""

from __future__ import annotations

import math
from collections.abc import Mapping

from whatsapp_cloud_api.errors import InvalidArgumentError
from whatsapp_cloud_api.messages.models import (
    ContactsMessage,
    LocationMessage,
    ReactionMessage,
    TemplateMessage,
)
from whatsapp_cloud_api.messages.template import TemplateComponents
from whatsapp_cloud_api.validators.common import require_text


def _require_coordinate(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{field} deve ser numérico", field=field)
    # NaN/Infinity não existem em JSON
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{field} deve ser finito", field=field)


def validate_location_message(message: LocationMessage) -> None:
    _require_coordinate(message.longitude, "longitude")
    _require_coordinate(message.latitude, "latitude")


def validate_contacts_message(message: ContactsMessage) -> None:
    """Valida cartões de contato.

    Raises:
        InvalidArgumentError: Se lista vazia, nome formatado ou telefone ausente
    """
    if not message.contacts:
        raise InvalidArgumentError("contacts não pode ser vazio", field="contacts")

    for contact in message.contacts:
        require_text(contact.name.formatted_name, "contacts.name.formatted_name")
        for phone in contact.phones:
            require_text(phone.phone, "contacts.phones.phone")
        for email in contact.emails:
            require_text(email.email, "contacts.emails.email")
        for url in contact.urls:
            require_text(url.url, "contacts.urls.url")


def validate_template_message(message: TemplateMessage) -> None:
    require_text(message.template_name, "template_name")
    require_text(message.language, "language")

    components = message.components
    if components is None:
        return
    if not isinstance(components, TemplateComponents):
        raise InvalidArgumentError(
            "components deve ser TemplateComponents", field="components"
        )

    for section, parameters in (("header", components.header), ("body", components.body)):
        for parameter in parameters:
            if not isinstance(parameter, Mapping):
                raise InvalidArgumentError(
                    f"components.{section} aceita apenas mappings",
                    field=f"components.{section}",
                )
    for button in components.buttons:
        if not isinstance(button, (str, Mapping)):
            raise InvalidArgumentError(
                "components.buttons aceita string ou mapping",
                field="components.buttons",
            )


def validate_reaction_message(message: ReactionMessage) -> None:
    """Valida reação. Emoji vazio é permitido (remove a reação)."""
    require_text(message.message_id, "message_id")

    if not isinstance(message.emoji, str):
        raise InvalidArgumentError("emoji deve ser string", field="emoji")
