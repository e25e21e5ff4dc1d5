"""Builder para mensagens de contatos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.models import Contact, ContactName, ContactsMessage


def _without_none(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _build_name(name: ContactName) -> dict[str, Any]:
    return _without_none({
        "formatted_name": name.formatted_name,
        "first_name": name.first_name,
        "last_name": name.last_name,
        "middle_name": name.middle_name,
        "prefix": name.prefix,
        "suffix": name.suffix,
    })


def _build_contact(contact: Contact) -> dict[str, Any]:
    """Monta um cartão de contato; listas vazias são omitidas."""
    result: dict[str, Any] = {"name": _build_name(contact.name)}

    if contact.phones:
        result["phones"] = [
            _without_none({"phone": p.phone, "type": p.type, "wa_id": p.wa_id})
            for p in contact.phones
        ]
    if contact.emails:
        result["emails"] = [
            _without_none({"email": e.email, "type": e.type}) for e in contact.emails
        ]
    if contact.urls:
        result["urls"] = [_without_none({"url": u.url, "type": u.type}) for u in contact.urls]
    if contact.birthday is not None:
        result["birthday"] = contact.birthday

    return result


class ContactsPayloadBuilder:
    def build(self, message: ContactsMessage) -> dict[str, Any]:
        return {"contacts": [_build_contact(c) for c in message.contacts]}
