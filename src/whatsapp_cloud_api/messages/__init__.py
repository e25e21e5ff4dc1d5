"""Modelos de mensagem, referências de mídia e componentes de template."""

from whatsapp_cloud_api.messages.media import MediaReference
from whatsapp_cloud_api.messages.models import (
    Contact,
    ContactEmail,
    ContactName,
    ContactPhone,
    ContactsMessage,
    ContactUrl,
    CtaUrlAction,
    InteractiveAction,
    InteractiveMessage,
    ListAction,
    ListRow,
    ListSection,
    LocationMessage,
    MediaMessage,
    Message,
    OutboundMessage,
    ReactionMessage,
    ReadReceipt,
    ReplyButton,
    ReplyButtonsAction,
    TemplateMessage,
    TextMessage,
)
from whatsapp_cloud_api.messages.template import (
    TemplateComponents,
    build_template_components,
)

__all__ = [
    "Contact",
    "ContactEmail",
    "ContactName",
    "ContactPhone",
    "ContactUrl",
    "ContactsMessage",
    "CtaUrlAction",
    "InteractiveAction",
    "InteractiveMessage",
    "ListAction",
    "ListRow",
    "ListSection",
    "LocationMessage",
    "MediaMessage",
    "MediaReference",
    "Message",
    "OutboundMessage",
    "ReactionMessage",
    "ReadReceipt",
    "ReplyButton",
    "ReplyButtonsAction",
    "TemplateComponents",
    "TemplateMessage",
    "TextMessage",
    "build_template_components",
]
