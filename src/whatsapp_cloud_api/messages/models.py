"""Modelos imutáveis das mensagens enviadas ao endpoint /messages.

Cada modelo é criado pelo cliente imediatamente antes do envio e descartado
depois; validação fica em `whatsapp_cloud_api.validators` e serialização em
`whatsapp_cloud_api.payload_builders`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from whatsapp_cloud_api.constants.whatsapp import InteractiveType, MessageType
from whatsapp_cloud_api.messages.media import MediaReference
from whatsapp_cloud_api.messages.template import TemplateComponents


@dataclass(frozen=True, kw_only=True)
class OutboundMessage:
    """Campos comuns a toda mensagem endereçada a um destinatário.

    Attributes:
        to: Número do destinatário (formato internacional)
        reply_to: wamid da mensagem respondida (gera `context`)
    """

    to: str
    reply_to: str | None = None


@dataclass(frozen=True, kw_only=True)
class TextMessage(OutboundMessage):
    message_type: ClassVar[MessageType] = MessageType.TEXT

    text: str
    preview_url: bool = False


@dataclass(frozen=True, kw_only=True)
class MediaMessage(OutboundMessage):
    """Documento, imagem, áudio, vídeo ou sticker.

    `filename` só é emitido para documentos; `caption` não é emitido para
    áudio e sticker.
    """

    message_type: MessageType
    media: MediaReference
    caption: str | None = None
    filename: str | None = None


@dataclass(frozen=True, kw_only=True)
class LocationMessage(OutboundMessage):
    message_type: ClassVar[MessageType] = MessageType.LOCATION

    longitude: float
    latitude: float
    name: str | None = None
    address: str | None = None


@dataclass(frozen=True, kw_only=True)
class ContactName:
    formatted_name: str
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    prefix: str | None = None
    suffix: str | None = None


@dataclass(frozen=True, kw_only=True)
class ContactPhone:
    phone: str
    type: str | None = None
    wa_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ContactEmail:
    email: str
    type: str | None = None


@dataclass(frozen=True, kw_only=True)
class ContactUrl:
    url: str
    type: str | None = None


@dataclass(frozen=True, kw_only=True)
class Contact:
    """Cartão de contato (vCard simplificado da API)."""

    name: ContactName
    phones: Sequence[ContactPhone] = field(default_factory=tuple)
    emails: Sequence[ContactEmail] = field(default_factory=tuple)
    urls: Sequence[ContactUrl] = field(default_factory=tuple)
    birthday: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "phones", tuple(self.phones or ()))
        object.__setattr__(self, "emails", tuple(self.emails or ()))
        object.__setattr__(self, "urls", tuple(self.urls or ()))


@dataclass(frozen=True, kw_only=True)
class ContactsMessage(OutboundMessage):
    message_type: ClassVar[MessageType] = MessageType.CONTACTS

    contacts: Sequence[Contact]

    def __post_init__(self) -> None:
        object.__setattr__(self, "contacts", tuple(self.contacts or ()))


@dataclass(frozen=True, kw_only=True)
class TemplateMessage(OutboundMessage):
    message_type: ClassVar[MessageType] = MessageType.TEMPLATE

    template_name: str
    language: str
    components: TemplateComponents | None = None


@dataclass(frozen=True)
class ReplyButton:
    id: str
    title: str


@dataclass(frozen=True)
class ReplyButtonsAction:
    interactive_type: ClassVar[InteractiveType] = InteractiveType.BUTTON

    buttons: Sequence[ReplyButton]

    def __post_init__(self) -> None:
        object.__setattr__(self, "buttons", tuple(self.buttons or ()))


@dataclass(frozen=True)
class ListRow:
    id: str
    title: str
    description: str | None = None


@dataclass(frozen=True)
class ListSection:
    title: str
    rows: Sequence[ListRow]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows or ()))


@dataclass(frozen=True)
class ListAction:
    """Menu de lista: `button` é o texto do botão que abre o menu."""

    interactive_type: ClassVar[InteractiveType] = InteractiveType.LIST

    button: str
    sections: Sequence[ListSection]

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", tuple(self.sections or ()))


@dataclass(frozen=True)
class CtaUrlAction:
    interactive_type: ClassVar[InteractiveType] = InteractiveType.CTA_URL

    display_text: str
    url: str


InteractiveAction = ReplyButtonsAction | ListAction | CtaUrlAction


@dataclass(frozen=True, kw_only=True)
class InteractiveMessage(OutboundMessage):
    message_type: ClassVar[MessageType] = MessageType.INTERACTIVE

    body: str
    action: InteractiveAction
    header: str | None = None
    footer: str | None = None

    @property
    def interactive_type(self) -> InteractiveType:
        return self.action.interactive_type


@dataclass(frozen=True, kw_only=True)
class ReactionMessage(OutboundMessage):
    """Reação a uma mensagem; emoji vazio remove a reação."""

    message_type: ClassVar[MessageType] = MessageType.REACTION

    message_id: str
    emoji: str


@dataclass(frozen=True, kw_only=True)
class ReadReceipt:
    """Marca uma mensagem recebida como lida. Não tem destinatário."""

    message_type: ClassVar[MessageType] = MessageType.READ_RECEIPT

    message_id: str


Message = (
    TextMessage
    | MediaMessage
    | LocationMessage
    | ContactsMessage
    | TemplateMessage
    | InteractiveMessage
    | ReactionMessage
    | ReadReceipt
)
