"""Validador para mensagens interativas (botões, lista, CTA URL)."""

from __future__ import annotations

from whatsapp_cloud_api.errors import InvalidArgumentError
from whatsapp_cloud_api.messages.models import (
    CtaUrlAction,
    InteractiveMessage,
    ListAction,
    ReplyButtonsAction,
)
from whatsapp_cloud_api.validators.common import require_text


def _validate_buttons(action: ReplyButtonsAction) -> None:
    if not action.buttons:
        raise InvalidArgumentError("buttons não pode ser vazio", field="buttons")
    for button in action.buttons:
        require_text(button.id, "buttons.id")
        require_text(button.title, "buttons.title")


def _validate_list(action: ListAction) -> None:
    require_text(action.button, "button")
    if not action.sections:
        raise InvalidArgumentError("sections não pode ser vazio", field="sections")
    for section in action.sections:
        require_text(section.title, "sections.title")
        if not section.rows:
            raise InvalidArgumentError("sections.rows não pode ser vazio", field="sections.rows")
        for row in section.rows:
            require_text(row.id, "sections.rows.id")
            require_text(row.title, "sections.rows.title")


def _validate_cta_url(action: CtaUrlAction) -> None:
    require_text(action.display_text, "display_text")
    require_text(action.url, "url")


def validate_interactive_message(message: InteractiveMessage) -> None:
    """Valida mensagem interativa.

    Raises:
        InvalidArgumentError: Se body ausente, ação desconhecida ou incompleta
    """
    require_text(message.body, "body")

    if message.header is not None:
        require_text(message.header, "header")

    action = message.action
    if isinstance(action, ReplyButtonsAction):
        _validate_buttons(action)
    elif isinstance(action, ListAction):
        _validate_list(action)
    elif isinstance(action, CtaUrlAction):
        _validate_cta_url(action)
    else:
        raise InvalidArgumentError(
            f"Ação interativa não suportada: {type(action).__name__}", field="action"
        )
