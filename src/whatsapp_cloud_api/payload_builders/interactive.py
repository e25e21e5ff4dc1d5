"""Builder para mensagens interativas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud_api.messages.models import (
    CtaUrlAction,
    ListAction,
    ReplyButtonsAction,
)

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.models import InteractiveAction, InteractiveMessage


def _build_button_action(action: ReplyButtonsAction) -> dict[str, Any]:
    return {
        "buttons": [
            {"type": "reply", "reply": {"id": b.id, "title": b.title}}
            for b in action.buttons
        ]
    }


def _build_list_action(action: ListAction) -> dict[str, Any]:
    sections = []
    for section in action.sections:
        rows = []
        for row in section.rows:
            row_obj = {"id": row.id, "title": row.title}
            if row.description is not None:
                row_obj["description"] = row.description
            rows.append(row_obj)
        sections.append({"title": section.title, "rows": rows})
    return {"button": action.button, "sections": sections}


def _build_cta_url_action(action: CtaUrlAction) -> dict[str, Any]:
    return {
        "name": "cta_url",
        "parameters": {
            "display_text": action.display_text,
            "url": action.url,
        },
    }


def _build_action(action: InteractiveAction) -> dict[str, Any]:
    if isinstance(action, ReplyButtonsAction):
        return _build_button_action(action)
    if isinstance(action, ListAction):
        return _build_list_action(action)
    if isinstance(action, CtaUrlAction):
        return _build_cta_url_action(action)
    raise ValueError(f"Ação interativa não suportada: {type(action).__name__}")


class InteractivePayloadBuilder:
    """Builder para botões de resposta, lista e CTA URL."""

    def build(self, message: InteractiveMessage) -> dict[str, Any]:
        interactive: dict[str, Any] = {"type": str(message.interactive_type)}

        if message.header is not None:
            interactive["header"] = {"type": "text", "text": message.header}

        interactive["body"] = {"text": message.body}

        if message.footer is not None:
            interactive["footer"] = {"text": message.footer}

        interactive["action"] = _build_action(message.action)
        return {"interactive": interactive}
