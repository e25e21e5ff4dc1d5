"""Builder para mensagens de template."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud_api.messages.template import build_template_components

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.models import TemplateMessage


class TemplatePayloadBuilder:
    """Builder para mensagens de template.

    `components` é sempre emitido, mesmo vazio.
    """

    def build(self, message: TemplateMessage) -> dict[str, Any]:
        return {
            "template": {
                "name": message.template_name,
                "language": {"code": message.language},
                "components": build_template_components(message.components),
            }
        }
