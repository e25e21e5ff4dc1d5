"""Checagens compartilhadas pelos validadores de mensagem."""

from __future__ import annotations

from typing import Any

from whatsapp_cloud_api.errors import InvalidArgumentError


def require_text(value: Any, field: str) -> None:
    """Exige string não vazia (espaços não contam).

    Raises:
        InvalidArgumentError: Se ausente, vazio ou não-string
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field} é obrigatório", field=field)


def validate_recipient(to: Any) -> None:
    require_text(to, "to")


def validate_reply_to(reply_to: str | None) -> None:
    """`reply_to` é opcional, mas se informado não pode ser vazio."""
    if reply_to is not None:
        require_text(reply_to, "reply_to")
