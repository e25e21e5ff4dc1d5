"""Mascaramento de dados sensíveis antes de logar."""

from __future__ import annotations

_VISIBLE_SUFFIX = 4


def mask_phone_number(phone_number: str | None) -> str:
    """Mantém apenas os últimos dígitos do número ("***7777")."""
    if not phone_number:
        return ""
    digits = "".join(ch for ch in phone_number if ch.isdigit())
    if len(digits) <= _VISIBLE_SUFFIX:
        return "***"
    return f"***{digits[-_VISIBLE_SUFFIX:]}"


def mask_token(token: str | None) -> str:
    """Nunca expõe o token; indica apenas se estava presente."""
    return "<redacted>" if token else ""
