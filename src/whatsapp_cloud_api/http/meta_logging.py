"""Helpers de logging para envios à API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from whatsapp_cloud_api.config.logging.redaction import mask_phone_number

if TYPE_CHECKING:
    from whatsapp_cloud_api.http.meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)


def log_error_response(
    message_type: str,
    to: str | None,
    status_code: int,
    meta_error: WhatsAppApiError | None,
) -> None:
    """Loga resposta de erro da Meta sem expor dados sensíveis."""
    extra: dict[str, object] = {
        "message_type": message_type,
        "to": mask_phone_number(to),
        "status_code": status_code,
    }
    if meta_error is not None:
        extra.update({
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "is_permanent": meta_error.is_permanent,
            "fbtrace_id": meta_error.fbtrace_id,
        })
    logger.warning("whatsapp_error_response", extra=extra)


def log_success(
    message_type: str,
    to: str | None,
    status_code: int,
) -> None:
    logger.debug(
        "whatsapp_message_sent",
        extra={
            "message_type": message_type,
            "to": mask_phone_number(to),
            "status_code": status_code,
        },
    )
