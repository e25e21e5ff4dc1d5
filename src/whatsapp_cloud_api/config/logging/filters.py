"""Filter de logging que injeta contexto do SDK em cada record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _no_correlation_id() -> str:
    return ""


class SdkContextFilter(logging.Filter):
    """Garante `service` e `correlation_id` em todo record.

    Valores passados via `extra` têm precedência; o getter é consultado
    apenas quando o record não traz correlation_id.

    Args:
        service_name: Nome do serviço que aparece nos logs.
        correlation_id_getter: Fornece o correlation_id da aplicação
            hospedeira (ex: lido de um contextvar).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.correlation_id_getter = correlation_id_getter or _no_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self.correlation_id_getter()
        record.service = self.service_name
        return True
