"""Resposta crua devolvida pelo transporte."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawResponse:
    """Status, headers e corpo exatamente como recebidos."""

    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    status_code: int = 200
