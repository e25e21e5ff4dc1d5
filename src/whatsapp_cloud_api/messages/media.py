"""Referência a mídia: objeto já enviado (id) ou URL remota (link)."""

from __future__ import annotations

from dataclasses import dataclass

from whatsapp_cloud_api.constants.whatsapp import MediaReferenceKind
from whatsapp_cloud_api.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class MediaReference:
    """Valor marcado: exatamente uma forma de referência.

    Não valida formato de URL nem de id; a API remota é a autoridade.
    Use `by_id` / `by_link` em vez do construtor.
    """

    kind: MediaReferenceKind
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, MediaReferenceKind):
            try:
                kind = MediaReferenceKind(self.kind)
            except ValueError as exc:
                raise InvalidArgumentError(
                    f"Tipo de referência de mídia inválido: {self.kind!r}", field="kind"
                ) from exc
            object.__setattr__(self, "kind", kind)
        if not isinstance(self.value, str):
            raise InvalidArgumentError(
                f"media {self.kind.value} deve ser string", field=self.kind.value
            )
        if not self.value.strip():
            raise InvalidArgumentError(
                f"media {self.kind.value} não pode ser vazio", field=self.kind.value
            )

    @classmethod
    def by_id(cls, object_id: str) -> MediaReference:
        """Mídia previamente enviada, referenciada pelo id opaco."""
        return cls(MediaReferenceKind.ID, object_id)

    @classmethod
    def by_link(cls, url: str) -> MediaReference:
        """Mídia remota, referenciada por URL."""
        return cls(MediaReferenceKind.LINK, url)

    @property
    def is_id(self) -> bool:
        return self.kind is MediaReferenceKind.ID

    @property
    def is_link(self) -> bool:
        return self.kind is MediaReferenceKind.LINK

    def as_field(self) -> dict[str, str]:
        """Campo único a mesclar no objeto de mídia: {"id": ...} ou {"link": ...}."""
        return {self.kind.value: self.value}
