"""Testes para MediaReference (id vs link)."""

from __future__ import annotations

import dataclasses

import pytest

from whatsapp_cloud_api.constants.whatsapp import MediaReferenceKind
from whatsapp_cloud_api.errors import InvalidArgumentError
from whatsapp_cloud_api.messages.media import MediaReference


class TestMediaReference:
    """Variantes mutuamente exclusivas e campo emitido."""

    def test_by_id_emits_only_id(self) -> None:
        ref = MediaReference.by_id("abc-123")
        assert ref.as_field() == {"id": "abc-123"}
        assert ref.is_id is True
        assert ref.is_link is False

    def test_by_link_emits_only_link(self) -> None:
        ref = MediaReference.by_link("https://x/y.pdf")
        assert ref.as_field() == {"link": "https://x/y.pdf"}
        assert ref.kind is MediaReferenceKind.LINK

    def test_kind_accepts_plain_string(self) -> None:
        ref = MediaReference("link", "https://x/y.pdf")
        assert ref.kind is MediaReferenceKind.LINK

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_value_raises(self, value: str) -> None:
        with pytest.raises(InvalidArgumentError):
            MediaReference.by_id(value)

    def test_malformed_link_is_passed_through(self) -> None:
        """Formato não é validado; a API remota decide."""
        ref = MediaReference.by_link("not a url")
        assert ref.as_field() == {"link": "not a url"}

    def test_is_immutable(self) -> None:
        ref = MediaReference.by_id("abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ref.value = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("value", [123, None, b"abc"])
    def test_non_string_value_raises(self, value: object) -> None:
        """Valor não-string vira InvalidArgumentError, não AttributeError."""
        with pytest.raises(InvalidArgumentError, match="string"):
            MediaReference.by_id(value)  # type: ignore[arg-type]

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            MediaReference("url", "https://x/y.pdf")  # type: ignore[arg-type]
        assert exc_info.value.field == "kind"
