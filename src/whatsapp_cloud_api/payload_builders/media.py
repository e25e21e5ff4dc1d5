"""Builders para mensagens de mídia (document, image, audio, video, sticker)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_cloud_api.constants.whatsapp import MessageType

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.media import MediaReference
    from whatsapp_cloud_api.messages.models import MediaMessage


def _build_media_object(
    media: MediaReference,
    caption: str | None = None,
    filename: str | None = None,
) -> dict[str, Any]:
    """Monta objeto de mídia com `id` ou `link` (nunca ambos).

    Args:
        media: Referência de mídia
        caption: Legenda opcional (omitida quando None)
        filename: Nome do arquivo opcional (omitido quando None)

    Returns:
        Objeto de mídia conforme API Meta
    """
    media_obj: dict[str, Any] = {}
    if caption is not None:
        media_obj["caption"] = caption
    if filename is not None:
        media_obj["filename"] = filename
    media_obj.update(media.as_field())
    return media_obj


class DocumentPayloadBuilder:
    def build(self, message: MediaMessage) -> dict[str, Any]:
        return {
            MessageType.DOCUMENT.value: _build_media_object(
                message.media, message.caption, message.filename
            )
        }


class ImagePayloadBuilder:
    def build(self, message: MediaMessage) -> dict[str, Any]:
        return {MessageType.IMAGE.value: _build_media_object(message.media, message.caption)}


class VideoPayloadBuilder:
    def build(self, message: MediaMessage) -> dict[str, Any]:
        return {MessageType.VIDEO.value: _build_media_object(message.media, message.caption)}


class AudioPayloadBuilder:
    """Áudio não aceita legenda."""

    def build(self, message: MediaMessage) -> dict[str, Any]:
        return {MessageType.AUDIO.value: _build_media_object(message.media)}


class StickerPayloadBuilder:
    """Sticker não aceita legenda."""

    def build(self, message: MediaMessage) -> dict[str, Any]:
        return {MessageType.STICKER.value: _build_media_object(message.media)}
