"""Cliente WhatsApp Cloud API.

Cada método público executa exatamente uma troca request/response pelo
transporte injetado:

1. valida a mensagem (InvalidArgumentError antes de qualquer rede)
2. monta o payload JSON
3. calcula URL `<base>/<versão>/<phone_number_id>/messages` e headers
4. delega ao transporte com o timeout configurado
5. devolve `Response`, mesmo para status >= 400

Falhas de rede (`TransportError`) propagam sem wrapper.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from types import TracebackType
from typing import Any

from whatsapp_cloud_api.config.settings import (
    DEFAULT_TIMEOUT_SECONDS,
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
)
from whatsapp_cloud_api.constants.whatsapp import MessageType
from whatsapp_cloud_api.errors import InvalidArgumentError
from whatsapp_cloud_api.http.client_handler import ClientHandler
from whatsapp_cloud_api.http.httpx_handler import HttpxClientHandler
from whatsapp_cloud_api.http.meta_logging import log_error_response, log_success
from whatsapp_cloud_api.messages.media import MediaReference
from whatsapp_cloud_api.messages.models import (
    Contact,
    ContactsMessage,
    CtaUrlAction,
    InteractiveAction,
    InteractiveMessage,
    ListAction,
    ListSection,
    LocationMessage,
    MediaMessage,
    Message,
    ReactionMessage,
    ReadReceipt,
    ReplyButton,
    ReplyButtonsAction,
    TemplateMessage,
    TextMessage,
)
from whatsapp_cloud_api.messages.template import TemplateComponents
from whatsapp_cloud_api.payload_builders.factory import build_full_payload
from whatsapp_cloud_api.response import OutboundRequest, Response
from whatsapp_cloud_api.validators.dispatcher import MessageValidator


class WhatsAppCloudApi:
    """Fachada de envio de mensagens pela WhatsApp Cloud API.

    Args:
        from_phone_number_id: ID do número remetente
        access_token: Bearer token da Graph API
        client_handler: Transporte (default: HttpxClientHandler próprio)
        graph_version: Versão da Graph API
        base_url: URL base da Graph API
        timeout: Timeout em segundos repassado ao transporte

    Raises:
        InvalidArgumentError: Se phone_number_id ou access_token vazios
    """

    def __init__(
        self,
        from_phone_number_id: str,
        access_token: str,
        client_handler: ClientHandler | None = None,
        graph_version: str = GRAPH_API_VERSION,
        base_url: str = GRAPH_API_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        settings = WhatsAppSettings(
            from_phone_number_id=from_phone_number_id,
            access_token=access_token,
            graph_version=graph_version,
            base_url=base_url,
            timeout_seconds=timeout,
        )
        errors = settings.validate()
        if errors:
            raise InvalidArgumentError("; ".join(errors))

        self._settings = settings
        self._owns_handler = client_handler is None
        self._client_handler: ClientHandler = (
            client_handler if client_handler is not None else HttpxClientHandler()
        )
        self._validator = MessageValidator()

    @classmethod
    def from_settings(
        cls,
        settings: WhatsAppSettings,
        client_handler: ClientHandler | None = None,
    ) -> WhatsAppCloudApi:
        """Cria cliente a partir de settings (ex: `get_whatsapp_settings()`)."""
        return cls(
            from_phone_number_id=settings.from_phone_number_id,
            access_token=settings.access_token,
            client_handler=client_handler,
            graph_version=settings.graph_version,
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
        )

    @property
    def settings(self) -> WhatsAppSettings:
        return self._settings

    @property
    def from_phone_number_id(self) -> str:
        return self._settings.from_phone_number_id

    @property
    def graph_version(self) -> str:
        return self._settings.graph_version

    @property
    def timeout(self) -> int:
        return self._settings.timeout_seconds

    def send_text_message(
        self,
        to: str,
        text: str,
        preview_url: bool = False,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_message(
            TextMessage(to=to, text=text, preview_url=preview_url, reply_to=reply_to)
        )

    def send_document(
        self,
        to: str,
        media: MediaReference,
        filename: str | None = None,
        caption: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_media(
            MessageType.DOCUMENT, to, media, caption=caption, filename=filename, reply_to=reply_to
        )

    def send_image(
        self,
        to: str,
        media: MediaReference,
        caption: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_media(MessageType.IMAGE, to, media, caption=caption, reply_to=reply_to)

    def send_audio(
        self,
        to: str,
        media: MediaReference,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_media(MessageType.AUDIO, to, media, reply_to=reply_to)

    def send_video(
        self,
        to: str,
        media: MediaReference,
        caption: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_media(MessageType.VIDEO, to, media, caption=caption, reply_to=reply_to)

    def send_sticker(
        self,
        to: str,
        media: MediaReference,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_media(MessageType.STICKER, to, media, reply_to=reply_to)

    def send_location(
        self,
        to: str,
        longitude: float,
        latitude: float,
        name: str | None = None,
        address: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_message(
            LocationMessage(
                to=to,
                longitude=longitude,
                latitude=latitude,
                name=name,
                address=address,
                reply_to=reply_to,
            )
        )

    def send_contacts(
        self,
        to: str,
        contacts: Sequence[Contact],
        reply_to: str | None = None,
    ) -> Response:
        return self._send_message(ContactsMessage(to=to, contacts=contacts, reply_to=reply_to))

    def send_template(
        self,
        to: str,
        template_name: str,
        language: str,
        components: TemplateComponents | None = None,
        reply_to: str | None = None,
    ) -> Response:
        """Envia template aprovado; `components` vazio/None gera `components: []`."""
        return self._send_message(
            TemplateMessage(
                to=to,
                template_name=template_name,
                language=language,
                components=components,
                reply_to=reply_to,
            )
        )

    def send_interactive(
        self,
        to: str,
        body: str,
        action: InteractiveAction,
        header: str | None = None,
        footer: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_message(
            InteractiveMessage(
                to=to,
                body=body,
                action=action,
                header=header,
                footer=footer,
                reply_to=reply_to,
            )
        )

    def send_reply_buttons(
        self,
        to: str,
        body: str,
        buttons: Sequence[ReplyButton],
        header: str | None = None,
        footer: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self.send_interactive(
            to, body, ReplyButtonsAction(buttons), header=header, footer=footer, reply_to=reply_to
        )

    def send_list(
        self,
        to: str,
        body: str,
        button: str,
        sections: Sequence[ListSection],
        header: str | None = None,
        footer: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self.send_interactive(
            to,
            body,
            ListAction(button, sections),
            header=header,
            footer=footer,
            reply_to=reply_to,
        )

    def send_cta_url(
        self,
        to: str,
        body: str,
        display_text: str,
        url: str,
        header: str | None = None,
        footer: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self.send_interactive(
            to,
            body,
            CtaUrlAction(display_text, url),
            header=header,
            footer=footer,
            reply_to=reply_to,
        )

    def send_reaction(self, to: str, message_id: str, emoji: str) -> Response:
        """Reage a uma mensagem; `emoji=""` remove a reação."""
        return self._send_message(ReactionMessage(to=to, message_id=message_id, emoji=emoji))

    def mark_message_as_read(self, message_id: str) -> Response:
        return self._send_message(ReadReceipt(message_id=message_id))

    def close(self) -> None:
        """Fecha o transporte apenas se ele foi criado por este cliente."""
        if self._owns_handler and isinstance(self._client_handler, HttpxClientHandler):
            self._client_handler.close()

    def __enter__(self) -> WhatsAppCloudApi:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _send_media(
        self,
        message_type: MessageType,
        to: str,
        media: MediaReference,
        caption: str | None = None,
        filename: str | None = None,
        reply_to: str | None = None,
    ) -> Response:
        return self._send_message(
            MediaMessage(
                to=to,
                message_type=message_type,
                media=media,
                caption=caption,
                filename=filename,
                reply_to=reply_to,
            )
        )

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.access_token}",
            "Content-Type": "application/json",
        }

    def _build_request(self, payload: dict[str, Any]) -> OutboundRequest:
        try:
            body = json.dumps(payload, ensure_ascii=False, allow_nan=False)
        except ValueError as exc:
            raise InvalidArgumentError(
                "Payload contém valor fora do JSON (NaN ou Infinity)"
            ) from exc
        return OutboundRequest(
            url=self._settings.messages_endpoint,
            body=body,
            headers=self._build_headers(),
            timeout=self._settings.timeout_seconds,
        )

    def _send_message(self, message: Message) -> Response:
        """Passos comuns a todos os tipos: validar, montar, enviar, embrulhar."""
        self._validator.validate(message)

        payload = build_full_payload(message)
        request = self._build_request(payload)

        raw = self._client_handler.send(
            request.url,
            request.body,
            request.headers,
            request.timeout,
        )
        response = Response(raw, request)

        message_type = str(message.message_type)
        to = getattr(message, "to", None)
        if response.is_error:
            log_error_response(message_type, to, response.http_status_code, response.api_error())
        else:
            log_success(message_type, to, response.http_status_code)

        return response
