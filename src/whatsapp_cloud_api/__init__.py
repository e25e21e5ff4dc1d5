"""SDK para envio de mensagens pela WhatsApp Cloud API (Meta Graph API).

Uso:
    from whatsapp_cloud_api import MediaReference, WhatsAppCloudApi

    with WhatsAppCloudApi(from_phone_number_id="123", access_token="...") as api:
        response = api.send_document(
            "5511999999999", MediaReference.by_id("abc-123"), filename="f.pdf"
        )
        if response.is_error:
            print(response.decoded_body())
"""

from whatsapp_cloud_api.client import WhatsAppCloudApi
from whatsapp_cloud_api.config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)
from whatsapp_cloud_api.errors import (
    InvalidArgumentError,
    MalformedResponseBodyError,
    ResponseError,
    TransportError,
    WhatsAppCloudApiError,
)
from whatsapp_cloud_api.http import (
    ClientHandler,
    HttpxClientHandler,
    RawResponse,
    WhatsAppApiError,
)
from whatsapp_cloud_api.messages import (
    Contact,
    ContactEmail,
    ContactName,
    ContactPhone,
    ContactUrl,
    CtaUrlAction,
    ListAction,
    ListRow,
    ListSection,
    MediaReference,
    ReplyButton,
    ReplyButtonsAction,
    TemplateComponents,
)
from whatsapp_cloud_api.response import OutboundRequest, Response

__all__ = [
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "ClientHandler",
    "Contact",
    "ContactEmail",
    "ContactName",
    "ContactPhone",
    "ContactUrl",
    "CtaUrlAction",
    "HttpxClientHandler",
    "InvalidArgumentError",
    "ListAction",
    "ListRow",
    "ListSection",
    "MalformedResponseBodyError",
    "MediaReference",
    "OutboundRequest",
    "RawResponse",
    "ReplyButton",
    "ReplyButtonsAction",
    "Response",
    "ResponseError",
    "TemplateComponents",
    "TransportError",
    "WhatsAppApiError",
    "WhatsAppCloudApi",
    "WhatsAppCloudApiError",
    "WhatsAppSettings",
    "get_whatsapp_settings",
]
