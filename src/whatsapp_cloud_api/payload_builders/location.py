"""Builder para mensagens de localização."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_cloud_api.messages.models import LocationMessage


class LocationPayloadBuilder:
    def build(self, message: LocationMessage) -> dict[str, Any]:
        location: dict[str, Any] = {
            "longitude": message.longitude,
            "latitude": message.latitude,
        }
        if message.name is not None:
            location["name"] = message.name
        if message.address is not None:
            location["address"] = message.address
        return {"location": location}
