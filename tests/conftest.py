"""Configuração do pytest para o SDK whatsapp_cloud_api."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports sem instalação
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from whatsapp_cloud_api import RawResponse, WhatsAppCloudApi  # noqa: E402

PHONE_NUMBER_ID = "106540352242922"
ACCESS_TOKEN = "EAAtest-token"
GRAPH_VERSION = "v24.0"
MESSAGES_URL = f"https://graph.facebook.com/{GRAPH_VERSION}/{PHONE_NUMBER_ID}/messages"


class FakeClientHandler:
    """Transporte fake: registra chamadas e devolve resposta fixa.

    Por padrão ecoa o corpo enviado, como os testes de contrato da API.
    """

    def __init__(
        self,
        status_code: int = 200,
        body: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._status_code = status_code
        self._body = body
        self._headers = dict(headers or {"Content-Type": "application/json"})
        self.calls: list[dict] = []

    def send(
        self,
        url: str,
        body: str,
        headers: Mapping[str, str],
        timeout: int,
    ) -> RawResponse:
        self.calls.append({"url": url, "body": body, "headers": dict(headers), "timeout": timeout})
        return RawResponse(
            headers=self._headers,
            body=body if self._body is None else self._body,
            status_code=self._status_code,
        )


@pytest.fixture
def fake_handler() -> FakeClientHandler:
    return FakeClientHandler()


@pytest.fixture
def api(fake_handler: FakeClientHandler) -> WhatsAppCloudApi:
    """Cliente com transporte fake e configuração de teste."""
    return WhatsAppCloudApi(
        from_phone_number_id=PHONE_NUMBER_ID,
        access_token=ACCESS_TOKEN,
        client_handler=fake_handler,
        graph_version=GRAPH_VERSION,
    )


@pytest.fixture
def make_fake_handler() -> Callable[..., FakeClientHandler]:
    """Fábrica de transportes fake com status/corpo configuráveis."""
    return FakeClientHandler


@pytest.fixture
def make_api() -> Callable[..., WhatsAppCloudApi]:
    """Fábrica de clientes com as credenciais de teste e transporte injetado."""

    def _make(client_handler: Any, **overrides: Any) -> WhatsAppCloudApi:
        return WhatsAppCloudApi(
            from_phone_number_id=PHONE_NUMBER_ID,
            access_token=ACCESS_TOKEN,
            client_handler=client_handler,
            **overrides,
        )

    return _make


@pytest.fixture
def sent_payload(fake_handler: FakeClientHandler) -> Callable[[], dict]:
    """Confere a única chamada ao transporte e devolve o corpo decodificado."""

    def _sent() -> dict:
        assert len(fake_handler.calls) == 1
        call = fake_handler.calls[0]
        assert call["url"] == MESSAGES_URL
        assert call["headers"] == {
            "Authorization": f"Bearer {ACCESS_TOKEN}",
            "Content-Type": "application/json",
        }
        assert isinstance(call["timeout"], int)
        return json.loads(call["body"])

    return _sent
