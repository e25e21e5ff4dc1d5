"""Testes para config.logging.

Cobre: configure_logging, get_logger, SdkContextFilter,
create_json_formatter e mascaramento de PII.
"""

from __future__ import annotations

import json
import logging

import pytest

from whatsapp_cloud_api.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    SdkContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    mask_phone_number,
    mask_token,
)
from whatsapp_cloud_api.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from whatsapp_cloud_api.http.meta_errors import parse_meta_error
from whatsapp_cloud_api.http.meta_logging import log_error_response, log_success

TEST_LOGGER = "whatsapp_cloud_api_tests"


def _record(msg: str = "whatsapp_message_sent", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="whatsapp_cloud_api.client",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logger com nível padrão INFO."""
        logger = configure_logging(logger_name=TEST_LOGGER)
        assert logger.level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        """Nível aceita minúsculas."""
        logger = configure_logging(level="debug", logger_name=TEST_LOGGER)
        assert logger.level == logging.DEBUG

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID", logger_name=TEST_LOGGER)

    def test_configure_logging_replaces_handlers(self) -> None:
        """Handlers existentes são substituídos por um único handler JSON."""
        logger = logging.getLogger(TEST_LOGGER)
        logger.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging(logger_name=TEST_LOGGER)
        assert len(logger.handlers) == 1

    def test_configure_logging_adds_context_filter(self) -> None:
        """Handler recebe SdkContextFilter."""
        logger = configure_logging(
            correlation_id_getter=lambda: "corr-1", logger_name=TEST_LOGGER
        )
        handler = logger.handlers[0]
        assert any(isinstance(f, SdkContextFilter) for f in handler.filters)

    def test_default_sdk_logger(self) -> None:
        """Sem logger_name configura o logger do pacote."""
        logger = configure_logging()
        try:
            assert logger.name == "whatsapp_cloud_api"
        finally:
            logger.handlers = []
            logger.setLevel(logging.NOTSET)

    def test_constants(self) -> None:
        """Constantes de nível e serviço."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "whatsapp_cloud_api"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("whatsapp_cloud_api.client")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "whatsapp_cloud_api.client"

    def test_same_name_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestSdkContextFilter:
    """Testes para SdkContextFilter."""

    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()
        assert SdkContextFilter("svc", lambda: "corr-42").filter(record) is True
        assert record.service == "svc"
        assert record.correlation_id == "corr-42"

    def test_default_correlation_id_is_empty(self) -> None:
        record = _record()
        SdkContextFilter("svc").filter(record)
        assert record.correlation_id == ""

    def test_keeps_explicit_correlation_id(self) -> None:
        record = _record(correlation_id="from-extra")
        SdkContextFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "from-extra"


class TestJsonFormatter:
    """Testes para create_json_formatter."""

    def test_output_is_json_with_renamed_fields(self) -> None:
        record = _record(status_code=200)
        SdkContextFilter("svc", lambda: "corr-1").filter(record)

        output = json.loads(create_json_formatter().format(record))

        assert output["level"] == "INFO"
        assert output["logger"] == "whatsapp_cloud_api.client"
        assert output["message"] == "whatsapp_message_sent"
        assert output["correlation_id"] == "corr-1"
        assert output["service"] == "svc"
        assert output["status_code"] == 200
        assert "levelname" not in output

    def test_field_constants(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}


class TestRedaction:
    """Testes de mascaramento de dados sensíveis."""

    @pytest.mark.parametrize(
        ("phone", "expected"),
        [
            ("5511988887777", "***7777"),
            ("+55 (11) 98888-7777", "***7777"),
            ("1234", "***"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_mask_phone_number(self, phone: str | None, expected: str) -> None:
        assert mask_phone_number(phone) == expected

    def test_mask_token(self) -> None:
        assert mask_token("EAAtest-token") == "<redacted>"
        assert mask_token("") == ""


class TestMetaLogging:
    """Logs de envio nunca carregam número completo."""

    def test_log_success(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="whatsapp_cloud_api.http.meta_logging")
        log_success("text", "5511988887777", 200)

        record = caplog.records[-1]
        assert record.getMessage() == "whatsapp_message_sent"
        assert record.to == "***7777"
        assert "5511988887777" not in caplog.text

    def test_log_error_response(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="whatsapp_cloud_api.http.meta_logging")
        meta_error = parse_meta_error(
            {"error": {"type": "OAuthException", "code": 190, "fbtrace_id": "trace"}}
        )
        log_error_response("image", "5511988887777", 401, meta_error)

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "whatsapp_error_response"
        assert record.error_code == 190
        assert record.is_permanent is True
        assert record.to == "***7777"
