import logging

import httpx
import pytest
import respx

from slacklogger.logging import get_logger, resolve_level
from slacklogger.notifier import configure
from slacklogger.options import SlackOptions


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_extra_context_is_appended(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("slacklogger.test", console_output=False)

    with caplog.at_level(logging.INFO, logger="slacklogger.test"):
        logger.info("DELIVERED", status=200, webhook="example.test")

    assert "DELIVERED | status=200 | webhook=example.test" in caplog.text


@respx.mock
def test_delivery_fault_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    respx.post("https://example.test/hook").mock(side_effect=httpx.ConnectError)
    notifier = configure(SlackOptions(webhook="https://example.test/hook"))

    with caplog.at_level(logging.ERROR, logger="slacklogger"):
        notifier.set_message("x").notify("y")

    assert "DELIVERY_FAULT" in caplog.text
    assert "stage=transport" in caplog.text
    assert "webhook=example.test" in caplog.text
