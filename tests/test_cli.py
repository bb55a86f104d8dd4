import json
from collections.abc import Iterator

import httpx
import pytest
import respx
from httpx import Response
from typer.testing import CliRunner

from slacklogger.cli import app
from slacklogger.settings import get_settings

WEBHOOK = "https://example.test/hook"

runner = CliRunner()


@pytest.fixture(autouse=True)
def slack_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("SLACK_WEBHOOK_URL", WEBHOOK)
    monkeypatch.setenv("SLACK_LABEL", "svc-a")
    monkeypatch.setenv("SLACK_PAYLOAD_STYLE", "blocks")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@respx.mock
def test_send_success() -> None:
    route = respx.post(WEBHOOK).mock(return_value=Response(200, content=b'{"ok":true}'))

    result = runner.invoke(
        app,
        ["send", "disk full", "--wrap", "writing checkpoint", "--severity", "critical", "--attachment", "rows=10"],
    )

    assert result.exit_code == 0
    assert "status: 200" in result.stdout
    assert '{"ok":true}' in result.stdout
    texts = [block["text"]["text"] for block in json.loads(route.calls.last.request.content)["blocks"] if "text" in block]
    assert "*Message*\n❌  writing checkpoint\n\n" in texts
    assert texts[-1] == "*Additional Data*\nrows=10\n\n"


@respx.mock
def test_send_text_style_with_webhook_override() -> None:
    other = "https://example.test/other"
    route = respx.post(other).mock(return_value=Response(200, content=b"ok"))

    result = runner.invoke(app, ["send", "disk full", "--style", "text", "--webhook", other])

    assert result.exit_code == 0
    assert json.loads(route.calls.last.request.content)["text"] == "*[svc-a]* disk full"


@respx.mock
def test_send_non_2xx_exits_with_error() -> None:
    respx.post(WEBHOOK).mock(return_value=Response(404, content=b"no_service"))

    result = runner.invoke(app, ["send", "x"])

    assert result.exit_code == 1
    assert "status: 404" in result.stdout


@respx.mock
def test_send_transport_failure_exits_with_error() -> None:
    respx.post(WEBHOOK).mock(side_effect=httpx.ConnectError)

    result = runner.invoke(app, ["send", "x"])

    assert result.exit_code == 1


def test_send_requires_webhook(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "")
    get_settings.cache_clear()

    result = runner.invoke(app, ["send", "x"])

    assert result.exit_code != 0
