import pytest

from slacklogger.options import PayloadStyle, SlackOptions
from slacklogger.settings import SlackSettings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SLACK_WEBHOOK_URL",
        "SLACK_CHANNEL",
        "SLACK_USER",
        "SLACK_LABEL",
        "SLACK_PAYLOAD_STYLE",
        "SLACK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = SlackSettings()

    assert settings.webhook_url == ""
    assert settings.payload_style == "blocks"
    assert settings.log_level == "INFO"


def test_settings_override_via_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://example.test/hook")
    monkeypatch.setenv("SLACK_CHANNEL", "C1")
    monkeypatch.setenv("SLACK_USER", "U1")
    monkeypatch.setenv("SLACK_LABEL", "svc-a")
    monkeypatch.setenv("SLACK_PAYLOAD_STYLE", "TEXT")

    options = SlackOptions.from_settings(SlackSettings())

    assert options == SlackOptions(
        webhook="https://example.test/hook",
        channel="C1",
        user="U1",
        label="svc-a",
        style=PayloadStyle.TEXT,
    )


def test_unknown_payload_style_falls_back_to_blocks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_PAYLOAD_STYLE", "attachments")

    options = SlackOptions.from_settings(SlackSettings())

    assert options.style == PayloadStyle.BLOCKS


def test_options_are_frozen() -> None:
    options = SlackOptions(webhook="https://example.test/hook")

    with pytest.raises(AttributeError):
        options.webhook = "other"  # type: ignore[misc]


def test_get_settings_cached() -> None:
    first = get_settings()
    second = get_settings()
    assert first is second
