"""Slack 웹훅으로 메시지 한 건을 보내는 CLI.

예:
    slacklogger send "disk full" --wrap "writing checkpoint" --severity critical
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

import typer

from slacklogger.logging import get_logger
from slacklogger.notifier import configure
from slacklogger.options import PayloadStyle, SlackOptions
from slacklogger.settings import get_settings
from slacklogger.severity import Severity

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Slack 웹훅 알림 도구."""


@app.command()
def send(
    message: str = typer.Argument(..., help="보고할 에러/메시지"),
    wrap: str = typer.Option("", help="호출 위치나 작업을 설명하는 문구"),
    severity: Severity = typer.Option(Severity.NONE, case_sensitive=False, help="심각도"),
    attachment: str = typer.Option("", help="추가 데이터(한 번만 첨부)"),
    style: Optional[PayloadStyle] = typer.Option(None, case_sensitive=False, help="페이로드 형태 (기본: 설정값)"),
    webhook: Optional[str] = typer.Option(None, help="웹훅 URL (기본: SLACK_WEBHOOK_URL)"),
) -> None:
    settings = get_settings()
    options = SlackOptions.from_settings(settings)
    if webhook:
        options = replace(options, webhook=webhook)
    if style is not None:
        options = replace(options, style=style)
    if not options.webhook:
        raise typer.BadParameter("webhook URL is not configured (SLACK_WEBHOOK_URL or --webhook)")

    logger = get_logger("slacklogger", log_level=settings.log_level)
    with configure(options, logger=logger) as notifier:
        notifier.set_message(message).severity(severity)
        if attachment:
            notifier.set_attachment(attachment)
        notifier.notify(wrap)

        if notifier.response_error is not None:
            typer.echo(f"error: {notifier.response_error}", err=True)
            raise typer.Exit(code=1)

        typer.echo(f"status: {notifier.response_status}")
        typer.echo(notifier.response_bytes.decode("utf-8", errors="replace"))
        # 상태 코드 판정은 호스트(CLI) 쪽 책임이다.
        if not 200 <= notifier.response_status < 300:
            raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
