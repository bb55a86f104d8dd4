"""slacklogger 예외 타입."""

from __future__ import annotations

from typing import Literal

DeliveryStage = Literal["request", "transport", "read"]


class SlackLoggerError(Exception):
    """slacklogger 기본 예외."""


class DeliveryError(SlackLoggerError):
    """웹훅 전송 실패.

    `notify`에서 raise되지 않고 `SlackLogger.response_error`에 보관된다.
    원본 httpx 예외는 `__cause__`로 연결된다.

    Attributes:
        stage: 실패 단계 ("request" = 요청 생성, "transport" = 송신, "read" = 응답 본문 읽기)
    """

    def __init__(self, stage: DeliveryStage, message: str) -> None:
        super().__init__(message)
        self.stage = stage


class ReportedMessage(SlackLoggerError):
    """`set_message`로 전달된 문자열을 감싸는 에러."""
