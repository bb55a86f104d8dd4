"""Slack 웹훅 알림기.

사용 예:
    logger = configure(SlackOptions(webhook=url, label="svc-a"))
    logger.set_error(exc).severity(Severity.CRITICAL).notify("writing checkpoint")
    if logger.response_error is not None:
        ...

전송 실패는 raise되지 않고 `response_error`에 보관된다. 한 인스턴스를 여러 스레드에서
동시에 쓰면 안 된다.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from slacklogger.errors import DeliveryError, DeliveryStage, ReportedMessage
from slacklogger.logging import SimpleLogger, get_logger
from slacklogger.messages import SlackPayload, encode_payload, render_message
from slacklogger.options import SlackOptions
from slacklogger.severity import Severity

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class SlackLogger:
    """에러/메시지를 Slack 웹훅으로 보내는 알림기."""

    def __init__(
        self,
        options: SlackOptions,
        *,
        client: httpx.Client | None = None,
        logger: SimpleLogger | None = None,
    ) -> None:
        self.webhook = options.webhook
        self.channel = options.channel
        self.user = options.user
        self.label = options.label
        self.style = options.style

        self._error: BaseException | None = None
        self._severity: Severity | str = Severity.NONE
        self._attachment = ""
        self._wrap = ""

        self.response_bytes = b""
        self.response_status = 0
        self.response_error: DeliveryError | None = None

        self._client = client
        self._owns_client = client is None
        # 호스트가 설정한 레벨/핸들러는 건드리지 않는다.
        self._logger = logger or get_logger("slacklogger", console_output=False, log_level=None)

    # ─────────────────────────────────────────────────────────────────
    # 상태 설정
    # ─────────────────────────────────────────────────────────────────

    @property
    def current_error(self) -> BaseException | None:
        return self._error

    @property
    def current_severity(self) -> Severity | str:
        return self._severity

    @property
    def attachment(self) -> str:
        return self._attachment

    def set_error(self, err: BaseException | None) -> SlackLogger:
        """보고할 에러를 지정한다. 심각도는 none으로 초기화된다."""
        self._error = err
        self._severity = Severity.NONE
        return self

    def set_message(self, message: str) -> SlackLogger:
        """문자열로 에러를 만들어 지정한다. 심각도는 none으로 초기화된다."""
        return self.set_error(ReportedMessage(message))

    def severity(self, level: Severity | str) -> SlackLogger:
        self._severity = level
        return self

    def set_attachment(self, attachment: str) -> None:
        """다음 전송 한 번에만 붙는 추가 텍스트."""
        self._attachment = attachment

    # ─────────────────────────────────────────────────────────────────
    # 전송
    # ─────────────────────────────────────────────────────────────────

    def notify(self, wrap_message: str) -> None:
        self._wrap = wrap_message
        self._send_notification()

    def notifyf(self, wrap_message: str, *params: Any) -> None:
        """`wrap_message % params`로 만든 문구와 함께 전송한다."""
        self._wrap = self._format_wrap(wrap_message, params)
        self._send_notification()

    def render(self) -> SlackPayload:
        """현재 상태로 페이로드를 만든다. 첨부는 여기서 소비된다."""
        payload = render_message(
            self.style,
            label=self.label,
            severity=self._severity,
            wrap=self._wrap,
            error=self._error,
            attachment=self._attachment,
            channel=self.channel,
            user=self.user,
        )
        self._attachment = ""
        return payload

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> SlackLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send_notification(self) -> None:
        self.response_bytes = b""
        self.response_status = 0
        self.response_error = None

        body = self._serialize(self.render())
        if body is None:
            return

        client = self._http()
        try:
            request = client.build_request("POST", self.webhook, content=body, headers=JSON_HEADERS)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            self._fail("request", exc)
            return

        try:
            response = client.send(request, stream=True)
        except httpx.RequestError as exc:
            self._fail("transport", exc)
            return

        try:
            self.response_status = response.status_code
            try:
                content = response.read()
            except (httpx.RequestError, httpx.StreamError) as exc:
                self._fail("read", exc)
                return
        finally:
            response.close()

        self.response_bytes = content
        self._logger.log_delivery(self._webhook_host(), self.response_status, len(content))

    def _serialize(self, payload: SlackPayload) -> bytes | None:
        # 직렬화 실패는 로그만 남기고 response_error에는 기록하지 않는다.
        try:
            return encode_payload(payload)
        except (TypeError, ValueError) as exc:
            self._logger.error(
                "SERIALIZE_FAULT",
                webhook=self._webhook_host() or "N/A",
                error_type=type(exc).__name__,
                error_message=exc,
            )
            return None

    def _fail(self, stage: DeliveryStage, exc: Exception) -> None:
        error = DeliveryError(stage, f"slack webhook {stage} failed: {exc}")
        error.__cause__ = exc
        self.response_error = error
        self._logger.log_delivery_fault(stage, self._webhook_host(), exc)

    def _format_wrap(self, template: str, params: tuple[Any, ...]) -> str:
        if not params:
            return template
        args: Any = params[0] if len(params) == 1 and isinstance(params[0], Mapping) else params
        try:
            return template % args
        except (TypeError, ValueError, KeyError) as exc:
            self._logger.warning("WRAP_FORMAT_FAULT", template=template, error_message=exc)
            return template

    def _http(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(follow_redirects=True)
            self._owns_client = True
        return self._client

    def _webhook_host(self) -> str:
        try:
            return httpx.URL(self.webhook).host
        except (httpx.InvalidURL, TypeError):
            return ""


def configure(
    options: SlackOptions,
    *,
    client: httpx.Client | None = None,
    logger: SimpleLogger | None = None,
) -> SlackLogger:
    """옵션으로 알림기를 만든다. 값 검증은 하지 않는다."""
    return SlackLogger(options, client=client, logger=logger)


__all__ = ["JSON_HEADERS", "SlackLogger", "configure"]
