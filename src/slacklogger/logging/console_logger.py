"""간단한 콘솔 로거."""

import logging
import sys
from typing import Any


def resolve_level(level: int | str) -> int:
    """숫자/문자열 로그 레벨을 정수 레벨로 변환한다."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


class SimpleLogger:
    """간단한 콘솔 로거.

    키워드 인자로 넘긴 컨텍스트는 `key=value` 형태로 메시지 뒤에 붙는다.
    """

    def __init__(
        self,
        name: str = "slacklogger",
        console_output: bool = True,
        log_level: int | str | None = logging.INFO,
    ) -> None:
        """로거 초기화.

        Args:
            name: 로거 이름
            console_output: 콘솔 출력 여부
            log_level: 로그 레벨 (None이면 기존 stdlib 로거 설정을 그대로 둔다)
        """
        self.name = name
        self.console_output = console_output
        self.logger = logging.getLogger(name)
        if log_level is None:
            self.log_level = self.logger.getEffectiveLevel()
        else:
            self.log_level = resolve_level(log_level)
            self.logger.setLevel(self.log_level)

        if console_output and not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(self.log_level)
            handler.setFormatter(
                logging.Formatter(
                    "[%(asctime)s] %(levelname)s | %(name)s | %(message)s",
                    datefmt="%Y-%m-%dT%H:%M:%S",
                )
            )
            self.logger.addHandler(handler)

    def info(self, message: str, **extra: Any) -> None:
        """INFO 레벨 로그."""
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, **extra: Any) -> None:
        """WARNING 레벨 로그."""
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, exc_info: bool = False, **extra: Any) -> None:
        """ERROR 레벨 로그."""
        self._log(logging.ERROR, message, extra, exc_info=exc_info)

    def debug(self, message: str, **extra: Any) -> None:
        """DEBUG 레벨 로그."""
        self._log(logging.DEBUG, message, extra)

    def _log(
        self,
        level: int,
        message: str,
        extra: dict[str, Any],
        exc_info: bool = False,
    ) -> None:
        if extra:
            extra_str = " | ".join(f"{k}={v}" for k, v in extra.items())
            message = f"{message} | {extra_str}"
        self.logger.log(level, message, exc_info=exc_info)

    # ─────────────────────────────────────────────────────────────────
    # 전송 이벤트 메서드
    # ─────────────────────────────────────────────────────────────────

    def log_delivery(self, webhook_host: str, status: int, size: int, **extra: Any) -> None:
        """전송 완료 로그 (DEBUG). 상태 코드 판정은 하지 않는다."""
        self.debug("DELIVERED", webhook=webhook_host, status=status, bytes=size, **extra)

    def log_delivery_fault(self, stage: str, webhook_host: str, error: BaseException, **extra: Any) -> None:
        """전송 실패 로그 (ERROR)."""
        self.error(
            "DELIVERY_FAULT",
            stage=stage,
            webhook=webhook_host or "N/A",
            error_type=type(error).__name__,
            error_message=error,
            **extra,
        )


def get_logger(name: str = "slacklogger", **kwargs: Any) -> SimpleLogger:
    """로거 인스턴스 반환.

    Args:
        name: 로거 이름
        **kwargs: SimpleLogger 생성 인자
    """
    return SimpleLogger(name=name, **kwargs)
