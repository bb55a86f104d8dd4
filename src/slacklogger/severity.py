"""알림 심각도와 표시 접두어."""

from __future__ import annotations

from enum import StrEnum


class Severity(StrEnum):
    NONE = "none"
    NOTIFICATION = "notification"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


_PREFIXES: dict[str, str] = {
    Severity.NOTIFICATION: "👉  ",
    Severity.INFO: "ℹ️  ",
    Severity.WARNING: "⚠️  ",
    Severity.ERROR: "🔴  ",
    Severity.CRITICAL: "❌  ",
}


def severity_prefix(level: Severity | str | None) -> str:
    """심각도에 해당하는 접두어(이모지 + 공백 2칸)를 반환한다.

    none 또는 알 수 없는 값은 빈 문자열.
    """
    if not isinstance(level, str):
        return ""
    return _PREFIXES.get(level, "")
