"""알림기 생성용 불변 옵션."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slacklogger.settings import SlackSettings


class PayloadStyle(StrEnum):
    BLOCKS = "blocks"
    TEXT = "text"


@dataclass(frozen=True)
class SlackOptions:
    """웹훅 대상/채널/사용자/라벨.

    값 검증은 하지 않는다. 빈 webhook도 허용되며 전송 시점에 실패로 기록된다.
    """

    webhook: str = ""
    channel: str = ""
    user: str = ""
    label: str = ""
    style: PayloadStyle = PayloadStyle.BLOCKS

    @classmethod
    def from_settings(cls, settings: SlackSettings) -> SlackOptions:
        try:
            style = PayloadStyle(settings.payload_style.strip().lower())
        except ValueError:
            style = PayloadStyle.BLOCKS
        return cls(
            webhook=settings.webhook_url,
            channel=settings.channel,
            user=settings.user,
            label=settings.label,
            style=style,
        )
