from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SlackSettings(BaseSettings):
    """Slack 웹훅 알림 설정."""

    webhook_url: str = Field(default="", alias="SLACK_WEBHOOK_URL", repr=False)
    channel: str = Field(default="", alias="SLACK_CHANNEL")
    user: str = Field(default="", alias="SLACK_USER")
    label: str = Field(default="", alias="SLACK_LABEL", description="메시지 앞에 붙는 짧은 태그")
    payload_style: str = Field(
        default="blocks",
        alias="SLACK_PAYLOAD_STYLE",
        description="blocks = Block Kit 섹션, text = 단일 text 필드",
    )
    log_level: str = Field(default="INFO", alias="SLACK_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> SlackSettings:
    """설정을 캐싱해 로드한다."""
    return SlackSettings()
