"""Slack 웹훅 페이로드 모델과 렌더링."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel

from slacklogger.options import PayloadStyle
from slacklogger.severity import Severity, severity_prefix


class BlockText(BaseModel):
    type: Literal["mrkdwn"] = "mrkdwn"
    text: str


class Block(BaseModel):
    type: Literal["section", "divider"]
    text: BlockText | None = None


class BlocksMessage(BaseModel):
    """Block Kit 섹션/구분선 목록 형태."""

    blocks: list[Block] | None = None


class TextMessage(BaseModel):
    """채널/사용자를 지정하는 단일 text 형태."""

    type: Literal["message"] = "message"
    channel: str
    user: str
    text: str


SlackPayload = Union[BlocksMessage, TextMessage]

DIVIDER = Block(type="divider")


def label_tag(label: str | None) -> str:
    """`*[label]* ` 형태의 라벨. 빈 라벨이면 빈 문자열."""
    if not label:
        return ""
    return f"*[{label}]* "


def error_text(error: BaseException | str | None) -> str:
    if error is None:
        return ""
    try:
        return str(error)
    except Exception:  # __str__ 자체가 깨진 예외 객체
        return type(error).__name__


def wrap_error(wrap: str, error: BaseException | str | None) -> str:
    """`wrap: error` 형태로 합친다. 한쪽이 비어 있으면 나머지만 사용."""
    detail = error_text(error)
    if wrap and detail:
        return f"{wrap}: {detail}"
    return wrap or detail


def clean_text(text: str) -> str:
    """UTF-8로 인코딩할 수 없는 문자(짝 없는 surrogate 등)를 `?`로 바꾼다."""
    return text.encode("utf-8", "replace").decode("utf-8")


def section(title: str, body: str) -> Block:
    return Block(type="section", text=BlockText(text=clean_text(f"*{title}*\n{body}\n\n")))


def render_blocks(
    label: str,
    severity: Severity | str,
    wrap: str,
    error: BaseException | str | None,
    attachment: str = "",
) -> BlocksMessage:
    prefix = severity_prefix(severity)
    blocks = [
        section("Location", label_tag(label)),
        DIVIDER,
        section("Severity", prefix),
        DIVIDER,
        section("Message", f"{prefix}{wrap or ''}"),
        DIVIDER,
        section("Data", error_text(error)),
    ]
    if attachment:
        blocks += [DIVIDER, section("Additional Data", attachment)]
    return BlocksMessage(blocks=blocks)


def render_text(
    label: str,
    severity: Severity | str,
    wrap: str,
    error: BaseException | str | None,
    attachment: str = "",
    *,
    channel: str = "",
    user: str = "",
) -> TextMessage:
    text = f"{label_tag(label)}{severity_prefix(severity)}{wrap_error(wrap or '', error)}"
    if attachment:
        text = f"{text}\n\n{attachment}"
    return TextMessage(
        channel=clean_text(channel or ""),
        user=clean_text(user or ""),
        text=clean_text(text),
    )


def render_message(
    style: PayloadStyle | str,
    *,
    label: str,
    severity: Severity | str,
    wrap: str,
    error: BaseException | str | None,
    attachment: str = "",
    channel: str = "",
    user: str = "",
) -> SlackPayload:
    """설정된 형태로 페이로드를 만든다. 어떤 입력에도 예외를 내지 않는다."""
    if style == PayloadStyle.TEXT:
        return render_text(
            label, severity, wrap, error, attachment, channel=channel, user=user
        )
    return render_blocks(label, severity, wrap, error, attachment)


def encode_payload(payload: SlackPayload) -> bytes:
    """페이로드를 JSON 바이트로 직렬화한다. 빈 필드(None)는 생략."""
    return payload.model_dump_json(exclude_none=True).encode("utf-8")
