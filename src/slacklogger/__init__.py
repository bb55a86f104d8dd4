"""Slack 웹훅 에러 알림."""

from slacklogger.errors import DeliveryError, ReportedMessage, SlackLoggerError
from slacklogger.messages import BlocksMessage, TextMessage, encode_payload, render_message
from slacklogger.notifier import SlackLogger, configure
from slacklogger.options import PayloadStyle, SlackOptions
from slacklogger.severity import Severity, severity_prefix

__all__ = [
    "BlocksMessage",
    "DeliveryError",
    "PayloadStyle",
    "ReportedMessage",
    "Severity",
    "SlackLogger",
    "SlackLoggerError",
    "SlackOptions",
    "TextMessage",
    "configure",
    "encode_payload",
    "render_message",
    "severity_prefix",
]
