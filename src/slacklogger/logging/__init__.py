"""콘솔 로깅 모듈."""

from slacklogger.logging.console_logger import SimpleLogger, get_logger, resolve_level

__all__ = ["SimpleLogger", "get_logger", "resolve_level"]
