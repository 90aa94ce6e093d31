"""
Request logging: stderr 로그 설정 + 라우팅 에러 기록.

형식: "HH:MM:SS: request error: <message>"
"""

import logging
import sys

REQUEST_LOG_FORMAT = "%(asctime)s: %(message)s"
REQUEST_LOG_DATEFMT = "%H:%M:%S"

_HANDLER_NAME = "playground-stderr"

logger = logging.getLogger("src.request")


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    src.* 로거에 stderr 핸들러 설정.

    여러 번 호출해도 핸들러는 하나만 유지 (레벨만 갱신).

    Args:
        level: 로그 레벨 (이름 또는 숫자)

    Returns:
        설정된 "src" 로거
    """
    root = logging.getLogger("src")
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return root

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(REQUEST_LOG_FORMAT, datefmt=REQUEST_LOG_DATEFMT))
    root.addHandler(handler)
    return root


def log_request_error(message: str) -> None:
    """라우팅 에러 등 JSON으로 응답하지 않는 요청 에러 기록."""
    if message:
        logger.warning(f"request error: {message}")
