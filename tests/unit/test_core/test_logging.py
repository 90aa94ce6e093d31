"""
test_logging.py - 요청 로그 설정 테스트
"""

import logging

import pytest

from src.core.logging import REQUEST_LOG_FORMAT, configure_logging, log_request_error


@pytest.fixture
def clean_src_logger():
    """테스트 후 src 로거 핸들러 원복."""
    root = logging.getLogger("src")
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """configure_logging 함수 테스트."""

    def test_sets_level(self, clean_src_logger):
        configure_logging("WARNING")

        assert clean_src_logger.level == logging.WARNING

    def test_adds_single_stderr_handler(self, clean_src_logger):
        """여러 번 호출해도 핸들러 하나."""
        configure_logging("INFO")
        configure_logging("DEBUG")

        named = [h for h in clean_src_logger.handlers if h.get_name() == "playground-stderr"]
        assert len(named) == 1
        assert named[0].formatter._fmt == REQUEST_LOG_FORMAT
        assert clean_src_logger.level == logging.DEBUG


class TestLogRequestError:
    """log_request_error 함수 테스트."""

    def test_logs_with_prefix(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.request"):
            log_request_error("unknown route")

        assert "request error: unknown route" in caplog.text

    def test_empty_message_is_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.request"):
            log_request_error("")

        assert caplog.records == []
