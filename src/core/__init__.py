"""
Core layer: 요청/응답 프로토콜 핵심 모듈.

역할:
- 멀티 파일 분해 (fileset)
- 요청 검증 (validation)
- 라우팅 (dispatch), envelope 인코딩 (envelope)
- 요청 에러 로그 (logging)
"""

from .dispatch import Handled, Passthrough, PlainText, RouteDispatcher, normalize_route
from .envelope import encode_envelope, error_envelope, info_envelope, result_envelope
from .fileset import compose, decompose
from .logging import configure_logging, log_request_error
from .validation import validate_disasm_request, validate_render_request

__all__ = [
    # fileset
    "decompose",
    "compose",
    # validation
    "validate_render_request",
    "validate_disasm_request",
    # dispatch
    "RouteDispatcher",
    "normalize_route",
    "Handled",
    "PlainText",
    "Passthrough",
    # envelope
    "result_envelope",
    "error_envelope",
    "info_envelope",
    "encode_envelope",
    # logging
    "configure_logging",
    "log_request_error",
]
