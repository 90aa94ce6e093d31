"""
Response Encoder: 두 가지 형태의 JSON envelope.

- 성공: {"result": "<text>"}
- 실패: {"error": "<message>"}
- 예외: GET /api/info 는 {"kphp_version": "<version>"}

둘 다 있거나 둘 다 없는 envelope은 만들지 않음.
"""

import json

from src.domain.constants import JSON_CONTENT_TYPE

RESULT_KEY = "result"
ERROR_KEY = "error"
# 기존 플레이그라운드 클라이언트와 호환되는 필드명
INFO_VERSION_KEY = "kphp_version"

ENVELOPE_KEYS = frozenset({RESULT_KEY, ERROR_KEY, INFO_VERSION_KEY})

Envelope = dict[str, str]

__all__ = [
    "Envelope",
    "JSON_CONTENT_TYPE",
    "result_envelope",
    "error_envelope",
    "info_envelope",
    "check_envelope",
    "encode_envelope",
]


def result_envelope(result: str) -> Envelope:
    return {RESULT_KEY: result}


def error_envelope(message: str) -> Envelope:
    return {ERROR_KEY: message}


def info_envelope(version: str) -> Envelope:
    return {INFO_VERSION_KEY: version}


def check_envelope(envelope: Envelope) -> None:
    """
    envelope 형태 검증.

    Raises:
        ValueError: 키가 정확히 1개가 아니거나, 허용되지 않은 키, 문자열이 아닌 값
    """
    if len(envelope) != 1:
        raise ValueError(f"envelope must have exactly one key, got {sorted(envelope)}")

    (key, value), = envelope.items()
    if key not in ENVELOPE_KEYS:
        raise ValueError(f"unexpected envelope key: {key!r}")
    if not isinstance(value, str):
        raise ValueError(f"envelope value must be a string, got {type(value).__name__}")


def encode_envelope(envelope: Envelope) -> bytes:
    """envelope → UTF-8 JSON bytes."""
    check_envelope(envelope)
    return json.dumps(envelope, ensure_ascii=False).encode("utf-8")
