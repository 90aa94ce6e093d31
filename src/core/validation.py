"""
Request Validator: JSON 본문 → RenderRequest / DisasmRequest.

규칙 (순서대로, 첫 실패에서 중단):
1. 본문은 JSON이어야 함 → 실패 시 파서 메시지 그대로
2. source 크기(UTF-8 바이트) < max_source_length (같으면 거절)
3. render만: data 없으면 {} (형태 검증 없음, 엔진이 렌더 시 처리)
4. 예상 못한 형태는 관대하게 처리 (크래시 금지):
   - 본문이 object가 아니면 빈 object로 취급
   - source 누락/null → ""
   - source가 문자열이 아니면 JSON 텍스트로 변환
"""

import json
from typing import Any

from src.domain.constants import DEFAULT_MAX_SOURCE_LENGTH, MSG_SOURCE_TOO_BIG
from src.domain.errors import ErrorCodes, ValidationError
from src.domain.schemas import DisasmRequest, RenderRequest


def decode_body(body: bytes) -> dict[str, Any]:
    """
    요청 본문 JSON 디코딩.

    Raises:
        ValidationError: MALFORMED_JSON
    """
    try:
        decoded = json.loads(body)
    except (ValueError, RecursionError) as e:
        # json.JSONDecodeError, UnicodeDecodeError 모두 ValueError
        raise ValidationError(ErrorCodes.MALFORMED_JSON, str(e)) from e

    if not isinstance(decoded, dict):
        return {}
    return decoded


def coerce_source(value: Any) -> str:
    """source 필드를 문자열로 변환."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def source_size(source: str) -> int:
    """source 크기 (UTF-8 바이트). 짝 없는 surrogate도 크래시 없이 셈."""
    return len(source.encode("utf-8", "surrogatepass"))


def check_source_size(source: str, max_source_length: int) -> None:
    """
    Raises:
        ValidationError: SOURCE_TOO_BIG
    """
    size = source_size(source)
    if size >= max_source_length:
        raise ValidationError(
            ErrorCodes.SOURCE_TOO_BIG,
            MSG_SOURCE_TOO_BIG,
            size=size,
            limit=max_source_length,
        )


def validate_render_request(
    body: bytes,
    max_source_length: int = DEFAULT_MAX_SOURCE_LENGTH,
) -> RenderRequest:
    """
    POST /api/render 본문 검증.

    Args:
        body: HTTP 요청 본문 (raw bytes)
        max_source_length: source 최대 바이트 수 (미만만 허용)

    Returns:
        RenderRequest

    Raises:
        ValidationError: MALFORMED_JSON, SOURCE_TOO_BIG
    """
    payload = decode_body(body)
    source = coerce_source(payload.get("source"))
    check_source_size(source, max_source_length)

    data = payload.get("data")
    if data is None:
        data = {}

    return RenderRequest(source=source, data=data)


def validate_disasm_request(
    body: bytes,
    max_source_length: int = DEFAULT_MAX_SOURCE_LENGTH,
) -> DisasmRequest:
    """
    POST /api/disasm 본문 검증. data 필드는 무시.

    Raises:
        ValidationError: MALFORMED_JSON, SOURCE_TOO_BIG
    """
    payload = decode_body(body)
    source = coerce_source(payload.get("source"))
    check_source_size(source, max_source_length)

    return DisasmRequest(source=source)
