"""
Playground Client: 브라우저 UI와 같은 규칙으로 API 호출.

규칙:
- single flight: 요청 중에는 render/disasm 컨트롤 비활성화
  → 완료(성공/실패/전송 에러) 후에만 다시 활성화
- 서버 왕복 전에 로컬 검사 (서버가 최종 판단):
  - source 비어 있음 → 빈 결과 (요청 안 함)
  - source >= 2048자 → "template source is too big"
  - data > 512자 → "template data is too big"
  - data JSON 파싱 실패 → 파서 메시지
- envelope: error 우선, 그 다음 result, 둘 다 없으면 "unexpected response"
"""

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any

import httpx

from src.domain.constants import (
    DEFAULT_MAX_DATA_LENGTH,
    DEFAULT_MAX_SOURCE_LENGTH,
    DEFAULT_MOUNT_PREFIX,
    MSG_DATA_TOO_BIG,
    MSG_SOURCE_TOO_BIG,
    MSG_UNEXPECTED_RESPONSE,
    ROUTE_DISASM,
    ROUTE_INFO,
    ROUTE_RENDER,
)

logger = logging.getLogger(__name__)

MSG_REQUEST_IN_FLIGHT = "another request is in flight"
ERROR_DISPLAY_PREFIX = "error!\n"


@dataclass(frozen=True)
class ClientResult:
    """결과 영역에 표시할 내용."""
    ok: bool
    text: str
    sent: bool = False  # 서버에 요청을 보냈는지

    @property
    def display(self) -> str:
        """결과 영역 텍스트. 에러는 "error!" 줄로 시작."""
        return self.text if self.ok else ERROR_DISPLAY_PREFIX + self.text

    @classmethod
    def success(cls, text: str, sent: bool = False) -> "ClientResult":
        return cls(ok=True, text=text, sent=sent)

    @classmethod
    def failure(cls, message: str, sent: bool = False) -> "ClientResult":
        return cls(ok=False, text=message, sent=sent)


def read_envelope(envelope: Any) -> ClientResult:
    """서버 envelope → ClientResult."""
    if isinstance(envelope, dict):
        if "error" in envelope:
            return ClientResult.failure(str(envelope["error"]), sent=True)
        if "result" in envelope:
            return ClientResult.success(str(envelope["result"]), sent=True)
    return ClientResult.failure(MSG_UNEXPECTED_RESPONSE, sent=True)


class PlaygroundClient:
    """
    플레이그라운드 API 클라이언트.

    Usage:
        with PlaygroundClient("http://127.0.0.1:8000") as client:
            result = client.render("{{ 1 + 2 }}", "{}")
            print(result.display)  # 3
    """

    def __init__(
        self,
        base_url: str = "",
        prefix: str = DEFAULT_MOUNT_PREFIX,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
        max_source_length: int = DEFAULT_MAX_SOURCE_LENGTH,
        max_data_length: int = DEFAULT_MAX_DATA_LENGTH,
    ):
        """
        Args:
            base_url: 서버 주소 (http 인자를 주면 무시)
            prefix: API 앞에 붙는 mount prefix
            http: 미리 만든 httpx.Client (테스트용 TestClient 포함)
            timeout: 요청 타임아웃(초)
            max_source_length: source 로컬 제한 (미만만 허용)
            max_data_length: data 로컬 제한 (이하만 허용)
        """
        self.prefix = prefix.rstrip("/")
        self.max_source_length = max_source_length
        self.max_data_length = max_data_length
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)
        self._in_flight = threading.Lock()

    # =========================================================================
    # Controls
    # =========================================================================

    @property
    def controls_enabled(self) -> bool:
        """render/disasm 버튼 활성화 여부 (요청 중이면 False)."""
        return not self._in_flight.locked()

    # =========================================================================
    # Actions
    # =========================================================================

    def render(self, source: str, data: str = "{}") -> ClientResult:
        """
        템플릿 렌더링.

        Args:
            source: 템플릿 소스 (멀티 파일 형식 가능)
            data: JSON 텍스트
        """
        if not source:
            return ClientResult.success("")
        if len(source) >= self.max_source_length:
            return ClientResult.failure(MSG_SOURCE_TOO_BIG)
        if len(data) > self.max_data_length:
            return ClientResult.failure(MSG_DATA_TOO_BIG)

        try:
            decoded = json.loads(data)
        except ValueError as e:
            return ClientResult.failure(str(e))

        return self._post(ROUTE_RENDER, {"source": source, "data": decoded})

    def disassemble(self, source: str) -> ClientResult:
        """템플릿 디스어셈블."""
        if not source:
            return ClientResult.success("")
        if len(source) >= self.max_source_length:
            return ClientResult.failure(MSG_SOURCE_TOO_BIG)

        return self._post(ROUTE_DISASM, {"source": source})

    def info(self) -> str:
        """
        엔진 버전 조회.

        Raises:
            httpx.HTTPError: 전송 실패
            ValueError: 응답에 버전 필드가 없음
        """
        response = self._http.get(self.prefix + ROUTE_INFO)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict) or "kphp_version" not in payload:
            raise ValueError(MSG_UNEXPECTED_RESPONSE)
        return str(payload["kphp_version"])

    # =========================================================================
    # Transport
    # =========================================================================

    def _post(self, route: str, payload: dict[str, Any]) -> ClientResult:
        if not self._in_flight.acquire(blocking=False):
            return ClientResult.failure(MSG_REQUEST_IN_FLIGHT)

        try:
            response = self._http.post(
                self.prefix + route,
                json=payload,
                headers={"Accept": "application/json"},
            )
            return read_envelope(response.json())
        except httpx.HTTPError as e:
            logger.warning(f"Request to {route} failed: {e}")
            return ClientResult.failure(str(e) or type(e).__name__, sent=True)
        except ValueError:
            # JSON이 아닌 응답 (라우팅 에러 평문 등)
            return ClientResult.failure(MSG_UNEXPECTED_RESPONSE, sent=True)
        finally:
            self._in_flight.release()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "PlaygroundClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
