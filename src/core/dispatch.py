"""
Route Dispatcher: (method, path) → handler.

상태 없는 테이블 조회. 결과는 3가지 중 하나:
- Handled(envelope): API 핸들러가 처리 → JSON 응답
- PlainText(text): 라우팅 에러 → 평문 응답 (서버 로그/디버깅용)
- Passthrough(route): /api 밖의 경로 → 이 모듈의 관심사 아님 (정적 파일 등)

경로 정규화:
1. mount prefix (/ktemplate) 제거
2. path만 사용 (query string 버림)
3. "" 또는 "/" → "/index.html"
4. 그 외에는 끝 슬래시 하나 제거
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from urllib.parse import urlsplit

from src.core.envelope import Envelope
from src.domain.constants import (
    API_PREFIX,
    DEFAULT_MOUNT_PREFIX,
    INDEX_ROUTE,
    MSG_UNKNOWN_ROUTE,
    MSG_UNSUPPORTED_METHOD,
)

logger = logging.getLogger(__name__)

Handler = Callable[[bytes], Envelope]
RouteTable = Mapping[str, Mapping[str, Handler]]


# =============================================================================
# Outcomes
# =============================================================================

@dataclass(frozen=True)
class Handled:
    """API 핸들러가 만든 envelope."""
    envelope: Envelope


@dataclass(frozen=True)
class PlainText:
    """라우팅 에러 메시지 (JSON 아님)."""
    text: str


@dataclass(frozen=True)
class Passthrough:
    """API 밖의 경로. route는 정규화된 경로."""
    route: str


Outcome = Handled | PlainText | Passthrough


# =============================================================================
# Normalization
# =============================================================================

def normalize_route(uri: str, mount_prefix: str = DEFAULT_MOUNT_PREFIX) -> str:
    """
    요청 URI → 라우트 이름.

    Examples:
        >>> normalize_route("/ktemplate/api/render/?x=1")
        '/api/render'
        >>> normalize_route("/ktemplate/")
        '/index.html'
    """
    if mount_prefix and uri.startswith(mount_prefix):
        uri = uri[len(mount_prefix):]

    path = urlsplit(uri).path
    if path in ("", "/"):
        return INDEX_ROUTE
    if path.endswith("/"):
        path = path[:-1]
    return path


# =============================================================================
# Dispatcher
# =============================================================================

class RouteDispatcher:
    """
    라우트 테이블 디스패처.

    Usage:
        dispatcher = RouteDispatcher({"POST": {"/api/render": handle_render}})
        outcome = dispatcher.dispatch("POST", "/ktemplate/api/render", body)
    """

    def __init__(self, routes: RouteTable, mount_prefix: str = DEFAULT_MOUNT_PREFIX):
        self.routes = routes
        self.mount_prefix = mount_prefix

    def resolve(self, method: str, uri: str) -> Handler | PlainText | Passthrough:
        """핸들러 조회 (호출은 하지 않음)."""
        route = normalize_route(uri, self.mount_prefix)

        if not route.startswith(API_PREFIX):
            return Passthrough(route)

        method_routes = self.routes.get(method)
        if method_routes is None:
            return PlainText(MSG_UNSUPPORTED_METHOD.format(method=method))

        handler = method_routes.get(route)
        if handler is None:
            return PlainText(MSG_UNKNOWN_ROUTE)
        return handler

    def dispatch(self, method: str, uri: str, body: bytes = b"") -> Outcome:
        """
        요청 하나를 처리.

        Args:
            method: HTTP 메서드 (대문자)
            uri: 요청 URI (path + query)
            body: 요청 본문

        Returns:
            Handled | PlainText | Passthrough
        """
        resolved = self.resolve(method, uri)
        if isinstance(resolved, (PlainText, Passthrough)):
            return resolved

        logger.debug(f"{method} {uri} → {getattr(resolved, '__name__', resolved)!s}")
        return Handled(resolved(body))
