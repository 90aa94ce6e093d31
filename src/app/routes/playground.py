"""
Playground Routes: 모든 요청을 RouteDispatcher로 전달.

- /api/... (mount prefix /ktemplate 허용) → 디스패처 → JSON envelope
- 라우팅 에러 → 평문 응답 (HTTP 200) + stderr 로그
- /api 밖 경로 → index 페이지 또는 404
"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from src.client.snippets import SNIPPETS
from src.core.dispatch import Handled, PlainText, RouteDispatcher
from src.core.envelope import encode_envelope
from src.core.logging import log_request_error
from src.domain.constants import INDEX_ROUTE, JSON_CONTENT_TYPE
from src.domain.schemas import PlaygroundConfig

# Routers
router = APIRouter()  # catch-all (반드시 마지막에 include)

# 디스패처가 "unsupported request method"로 답하도록 모든 메서드를 받음
DISPATCH_METHODS = [
    "GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT",
]


# =============================================================================
# Page
# =============================================================================

def index_page(request: Request) -> HTMLResponse:
    """플레이그라운드 HTML 페이지."""
    config: PlaygroundConfig = request.app.state.config
    templates: Jinja2Templates = request.app.state.page_templates

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "client_config": {
                "prefix": config.mount_prefix,
                "maxSourceLength": config.max_source_length,
                "maxDataLength": config.max_data_length,
                "snippets": [snippet.to_dict() for snippet in SNIPPETS],
            },
        },
    )


# =============================================================================
# Dispatch
# =============================================================================

def request_uri(request: Request) -> str:
    """path + query string."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


@router.api_route(
    "/{full_path:path}",
    methods=DISPATCH_METHODS,
    include_in_schema=False,
)
async def dispatch_request(request: Request, full_path: str) -> Response:
    """
    요청 하나를 디스패처로 처리.

    엔진 호출은 동기 작업이므로 스레드풀에서 실행.
    """
    dispatcher: RouteDispatcher = request.app.state.dispatcher
    body = await request.body()

    outcome = await run_in_threadpool(
        dispatcher.dispatch, request.method, request_uri(request), body
    )

    if isinstance(outcome, Handled):
        return Response(
            content=encode_envelope(outcome.envelope),
            media_type=JSON_CONTENT_TYPE,
        )

    if isinstance(outcome, PlainText):
        log_request_error(outcome.text)
        return PlainTextResponse(outcome.text)

    # Passthrough: API 밖 경로
    if outcome.route == INDEX_ROUTE and request.method in ("GET", "HEAD"):
        return index_page(request)
    raise HTTPException(status_code=404, detail="Not Found")
