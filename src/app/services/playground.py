"""
Playground Service: API 핸들러 (render / disasm / info).

흐름 (요청마다 한 번, 동기):
    validate → decompose → build_engine → render/disassemble → envelope

규칙:
- 항상 envelope 하나 반환 ({result} 또는 {error}), 예외를 밖으로 던지지 않음
- 엔진은 요청마다 새로 생성 (build_engine)
- 크기 초과 시 엔진을 호출하지 않음
"""

import logging
from collections.abc import Callable

from src.core.dispatch import RouteDispatcher
from src.core.envelope import Envelope, error_envelope, info_envelope, result_envelope
from src.core.fileset import decompose
from src.core.validation import validate_disasm_request, validate_render_request
from src.domain.constants import ROUTE_DISASM, ROUTE_INFO, ROUTE_RENDER
from src.domain.errors import PlaygroundError, ValidationError
from src.domain.schemas import PlaygroundConfig
from src.render.engine import PlaygroundEngine, build_engine, engine_version

logger = logging.getLogger(__name__)

EngineFactory = Callable[..., PlaygroundEngine]


class PlaygroundService:
    """
    플레이그라운드 API 컨트롤러.

    Usage:
        service = PlaygroundService(PlaygroundConfig())
        envelope = service.handle_render(b'{"source": "{{ 1 + 2 }}", "data": {}}')
        # {"result": "3"}
    """

    def __init__(
        self,
        config: PlaygroundConfig | None = None,
        engine_factory: EngineFactory = build_engine,
        version_provider: Callable[[], str] = engine_version,
    ):
        self.config = config or PlaygroundConfig()
        self.engine_factory = engine_factory
        self.version_provider = version_provider

    # =========================================================================
    # Handlers
    # =========================================================================

    def handle_render(self, body: bytes) -> Envelope:
        """POST /api/render."""
        try:
            request = validate_render_request(body, self.config.max_source_length)
            file_set = decompose(request.source)
            engine = self.engine_factory(file_set)
            return result_envelope(engine.render(file_set.main, request.data))
        except PlaygroundError as e:
            return self._error(e)
        except Exception as e:
            logger.error(f"Render failed unexpectedly: {e}", exc_info=True)
            return error_envelope(str(e) or type(e).__name__)

    def handle_disasm(self, body: bytes) -> Envelope:
        """POST /api/disasm."""
        try:
            request = validate_disasm_request(body, self.config.max_source_length)
            file_set = decompose(request.source)
            engine = self.engine_factory(file_set)
            lines = engine.disassemble(file_set.main, self.config.disasm_max_width)
            return result_envelope("\n".join(lines))
        except PlaygroundError as e:
            return self._error(e)
        except Exception as e:
            logger.error(f"Disassemble failed unexpectedly: {e}", exc_info=True)
            return error_envelope(str(e) or type(e).__name__)

    def handle_info(self, body: bytes = b"") -> Envelope:
        """GET /api/info. 본문은 사용하지 않음."""
        return info_envelope(self.version_provider())

    # =========================================================================
    # Routing
    # =========================================================================

    def build_dispatcher(self) -> RouteDispatcher:
        """이 서비스의 핸들러로 라우트 테이블 구성."""
        return RouteDispatcher(
            {
                "POST": {
                    ROUTE_RENDER: self.handle_render,
                    ROUTE_DISASM: self.handle_disasm,
                },
                "GET": {
                    ROUTE_INFO: self.handle_info,
                },
            },
            mount_prefix=self.config.mount_prefix,
        )

    @staticmethod
    def _error(e: PlaygroundError) -> Envelope:
        kind = "Rejected request" if isinstance(e, ValidationError) else "Template error"
        logger.info(f"{kind}: {e.to_dict()}")
        return error_envelope(e.user_message)
