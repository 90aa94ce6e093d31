"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uvicorn src.app.main:app --reload
- 직접 실행: python -m src.app.main (default.yaml의 server 섹션 사용)
- 설정 파일 지정: PLAYGROUND_CONFIG=/path/to/config.yaml
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

# Routes
from src.app.routes import playground
from src.app.services.playground import PlaygroundService
from src.core.logging import configure_logging
from src.domain.schemas import PlaygroundConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PLAYGROUND_CONFIG"

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드."""
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        # 프로젝트 루트의 default.yaml
        config_path = (
            Path(env_path) if env_path
            else Path(__file__).parent.parent.parent / "default.yaml"
        )

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 로그 설정
    종료 시: 정리할 리소스 없음 (요청 간 공유 상태 없음)
    """
    config: PlaygroundConfig = app.state.config
    configure_logging(config.log_level)
    logger.info(f"Playground ready (mount prefix: {config.mount_prefix or '-'})")

    yield


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: PlaygroundConfig | None = None) -> FastAPI:
    """
    애플리케이션 생성.

    Args:
        config: None이면 default.yaml (또는 PLAYGROUND_CONFIG)에서 로드
    """
    if config is None:
        config = PlaygroundConfig.from_dict(load_config())

    app = FastAPI(
        title="Template Playground",
        description="템플릿 소스 + JSON 데이터 → 렌더링 / 디스어셈블",
        version="0.1.0",
        lifespan=lifespan,
    )

    service = PlaygroundService(config)
    app.state.config = config
    app.state.service = service
    app.state.dispatcher = service.build_dispatcher()

    # Static files (CSS, JS)
    static_dir = Path(__file__).parent / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    # Jinja2 templates (페이지용, 플레이그라운드 엔진과 별개)
    app.state.page_templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    # catch-all 디스패처는 마지막
    app.include_router(playground.router)

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server = load_config().get("server") or {}
    uvicorn.run(
        "src.app.main:app",
        host=str(server.get("host", "127.0.0.1")),
        port=int(server.get("port", 8000)),
        reload=bool(server.get("reload", False)),
    )
