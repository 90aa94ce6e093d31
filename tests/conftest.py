"""
Pytest fixtures for the playground tests.

구성:
- 설정 fixture (default.yaml, PlaygroundConfig)
- 앱/TestClient fixture
- live_server: 실제 uvicorn 서버 (브라우저 테스트용, 빈 포트 사용)
"""

import socket
import threading
import time
from collections.abc import Generator
from pathlib import Path

import pytest
import uvicorn
import yaml
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.main import create_app
from src.domain.schemas import PlaygroundConfig

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def test_config() -> PlaygroundConfig:
    """테스트용 설정 (기본값과 동일한 제한)."""
    return PlaygroundConfig(
        mount_prefix="/ktemplate",
        max_source_length=2048,
        max_data_length=512,
        disasm_max_width=24,
        log_level="DEBUG",
    )


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(test_config: PlaygroundConfig) -> FastAPI:
    """테스트 설정으로 만든 앱."""
    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient."""
    with TestClient(app) as client:
        yield client


# =============================================================================
# Browser Test Fixtures
# =============================================================================

def _free_port(host: str) -> int:
    """OS가 비어 있는 포트를 고르게 함."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((host, 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """
    플레이그라운드 앱을 백그라운드 스레드의 uvicorn으로 띄움.

    Returns:
        서버 URL (예: "http://127.0.0.1:54321")
    """
    host = "127.0.0.1"
    port = _free_port(host)
    server = uvicorn.Server(
        uvicorn.Config(create_app(), host=host, port=port, log_level="warning")
    )

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # startup 완료 대기 (최대 5초)
    deadline = time.monotonic() + 5.0
    while not server.started:
        if not thread.is_alive() or time.monotonic() > deadline:
            raise RuntimeError(f"Playground server did not start on {host}:{port}")
        time.sleep(0.05)

    yield f"http://{host}:{port}"

    server.should_exit = True
    thread.join(timeout=5.0)
