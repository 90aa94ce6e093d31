"""
E2E 테스트용 Playwright 설정.

설정 항목:
- 뷰포트: 1280x720
- 실패 시 디버깅 정보 저장:
  - 스크린샷 (.png)
  - HTML 덤프 (.html)
  - 콘솔 로그 (.log)

브라우저 테스트는 선택적:
- pip install -e ".[browser]" && playwright install chromium
- E2E_BROWSER=1 pytest tests/e2e/test_browser.py
"""

from datetime import datetime
from pathlib import Path

import pytest

# =============================================================================
# 상수
# =============================================================================

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"


# =============================================================================
# Playwright 기본 설정 (pytest-playwright fixture 확장)
# =============================================================================

@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict) -> dict:
    """브라우저 컨텍스트 설정."""
    return {
        **browser_context_args,
        "viewport": {"width": 1280, "height": 720},
    }


@pytest.fixture
def console_logs(page) -> list[str]:
    """페이지 콘솔 로그 수집."""
    logs: list[str] = []
    page.on("console", lambda msg: logs.append(f"[{msg.type}] {msg.text}"))
    page.on("pageerror", lambda err: logs.append(f"[PAGE_ERROR] {err}"))
    return logs


# =============================================================================
# 실패 시 디버깅 정보 저장
# =============================================================================

def _generate_artifact_name(item_name: str) -> str:
    """고유한 artifact 파일명 생성 (테스트명 + 타임스탬프)."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    # 테스트 파라미터 제거 (예: test_foo[chromium] -> test_foo)
    clean_name = item_name.split("[")[0]
    return f"{clean_name}_{timestamp}"


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """테스트 실패 시 디버깅 정보 저장."""
    outcome = yield
    rep = outcome.get_result()

    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page")
    if page is None:
        return

    ARTIFACTS_DIR.mkdir(exist_ok=True)
    base_name = _generate_artifact_name(item.name)

    screenshot_path = ARTIFACTS_DIR / f"{base_name}.png"
    page.screenshot(path=str(screenshot_path), full_page=True)
    print(f"\n📸 Screenshot: {screenshot_path}")

    html_path = ARTIFACTS_DIR / f"{base_name}.html"
    html_path.write_text(page.content(), encoding="utf-8")
    print(f"📄 HTML dump: {html_path}")

    logs = item.funcargs.get("console_logs")
    if logs:
        log_path = ARTIFACTS_DIR / f"{base_name}.log"
        log_path.write_text("\n".join(logs), encoding="utf-8")
        print(f"📋 Console log: {log_path}")
