#!/usr/bin/env python
"""
플레이그라운드 서버 연결 확인 스크립트.

실행:
    python scripts/check_playground.py
    python scripts/check_playground.py http://127.0.0.1:8000

서버가 떠 있어야 함 (python -m src.app.main).
"""

import json
import sys
from pathlib import Path

import httpx

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.client import PlaygroundClient  # noqa: E402
from src.client.snippets import SNIPPETS  # noqa: E402

DEFAULT_BASE_URL = "http://127.0.0.1:8000"


def check_info(client: PlaygroundClient) -> bool:
    """GET /api/info 확인."""
    print("\n" + "=" * 60)
    print("🧪 엔진 버전 확인")
    print("=" * 60)

    try:
        version = client.info()
    except (httpx.HTTPError, ValueError) as e:
        print(f"❌ info 요청 실패: {type(e).__name__}: {e}")
        return False

    print(f"✅ 엔진: {version}")
    return True


def check_snippets(client: PlaygroundClient) -> bool:
    """모든 예제 스니펫을 render + disasm."""
    print("\n" + "=" * 60)
    print("🧪 예제 스니펫 렌더링")
    print("=" * 60)

    ok = True
    for snippet in SNIPPETS:
        rendered = client.render(snippet.src, snippet.data)
        disassembled = client.disassemble(snippet.src)

        if rendered.ok and disassembled.ok:
            lines = len(disassembled.text.splitlines())
            print(f"✅ {snippet.name}: {len(rendered.text)}자 출력, disasm {lines}줄")
        else:
            ok = False
            failed = rendered if not rendered.ok else disassembled
            print(f"❌ {snippet.name}: {failed.text}")

    return ok


def check_errors(client: PlaygroundClient) -> bool:
    """에러 envelope 확인."""
    print("\n" + "=" * 60)
    print("🧪 에러 응답 확인")
    print("=" * 60)

    result = client.render("{{ }}", json.dumps({}))
    if result.ok:
        print("❌ 컴파일 에러가 보고되지 않음")
        return False

    print("📥 컴파일 에러:")
    print(result.display)
    print("✅ 에러 envelope 정상")
    return True


def main() -> int:
    base_url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL
    print(f"🔌 대상 서버: {base_url}")

    with PlaygroundClient(base_url) as client:
        results = {
            "info": check_info(client),
            "snippets": check_snippets(client),
            "errors": check_errors(client),
        }

    print("\n" + "=" * 60)
    print("📊 결과 요약")
    print("=" * 60)
    for name, passed in results.items():
        status = "✅ 성공" if passed else "❌ 실패"
        print(f"  {name}: {status}")

    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
