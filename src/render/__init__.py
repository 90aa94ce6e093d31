"""
Render layer: 템플릿 엔진 어댑터.

역할:
- FileSet + 데이터 → 렌더링 결과
- FileSet → 디스어셈블 목록
- Jinja2 (SandboxedEnvironment)
"""

from .engine import (
    PlaygroundEngine,
    build_engine,
    disassemble_template,
    engine_version,
    render_template,
)

__all__ = [
    "PlaygroundEngine",
    "build_engine",
    "render_template",
    "disassemble_template",
    "engine_version",
]
