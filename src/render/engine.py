"""
Engine Adapter: FileSet → 요청 전용 Jinja2 엔진.

규칙:
- 요청마다 새 SandboxedEnvironment (공유/풀링 금지, 캐시 없음)
- 로더는 FileSet 복사본 위의 DictLoader (읽기 전용)
- autoescape(HTML) + StrictUndefined (없는 키 → 렌더 시 에러)
- filter/function/test 라이브러리를 매번 등록
- 모든 엔진 에러는 CompilationError / RenderError로 변환
"""

import logging
import platform
from collections.abc import Mapping
from importlib.metadata import version
from typing import Any

from jinja2 import (
    DictLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)
from jinja2.sandbox import SandboxedEnvironment

from src.domain.constants import DEFAULT_DISASM_MAX_WIDTH
from src.domain.errors import CompilationError, ErrorCodes, RenderError
from src.domain.schemas import FileSet
from src.render.disasm import disassemble_code
from src.render.library import (
    register_all_filters,
    register_all_functions,
    register_all_tests,
)

logger = logging.getLogger(__name__)


class PlaygroundEngine:
    """
    요청 하나를 위한 템플릿 엔진.

    Usage:
        engine = build_engine(decompose(source))
        text = engine.render(engine.file_set.main, {"a": 1})
    """

    def __init__(self, file_set: FileSet):
        self.file_set = file_set
        self.env = SandboxedEnvironment(
            loader=DictLoader(file_set.to_dict()),
            autoescape=True,
            undefined=StrictUndefined,
            cache_size=0,
            auto_reload=False,
        )
        register_all_filters(self.env)
        register_all_functions(self.env)
        register_all_tests(self.env)
        logger.debug(f"Engine built for {list(file_set)}")

    def render(self, name: str, data: Any) -> str:
        """
        템플릿 렌더링.

        Args:
            name: main 템플릿 이름
            data: 템플릿 데이터 (JSON object 또는 array)

        Returns:
            렌더링 결과

        Raises:
            CompilationError: 문법 에러 (include된 파일 포함)
            RenderError: 그 외 런타임 에러
        """
        context = template_context(data)

        try:
            template = self.env.get_template(name)
            return template.render(context)
        except TemplateSyntaxError as e:
            raise self._compilation_error(e) from e
        except TemplateError as e:
            raise RenderError(self._describe(e), template=name) from e
        except Exception as e:
            raise RenderError(f"{type(e).__name__}: {e}", template=name) from e

    def disassemble(self, name: str, max_width: int = DEFAULT_DISASM_MAX_WIDTH) -> list[str]:
        """
        main 템플릿 컴파일 → 명령어 목록.

        Raises:
            CompilationError: 문법 에러
            RenderError: 템플릿 없음 등
        """
        try:
            source, filename, _ = self.env.loader.get_source(self.env, name)
            code = self.env.compile(source, name, filename)
        except TemplateSyntaxError as e:
            raise self._compilation_error(e) from e
        except TemplateError as e:
            raise RenderError(self._describe(e), template=name) from e

        return disassemble_code(code, max_width)

    def _compilation_error(self, e: TemplateSyntaxError) -> CompilationError:
        name = e.name or e.filename
        return CompilationError(
            e.message or str(e),
            template=name,
            lineno=e.lineno,
            source_line=self._source_line(name, e.lineno),
        )

    def _source_line(self, name: str | None, lineno: int | None) -> str | None:
        if name is None or lineno is None or name not in self.file_set:
            return None
        lines = self.file_set[name].splitlines()
        if 1 <= lineno <= len(lines):
            return lines[lineno - 1]
        return None

    @staticmethod
    def _describe(e: TemplateError) -> str:
        message = e.message or str(e)
        if isinstance(e, TemplateNotFound):
            return f"template not found: {message}"
        return message


def template_context(data: Any) -> Mapping[str, Any]:
    """
    JSON 데이터 → 템플릿 컨텍스트.

    - object: 그대로
    - array: 인덱스 문자열이 키 (["a", "b"] → {"0": "a", "1": "b"})

    Raises:
        RenderError: TEMPLATE_DATA_INVALID (그 외 스칼라)
    """
    if isinstance(data, Mapping):
        return data
    if isinstance(data, list):
        return {str(index): value for index, value in enumerate(data)}
    raise RenderError(
        f"template data must be a JSON object or array, got {type(data).__name__}",
        code=ErrorCodes.TEMPLATE_DATA_INVALID,
    )


def build_engine(file_set: FileSet) -> PlaygroundEngine:
    """FileSet 전용 엔진 생성 (요청마다 호출)."""
    return PlaygroundEngine(file_set)


def render_template(file_set: FileSet, data: Any) -> str:
    """main 템플릿 렌더링 (간편 함수)."""
    engine = build_engine(file_set)
    return engine.render(file_set.main, data)


def disassemble_template(
    file_set: FileSet,
    max_width: int = DEFAULT_DISASM_MAX_WIDTH,
) -> list[str]:
    """main 템플릿 디스어셈블 (간편 함수)."""
    engine = build_engine(file_set)
    return engine.disassemble(file_set.main, max_width)


def engine_version() -> str:
    """엔진/런타임 버전 문자열."""
    return f"jinja2 {version('Jinja2')} (python {platform.python_version()})"
