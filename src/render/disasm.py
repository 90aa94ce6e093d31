"""
Disassembler: 컴파일된 템플릿 → 명령어 목록.

Jinja2는 템플릿을 Python 코드로 컴파일하므로 생성된 렌더 함수
(root, block_*)의 바이트코드를 dis로 나열한다.

출력 형식:
    root:
          0 RESUME                   0
          2 LOAD_CONST               '3'
"""

import dis
from collections.abc import Iterator
from types import CodeType

from src.domain.constants import DEFAULT_DISASM_MAX_WIDTH

RENDER_FUNCTION_NAMES = ("root",)
BLOCK_FUNCTION_PREFIX = "block_"
CLIP_SUFFIX = "..."


def is_render_function(code: CodeType) -> bool:
    return code.co_name in RENDER_FUNCTION_NAMES or code.co_name.startswith(
        BLOCK_FUNCTION_PREFIX
    )


def iter_render_functions(code: CodeType) -> Iterator[CodeType]:
    """모듈 코드 객체에서 렌더 함수들을 선언 순서대로."""
    for const in code.co_consts:
        if not isinstance(const, CodeType):
            continue
        if is_render_function(const):
            yield const
        else:
            yield from iter_render_functions(const)


def clip(text: str, max_width: int) -> str:
    if len(text) <= max_width:
        return text
    if max_width <= len(CLIP_SUFFIX):
        return text[:max_width]
    return text[:max_width - len(CLIP_SUFFIX)] + CLIP_SUFFIX


def format_instruction(instr: dis.Instruction, max_width: int) -> str:
    """명령어 한 줄. opname 컬럼 폭 = max_width, 인자 텍스트는 max_width로 자름."""
    arg = clip(instr.argrepr, max_width)
    return f"{instr.offset:>6} {instr.opname:<{max_width}} {arg}".rstrip()


def disassemble_code(code: CodeType, max_width: int = DEFAULT_DISASM_MAX_WIDTH) -> list[str]:
    """
    컴파일된 템플릿 모듈 → 명령어 목록.

    Args:
        code: Environment.compile() 결과
        max_width: 명령어 컬럼 폭

    Returns:
        함수 헤더 라인 + 명령어 라인 목록
    """
    lines: list[str] = []
    for function in iter_render_functions(code):
        lines.append(f"{function.co_name}:")
        lines.extend(
            format_instruction(instr, max_width)
            for instr in dis.get_instructions(function)
        )
    return lines
