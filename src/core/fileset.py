"""
File-Set Decomposer: 제출된 텍스트 → 이름 붙은 멀티 파일 템플릿 세트.

형식:
    --- main.template
    {% include "ui/button.template" %}
    --- ui/button.template
    <input type="button">

규칙:
- 구분자 라인은 정확히 "--- <name>\\n" (라인 시작에 고정)
- name 패턴: [\\w/]+\\.\\w+
- 구분자가 하나도 없으면 전체가 main.template 하나
- 첫 구분자 앞의 텍스트는 버림 (이름이 없으므로 파일이 아님)
- 연속된 구분자 → 빈 문자열 파일 (허용)
- 선언 순서 유지: 첫 번째 이름이 main 템플릿
"""

import re
from collections.abc import Iterator, Mapping

from src.domain.constants import DEFAULT_TEMPLATE_NAME, FILE_DELIMITER_PREFIX
from src.domain.schemas import FileSet

FILE_NAME_PATTERN = re.compile(r"[\w/]+\.\w+", re.ASCII)


def _iter_lines(raw: str) -> Iterator[str]:
    """'\\n' 기준으로 라인 분리 (개행 문자 유지)."""
    start = 0
    while start < len(raw):
        end = raw.find("\n", start)
        if end == -1:
            yield raw[start:]
            return
        yield raw[start:end + 1]
        start = end + 1


def parse_delimiter(line: str) -> str | None:
    """
    구분자 라인이면 파일 이름, 아니면 None.

    Args:
        line: 개행 문자를 포함한 한 줄

    Returns:
        파일 이름 또는 None
    """
    if not line.startswith(FILE_DELIMITER_PREFIX) or not line.endswith("\n"):
        return None

    name = line[len(FILE_DELIMITER_PREFIX):-1]
    if FILE_NAME_PATTERN.fullmatch(name):
        return name
    return None


def decompose(raw: str) -> FileSet:
    """
    원본 텍스트를 FileSet으로 분해.

    Args:
        raw: 사용자가 제출한 source 필드

    Returns:
        FileSet (항상 1개 이상의 항목)
    """
    file_set = FileSet()
    current: str | None = None
    body: list[str] = []

    for line in _iter_lines(raw):
        name = parse_delimiter(line)
        if name is not None:
            if current is not None:
                file_set.add(current, "".join(body))
            current = name
            body = []
        elif current is not None:
            body.append(line)

    if current is None:
        # 구분자 없음 → 단일 파일
        return FileSet({DEFAULT_TEMPLATE_NAME: raw})

    file_set.add(current, "".join(body))
    return file_set


def compose(files: Mapping[str, str]) -> str:
    """
    FileSet → 구분자 텍스트 (decompose의 역).

    중간 파일의 본문이 개행으로 끝나지 않으면 다음 구분자와 합쳐지므로
    decompose(compose(x)) == x 는 그런 경우에만 성립.
    """
    return "".join(
        f"{FILE_DELIMITER_PREFIX}{name}\n{source}" for name, source in files.items()
    )
