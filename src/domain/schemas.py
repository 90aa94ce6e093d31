"""
Data schemas for the playground.

규칙:
- 모든 요청 단위 객체는 요청마다 새로 생성, 응답 후 폐기
- 요청 간 공유 상태 없음 (캐시 금지)
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.constants import (
    DEFAULT_DISASM_MAX_WIDTH,
    DEFAULT_MAX_DATA_LENGTH,
    DEFAULT_MAX_SOURCE_LENGTH,
    DEFAULT_MOUNT_PREFIX,
)

# =============================================================================
# File Set
# =============================================================================

class FileSet(Mapping[str, str]):
    """
    파일명 → 템플릿 소스의 순서 있는 매핑.

    - 첫 번째 항목이 main 템플릿
    - 같은 이름이 반복되면 마지막 내용이 이김 (위치는 처음 등장한 자리)
    """

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        if files:
            for name, source in files.items():
                self.add(name, source)

    def add(self, name: str, source: str) -> None:
        self._files[name] = source

    @property
    def main(self) -> str:
        """main(entry) 템플릿 이름."""
        if not self._files:
            raise LookupError("file set is empty")
        return next(iter(self._files))

    def to_dict(self) -> dict[str, str]:
        """로더에 넘길 복사본."""
        return dict(self._files)

    def __getitem__(self, name: str) -> str:
        return self._files[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"FileSet({list(self._files)!r})"


# =============================================================================
# Requests
# =============================================================================

@dataclass
class RenderRequest:
    """POST /api/render 본문."""
    source: str
    data: Any = field(default_factory=dict)


@dataclass
class DisasmRequest:
    """POST /api/disasm 본문."""
    source: str


# =============================================================================
# Config
# =============================================================================

@dataclass
class PlaygroundConfig:
    """default.yaml의 playground/logging 섹션."""
    mount_prefix: str = DEFAULT_MOUNT_PREFIX
    max_source_length: int = DEFAULT_MAX_SOURCE_LENGTH
    max_data_length: int = DEFAULT_MAX_DATA_LENGTH
    disasm_max_width: int = DEFAULT_DISASM_MAX_WIDTH
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "PlaygroundConfig":
        """YAML dict → PlaygroundConfig. 누락된 키는 기본값."""
        data = data or {}
        section = data.get("playground") or {}
        logging_section = data.get("logging") or {}

        mount_prefix = str(section.get("mount_prefix", DEFAULT_MOUNT_PREFIX) or "")
        # 끝 슬래시는 prefix에 포함하지 않음 ("/ktemplate/" → "/ktemplate")
        mount_prefix = mount_prefix.rstrip("/")

        return cls(
            mount_prefix=mount_prefix,
            max_source_length=int(section.get("max_source_length", DEFAULT_MAX_SOURCE_LENGTH)),
            max_data_length=int(section.get("max_data_length", DEFAULT_MAX_DATA_LENGTH)),
            disasm_max_width=int(section.get("disasm_max_width", DEFAULT_DISASM_MAX_WIDTH)),
            log_level=str(logging_section.get("level", "INFO")).upper(),
        )
