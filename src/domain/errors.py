"""
Error definitions for the playground.

규칙:
- 애플리케이션 에러는 HTTP status를 바꾸지 않음 → 항상 {error: ...} envelope
- 사용자에게 보여줄 메시지는 message 하나로 충분해야 함 (stack trace 금지)
"""

from typing import Any


class PlaygroundError(Exception):
    """
    플레이그라운드 요청 처리 중 발생하는 에러.

    Usage:
        raise ValidationError(ErrorCodes.SOURCE_TOO_BIG, "template source is too big")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    @property
    def user_message(self) -> str:
        """error envelope에 그대로 들어가는 메시지."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ValidationError(PlaygroundError):
    """요청 본문 검증 실패 (JSON 파싱, 크기 제한)."""


class CompilationError(PlaygroundError):
    """
    템플릿 lex/parse/compile 실패.

    full_message: "<file>:<line>: <reason>" + 문제 라인 (여러 줄일 수 있음)
    """

    def __init__(
        self,
        message: str,
        template: str | None = None,
        lineno: int | None = None,
        source_line: str | None = None,
    ) -> None:
        self.template = template
        self.lineno = lineno
        self.source_line = source_line
        super().__init__(
            ErrorCodes.COMPILATION_FAILED,
            message,
            template=template,
            lineno=lineno,
        )

    @property
    def full_message(self) -> str:
        location = self.template or "<unknown>"
        if self.lineno is not None:
            location = f"{location}:{self.lineno}"
        text = f"{location}: {self.message}"
        if self.source_line and self.source_line.strip():
            text += f"\n    {self.source_line.strip()}"
        return text

    @property
    def user_message(self) -> str:
        return self.full_message


class RenderError(PlaygroundError):
    """렌더링/디스어셈블 중 런타임 에러 (undefined, include 누락, sandbox 위반 등)."""

    def __init__(self, message: str, code: str | None = None, **context: Any) -> None:
        super().__init__(code or ErrorCodes.RENDER_FAILED, message, **context)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Request ===
    MALFORMED_JSON = "MALFORMED_JSON"
    SOURCE_TOO_BIG = "SOURCE_TOO_BIG"

    # === Engine ===
    COMPILATION_FAILED = "COMPILATION_FAILED"
    RENDER_FAILED = "RENDER_FAILED"
    TEMPLATE_DATA_INVALID = "TEMPLATE_DATA_INVALID"
