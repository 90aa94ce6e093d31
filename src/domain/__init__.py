"""Domain layer: errors, constants and schemas."""

from .errors import CompilationError, PlaygroundError, RenderError, ValidationError
from .schemas import (
    DisasmRequest,
    FileSet,
    PlaygroundConfig,
    RenderRequest,
)

__all__ = [
    "PlaygroundError",
    "ValidationError",
    "CompilationError",
    "RenderError",
    "FileSet",
    "RenderRequest",
    "DisasmRequest",
    "PlaygroundConfig",
]
