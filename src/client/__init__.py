"""
Client layer: 플레이그라운드 API 클라이언트 + 예제 스니펫.
"""

from .playground import ClientResult, PlaygroundClient, read_envelope
from .snippets import SNIPPETS, Snippet, get_snippet, snippet_names

__all__ = [
    "PlaygroundClient",
    "ClientResult",
    "read_envelope",
    "Snippet",
    "SNIPPETS",
    "get_snippet",
    "snippet_names",
]
