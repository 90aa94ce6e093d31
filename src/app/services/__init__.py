"""
App Services: API 핸들러 로직.

- playground: render / disasm / info 컨트롤러
"""

from .playground import PlaygroundService

__all__ = ["PlaygroundService"]
