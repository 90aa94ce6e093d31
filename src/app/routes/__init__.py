"""
FastAPI Routes.

페이지 + API 모두 playground 라우터의 디스패처가 처리
"""

from . import playground

__all__ = ["playground"]
