"""
플레이그라운드 표준 라이브러리: filter / function / test 등록.

Jinja2 기본 제공 filter 외에 플레이그라운드 스니펫이 쓰는 것들:
- filters: raw, keys, escape/e (strategy 인자: html, url)
- functions: starts_with, ends_with, contains
- tests: matches, starting_with, ending_with

엔진마다 새로 등록 (요청 간 공유 금지).
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from jinja2 import Environment
from jinja2.exceptions import FilterArgumentError
from markupsafe import Markup, escape

# =============================================================================
# Filters
# =============================================================================

def raw_filter(value: Any) -> Markup:
    """자동 이스케이프 없이 그대로 출력."""
    return Markup(str(value))


def keys_filter(value: Any) -> list[Any]:
    """mapping → 키 목록, sequence → 인덱스 목록."""
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, Sequence) and not isinstance(value, str):
        return list(range(len(value)))
    return []


def escape_filter(value: Any, strategy: str = "html") -> Markup:
    """
    이스케이프 전략 선택.

    Args:
        value: 출력할 값
        strategy: "html" (기본) 또는 "url"
    """
    if strategy == "html":
        return escape(value)
    if strategy == "url":
        return Markup(quote(str(value), safe=""))
    raise FilterArgumentError(f"unknown escaping strategy: {strategy!r}")


FILTERS = {
    "raw": raw_filter,
    "keys": keys_filter,
    "escape": escape_filter,
    "e": escape_filter,
}


# =============================================================================
# Functions
# =============================================================================

def starts_with(value: Any, prefix: Any) -> bool:
    return str(value).startswith(str(prefix))


def ends_with(value: Any, suffix: Any) -> bool:
    return str(value).endswith(str(suffix))


def contains(haystack: Any, needle: Any) -> bool:
    if isinstance(haystack, str):
        return str(needle) in haystack
    try:
        return needle in haystack
    except TypeError:
        return False


FUNCTIONS = {
    "starts_with": starts_with,
    "ends_with": ends_with,
    "contains": contains,
}


# =============================================================================
# Tests
# =============================================================================

def matches_test(value: Any, pattern: str) -> bool:
    """정규식 매칭 ({{ "5293" is matches("\\\\d+") }})."""
    return re.search(pattern, str(value)) is not None


TESTS = {
    "matches": matches_test,
    "starting_with": starts_with,
    "ending_with": ends_with,
}


# =============================================================================
# Registration
# =============================================================================

def register_all_filters(env: Environment) -> None:
    env.filters.update(FILTERS)


def register_all_functions(env: Environment) -> None:
    env.globals.update(FUNCTIONS)


def register_all_tests(env: Environment) -> None:
    env.tests.update(TESTS)
