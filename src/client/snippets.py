"""
예제 스니펫 카탈로그.

플레이그라운드 페이지의 선택 목록을 채우는 고정 데이터.
프로세스 수명 동안 변경 불가.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Snippet:
    """카탈로그 항목. data는 JSON 텍스트."""
    name: str
    src: str
    data: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


WELCOME = Snippet(
    name="Welcome",
    src="""\
{#
    Welcome to the template playground!
    You can edit and explore templates here.
#}

Here are some example expressions for you:
{{ a.b.c }}
{{ a|length }}
{{ "Hello, " ~ "World" }}
{{ "5293" is matches("^\\\\d+$") }}

Note that a.b.c comes from the template data.

You can declare and modify template-local variables:
{% set v = 5.1 %}
{{ v * 2 }}
{% set v = v / 2 %}
{{ v }}""",
    data='{"a": {"b": {"c": 10}}}',
)

MULTI_FILE = Snippet(
    name="Multi file",
    src="""\
--- main.template
{# It's possible to use multi-file templates #}
{# Use --- followed by a file name #}
{% set name = "example" %}
{% include "ui/button.template" %}

--- ui/button.template
{% set label_text = label | default("") %}
{% if label_text %}
<label>
    {{ label_text }}:
    <input id="ui-{{ name }}" type="button" value="{{ name }}">
</label>
{% else %}
    <input id="ui-{{ name }}" type="button" value="{{ name }}">
{% endif %}""",
    data="{}",
)

FOR_LOOP = Snippet(
    name="For loop",
    src="""\
Loop over values:
{% for item in page['items'] %}
    {{ item.name }}
{% endfor %}

Loop with the index:
{% for item in page['items'] %}
    {{ loop.index0 ~ ": " ~ item.name }}
{% endfor %}""",
    data='{"page": {"items": [{"name": "Bidon Pomoev"}, {"name": "Rulon Oboev"}]}}',
)

ESCAPE_RAW = Snippet(
    name="Escape/raw",
    src="""\
{% set html = '<i>boom</i>' %}

This sandbox uses auto-escaping for HTML:
{{ html }}

It's possible to output the value "as is":
{{ html|raw }}

You can apply the escaping manually:
{{ html|escape }}
Escape filter is aliased to "e" for convenience.

It's also possible to choose the escaping strategy:
{{ "Status: OK"|e("url") }}""",
    data="{}",
)

BLOCKS = Snippet(
    name="Blocks",
    src="""\
--- child.template
{% extends "base.template" %}
{% block title %}My super title{% endblock %}
{% block content %}
    This is our custom content.
    Try removing this block to see the default content.
{% endblock %}

--- base.template
<h1>{% block title %}Default Title{% endblock %}</h1>
Page content is:
{% block content %}
    This is some default content.
    (The title is "{{ self.title() }}")
{% endblock %}""",
    data="{}",
)

BUILTINS = Snippet(
    name="Builtins",
    src="""\
{% set s = '432' %}
{% if starts_with(s, '4') %}
    Capitalized={{ 'alex'|capitalize }}
{% endif %}
{{ languages|first|first }}
{{ languages|first }}
{{ languages|last }}
{{ languages|keys|first }}""",
    data='{"languages": ["Python", "Jinja"]}',
)

WHITESPACE = Snippet(
    name="Whitespace control",
    src="""\
With "-" tag modifier you can control the whitespaces

Every loop iteration produces exactly 1-line output:

{% for name, v in prices|dictsort -%}
    {{ name }}: {{ v -}}
    {% if v > 100000 %} (WOW! That's a lot!){% endif %}
{% endfor %}""",
    data='{"prices": {"laptop": 65020, "apple": 50, "compiler": 248184271}}',
)

SNIPPETS: tuple[Snippet, ...] = (
    WELCOME,
    MULTI_FILE,
    FOR_LOOP,
    ESCAPE_RAW,
    BLOCKS,
    BUILTINS,
    WHITESPACE,
)


def snippet_names() -> list[str]:
    return [snippet.name for snippet in SNIPPETS]


def get_snippet(name: str) -> Snippet:
    """
    이름으로 스니펫 조회.

    Raises:
        KeyError: 없는 이름
    """
    for snippet in SNIPPETS:
        if snippet.name == name:
            return snippet
    raise KeyError(name)
