from __future__ import annotations

from pathlib import Path

import pytest

from stencil.core.engine import TemplateEngine
from stencil.core.parser import TemplateParser

MALFORMED_TEMPLATES = [
    "Hello {{ name",
    "{% if admin %}Admin",
    "{% for item in items %}{{ item }}",
    "{% if admin %}Admin{% endif %}{% endif %}",
    "{% if admin %}{% for item in items %}{{ item }{% endfor %}{% endif %}",
]


@pytest.fixture
def parser() -> TemplateParser:
    return TemplateParser()


@pytest.fixture
def engine() -> TemplateEngine:
    return TemplateEngine()


@pytest.fixture
def user_data() -> dict:
    return {
        "name": "Ada",
        "admin": True,
        "items": ["one", "two"],
        "user": {"name": "Ada Lovelace", "roles": ["author", "admin"], "profile": {"city": "London"}},
    }


@pytest.fixture
def write_file(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
