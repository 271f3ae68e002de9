from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .nodes import CompositeNode
from .parser import TemplateParser

logger = logging.getLogger("stencil")


def _freeze(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class Template:
    """A parsed template that can be rendered any number of times."""

    source: str
    root: CompositeNode

    def render(self, data: Mapping[str, Any] | None = None) -> str:
        return self.root.evaluate(_freeze(data))


class TemplateEngine:
    def __init__(self, parser: TemplateParser | None = None) -> None:
        self.parser = parser or TemplateParser()

    def compile(self, template: str) -> Template:
        return Template(source=template, root=self.parser.parse(template))

    def render(self, template: str, data: Mapping[str, Any] | None = None) -> str:
        return self.compile(template).render(data)

    def render_file(self, path: Path | str, data: Mapping[str, Any] | None = None) -> str:
        template_path = Path(path)
        if not template_path.is_file():
            raise FileNotFoundError(f"Template file does not exist: {template_path}")
        logger.debug("render_file: %s", template_path)
        return self.render(template_path.read_text(encoding="utf-8"), data)


def render(template: str, data: Mapping[str, Any] | None = None) -> str:
    return TemplateEngine().render(template, data)
