from __future__ import annotations

from dataclasses import dataclass

from .nodes import ExpressionNode


@dataclass(frozen=True, slots=True)
class Tag:
    """A single ``{% ... %}`` tag located in a template."""

    keyword: str
    args: str
    start: int
    end: int
    raw: str


@dataclass(frozen=True, slots=True)
class BlockSpan:
    body_start: int
    body_end: int
    end: int
    else_start: int | None = None
    else_end: int | None = None

    @property
    def has_else(self) -> bool:
        return self.else_start is not None


@dataclass(frozen=True, slots=True)
class ParsedBlock:
    node: ExpressionNode
    end: int
