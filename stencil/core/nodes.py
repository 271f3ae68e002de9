from __future__ import annotations

from collections import ChainMap
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol

from stencil.config.paths import MISSING, is_iterable_collection, is_truthy, lookup

Context = Mapping[str, Any]


class ExpressionNode(Protocol):
    type: ClassVar[str]

    def evaluate(self, context: Context) -> str: ...


@dataclass(frozen=True, slots=True)
class TextNode:
    type: ClassVar[str] = "text"

    text: str

    def evaluate(self, context: Context) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class VariableNode:
    type: ClassVar[str] = "variable"

    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", self.path.strip())

    def evaluate(self, context: Context) -> str:
        value = lookup(context, self.path)
        if value is MISSING or value is None:
            return ""
        return str(value)


@dataclass(frozen=True, slots=True)
class ConditionalNode:
    type: ClassVar[str] = "conditional"

    condition: str
    true_branch: ExpressionNode
    false_branch: ExpressionNode | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "condition", self.condition.strip())

    def evaluate(self, context: Context) -> str:
        if is_truthy(lookup(context, self.condition)):
            return self.true_branch.evaluate(context)
        if self.false_branch is not None:
            return self.false_branch.evaluate(context)
        return ""


@dataclass(frozen=True, slots=True)
class LoopNode:
    """Render ``body`` once per element, binding ``item_name`` in a layered context."""

    type: ClassVar[str] = "loop"

    item_name: str
    collection_path: str
    body: ExpressionNode

    def __post_init__(self) -> None:
        object.__setattr__(self, "item_name", self.item_name.strip())
        object.__setattr__(self, "collection_path", self.collection_path.strip())

    def evaluate(self, context: Context) -> str:
        items = lookup(context, self.collection_path)
        if not is_iterable_collection(items):
            return ""
        return "".join(
            self.body.evaluate(ChainMap({self.item_name: item}, context))
            for item in items
        )


@dataclass(slots=True)
class CompositeNode:
    type: ClassVar[str] = "composite"

    children: list[ExpressionNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.children = list(self.children)

    def add(self, node: ExpressionNode) -> None:
        self.children.append(node)

    def evaluate(self, context: Context) -> str:
        return "".join(child.evaluate(context) for child in self.children)
