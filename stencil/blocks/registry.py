from __future__ import annotations

from .base import BlockHandler


class BlockRegistry:
    def __init__(self) -> None:
        self._handlers: dict[str, BlockHandler] = {}

    def register(self, name: str, handler: BlockHandler) -> None:
        key = name.strip()
        if not key:
            raise ValueError("Block keyword cannot be empty")
        self._handlers[key] = handler

    def get(self, name: str) -> BlockHandler:
        if name not in self._handlers:
            raise KeyError(f"Unknown block keyword: {name}")
        return self._handlers[name]

    def names(self) -> list[str]:
        return sorted(self._handlers.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._handlers


registry = BlockRegistry()


def register_block(name: str, *, target: BlockRegistry | None = None):
    def wrapper(func: BlockHandler) -> BlockHandler:
        (target or registry).register(name, func)
        return func

    return wrapper
