from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

MISSING: Any = object()


def _step(current: Any, part: str) -> Any:
    if isinstance(current, Mapping):
        if part in current:
            return current[part]
        return MISSING
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        if part.isdecimal() and int(part) < len(current):
            return current[int(part)]
    return MISSING


def lookup(context: Mapping[str, Any], dotted: str, default: Any = MISSING) -> Any:
    """Resolve ``dotted`` through nested mappings, returning ``default`` on any miss."""
    current: Any = context
    for part in dotted.strip().split("."):
        current = _step(current, part.strip())
        if current is MISSING:
            return default
    return current


def get_dotted(mapping: Mapping[str, Any], dotted: str) -> Any:
    value = lookup(mapping, dotted)
    if value is MISSING:
        raise KeyError(dotted)
    return value


def set_dotted(mapping: dict[str, Any], dotted: str, value: Any) -> None:
    parts = dotted.split(".")
    current: dict[str, Any] = mapping
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value


def is_truthy(value: Any) -> bool:
    if value is MISSING:
        return False
    return bool(value)


def is_iterable_collection(value: Any) -> bool:
    if value is MISSING or isinstance(value, (str, bytes, Mapping)):
        return False
    return isinstance(value, Iterable)
