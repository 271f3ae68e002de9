from .parser import load_json_or_jsonc, loads_json_or_jsonc
from .paths import MISSING, get_dotted, is_iterable_collection, is_truthy, lookup, set_dotted

__all__ = [
    "MISSING",
    "get_dotted",
    "is_iterable_collection",
    "is_truthy",
    "load_json_or_jsonc",
    "loads_json_or_jsonc",
    "lookup",
    "set_dotted",
]
