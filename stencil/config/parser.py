from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _strip_jsonc(text: str) -> str:
    """Remove // and /* */ comments, leaving string literals intact."""
    out: list[str] = []
    i = 0
    quote = ""
    escaped = False
    comment = ""

    while i < len(text):
        ch = text[i]
        pair = text[i : i + 2]

        if comment == "line":
            if ch == "\n":
                comment = ""
                out.append(ch)
            i += 1
            continue

        if comment == "block":
            if pair == "*/":
                comment = ""
                i += 2
            else:
                i += 1
            continue

        if quote:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = ""
            i += 1
            continue

        if ch == '"':
            quote = ch
        elif pair == "//":
            comment = "line"
            i += 2
            continue
        elif pair == "/*":
            comment = "block"
            i += 2
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def _strip_trailing_commas(text: str) -> str:
    """Drop a comma that is followed only by whitespace and ] or }."""
    out: list[str] = []
    in_string = False
    escaped = False

    for i, ch in enumerate(text):
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < len(text) and text[j] in " \t\r\n":
                j += 1
            if j < len(text) and text[j] in "]}":
                continue

        out.append(ch)

    return "".join(out)


def loads_json_or_jsonc(raw: str) -> dict[str, Any]:
    cleaned = _strip_trailing_commas(_strip_jsonc(raw))
    data = json.loads(cleaned)
    if not isinstance(data, dict):
        raise ValueError("Top-level context must be an object")
    return data


def load_json_or_jsonc(context_path: Path) -> dict[str, Any]:
    return loads_json_or_jsonc(context_path.read_text(encoding="utf-8"))
