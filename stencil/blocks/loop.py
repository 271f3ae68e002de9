from __future__ import annotations

import re

from stencil.core.nodes import LoopNode
from stencil.core.runtime import ParsedBlock

from .registry import register_block

_LOOP_ARGS = re.compile(r"^([A-Za-z_]\w*)\s+in\s+(\S+)$")


@register_block("for")
def parse_loop(parser, tag, template: str) -> ParsedBlock | None:
    match = _LOOP_ARGS.match(tag.args)
    if match is None:
        return None

    span = parser.extract_block(template, tag.end, "for")
    if span is None:
        return None

    item_name, collection_path = match.groups()
    body = parser.parse(template[span.body_start : span.body_end])
    return ParsedBlock(node=LoopNode(item_name, collection_path, body), end=span.end)
