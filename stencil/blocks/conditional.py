from __future__ import annotations

from stencil.core.nodes import ConditionalNode
from stencil.core.runtime import ParsedBlock

from .registry import register_block


@register_block("if")
def parse_conditional(parser, tag, template: str) -> ParsedBlock | None:
    if not tag.args:
        return None

    span = parser.extract_block(template, tag.end, "if", track_else=True)
    if span is None:
        return None

    true_branch = parser.parse(template[span.body_start : span.body_end])
    false_branch = None
    if span.has_else:
        false_branch = parser.parse(template[span.else_start : span.else_end])

    return ParsedBlock(node=ConditionalNode(tag.args, true_branch, false_branch), end=span.end)
