from __future__ import annotations

import copy
import logging

from stencil.blocks import load_builtin_blocks
from stencil.blocks.registry import BlockRegistry, registry as default_registry

from .nodes import CompositeNode, TextNode, VariableNode
from .runtime import BlockSpan, ParsedBlock, Tag

logger = logging.getLogger("stencil")

VARIABLE_OPEN, VARIABLE_CLOSE = "{{", "}}"
TAG_OPEN, TAG_CLOSE = "{%", "%}"
MAX_DEPTH = 64


def read_tag(template: str, start: int) -> Tag | None:
    """Read the ``{% ... %}`` tag opening at ``start``, or None when it is never closed."""
    close = template.find(TAG_CLOSE, start + len(TAG_OPEN))
    if close == -1:
        return None
    end = close + len(TAG_CLOSE)
    parts = template[start + len(TAG_OPEN) : close].strip().split(None, 1)
    keyword = parts[0] if parts else ""
    args = parts[1].strip() if len(parts) > 1 else ""
    return Tag(keyword=keyword, args=args, start=start, end=end, raw=template[start:end])


def next_tag(template: str, pos: int) -> Tag | None:
    start = template.find(TAG_OPEN, pos)
    if start == -1:
        return None
    return read_tag(template, start)


class TemplateParser:
    """Recursive-descent parser turning template text into an expression tree.

    Parsing never raises: tags that cannot be matched, and blocks nested deeper
    than ``max_depth``, are kept as literal text.
    """

    def __init__(self, registry: BlockRegistry | None = None, *, max_depth: int = MAX_DEPTH) -> None:
        load_builtin_blocks()
        self.registry = registry if registry is not None else default_registry
        self.max_depth = max_depth
        self.depth = 0

    def parse(self, template: str) -> CompositeNode:
        root = CompositeNode()
        pos = 0

        while pos < len(template):
            var_at = template.find(VARIABLE_OPEN, pos)
            tag_at = template.find(TAG_OPEN, pos)
            candidates = [i for i in (var_at, tag_at) if i != -1]
            if not candidates:
                root.add(TextNode(template[pos:]))
                break

            start = min(candidates)
            if start > pos:
                root.add(TextNode(template[pos:start]))

            if start == var_at:
                close = template.find(VARIABLE_CLOSE, start + len(VARIABLE_OPEN))
                if close == -1:
                    logger.debug("unclosed variable at offset %d kept as text", start)
                    root.add(TextNode(template[start:]))
                    break
                root.add(VariableNode(template[start + len(VARIABLE_OPEN) : close]))
                pos = close + len(VARIABLE_CLOSE)
                continue

            tag = read_tag(template, start)
            if tag is None:
                logger.debug("unclosed tag at offset %d kept as text", start)
                root.add(TextNode(template[start:]))
                break

            block = self._parse_block(tag, template)
            if block is None:
                logger.debug("tag %r at offset %d kept as text", tag.raw, start)
                root.add(TextNode(tag.raw))
                pos = tag.end
            else:
                root.add(block.node)
                pos = block.end

        return root

    def extract_block(
        self, template: str, start: int, keyword: str, *, track_else: bool = False
    ) -> BlockSpan | None:
        """Find the body of a ``keyword`` block whose opening tag ends at ``start``.

        Nested blocks with the same keyword are skipped by depth counting. With
        ``track_else`` the first ``{% else %}`` at the outer depth splits the body.
        Returns None when no matching end tag exists.
        """
        end_keyword = f"end{keyword}"
        depth = 1
        else_tag: Tag | None = None
        pos = start

        while True:
            tag = next_tag(template, pos)
            if tag is None:
                return None
            pos = tag.end

            if tag.keyword == keyword and tag.args:
                depth += 1
            elif tag.keyword == end_keyword and not tag.args:
                depth -= 1
                if depth == 0:
                    break
            elif track_else and depth == 1 and else_tag is None and tag.keyword == "else" and not tag.args:
                else_tag = tag

        if else_tag is None:
            return BlockSpan(body_start=start, body_end=tag.start, end=tag.end)
        return BlockSpan(
            body_start=start,
            body_end=else_tag.start,
            end=tag.end,
            else_start=else_tag.end,
            else_end=tag.start,
        )

    def _parse_block(self, tag: Tag, template: str) -> ParsedBlock | None:
        if tag.keyword not in self.registry:
            return None
        if self.depth >= self.max_depth:
            logger.debug("block %r nested deeper than %d", tag.raw, self.max_depth)
            return None
        handler = self.registry.get(tag.keyword)
        return handler(self._nested(), tag, template)

    def _nested(self) -> TemplateParser:
        # per-level copy keeps a shared parser free of mutable state
        child = copy.copy(self)
        child.depth = self.depth + 1
        return child
