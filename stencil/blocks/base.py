from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stencil.core.nodes import CompositeNode
    from stencil.core.runtime import BlockSpan, ParsedBlock, Tag


class BlockParserProtocol(Protocol):
    def parse(self, template: str) -> CompositeNode: ...

    def extract_block(
        self, template: str, start: int, keyword: str, *, track_else: bool = False
    ) -> BlockSpan | None: ...


class BlockHandler(Protocol):
    def __call__(self, parser: BlockParserProtocol, tag: Tag, template: str) -> ParsedBlock | None: ...
