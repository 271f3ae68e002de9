"""Tests for the block registry and custom block handlers."""

from __future__ import annotations

import pytest

from stencil.blocks import BlockRegistry, load_builtin_blocks, register_block, registry
from stencil.core.engine import TemplateEngine
from stencil.core.nodes import TextNode
from stencil.core.parser import TemplateParser
from stencil.core.runtime import ParsedBlock


class TestBlockRegistry:
    def test_builtins_registered(self) -> None:
        load_builtin_blocks()
        assert {"if", "for"} <= set(registry.names())
        assert "if" in registry

    def test_unknown_keyword(self) -> None:
        with pytest.raises(KeyError, match="Unknown block keyword"):
            BlockRegistry().get("nope")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            BlockRegistry().register("  ", lambda parser, tag, template: None)

    def test_names_sorted(self) -> None:
        local = BlockRegistry()
        local.register("b", lambda parser, tag, template: None)
        local.register("a", lambda parser, tag, template: None)
        assert local.names() == ["a", "b"]


class TestCustomBlocks:
    @pytest.fixture
    def local_registry(self) -> BlockRegistry:
        local = BlockRegistry()

        @register_block("upper", target=local)
        def parse_upper(parser, tag, template):
            span = parser.extract_block(template, tag.end, "upper")
            if span is None:
                return None
            body = parser.parse(template[span.body_start : span.body_end])
            return ParsedBlock(node=TextNode(body.evaluate({}).upper()), end=span.end)

        return local

    def test_custom_handler(self, local_registry: BlockRegistry) -> None:
        engine = TemplateEngine(TemplateParser(registry=local_registry))
        assert engine.render("a{% upper x %}b{% endupper %}c") == "aBc"

    def test_builtins_absent_from_custom_registry(self, local_registry: BlockRegistry) -> None:
        engine = TemplateEngine(TemplateParser(registry=local_registry))
        template = "{% if a %}Y{% endif %}"
        assert engine.render(template, {"a": True}) == template

    def test_handler_declining_keeps_text(self, local_registry: BlockRegistry) -> None:
        engine = TemplateEngine(TemplateParser(registry=local_registry))
        assert engine.render("{% upper x %}never closed") == "{% upper x %}never closed"

    def test_custom_registry_does_not_leak(self, local_registry: BlockRegistry) -> None:
        assert "upper" not in registry
