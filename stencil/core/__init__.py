from .engine import Template, TemplateEngine, render
from .nodes import CompositeNode, ConditionalNode, ExpressionNode, LoopNode, TextNode, VariableNode
from .parser import TemplateParser
from .runtime import BlockSpan, ParsedBlock, Tag

__all__ = [
    "BlockSpan",
    "CompositeNode",
    "ConditionalNode",
    "ExpressionNode",
    "LoopNode",
    "ParsedBlock",
    "Tag",
    "Template",
    "TemplateEngine",
    "TemplateParser",
    "TextNode",
    "VariableNode",
    "render",
]
