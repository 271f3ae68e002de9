from .core import (
    CompositeNode,
    ConditionalNode,
    LoopNode,
    Template,
    TemplateEngine,
    TemplateParser,
    TextNode,
    VariableNode,
    render,
)

__version__ = "0.1.0"

__all__ = [
    "CompositeNode",
    "ConditionalNode",
    "LoopNode",
    "Template",
    "TemplateEngine",
    "TemplateParser",
    "TextNode",
    "VariableNode",
    "render",
]
