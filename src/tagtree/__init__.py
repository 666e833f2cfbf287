"""
tagtree: Declarative HTML trees with collected inline styles

Build a tree of immutable nodes, attach attributes and CSS declarations to
any of them, and render the whole thing to HTML bytes. Declarations become
generated classes that are deduplicated into a single stylesheet grouped by
media query.

Quick Start:
    >>> from tagtree import render, tag
    >>> render(tag("div", "hi").inline_style("color", "red"))
    b'<div class="c0">hi</div>'

    >>> # Whole pages carry their stylesheet in <head>
    >>> from tagtree import Document, render_document
    >>> html = render_document(Document(tag("p", "Hello")))

Reproducible class names (snapshot tests):
    >>> from tagtree import StyleRegistry
    >>> html = render(node, registry=StyleRegistry.hashed())

Pretty output:
    >>> from tagtree import PrinterConfig
    >>> html = render(node, config=PrinterConfig.PRETTY)

Installation:
    pip install tagtree              # Core (zero deps)
    pip install tagtree[test]        # + pytest and hypothesis
"""

from tagtree.classnames import ClassNameStrategy, HashNaming, SequentialNaming, StyleRegistry
from tagtree.config import (
    PrinterConfig,
    get_printer_config,
    printer_config_context,
    reset_printer_config,
    set_printer_config,
)
from tagtree.errors import ConfigError, RenderError, TagtreeError
from tagtree.nodes import (
    INLINE_ELEMENTS,
    VOID_ELEMENTS,
    AttributeWrapper,
    Component,
    Document,
    Element,
    Empty,
    Fragment,
    Node,
    Raw,
    Renderable,
    StyleWrapper,
    Text,
    group,
    tag,
)
from tagtree.printer import Printer
from tagtree.renderers.html import HtmlRenderer
from tagtree.renderers.protocol import NodeRenderer
from tagtree.style import MediaQuery, Pseudo, Style

__version__ = "0.1.0"


def render(
    node: Renderable,
    *,
    config: PrinterConfig | None = None,
    registry: StyleRegistry | None = None,
) -> bytes:
    """Render a node tree to HTML bytes.

    Args:
        node: Root of the tree
        config: Formatting policy (defaults to the ambient config)
        registry: Style registry (defaults to a fresh sequential registry, so
            class numbering restarts for every call)

    Returns:
        UTF-8 encoded HTML

    Example:
        >>> render(tag("p", "a < b"))
        b'<p>a &lt; b</p>'

    """
    return HtmlRenderer(config, registry=registry).render(node)


def render_document(
    document: Document,
    *,
    config: PrinterConfig | None = None,
    registry: StyleRegistry | None = None,
) -> bytes:
    """Render a full page, stylesheet included, to HTML bytes.

    Args:
        document: Page to render
        config: Formatting policy (defaults to the ambient config)
        registry: Style registry (defaults to a fresh sequential registry)

    Returns:
        UTF-8 encoded HTML starting with the doctype

    """
    return HtmlRenderer(config, registry=registry).render_document(document)


def render_string(
    node: Renderable,
    *,
    config: PrinterConfig | None = None,
    registry: StyleRegistry | None = None,
) -> str:
    """Render a node tree to a decoded string.

    Example:
        >>> render_string(Text("simple text"))
        'simple text'

    """
    return render(node, config=config, registry=registry).decode("utf-8")


def stylesheet_for(
    node: Renderable,
    *,
    config: PrinterConfig | None = None,
    registry: StyleRegistry | None = None,
) -> str:
    """Render a tree and return only the stylesheet its styles produce.

    Example:
        >>> stylesheet_for(tag("p").inline_style("color", "red"))
        '.c0{color:red}'

    """
    _, stylesheet = HtmlRenderer(config, registry=registry).render_with_stylesheet(node)
    return stylesheet


__all__ = [
    # Version
    "__version__",
    # Rendering
    "render",
    "render_document",
    "render_string",
    "stylesheet_for",
    "HtmlRenderer",
    "NodeRenderer",
    "Printer",
    # Nodes
    "AttributeWrapper",
    "Component",
    "Document",
    "Element",
    "Empty",
    "Fragment",
    "Node",
    "Raw",
    "Renderable",
    "StyleWrapper",
    "Text",
    "group",
    "tag",
    "INLINE_ELEMENTS",
    "VOID_ELEMENTS",
    # Styles
    "MediaQuery",
    "Pseudo",
    "Style",
    "ClassNameStrategy",
    "HashNaming",
    "SequentialNaming",
    "StyleRegistry",
    # Configuration
    "PrinterConfig",
    "get_printer_config",
    "printer_config_context",
    "reset_printer_config",
    "set_printer_config",
    # Errors
    "ConfigError",
    "RenderError",
    "TagtreeError",
]
