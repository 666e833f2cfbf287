"""Structural interface shared by tree renderers.

Code that only needs bytes out of a tree should accept a NodeRenderer rather
than HtmlRenderer, so alternative printers (minifiers, test doubles) can be
swapped in without subclassing.
"""

from typing import Protocol, runtime_checkable

from tagtree.nodes import Document, Renderable


@runtime_checkable
class NodeRenderer(Protocol):
    """Anything that turns a node tree into encoded output."""

    def render(self, node: Renderable) -> bytes:
        """Render a fragment or element tree."""
        ...

    def render_document(self, document: Document) -> bytes:
        """Render a full page, doctype and stylesheet included."""
        ...
