"""tagtree renderers.

Renderers serialize node trees into an output format.

Available Renderers:
- HtmlRenderer: Renders trees to HTML bytes through a per-call Printer

Thread Safety:
All renderers create a Printer local to each render() call.
Safe for concurrent use from multiple threads.

"""

from tagtree.renderers.html import HtmlRenderer
from tagtree.renderers.protocol import NodeRenderer

__all__ = ["HtmlRenderer", "NodeRenderer"]
