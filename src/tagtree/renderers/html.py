"""HTML renderer: serializes a node tree into a Printer.

Rendering is a single top-down walk. Wrappers stage attributes and styles on
the Printer, elements consume the staged attributes for their opening tag,
and the collected styles are assembled into a stylesheet on demand.

Thread Safety:
All per-render state lives in a Printer created fresh for each render() call.
Multiple threads can share an HtmlRenderer. If a StyleRegistry is injected it
is shared too; the registry locks its own updates.

Pretty Printing:
With a non-empty newline or indentation, block elements start on their own
line at the current indentation and close on their own line; inline elements
(INLINE_ELEMENTS) stay on the current line.
"""

from __future__ import annotations

from dataclasses import dataclass

from tagtree.classnames import StyleRegistry
from tagtree.config import PrinterConfig
from tagtree.errors import RenderError
from tagtree.nodes import (
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
)
from tagtree.printer import Printer
from tagtree.utils.logger import get_logger
from tagtree.utils.text import escape_attribute, escape_text

logger = get_logger(__name__)

DOCTYPE = "<!doctype html>"


class HtmlRenderer:
    """Render node trees to HTML bytes.

    Usage:
        >>> from tagtree.nodes import tag
        >>> renderer = HtmlRenderer()
        >>> renderer.render(tag("p", "Hello"))
        b'<p>Hello</p>'

    Args:
        config: Formatting policy; None uses the ambient config at render time
        registry: Style registry shared by every render of this renderer; None
            gives each render call a fresh sequential registry

    """

    __slots__ = ("_config", "_registry")

    def __init__(
        self,
        config: PrinterConfig | None = None,
        *,
        registry: StyleRegistry | None = None,
    ) -> None:
        self._config = config
        self._registry = registry

    @property
    def registry(self) -> StyleRegistry | None:
        return self._registry

    def new_printer(self) -> Printer:
        """Create a Printer for one render pass."""
        return Printer(self._config)

    def render(self, node: Renderable) -> bytes:
        """Render a node to bytes.

        Args:
            node: Root of the tree

        Returns:
            UTF-8 encoded HTML
        """
        printer = self.new_printer()
        self.render_into(node, printer)
        output = printer.output()
        logger.debug("Rendered %s to %d bytes", type(node).__name__, len(output))
        return output

    def render_document(self, document: Document) -> bytes:
        """Render a full page to bytes."""
        return self.render(document)

    def render_with_stylesheet(self, node: Renderable) -> tuple[bytes, str]:
        """Render a node and return its bytes with the collected stylesheet.

        Useful for fragments whose styles are embedded by the caller.
        """
        printer = self.new_printer()
        self.render_into(node, printer)
        return printer.output(), printer.stylesheet

    def render_into(
        self,
        node: Renderable,
        printer: Printer,
        registry: StyleRegistry | None = None,
    ) -> None:
        """Render node into an existing printer.

        Args:
            node: Node to render
            printer: Print state to mutate
            registry: Style registry for this pass (defaults to the
                renderer's registry, or a fresh sequential one)
        """
        if registry is None:
            registry = self._registry if self._registry is not None else StyleRegistry()
        self._render(node, printer, registry)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render(self, node: Renderable, printer: Printer, registry: StyleRegistry) -> None:
        """Render any node."""
        match node:
            case Element():
                self._render_element(node, printer, registry)
            case Text():
                printer.write(escape_text(node.content))
            case Raw():
                printer.write(node.content)
            case Empty():
                pass
            case Fragment():
                for child in node.children:
                    self._render(child, printer, registry)
            case AttributeWrapper():
                self._render_attributes(node, printer, registry)
            case StyleWrapper():
                self._render_styles(node, printer, registry)
            case Document():
                self._render_document(node, printer, registry)
            case _StylesheetSlot():
                self._render_element(Element("style", Raw(printer.stylesheet)), printer, registry)
            case Component():
                self._render(node.body, printer, registry)
            case _:
                raise RenderError("not a renderable node", node)

    # =========================================================================
    # Elements
    # =========================================================================

    def _render_element(self, element: Element, printer: Printer, registry: StyleRegistry) -> None:
        """Render an element with the currently staged attributes."""
        block = not element.is_inline
        if block:
            printer.write_line_break()

        printer.write(f"<{element.tag}")
        for key, value in printer.attributes.items():
            if value:
                printer.write(f' {key}="{escape_attribute(value)}"')
            else:
                printer.write(f" {key}")
        printer.write(">")

        if element.is_void:
            return

        with printer.child_scope(indent=block):
            self._render(element.content, printer, registry)

        if block:
            printer.write_line_break()
        printer.write(f"</{element.tag}>")

    # =========================================================================
    # Wrappers
    # =========================================================================

    def _render_attributes(
        self, wrapper: AttributeWrapper, printer: Printer, registry: StyleRegistry
    ) -> None:
        """Stage attributes, render content, restore the previous set."""
        with printer.staged_attributes():
            for key, value in wrapper.attributes:
                if value is not None:
                    printer.merge_attribute(key, value)
            self._render(wrapper.content, printer, registry)

    def _render_styles(self, wrapper: StyleWrapper, printer: Printer, registry: StyleRegistry) -> None:
        """Register styles as classes, render content, restore ``class``."""
        previous_class = printer.attributes.get("class")
        try:
            for style in wrapper.styles:
                class_name = registry.class_name(style)
                printer.add_style(style.media, style.selector(class_name), style.declaration)
                printer.merge_attribute("class", class_name)
            self._render(wrapper.content, printer, registry)
        finally:
            if previous_class is None:
                printer.attributes.pop("class", None)
            else:
                printer.attributes["class"] = previous_class

    # =========================================================================
    # Documents
    # =========================================================================

    def _render_document(self, document: Document, printer: Printer, registry: StyleRegistry) -> None:
        """Render doctype, head (with stylesheet) and body.

        The body goes first into a sibling printer that shares the style map,
        so its styles are known by the time ``<head>`` is written.
        """
        body_printer = printer.sibling()
        self._render(document.body, body_printer, registry)

        printer.write(DOCTYPE)
        # Attributes staged on the document land on <html>
        self._render_element(
            Element(
                "html",
                Fragment(
                    (
                        Element("head", Fragment((document.head, _StylesheetSlot()))),
                        Element("body", Raw(body_printer.output())),
                    )
                ),
            ),
            printer,
            registry,
        )


@dataclass(frozen=True, slots=True)
class _StylesheetSlot(Node):
    """Marks where ``<style>`` goes.

    Resolved when reached, after the head content has registered its styles.
    """
