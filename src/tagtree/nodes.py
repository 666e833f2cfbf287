"""Typed tree nodes for tagtree.

All primitive nodes are frozen dataclasses with slots for:
- Immutability: composing (wrapping a node in attributes or styles) builds a
  new value and never mutates an existing one, so trees are safe to share
- Pattern matching: the renderer dispatches with a match statement
- Memory efficiency: __slots__ reduces memory footprint

Node Hierarchy:
Node (base)
├── Element            <tag attrs>content</tag>
├── Text               escaped text
├── Raw                verbatim markup
├── Empty              renders nothing
├── Fragment           siblings in order
├── Document           doctype + html/head/body skeleton with the stylesheet
├── AttributeWrapper   stages attributes for the element it wraps
└── StyleWrapper       turns styles into classes for the element it wraps

Component is the extension point: a plain class whose ``body`` returns a
tree of the nodes above.

Example:
    >>> page = tag("div", tag("p", "Hello").inline_style("color", "red"))
    >>> page = page.attribute("id", "main")

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from tagtree.errors import RenderError
from tagtree.style import MediaQuery, Pseudo, Style

# Elements that can never have content or a closing tag.
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements that stay on the current line in pretty output.
INLINE_ELEMENTS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "bdo",
        "big",
        "br",
        "button",
        "cite",
        "code",
        "dfn",
        "em",
        "i",
        "img",
        "input",
        "kbd",
        "label",
        "map",
        "object",
        "output",
        "q",
        "samp",
        "script",
        "select",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "textarea",
        "time",
        "tt",
        "var",
    }
)


# =============================================================================
# Base Node
# =============================================================================


class Composable:
    """Attribute and style entry points shared by every node."""

    __slots__ = ()

    def attribute(self, key: str, value: str | None = "") -> Renderable:
        """Stage ``key="value"`` on the element this node renders.

        An empty value renders as a bare attribute (``disabled``); ``None``
        leaves the node unchanged.
        """
        return AttributeWrapper(self, ((key, value),))

    def inline_style(
        self,
        property: str,
        value: str | None,
        media: MediaQuery | None = None,
        pre: str | None = None,
        pseudo: Pseudo | None = None,
    ) -> Renderable:
        """Attach a CSS declaration, rendered as a generated class.

        A ``None`` value adds no style.
        """
        styles = () if value is None else (Style(property, value, media, pre, pseudo),)
        return StyleWrapper(self, styles)


@dataclass(frozen=True, slots=True)
class Node(Composable):
    """Base class for all primitive nodes."""


# =============================================================================
# Primitive Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Empty(Node):
    """Renders nothing."""


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content, HTML-escaped on output."""

    content: str


@dataclass(frozen=True, slots=True)
class Raw(Node):
    """Markup written verbatim.

    The caller is responsible for its validity.

    """

    content: str | bytes


@dataclass(frozen=True, slots=True)
class Fragment(Node):
    """An ordered group of sibling nodes."""

    children: tuple[Renderable, ...] = ()


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An HTML element.

    Staged attributes land on this element's opening tag; its content starts
    with a clean attribute set. Void elements drop content and closing tag.

    """

    tag: str
    content: Renderable = field(default_factory=Empty)

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    @property
    def is_inline(self) -> bool:
        return self.tag in INLINE_ELEMENTS


@dataclass(frozen=True, slots=True)
class Document(Node):
    """A complete HTML page.

    The stylesheet collected from head and body is injected as a ``<style>``
    element at the end of ``<head>``.

    """

    body: Renderable
    head: Renderable = field(default_factory=Empty)


# =============================================================================
# Wrapper Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class AttributeWrapper(Node):
    """Content plus attributes to stage on its outermost element.

    Attributes:
        content: The wrapped node
        attributes: (key, value) pairs in call order; ``None`` values are
            skipped at render time

    """

    content: Renderable
    attributes: tuple[tuple[str, str | None], ...]

    def attribute(self, key: str, value: str | None = "") -> AttributeWrapper:
        return AttributeWrapper(self.content, (*self.attributes, (key, value)))


@dataclass(frozen=True, slots=True)
class StyleWrapper(Node):
    """Content plus styles to apply as generated classes.

    Attributes:
        content: The wrapped node
        styles: Styles in call order; class names follow this order

    """

    content: Renderable
    styles: tuple[Style, ...]

    def inline_style(
        self,
        property: str,
        value: str | None,
        media: MediaQuery | None = None,
        pre: str | None = None,
        pseudo: Pseudo | None = None,
    ) -> StyleWrapper:
        if value is None:
            return self
        return StyleWrapper(self.content, (*self.styles, Style(property, value, media, pre, pseudo)))


# =============================================================================
# Components
# =============================================================================


class Component(Composable):
    """Base class for user-defined composite nodes.

    Subclasses describe their markup through ``body``; rendering a component
    renders its body.

    Example:
        >>> class Greeting(Component):
        ...     def __init__(self, name):
        ...         self.name = name
        ...
        ...     @property
        ...     def body(self):
        ...         return tag("p", f"Hello, {self.name}")

    """

    __slots__ = ()

    @property
    def body(self) -> Renderable:
        raise RenderError("component does not define a body", self)


Renderable = Union[Node, Component]

# Anything tag() accepts as a child.
Child = Union[Renderable, str, None, Iterable["Child"]]


def _flatten(children: Iterable[Child], into: list[Renderable]) -> None:
    for child in children:
        if child is None:
            continue
        if isinstance(child, str):
            into.append(Text(child))
        elif isinstance(child, (Node, Component)):
            into.append(child)
        elif isinstance(child, (bytes, bytearray)):
            raise TypeError("Cannot use bytes as HTML content; wrap them in Raw")
        elif isinstance(child, Iterable):
            _flatten(child, into)
        else:
            raise TypeError(f"Cannot use {type(child).__name__} as HTML content")


def group(*children: Child) -> Renderable:
    """Combine children into a single node.

    Strings become Text, None is skipped and nested iterables are flattened.
    Zero children give Empty and one child is returned as-is.
    """
    nodes: list[Renderable] = []
    _flatten(children, nodes)
    if not nodes:
        return Empty()
    if len(nodes) == 1:
        return nodes[0]
    return Fragment(tuple(nodes))


def tag(name: str, *children: Child) -> Element:
    """Create an element with the given tag name and children.

    Example:
        >>> tag("ul", [tag("li", item) for item in ("a", "b")])
        Element(tag='ul', content=Fragment(...))

    """
    return Element(name, group(*children))


__all__ = [
    "INLINE_ELEMENTS",
    "VOID_ELEMENTS",
    "AttributeWrapper",
    "Child",
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
]
