"""Print state threaded through a single render pass.

A Printer carries everything a render mutates: the output bytes, the
attribute set staged for the next element, the collected styles grouped by
media query, and the current pretty-print indentation. It is created once per
render call and discarded after its bytes and stylesheet have been read.

Thread Safety:
    A Printer is not safe for concurrent mutation. Each render() call creates
    its own instance.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from tagtree.bytebuilder import ByteBuilder
from tagtree.config import PrinterConfig, get_printer_config
from tagtree.style import MediaQuery

StyleMap = dict[MediaQuery | None, dict[str, str]]


class Printer:
    """Mutable accumulator for one render pass.

    Attributes:
        attributes: Attributes staged for the next element, in insertion order
        bytes: Output buffer
        styles: Media group -> selector -> ``property:value``, in
            registration order
        configuration: Formatting policy for this pass
        indentation: Current indentation prefix for pretty output

    """

    __slots__ = ("attributes", "bytes", "styles", "configuration", "indentation")

    def __init__(
        self,
        config: PrinterConfig | None = None,
        *,
        styles: StyleMap | None = None,
    ) -> None:
        """Initialize printer.

        Args:
            config: Formatting policy (defaults to the ambient config)
            styles: Existing style map to share, for sub-printers of the
                same render pass
        """
        self.configuration = config if config is not None else get_printer_config()
        self.attributes: dict[str, str] = {}
        self.bytes = ByteBuilder()
        self.styles: StyleMap = styles if styles is not None else {}
        self.indentation = ""

    def sibling(self) -> Printer:
        """Create a fresh printer that shares this printer's styles."""
        return Printer(self.configuration, styles=self.styles)

    def write(self, s: str | bytes) -> None:
        self.bytes.append(s)

    def write_line_break(self) -> None:
        """Write newline plus current indentation (no-op in compact mode)."""
        self.bytes.append(self.configuration.newline)
        self.bytes.append(self.indentation)

    def add_style(self, media: MediaQuery | None, selector: str, declaration: str) -> bool:
        """Register a rule under its media group. First write wins.

        Returns:
            True if the rule was added, False if the selector already existed
        """
        group = self.styles.setdefault(media, {})
        if selector in group:
            return False
        group[selector] = declaration
        return True

    def merge_attribute(self, key: str, value: str) -> None:
        """Stage an attribute for the next element.

        ``class`` accumulates space-separated; any other key is replaced.
        """
        if key == "class" and key in self.attributes:
            self.attributes[key] = f"{self.attributes[key]} {value}"
        else:
            self.attributes[key] = value

    @contextmanager
    def staged_attributes(self) -> Iterator[None]:
        """Restore the staged attribute set on exit."""
        saved = dict(self.attributes)
        try:
            yield
        finally:
            self.attributes = saved

    @contextmanager
    def child_scope(self, indent: bool) -> Iterator[None]:
        """Scope for an element's children.

        Children start with no staged attributes and, when indent is set, one
        level deeper. Both are restored on exit.
        """
        saved_attributes = self.attributes
        saved_indentation = self.indentation
        self.attributes = {}
        if indent:
            self.indentation += self.configuration.indentation
        try:
            yield
        finally:
            self.attributes = saved_attributes
            self.indentation = saved_indentation

    @property
    def stylesheet(self) -> str:
        """Assemble the stylesheet text from the collected styles.

        Global rules come first; media groups follow in the order they were
        first used. Computed on every access.
        """
        config = self.configuration
        parts: list[str] = [config.newline]
        # Stable partition: None sorts first, other groups keep insertion order
        for media, rules in sorted(self.styles.items(), key=lambda item: item[0] is not None):
            indent = ""
            if media is not None:
                parts.append(f"@media {media.raw_value}{{")
                parts.append(config.newline)
                indent = config.indentation
            for selector, declaration in rules.items():
                parts.append(indent)
                if config.force_important:
                    parts.append(f"{selector}{{{declaration} !important}}")
                else:
                    parts.append(f"{selector}{{{declaration}}}")
                parts.append(config.newline)
            if media is not None:
                parts.append("}")
                parts.append(config.newline)
        return "".join(parts)

    def output(self) -> bytes:
        """Bytes written so far."""
        return self.bytes.build()

    def __repr__(self) -> str:
        groups = sum(len(rules) for rules in self.styles.values())
        return f"Printer(bytes={len(self.bytes)}, attributes={len(self.attributes)}, rules={groups})"


__all__ = ["Printer", "StyleMap"]
