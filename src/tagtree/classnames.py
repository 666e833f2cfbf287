"""Style registry and class-name strategies.

Every distinct Style seen during a render session gets exactly one CSS class
name. The registry owns deduplication and registration order; a strategy
decides what the name looks like:

- SequentialNaming: ``c<index>`` (compact) or ``<property>-<index>``
  (readable). Stable within one registry only.
- HashNaming: ``<property>-<base62 murmur3>`` of the style content.
  Bit-exact across runs, suited to snapshot tests.

Example:
    >>> registry = StyleRegistry.sequential(readable=True)
    >>> registry.class_name(Style("color", "red"))
    'color-0'
    >>> registry.class_name(Style("margin", "0"))
    'margin-1'
    >>> registry.class_name(Style("color", "red"))
    'color-0'

Thread Safety:
    StyleRegistry serializes the check-then-insert sequence with a lock, so a
    single registry may be shared by concurrent renders when cross-document
    class reuse is wanted.

"""

from __future__ import annotations

import threading
from typing import Protocol

from tagtree.style import Style
from tagtree.utils.hashing import class_id
from tagtree.utils.logger import get_logger
from tagtree.utils.text import sanitize_class_fragment

logger = get_logger(__name__)


class ClassNameStrategy(Protocol):
    """Policy turning a style's identity into a class name."""

    def name(self, style: Style, index: int) -> str:
        """Name a newly registered style.

        Args:
            style: The style being registered
            index: Its 0-based registration position in the registry

        Returns:
            CSS class name (without the leading dot)
        """
        ...


class SequentialNaming:
    """Name classes by registration order."""

    __slots__ = ("readable",)

    def __init__(self, readable: bool = False) -> None:
        self.readable = readable

    def name(self, style: Style, index: int) -> str:
        if self.readable:
            return f"{sanitize_class_fragment(style.property)}-{index}"
        return f"c{index}"

    def __repr__(self) -> str:
        return f"SequentialNaming(readable={self.readable})"


class HashNaming:
    """Name classes by a hash of their content."""

    __slots__ = ()

    def name(self, style: Style, index: int) -> str:
        return f"{style.property}-{class_id(style.hash_input)}"

    def __repr__(self) -> str:
        return "HashNaming()"


class StyleRegistry:
    """Order-preserving, deduplicating map from Style to class name.

    The first time a style is seen it is assigned the next index and named by
    the strategy; every later lookup of an equal style returns that name.

    Usage:
            >>> registry = StyleRegistry.hashed()
            >>> registry.class_name(Style("color", "red")).startswith("color-")
            True
            >>> len(registry)
            1

    """

    __slots__ = ("_strategy", "_names", "_lock")

    def __init__(self, strategy: ClassNameStrategy | None = None) -> None:
        """Initialize registry.

        Args:
            strategy: Naming policy (defaults to compact SequentialNaming)
        """
        self._strategy: ClassNameStrategy = strategy or SequentialNaming()
        self._names: dict[Style, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def sequential(cls, readable: bool = False) -> StyleRegistry:
        """Registry for production output."""
        return cls(SequentialNaming(readable=readable))

    @classmethod
    def hashed(cls) -> StyleRegistry:
        """Registry with reproducible, content-addressed names."""
        return cls(HashNaming())

    @property
    def strategy(self) -> ClassNameStrategy:
        return self._strategy

    @property
    def styles(self) -> list[Style]:
        """Registered styles in registration order."""
        with self._lock:
            return list(self._names)

    def class_name(self, style: Style) -> str:
        """Return the class name for style, registering it if new."""
        with self._lock:
            name = self._names.get(style)
            if name is None:
                index = len(self._names)
                name = self._strategy.name(style, index)
                self._names[style] = name
                logger.debug("Registered style %s as .%s (index %d)", style.declaration, name, index)
            return name

    def reset(self) -> None:
        """Forget every registration so numbering restarts at zero."""
        with self._lock:
            self._names.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __contains__(self, style: object) -> bool:
        with self._lock:
            return style in self._names

    def __repr__(self) -> str:
        return f"StyleRegistry({self._strategy!r}, styles={len(self)})"


__all__ = ["ClassNameStrategy", "HashNaming", "SequentialNaming", "StyleRegistry"]
