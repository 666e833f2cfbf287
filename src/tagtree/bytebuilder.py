"""ByteBuilder for O(n) byte accumulation.

Render output is collected as UTF-8 bytes in a single growable bytearray.
Appending to a bytearray is amortized O(1), so a render pass costs O(n) in
the size of the output instead of O(n²) for repeated bytes concatenation.

Thread Safety:
ByteBuilder instances are owned by one Printer, which is local to each
render() call. No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class ByteBuilder:
    """Efficient byte accumulator.

    Usage:
            >>> bb = ByteBuilder()
            >>> _ = bb.append("<h1>").append("Hello").append(b"</h1>")
            >>> bb.build()
            b'<h1>Hello</h1>'

    """

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        """Initialize empty ByteBuilder."""
        self._buffer = bytearray()

    def append(self, s: str | bytes) -> ByteBuilder:
        """Append text (UTF-8 encoded) or raw bytes.

        Args:
            s: Data to append (empty values are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._buffer += s.encode("utf-8") if isinstance(s, str) else s
        return self

    def extend(self, parts: Iterable[str | bytes]) -> ByteBuilder:
        """Append multiple pieces at once.

        Returns:
            self for method chaining
        """
        for part in parts:
            self.append(part)
        return self

    def build(self) -> bytes:
        """Return an immutable copy of everything appended so far."""
        return bytes(self._buffer)

    def clear(self) -> ByteBuilder:
        """Discard accumulated bytes.

        Returns:
            self for method chaining
        """
        self._buffer.clear()
        return self

    def __len__(self) -> int:
        """Return number of bytes accumulated."""
        return len(self._buffer)

    def __bool__(self) -> bool:
        """Return True if any bytes have been appended."""
        return bool(self._buffer)
