"""Tests for ByteBuilder."""

from tagtree.bytebuilder import ByteBuilder


class TestByteBuilder:
    """Append, build and reset behavior."""

    def test_text_is_utf8_encoded(self) -> None:
        bb = ByteBuilder()
        bb.append("π").append(b"!")
        assert bb.build() == "π!".encode()
        assert len(bb) == 3

    def test_empty_pieces_skipped(self) -> None:
        bb = ByteBuilder()
        bb.append("").append(b"")
        assert not bb
        assert bb.build() == b""

    def test_extend(self) -> None:
        bb = ByteBuilder().extend(["<p>", b"x", "</p>"])
        assert bb.build() == b"<p>x</p>"

    def test_build_returns_snapshot(self) -> None:
        bb = ByteBuilder().append("a")
        snapshot = bb.build()
        bb.append("b")
        assert snapshot == b"a"
        assert bb.build() == b"ab"

    def test_clear(self) -> None:
        bb = ByteBuilder().append("abc").clear()
        assert len(bb) == 0
        assert bb.build() == b""
