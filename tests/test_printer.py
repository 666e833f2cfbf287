"""Tests for Printer state and stylesheet assembly."""

import pytest

from tagtree.config import PrinterConfig, printer_config_context
from tagtree.printer import Printer
from tagtree.style import MediaQuery


class TestPrinterState:
    """Attribute staging and style registration."""

    def test_defaults(self) -> None:
        printer = Printer()
        assert printer.attributes == {}
        assert printer.styles == {}
        assert printer.output() == b""
        assert printer.configuration is PrinterConfig.DEFAULT

    def test_ambient_config(self) -> None:
        with printer_config_context(PrinterConfig.EMAIL):
            assert Printer().configuration is PrinterConfig.EMAIL
        assert Printer().configuration is PrinterConfig.DEFAULT

    def test_add_style_first_write_wins(self) -> None:
        printer = Printer()
        assert printer.add_style(None, ".c0", "color:red") is True
        assert printer.add_style(None, ".c0", "color:blue") is False
        assert printer.styles == {None: {".c0": "color:red"}}

    def test_same_selector_in_different_media(self) -> None:
        printer = Printer()
        printer.add_style(None, ".c0", "color:red")
        printer.add_style(MediaQuery.PRINT, ".c0", "color:black")
        assert printer.styles[MediaQuery.PRINT] == {".c0": "color:black"}

    def test_class_accumulates(self) -> None:
        printer = Printer()
        printer.merge_attribute("class", "a")
        printer.merge_attribute("class", "b")
        assert printer.attributes["class"] == "a b"

    def test_other_keys_replace(self) -> None:
        printer = Printer()
        printer.merge_attribute("id", "first")
        printer.merge_attribute("id", "second")
        assert printer.attributes == {"id": "second"}

    def test_staged_attributes_restore(self) -> None:
        printer = Printer()
        printer.merge_attribute("id", "outer")
        with printer.staged_attributes():
            printer.merge_attribute("id", "inner")
            printer.merge_attribute("role", "main")
        assert printer.attributes == {"id": "outer"}

    def test_staged_attributes_restore_on_error(self) -> None:
        printer = Printer()
        with pytest.raises(RuntimeError), printer.staged_attributes():
            printer.merge_attribute("id", "inner")
            raise RuntimeError("boom")
        assert printer.attributes == {}

    def test_child_scope(self) -> None:
        printer = Printer(PrinterConfig.PRETTY)
        printer.merge_attribute("id", "parent")
        with printer.child_scope(indent=True):
            assert printer.attributes == {}
            assert printer.indentation == "  "
            with printer.child_scope(indent=False):
                assert printer.indentation == "  "
        assert printer.attributes == {"id": "parent"}
        assert printer.indentation == ""

    def test_child_scope_restores_on_error(self) -> None:
        printer = Printer(PrinterConfig.PRETTY)
        printer.merge_attribute("id", "parent")
        with pytest.raises(RuntimeError), printer.child_scope(indent=True):
            printer.merge_attribute("id", "child")
            raise RuntimeError("boom")
        assert printer.attributes == {"id": "parent"}
        assert printer.indentation == ""

    def test_sibling_shares_styles(self) -> None:
        printer = Printer(PrinterConfig.PRETTY)
        sibling = printer.sibling()
        sibling.add_style(None, ".c0", "color:red")
        sibling.write("<p>")
        assert printer.styles == {None: {".c0": "color:red"}}
        assert printer.output() == b""
        assert sibling.configuration is printer.configuration

    def test_write_line_break(self) -> None:
        printer = Printer(PrinterConfig.PRETTY)
        printer.indentation = "    "
        printer.write_line_break()
        assert printer.output() == b"\n    "

        compact = Printer(PrinterConfig.DEFAULT)
        compact.write_line_break()
        assert compact.output() == b""


class TestStylesheet:
    """Stylesheet text assembly."""

    def _printer(self, config: PrinterConfig) -> Printer:
        printer = Printer(config)
        printer.add_style(MediaQuery.DARK, ".c1", "color:white")
        printer.add_style(None, ".c0", "color:black")
        printer.add_style(MediaQuery.PRINT, ".c2", "display:none")
        printer.add_style(None, ".c3:hover", "color:red")
        return printer

    def test_empty(self) -> None:
        assert Printer().stylesheet == ""
        assert Printer(PrinterConfig.PRETTY).stylesheet == "\n"

    def test_compact(self) -> None:
        assert self._printer(PrinterConfig.DEFAULT).stylesheet == (
            ".c0{color:black}"
            ".c3:hover{color:red}"
            "@media (prefers-color-scheme: dark){.c1{color:white}}"
            "@media print{.c2{display:none}}"
        )

    def test_pretty(self) -> None:
        assert self._printer(PrinterConfig.PRETTY).stylesheet == (
            "\n"
            ".c0{color:black}\n"
            ".c3:hover{color:red}\n"
            "@media (prefers-color-scheme: dark){\n"
            "  .c1{color:white}\n"
            "}\n"
            "@media print{\n"
            "  .c2{display:none}\n"
            "}\n"
        )

    def test_email_forces_important(self) -> None:
        assert self._printer(PrinterConfig.EMAIL).stylesheet == (
            "\n"
            ".c0{color:black !important}\n"
            ".c3:hover{color:red !important}\n"
            "@media (prefers-color-scheme: dark){\n"
            " .c1{color:white !important}\n"
            "}\n"
            "@media print{\n"
            " .c2{display:none !important}\n"
            "}\n"
        )

    def test_media_groups_keep_first_use_order(self) -> None:
        printer = Printer()
        printer.add_style(MediaQuery.PRINT, ".a", "x:1")
        printer.add_style(MediaQuery.DARK, ".b", "x:2")
        printer.add_style(MediaQuery.PRINT, ".c", "x:3")
        assert printer.stylesheet == (
            "@media print{.a{x:1}.c{x:3}}@media (prefers-color-scheme: dark){.b{x:2}}"
        )

    def test_computed_on_read(self) -> None:
        printer = Printer()
        printer.add_style(None, ".c0", "color:red")
        before = printer.stylesheet
        printer.add_style(None, ".c1", "margin:0")
        assert printer.stylesheet == before + ".c1{margin:0}"
