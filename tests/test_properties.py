"""Property-based tests for rendering and style collection using Hypothesis.

These tests verify invariants that should hold for any styles and text:
1. Registering the same style repeatedly yields one name and one rule
2. Distinct styles keep registration order in the stylesheet
3. Global rules always precede media blocks
4. Escaped text never leaks markup
5. Hash-named classes are reproducible
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from tagtree import (
    Fragment,
    HtmlRenderer,
    MediaQuery,
    PrinterConfig,
    StyleRegistry,
    Text,
    render,
    tag,
)
from tagtree.style import Style

css_words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-0123456789#%", min_size=1, max_size=12)
media_queries = st.one_of(
    st.none(), st.sampled_from([MediaQuery.DARK, MediaQuery.PRINT, MediaQuery("(min-width: 40em)")])
)
styles = st.builds(Style, property=css_words, value=css_words, media=media_queries)


class TestStyleProperties:
    """Invariants of style collection."""

    @given(style=styles, repeats=st.integers(min_value=1, max_value=8))
    @settings(max_examples=50)
    def test_dedup_is_idempotent(self, style: Style, repeats: int) -> None:
        nodes = tuple(
            tag("p").inline_style(style.property, style.value, media=style.media)
            for _ in range(repeats)
        )
        html, stylesheet = HtmlRenderer(PrinterConfig.DEFAULT).render_with_stylesheet(
            Fragment(nodes)
        )
        assert html == b'<p class="c0"></p>' * repeats
        assert stylesheet.count(f"{{{style.declaration}}}") == 1

    @given(style_list=st.lists(styles, min_size=2, max_size=10, unique=True))
    @settings(max_examples=50)
    def test_registration_order_within_group(self, style_list: list[Style]) -> None:
        node = Fragment(
            tuple(tag("p").inline_style(s.property, s.value, media=s.media) for s in style_list)
        )
        registry = StyleRegistry.sequential()
        _, stylesheet = HtmlRenderer(registry=registry).render_with_stylesheet(node)

        for media in {s.media for s in style_list}:
            group = [s for s in style_list if s.media == media]
            positions = [
                stylesheet.index(f".{registry.class_name(s)}{{{s.declaration}}}") for s in group
            ]
            assert positions == sorted(positions)

    @given(style_list=st.lists(styles, min_size=1, max_size=10))
    @settings(max_examples=50)
    def test_globals_precede_media_blocks(self, style_list: list[Style]) -> None:
        node = Fragment(
            tuple(tag("p").inline_style(s.property, s.value, media=s.media) for s in style_list)
        )
        _, stylesheet = HtmlRenderer().render_with_stylesheet(node)
        if "@media" in stylesheet:
            head = stylesheet[: stylesheet.index("@media")]
            tail = stylesheet[stylesheet.index("@media") :]
            # Every global rule sits before the first media block
            assert all(not part or part.startswith("@media") for part in tail.split("}}"))
            assert "@media" not in head

    @given(style=styles)
    def test_hash_names_reproducible(self, style: Style) -> None:
        assert StyleRegistry.hashed().class_name(style) == StyleRegistry.hashed().class_name(style)


class TestTextProperties:
    """Invariants of text escaping."""

    @given(st.text())
    def test_text_never_opens_tags(self, text: str) -> None:
        output = render(tag("p", Text(text))).decode("utf-8")
        inner = output[len("<p>") : -len("</p>")]
        assert "<" not in inner
        assert ">" not in inner

    @given(st.text())
    def test_attribute_values_stay_quoted(self, value: str) -> None:
        output = render(tag("p").attribute("title", value or "x")).decode("utf-8")
        inner = output[len('<p title="') : -len('"></p>')]
        assert '"' not in inner
