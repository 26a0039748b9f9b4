"""Tests for the markup and plain text renderers and the registry."""

import pytest

from tagmark.formatting.ir import BOLD, ITALIC, Component, Decoration, Style
from tagmark.formatting.parser import parse
from tagmark.renderers import (
    SUPPORTED_DIALECTS,
    HTMLRenderer,
    MarkupRenderer,
    PlainTextRenderer,
    get_renderer,
)


class TestMarkupRenderer:
    """Tests for re-encoding components as tag markup."""

    @pytest.fixture
    def renderer(self) -> MarkupRenderer:
        """Create a renderer instance."""
        return MarkupRenderer()

    def test_render(self, renderer: MarkupRenderer):
        """Test rendering styled components as tags."""
        rendered = renderer.render(
            [
                Component("foo "),
                Component("bar", Style.of(BOLD, ITALIC)),
                Component("x.io", Style.of(Decoration.link("x.io"))),
            ]
        )

        assert rendered == (
            "foo <bold><italic>bar</italic></bold><link:x.io>x.io</link>"
        )

    def test_render_escapes_text(self, renderer: MarkupRenderer):
        """Test that tag characters in text are escaped."""
        assert renderer.render([Component("a<b>\\")]) == "a\\<b\\>\\\\"

    def test_aliases_use_canonical_names(self, renderer: MarkupRenderer):
        """Test that re-encoding uses canonical tag names."""
        rendered = renderer.render(parse("<code>x</code><underlined>y</underlined>"))

        assert rendered == "<mono-space>x</mono-space><underline>y</underline>"

    def test_roundtrip(self, renderer: MarkupRenderer, sample_markup: str):
        """Test that re-encoded markup parses to the same components."""
        components = parse(sample_markup)

        assert parse(renderer.render(components)) == components

    def test_roundtrip_tags_without_text(self, renderer: MarkupRenderer):
        """Test that markup holding only tags survives re-encoding."""
        components = parse("<bold>")

        assert renderer.render(components) == ""
        assert parse(renderer.render(components)) == components

    def test_roundtrip_escaped_link_target(self, renderer: MarkupRenderer):
        """Test that link targets with tag characters survive re-encoding."""
        components = parse("<link:a\\>b\\\\>x</link>")

        assert parse(renderer.render(components)) == components


class TestPlainTextRenderer:
    """Tests for the plain text renderer."""

    def test_render(self, sample_markup: str):
        """Test that styling is dropped."""
        rendered = PlainTextRenderer().render(parse(sample_markup))

        assert rendered == "Foo<T> bar buzz fee far *klick*"


class TestGetRenderer:
    """Tests for the renderer registry."""

    def test_supported_dialects(self):
        """Test the registered dialect names."""
        assert SUPPORTED_DIALECTS == ("html", "markup", "plain")

    def test_get_renderer(self):
        """Test looking up renderers by name."""
        assert get_renderer("html") is HTMLRenderer
        assert get_renderer("MARKUP") is MarkupRenderer
        assert get_renderer("plain") is PlainTextRenderer

    def test_names_match_registry(self):
        """Test that each renderer reports its registry name."""
        for dialect in SUPPORTED_DIALECTS:
            assert get_renderer(dialect)().name == dialect

    def test_unknown_dialect(self):
        """Test that unknown dialects are rejected."""
        with pytest.raises(ValueError, match="Unsupported output dialect"):
            get_renderer("markdown")
