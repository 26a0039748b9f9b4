"""Tests for automatic link tagging."""

import pytest

import tagmark.config
from tagmark.formatting.ir import Component, Decoration, Style
from tagmark.formatting.links import (
    LinkFinder,
    LinkSpan,
    default_finder,
    link_spans,
    tag_links,
)
from tagmark.formatting.parser import parse


class TestLinkFinder:
    """Tests for splitting text into link spans."""

    def test_spans_cover_text(self):
        """Test that spans are contiguous and cover the input."""
        text = "see https://x.io/ now"
        spans = list(link_spans(text))

        assert spans == [
            LinkSpan("see "),
            LinkSpan("https://x.io/", is_link=True),
            LinkSpan(" now"),
        ]
        assert "".join(span.text for span in spans) == text

    def test_no_links(self):
        """Test text without links is a single plain span."""
        assert list(link_spans("just words")) == [LinkSpan("just words")]

    def test_empty_text(self):
        """Test that empty text yields no spans."""
        assert list(link_spans("")) == []

    def test_link_only(self):
        """Test text that is entirely a link."""
        spans = list(link_spans("https://papermc.io/"))

        assert spans == [LinkSpan("https://papermc.io/", is_link=True)]

    def test_multiple_links(self):
        """Test several links in one text."""
        spans = list(link_spans("https://a.io and https://b.io"))

        assert [span.text for span in spans if span.is_link] == [
            "https://a.io",
            "https://b.io",
        ]

    def test_spans_are_lazy(self):
        """Test that spans are produced by an iterator."""
        spans = link_spans("see https://x.io/ now")

        assert next(spans) == LinkSpan("see ")

    def test_fuzzy_links_disabled_by_default(self):
        """Test that links without a scheme are not detected by default."""
        assert list(link_spans("visit example.com today")) == [
            LinkSpan("visit example.com today")
        ]

    def test_fuzzy_links_enabled(self):
        """Test detecting links without a scheme."""
        finder = LinkFinder(fuzzy_links=True)
        spans = list(finder.spans("visit example.com today"))

        assert LinkSpan("example.com", is_link=True) in spans

    def test_fuzzy_links_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        """Test that the settings control fuzzy detection."""
        monkeypatch.setenv("TAGMARK_FUZZY_LINKS", "true")

        assert LinkFinder().fuzzy_links is True

    def test_default_finder_is_shared(self):
        """Test that the default finder is built once per configuration."""
        assert default_finder() is default_finder()

    def test_default_finder_follows_settings(self, monkeypatch: pytest.MonkeyPatch):
        """Test that changed settings select a matching finder."""
        strict = default_finder()
        monkeypatch.setenv("TAGMARK_FUZZY_LINKS", "true")
        monkeypatch.setattr(tagmark.config, "_settings", None)

        fuzzy = default_finder()

        assert fuzzy is not strict
        assert fuzzy.fuzzy_links is True

    def test_email_detected(self):
        """Test that e-mail addresses are links by default."""
        spans = list(link_spans("mail foo@example.com please"))

        assert LinkSpan("foo@example.com", is_link=True) in spans

    def test_email_disabled(self):
        """Test turning off e-mail detection."""
        finder = LinkFinder(fuzzy_email=False)

        assert list(finder.spans("mail foo@example.com")) == [
            LinkSpan("mail foo@example.com")
        ]


class TestTagLinks:
    """Tests for tag_links."""

    def test_tag_links(self):
        """Test wrapping a link in a link tag."""
        tagged = tag_links("see https://x.io/ now")

        assert tagged == "see <link:https://x.io/>https://x.io/</link> now"

    def test_tag_link_only(self):
        """Test wrapping text that is only a link."""
        link = "https://papermc.io/"

        assert tag_links(link) == f"<link:{link}>{link}</link>"

    def test_tagged_links_parse(self):
        """Test that tagged text parses to a linked component."""
        components = parse(tag_links("see https://x.io/ now"))

        assert components == [
            Component("see "),
            Component("https://x.io/", Style.of(Decoration.link("https://x.io/"))),
            Component(" now"),
        ]

    def test_no_links_unchanged(self):
        """Test that text without links is copied verbatim."""
        assert tag_links("a <b> c") == "a <b> c"

    def test_escape(self, sample_plain_text: str):
        """Test that escaping lets any plain text round-trip."""
        tagged = tag_links(sample_plain_text, escape=True)

        assert "\\<b\\>" in tagged
        components = parse(tagged)
        assert "".join(c.text for c in components) == sample_plain_text
        assert components[1] == Component(
            "https://x.io/", Style.of(Decoration.link("https://x.io/"))
        )

    def test_custom_finder(self):
        """Test passing a finder with its own options."""
        finder = LinkFinder(fuzzy_links=True)

        assert tag_links("go to example.com", finder=finder) == (
            "go to <link:example.com>example.com</link>"
        )
