"""Formatting utilities for parsing tag markup and tagging links."""

from tagmark.formatting.ir import (
    DecorationKind,
    Decoration,
    Style,
    Component,
    BOLD,
    ITALIC,
    UNDERLINED,
    MONO_SPACE,
    SPOILER,
    plain_text,
)
from tagmark.formatting.parser import TagParser, InvalidTagError, escape_tags, parse
from tagmark.formatting.links import LinkFinder, LinkSpan, link_spans, tag_links

__all__ = [
    "DecorationKind",
    "Decoration",
    "Style",
    "Component",
    "BOLD",
    "ITALIC",
    "UNDERLINED",
    "MONO_SPACE",
    "SPOILER",
    "plain_text",
    "TagParser",
    "InvalidTagError",
    "escape_tags",
    "parse",
    "LinkFinder",
    "LinkSpan",
    "default_finder",
    "link_spans",
    "tag_links",
]
