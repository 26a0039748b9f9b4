"""Automatic link tagging for plain text.

URL detection is delegated to linkify-it. Detected links are wrapped in
link tags pointing at the literal link text, so the parser produces one
linked component per URL.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, Optional

from linkify_it import LinkifyIt

from tagmark.config import get_settings
from tagmark.formatting.ir import Decoration
from tagmark.formatting.parser import escape_tags


@dataclass(frozen=True)
class LinkSpan:
    """A slice of text classified as link or plain text.

    Attributes:
        text: The literal slice of the input
        is_link: Whether the slice is a detected link
    """

    text: str
    is_link: bool = False


class LinkFinder:
    """Split text into contiguous link and plain-text spans."""

    def __init__(
        self,
        fuzzy_links: Optional[bool] = None,
        fuzzy_email: Optional[bool] = None,
    ) -> None:
        """Initialize the finder.

        Args:
            fuzzy_links: Detect links without a scheme (e.g. "example.com")
            fuzzy_email: Detect bare e-mail addresses
        """
        settings = get_settings()
        self.fuzzy_links = settings.fuzzy_links if fuzzy_links is None else fuzzy_links
        self.fuzzy_email = settings.fuzzy_email if fuzzy_email is None else fuzzy_email

        self._linkify = LinkifyIt(
            options={
                "fuzzy_link": self.fuzzy_links,
                "fuzzy_email": self.fuzzy_email,
            }
        )

    def spans(self, text: str) -> Iterator[LinkSpan]:
        """Yield spans covering text in order, with no gaps or overlaps."""
        pos = 0
        for match in self._linkify.match(text) or []:
            if match.index > pos:
                yield LinkSpan(text[pos:match.index])
            yield LinkSpan(text[match.index:match.last_index], is_link=True)
            pos = match.last_index
        if pos < len(text):
            yield LinkSpan(text[pos:])


@lru_cache(maxsize=None)
def _cached_finder(fuzzy_links: bool, fuzzy_email: bool) -> LinkFinder:
    return LinkFinder(fuzzy_links=fuzzy_links, fuzzy_email=fuzzy_email)


def default_finder() -> LinkFinder:
    """Get a shared LinkFinder for the current settings."""
    settings = get_settings()
    return _cached_finder(settings.fuzzy_links, settings.fuzzy_email)


def link_spans(text: str) -> Iterator[LinkSpan]:
    """Split text into link and plain spans using the configured finder."""
    return default_finder().spans(text)


def tag_links(
    text: str,
    escape: bool = False,
    finder: Optional[LinkFinder] = None,
) -> str:
    """Surround every link in text with a link tag pointing at the link.

    Args:
        text: Plain text, not yet containing any tags
        escape: Escape tag characters in every span, so that text
            containing "<", ">" or "\\" still parses back to itself
        finder: LinkFinder to use (default: the shared finder for the
            current settings)

    Returns:
        Tag markup with each link wrapped as <link:URL>URL</link>
    """
    finder = finder or default_finder()
    parts: list[str] = []

    for span in finder.spans(text):
        content = escape_tags(span.text) if escape else span.text
        if span.is_link:
            tag = Decoration.link(content)
            parts.append(f"{tag.to_tag()}{content}{tag.to_tag(closing=True)}")
        else:
            parts.append(content)

    return "".join(parts)
