"""Message formatting orchestrator."""

import logging
from typing import Optional

from tagmark.config import get_settings
from tagmark.formatting.ir import Component
from tagmark.formatting.links import LinkFinder, default_finder, tag_links
from tagmark.formatting.parser import InvalidTagError, TagParser, escape_tags
from tagmark.renderers import get_renderer
from tagmark.renderers.base import Renderer

logger = logging.getLogger(__name__)


class MessageFormatError(Exception):
    """Error while preparing a message for sending."""

    pass


class MessageTooLongError(MessageFormatError):
    """Rendered message exceeds the platform character limit."""

    def __init__(self, char_count: int, limit: int) -> None:
        self.char_count = char_count
        self.limit = limit
        super().__init__(
            f"message char count ({char_count}) exceeds limit ({limit})"
        )


class MessageFormatter:
    """Turns tagged message text into the platform's output dialect.

    Pipeline:
    1. For plain text: escape it and optionally wrap links in link tags
    2. Parse tag markup into components
    3. Render components (HTML by default)
    4. Check the rendered length against the message limit
    """

    def __init__(
        self,
        dialect: str = "html",
        auto_link: Optional[bool] = None,
        char_limit: Optional[int] = None,
        link_finder: Optional[LinkFinder] = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            dialect: Output dialect name (html, markup or plain)
            auto_link: Tag links found in plain text before parsing
            char_limit: Maximum rendered length in characters; 0 disables
                the check
            link_finder: Finder used for auto-linking (default: the shared
                finder for the current settings)
        """
        settings = get_settings()
        self.auto_link = settings.auto_link if auto_link is None else auto_link
        self.char_limit = (
            settings.message_char_limit if char_limit is None else char_limit
        )

        self.parser = TagParser()
        self.renderer: Renderer = get_renderer(dialect)()
        self.link_finder = link_finder or default_finder()

    def parse(self, text: str, plain: bool = False) -> list[Component]:
        """Parse message text into components.

        Args:
            text: Tag markup, or plain text when plain is set
            plain: Treat text as plain text: escape it (and tag its links
                when auto-linking) so no character is read as markup

        Raises:
            MessageFormatError: If the markup contains an invalid tag
        """
        if plain:
            text = self._prepare(text)

        try:
            return self.parser.parse(text)
        except InvalidTagError as e:
            raise MessageFormatError("invalid format tag") from e

    def format(self, text: str, plain: bool = False) -> str:
        """Render message text in the output dialect.

        Args:
            text: Tag markup, or plain text when plain is set
            plain: Treat text as plain text

        Returns:
            The rendered message

        Raises:
            MessageFormatError: If the markup contains an invalid tag
            MessageTooLongError: If the rendered message is too long
        """
        rendered = self.renderer.render(self.parse(text, plain=plain))
        self.check_length(rendered)
        logger.debug(
            "Formatted message as %s (%d chars)", self.renderer.name, len(rendered)
        )
        return rendered

    def check_length(self, rendered: str) -> None:
        """Raise MessageTooLongError if rendered exceeds the limit."""
        if self.char_limit and len(rendered) > self.char_limit:
            raise MessageTooLongError(len(rendered), self.char_limit)

    def _prepare(self, text: str) -> str:
        """Turn plain text into markup that parses back to the same text."""
        if self.auto_link:
            return tag_links(text, escape=True, finder=self.link_finder)
        return escape_tags(text)


def to_html(text: str) -> str:
    """Convert tag markup to HTML without auto-linking or a length limit."""
    return MessageFormatter(auto_link=False, char_limit=0).format(text)
