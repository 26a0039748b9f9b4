"""Tag markup parser for converting annotated text to IR."""

import logging
from dataclasses import dataclass

from tagmark.formatting.ir import Component, Decoration, Style

logger = logging.getLogger(__name__)


class InvalidTagError(ValueError):
    """A tag in the markup could not be parsed.

    Attributes:
        tag: The raw text of the offending tag, without brackets
        reason: Why the tag was rejected
    """

    UNKNOWN = "unknown tag"
    MISSING_TARGET = "missing link target"
    UNTERMINATED = "missing closing bracket"

    def __init__(self, tag: str, reason: str = UNKNOWN) -> None:
        self.tag = tag
        self.reason = reason
        super().__init__(f"invalid tag '{tag}': {reason}")


@dataclass
class _Tag:
    decoration: Decoration
    closing: bool


class TagParser:
    """Parse tag markup into a list of styled components."""

    OPEN = "<"
    CLOSE = ">"
    ESCAPE = "\\"
    CLOSING_PREFIX = "/"
    TARGET_SEPARATOR = ":"

    ESCAPABLE = (ESCAPE, OPEN, CLOSE)

    def parse(self, text: str) -> list[Component]:
        """Convert tag markup to components.

        Tags may close out of order: a closing tag removes the most
        recently opened tag of the same name and leaves every other
        open tag in place. A closing tag with no open counterpart is
        ignored, as are tags still open at the end of the input.

        Args:
            text: The annotated source text

        Returns:
            Components in source order. Input with no text at all yields
            a single empty, unstyled component.

        Raises:
            InvalidTagError: On an unknown tag name, an opening link tag
                without a target, or a tag left unterminated
        """
        components: list[Component] = []
        open_tags: list[Decoration] = []

        token: list[str] = []
        building_tag = False
        pos = 0

        while pos < len(text):
            char = text[pos]
            pos += 1

            if char == self.OPEN and not building_tag:
                if token:
                    components.append(self._create_component(token, open_tags))
                    token = []
                building_tag = True
            elif char == self.CLOSE and building_tag:
                building_tag = False
                tag = self._create_tag("".join(token))
                token = []
                if tag.closing:
                    self._close(open_tags, tag.decoration)
                else:
                    open_tags.append(tag.decoration)
            elif char == self.ESCAPE and pos < len(text) and text[pos] in self.ESCAPABLE:
                token.append(text[pos])
                pos += 1
            else:
                token.append(char)

        if building_tag:
            raise InvalidTagError("".join(token), InvalidTagError.UNTERMINATED)

        if token:
            components.append(self._create_component(token, open_tags))
        elif not components:
            components.append(Component(""))

        if open_tags:
            logger.debug(
                "Discarding %d unclosed tag(s): %s",
                len(open_tags),
                ", ".join(decoration.name for decoration in open_tags),
            )

        return components

    def _create_component(
        self, token: list[str], open_tags: list[Decoration]
    ) -> Component:
        """Snapshot the open tags into a style for the buffered text."""
        return Component(text="".join(token), style=Style(tuple(open_tags)))

    def _create_tag(self, content: str) -> _Tag:
        """Parse the body of a bracket (the text between < and >)."""
        name, separator, target = content.partition(self.TARGET_SEPARATOR)
        closing = name.startswith(self.CLOSING_PREFIX)
        if closing:
            name = name[len(self.CLOSING_PREFIX):]

        decoration = Decoration.from_name(name)
        if decoration is None:
            raise InvalidTagError(content)

        if decoration.is_link and not closing:
            if not separator:
                raise InvalidTagError(content, InvalidTagError.MISSING_TARGET)
            decoration = Decoration.link(target)

        return _Tag(decoration=decoration, closing=closing)

    def _close(self, open_tags: list[Decoration], decoration: Decoration) -> None:
        """Remove the most recently opened tag with the same name."""
        for index in range(len(open_tags) - 1, -1, -1):
            if open_tags[index].name == decoration.name:
                del open_tags[index]
                return
        logger.debug("Ignoring unmatched closing tag: %s", decoration.to_tag(True))


def escape_tags(text: str) -> str:
    """Escape every character that could be read as tag markup.

    Backslashes are escaped first so the escapes added for brackets are
    not escaped again.
    """
    return (
        text.replace(TagParser.ESCAPE, TagParser.ESCAPE * 2)
        .replace(TagParser.OPEN, TagParser.ESCAPE + TagParser.OPEN)
        .replace(TagParser.CLOSE, TagParser.ESCAPE + TagParser.CLOSE)
    )


_default_parser = TagParser()


def parse(text: str) -> list[Component]:
    """Parse tag markup with a shared TagParser."""
    return _default_parser.parse(text)
