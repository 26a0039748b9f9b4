"""Intermediate Representation for tagged text.

This module defines the data structures that sit between the tag
markup parser and the output renderers: decorations, the styles built
from them, and the styled runs (components) a parse produces.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Union


class DecorationKind(Enum):
    """The closed set of stylable attributes.

    The value of each member is its canonical tag name.
    """

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINED = "underline"
    MONO_SPACE = "mono-space"
    SPOILER = "spoiler"
    LINK = "link"


# Every name accepted in a tag, including aliases
TAG_NAMES: dict[str, DecorationKind] = {
    "bold": DecorationKind.BOLD,
    "italic": DecorationKind.ITALIC,
    "underline": DecorationKind.UNDERLINED,
    "underlined": DecorationKind.UNDERLINED,
    "mono-space": DecorationKind.MONO_SPACE,
    "code": DecorationKind.MONO_SPACE,
    "spoiler": DecorationKind.SPOILER,
    "link": DecorationKind.LINK,
}


@dataclass(frozen=True)
class Decoration:
    """One stylable attribute of a run of text.

    Attributes:
        kind: Which attribute this is
        target: Link target (only meaningful for LINK decorations)
    """

    kind: DecorationKind
    target: str = ""

    @property
    def name(self) -> str:
        """Canonical tag name."""
        return self.kind.value

    @property
    def is_link(self) -> bool:
        return self.kind is DecorationKind.LINK

    @classmethod
    def from_name(cls, name: str) -> Optional["Decoration"]:
        """Resolve a canonical or alias tag name.

        A link always resolves with an empty placeholder target; the
        parser fills in the real target from the tag body.
        """
        kind = TAG_NAMES.get(name)
        if kind is None:
            return None
        return cls(kind)

    @classmethod
    def link(cls, target: str) -> "Decoration":
        """Create a link decoration pointing at target."""
        return cls(DecorationKind.LINK, target)

    def to_tag(self, closing: bool = False) -> str:
        """Render this decoration as a tag of the markup dialect."""
        if closing:
            return f"</{self.name}>"
        if self.is_link:
            return f"<{self.name}:{self.target}>"
        return f"<{self.name}>"

    def __str__(self) -> str:
        return self.to_tag()


BOLD = Decoration(DecorationKind.BOLD)
ITALIC = Decoration(DecorationKind.ITALIC)
UNDERLINED = Decoration(DecorationKind.UNDERLINED)
MONO_SPACE = Decoration(DecorationKind.MONO_SPACE)
SPOILER = Decoration(DecorationKind.SPOILER)


def _dedupe(decorations: Iterable[Decoration]) -> tuple[Decoration, ...]:
    """Drop decorations whose name was already seen, keeping the first."""
    seen: set[str] = set()
    unique: list[Decoration] = []
    for decoration in decorations:
        if decoration.name not in seen:
            seen.add(decoration.name)
            unique.append(decoration)
    return tuple(unique)


@dataclass(frozen=True)
class Style:
    """An ordered set of decorations applied to a run of text.

    No two decorations share a canonical name; when duplicates are
    supplied the first one wins. Order is the order in which the tags
    were opened.

    Attributes:
        decorations: The active decorations, outermost first
    """

    decorations: tuple[Decoration, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "decorations", _dedupe(self.decorations))

    @classmethod
    def of(cls, *decorations: Decoration) -> "Style":
        return cls(decorations)

    def decorate(self, *decorations: Decoration) -> "Style":
        """Return a new style with decorations appended.

        Decorations whose name is already present are ignored.
        """
        return Style(self.decorations + decorations)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(decoration.name for decoration in self.decorations)

    @property
    def link_target(self) -> Optional[str]:
        """Target of the link decoration, if any."""
        for decoration in self.decorations:
            if decoration.is_link:
                return decoration.target
        return None

    def __contains__(self, item: Union[Decoration, DecorationKind, str]) -> bool:
        if isinstance(item, Decoration):
            return item in self.decorations
        if isinstance(item, DecorationKind):
            item = item.value
        return item in self.names

    def __iter__(self) -> Iterator[Decoration]:
        return iter(self.decorations)

    def __len__(self) -> int:
        return len(self.decorations)


@dataclass(frozen=True)
class Component:
    """A contiguous run of text with a consistent style.

    Attributes:
        text: The text content, with markup and escapes removed
        style: Decorations active over the text
    """

    text: str
    style: Style = field(default_factory=Style)

    @property
    def is_empty(self) -> bool:
        return not self.text

    def with_style(self, style: Style) -> "Component":
        return replace(self, style=style)

    def decorate(self, *decorations: Decoration) -> "Component":
        """Return a copy of this component with decorations added."""
        return replace(self, style=self.style.decorate(*decorations))

    def __str__(self) -> str:
        return self.text


def plain_text(components: Iterable[Component]) -> str:
    """Get the text content of a sequence of components without styling."""
    return "".join(component.text for component in components)
