"""Tag markup renderer (re-encodes components into the source dialect)."""

from tagmark.formatting.ir import Component, Decoration
from tagmark.formatting.parser import escape_tags
from tagmark.renderers.base import Renderer


class MarkupRenderer(Renderer):
    """Render components back to tag markup.

    Each component is written as a self-contained group of tags, so
    parsing the output gives back equal components.
    """

    @property
    def name(self) -> str:
        return "markup"

    def render_component(self, component: Component) -> str:
        if component.is_empty:
            return ""

        opening = "".join(self._open_tag(decoration) for decoration in component.style)
        closing = "".join(
            decoration.to_tag(closing=True)
            for decoration in reversed(component.style.decorations)
        )
        return f"{opening}{escape_tags(component.text)}{closing}"

    def _open_tag(self, decoration: Decoration) -> str:
        # Link targets are read with the same escapes as text
        if decoration.is_link:
            return Decoration.link(escape_tags(decoration.target)).to_tag()
        return decoration.to_tag()
