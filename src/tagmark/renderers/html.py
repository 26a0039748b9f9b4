"""Chat platform HTML renderer.

The platform accepts a small HTML subset:
  <b>bold</b>, <i>italic</i>, <u>underline</u>, <code>code</code>,
  <tg-spoiler>spoiler</tg-spoiler>, <a href="url">link</a>
"""

import html

from tagmark.formatting.ir import Component, Decoration, DecorationKind
from tagmark.renderers.base import Renderer


class HTMLRenderer(Renderer):
    """Render components as chat platform HTML."""

    TAG_NAMES: dict[DecorationKind, str] = {
        DecorationKind.BOLD: "b",
        DecorationKind.ITALIC: "i",
        DecorationKind.UNDERLINED: "u",
        DecorationKind.MONO_SPACE: "code",
        DecorationKind.SPOILER: "tg-spoiler",
        DecorationKind.LINK: "a",
    }

    @property
    def name(self) -> str:
        return "html"

    def render_component(self, component: Component) -> str:
        """Wrap the escaped text in one HTML element per decoration.

        Elements open in style order and close in reverse.
        """
        if component.is_empty:
            return ""

        opened: list[str] = []
        parts: list[str] = []
        for decoration in component.style:
            tag_name = self.TAG_NAMES[decoration.kind]
            opened.append(tag_name)
            parts.append(self._open_tag(tag_name, decoration))

        parts.append(self.escape(component.text))
        parts.extend(f"</{tag_name}>" for tag_name in reversed(opened))
        return "".join(parts)

    def _open_tag(self, tag_name: str, decoration: Decoration) -> str:
        if decoration.is_link:
            return f'<{tag_name} href="{html.escape(decoration.target)}">'
        return f"<{tag_name}>"

    @staticmethod
    def escape(text: str) -> str:
        """Escape HTML special characters in text content."""
        return html.escape(text, quote=False)
