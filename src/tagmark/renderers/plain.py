"""Plain text renderer."""

from tagmark.formatting.ir import Component
from tagmark.renderers.base import Renderer


class PlainTextRenderer(Renderer):
    """Render components as plain text, dropping all styling."""

    @property
    def name(self) -> str:
        return "plain"

    def render_component(self, component: Component) -> str:
        return component.text
